import hashlib
from hkdf import Hkdf

def derive_key(session_key, purpose, length=32):
    """Expand the negotiated session key K into a subkey for one purpose.

    Use a different 'purpose' string for every job the key is put to (one
    per cipher direction, MAC, and so on) so that the subkeys are
    independent of each other and of K itself."""
    assert isinstance(session_key, bytes)
    assert isinstance(purpose, bytes)
    h = Hkdf(salt=b"", input_key_material=session_key, hash=hashlib.sha256)
    return h.expand(b"SRP-6a derive key: " + purpose, length)

def expand_seed(seed, info, num_bytes, salt=b""):
    h = Hkdf(salt=salt, input_key_material=seed, hash=hashlib.sha256)
    return h.expand(info, num_bytes)
