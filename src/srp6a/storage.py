import threading
from .params import Params, DefaultParams
from .registration import SALT_SIZE_BYTES
from .util import bytes_to_number
from .kdf import expand_seed
from .errors import StorageLookupFailure

class VerifierStore:
    """Where the server keeps (identifier, salt, verifier) records.

    Applications back this with their own database. get() must raise
    StorageLookupFailure for an unknown identifier rather than returning
    None, so that start_login() can hide the miss from the client."""

    def put(self, identifier, salt, verifier):
        raise NotImplementedError

    def get(self, identifier):
        raise NotImplementedError

class MemoryVerifierStore(VerifierStore):
    def __init__(self):
        self._records = {}
        self._lock = threading.Lock()

    def put(self, identifier, salt, verifier):
        assert isinstance(identifier, bytes), repr(identifier)
        assert isinstance(salt, bytes), repr(salt)
        assert isinstance(verifier, bytes), repr(verifier)
        with self._lock:
            self._records[identifier] = (salt, verifier)

    def get(self, identifier):
        with self._lock:
            try:
                return self._records[identifier]
            except KeyError:
                raise StorageLookupFailure("no such record")

def decoy_record(identifier, seed, params=DefaultParams):
    """Return a fake (salt, verifier) for an identifier the store does not
    know.

    The same identifier always gets the same salt, so a client probing
    twice sees a stable answer, just as it would for a real account. The
    seed is a server-side secret: without it, nobody can tell a decoy salt
    from a real one. The verifier is a pseudorandom value mod N with no
    known discrete log, so the login always fails at the proof step.

    No exponentiation happens here: a miss must cost the same as a hit,
    or the response time tells the client whether the account exists."""
    assert isinstance(params, Params), repr(params)
    assert isinstance(identifier, bytes), repr(identifier)
    assert isinstance(seed, bytes)
    salt = expand_seed(identifier, b"SRP-6a decoy salt",
                       SALT_SIZE_BYTES, salt=seed)
    g = params.group
    # 16 extra bytes so the reduction mod N is close to uniform
    oversized = expand_seed(identifier, b"SRP-6a decoy verifier",
                            g.element_size_bytes + 16, salt=seed)
    verifier = g.element_to_bytes(bytes_to_number(oversized) % g.N)
    return salt, verifier
