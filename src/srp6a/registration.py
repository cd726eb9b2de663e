import os
from .params import Params, DefaultParams
from .util import H, random_bytes

SALT_SIZE_BYTES = 16

# x = H(s, H(I, ":", p))
# v = g^x % N
#
# The server stores (I, s, v). v lets the server check a login, but does
# not let anyone who steals it log in as I without first guessing p.

def compute_x(salt, identifier, passphrase):
    assert isinstance(salt, bytes), repr(salt)
    assert isinstance(identifier, bytes), repr(identifier)
    assert isinstance(passphrase, bytes)
    return H(salt, H(identifier, b":", passphrase))

def compute_verifier(identifier, passphrase, salt, params=DefaultParams):
    assert isinstance(params, Params), repr(params)
    g = params.group
    return g.exp(g.g, compute_x(salt, identifier, passphrase))

def register(identifier, passphrase, params=DefaultParams,
             entropy_f=os.urandom):
    """Create the (salt, verifier) pair to hand to the verifier store.

    The passphrase is only used to derive x and is not kept anywhere."""
    salt = random_bytes(SALT_SIZE_BYTES, entropy_f)
    verifier = compute_verifier(identifier, passphrase, salt, params)
    return salt, verifier
