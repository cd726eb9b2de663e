import os, json, logging
from binascii import hexlify, unhexlify
from .params import Params, DefaultParams
from .registration import compute_x
from .util import H, random_bytes, bytes_to_number
from .errors import AbortedHandshake, WrongGroupError

logger = logging.getLogger(__name__)

EPHEMERAL_SIZE_BYTES = 32

# a = random()
# A = g^a % N
#  (server: s, B)
# u = H(PAD(A), PAD(B))
# x = H(s, H(I, ":", p))
# k = H(N, PAD(g))
# S = (B - k*g^x) ^ (a + u*x) % N
# K = H(S)
#
# The client aborts if B % N == 0 or u == 0.

def begin_handshake(params=DefaultParams, entropy_f=os.urandom):
    """Return (A, a). Send A to the server along with the identifier, and
    keep a secret until complete_handshake() has been called with it."""
    assert isinstance(params, Params), repr(params)
    g = params.group
    a = random_bytes(EPHEMERAL_SIZE_BYTES, entropy_f)
    A = g.exp(g.g, a)
    return A, a

def complete_handshake(A, a, identifier, passphrase, salt, B,
                       params=DefaultParams):
    assert isinstance(params, Params), repr(params)
    assert isinstance(A, bytes), repr(A)
    assert isinstance(a, bytes)
    assert isinstance(B, bytes), repr(B)
    g = params.group

    if g.is_zero(B):
        logger.debug("client aborting handshake: B is zero")
        raise AbortedHandshake("B is zero")

    u = H(g.pad(A), g.pad(B))
    if g.is_zero(u):
        logger.debug("client aborting handshake: u is zero")
        raise AbortedHandshake("u is zero")

    x = compute_x(salt, identifier, passphrase)
    base = g.sub(B, g.mul(params.k, g.exp(g.g, x)))
    exponent = bytes_to_number(a) + bytes_to_number(u) * bytes_to_number(x)
    S = g.exp(base, exponent)
    return H(S)


class ClientState:
    """The client's half-finished handshake, for callers that cannot keep
    (A, a) in a local variable between the two steps (for example when the
    server's reply arrives in a different request).

    The serialized form contains the private value a. Store it no longer
    than the handshake lasts, and somewhere only this client can read."""

    def __init__(self, A, a, params=DefaultParams):
        assert isinstance(params, Params), repr(params)
        assert isinstance(A, bytes), repr(A)
        assert isinstance(a, bytes)
        self.A = A
        self.a = a
        self.params = params

    @classmethod
    def start(klass, params=DefaultParams, entropy_f=os.urandom):
        A, a = begin_handshake(params, entropy_f)
        return klass(A, a, params)

    def finish(self, identifier, passphrase, salt, B):
        return complete_handshake(self.A, self.a, identifier, passphrase,
                                  salt, B, self.params)

    def serialize(self):
        d = {"hashed_params": self.params.hash_params(),
             "A": hexlify(self.A).decode("ascii"),
             "a": hexlify(self.a).decode("ascii"),
             }
        return json.dumps(d).encode("ascii")

    @classmethod
    def from_serialized(klass, data, params=DefaultParams):
        d = json.loads(data.decode("ascii"))
        if d["hashed_params"] != params.hash_params():
            err = ("ClientState.from_serialized() must be called with the"
                   " same params= that were used to create the serialized"
                   " data. These are different somehow.")
            raise WrongGroupError(err)
        return klass(A=unhexlify(d["A"].encode("ascii")),
                     a=unhexlify(d["a"].encode("ascii")),
                     params=params)
