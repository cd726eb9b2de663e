import os, logging
from .params import Params, DefaultParams
from .proof import verify_client_proof
from .storage import decoy_record
from .util import H, random_bytes
from .errors import AbortedHandshake, StorageLookupFailure

logger = logging.getLogger(__name__)

EPHEMERAL_SIZE_BYTES = 32

# (client: I, A)
# b = random()
# k = H(N, PAD(g))
# B = k*v + g^b % N
# u = H(PAD(A), PAD(B))
# S = (A * v^u) ^ b % N
# K = H(S)
#
# The server aborts if A % N == 0, and also if u == 0: a zero u would let
# the client's A alone decide S.

def handshake(A, verifier, params=DefaultParams, entropy_f=os.urandom):
    """Return (B, K). B goes to the client together with the salt. K is the
    session key and must never be sent anywhere."""
    assert isinstance(params, Params), repr(params)
    assert isinstance(A, bytes), repr(A)
    assert isinstance(verifier, bytes), repr(verifier)
    g = params.group

    if g.is_zero(A):
        logger.debug("server aborting handshake: A is zero")
        raise AbortedHandshake("A is zero")

    b = random_bytes(EPHEMERAL_SIZE_BYTES, entropy_f)
    B = g.add(g.mul(params.k, verifier), g.exp(g.g, b))

    u = H(g.pad(A), g.pad(B))
    if g.is_zero(u):
        logger.debug("server aborting handshake: u is zero")
        raise AbortedHandshake("u is zero")

    S = g.exp(g.mul(A, g.exp(verifier, u)), b)
    return B, H(S)


class ServerSession:
    """What the server remembers between sending (salt, B) and receiving
    the client's proof. K is secret; drop the whole object once the login
    has succeeded or failed."""

    def __init__(self, identifier, salt, A, B, K, params=DefaultParams):
        self.identifier = identifier
        self.salt = salt
        self.A = A
        self.B = B
        self.K = K
        self.params = params

    def verify(self, M1):
        """Check the client's proof and return M2 to send back. Raises
        ProofMismatch, in which case nothing must be sent."""
        return verify_client_proof(M1, self.identifier, self.salt,
                                   self.A, self.B, self.K, self.params)


def start_login(store, identifier, A, decoy_seed, params=DefaultParams,
                entropy_f=os.urandom):
    """Look up the identifier and answer the client's A.

    Returns a ServerSession; send session.salt and session.B to the client.
    Unknown identifiers are answered with a decoy record derived from
    decoy_seed (a long-lived server secret), so the reply looks exactly like
    a real one and the login fails later with ProofMismatch, the same way a
    wrong passphrase does."""
    try:
        salt, verifier = store.get(identifier)
    except StorageLookupFailure:
        logger.debug("verifier lookup missed, answering with decoy record")
        salt, verifier = decoy_record(identifier, decoy_seed, params)
    B, K = handshake(A, verifier, params, entropy_f)
    return ServerSession(identifier, salt, A, B, K, params)
