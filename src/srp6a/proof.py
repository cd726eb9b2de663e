import logging
from .params import DefaultParams
from .util import H, xor_bytes, constant_time_equal
from .errors import ProofMismatch

logger = logging.getLogger(__name__)

# M1 = H(H(N) xor H(PAD(g)), H(I), s, PAD(A), PAD(B), K)   client -> server
# M2 = H(PAD(A), M1, K)                                    server -> client
#
# Both proofs cover A and B (and M1 covers the salt and identifier too), so
# a proof recorded from one session is useless in any other session, even
# one that happens to arrive at the same K. The client shows M1 first; a
# server that rejects M1 must not send M2.

def client_proof(identifier, salt, A, B, K, params=DefaultParams):
    g = params.group
    group_hash = xor_bytes(H(g.N_bytes), H(g.pad(g.g_bytes)))
    return H(group_hash, H(identifier), salt, g.pad(A), g.pad(B), K)

def server_proof(A, M1, K, params=DefaultParams):
    g = params.group
    return H(g.pad(A), M1, K)

def verify_client_proof(M1, identifier, salt, A, B, K, params=DefaultParams):
    """Check the client's M1. Returns M2 for the server to send back, or
    raises ProofMismatch."""
    assert isinstance(M1, bytes), repr(M1)
    expected = client_proof(identifier, salt, A, B, K, params)
    if not constant_time_equal(M1, expected):
        logger.debug("client proof rejected")
        raise ProofMismatch("authentication failed")
    return server_proof(A, M1, K, params)

def verify_server_proof(M2, A, M1, K, params=DefaultParams):
    assert isinstance(M2, bytes), repr(M2)
    expected = server_proof(A, M1, K, params)
    if not constant_time_equal(M2, expected):
        logger.debug("server proof rejected")
        raise ProofMismatch("authentication failed")
