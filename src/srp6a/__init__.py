import logging

from .errors import (SRPError, RandomSourceError, AbortedHandshake,
                     ProofMismatch, StorageLookupFailure, WrongGroupError)
from .params import Params, Params2048, ParamsMODP2048, DefaultParams
from .registration import register, compute_verifier
from .client import begin_handshake, complete_handshake, ClientState
from .server import handshake, start_login, ServerSession
from .proof import (client_proof, server_proof,
                    verify_client_proof, verify_server_proof)
from .storage import VerifierStore, MemoryVerifierStore, decoy_record
from .kdf import derive_key
(SRPError, RandomSourceError, AbortedHandshake, ProofMismatch,
 StorageLookupFailure, WrongGroupError, Params, Params2048, ParamsMODP2048,
 DefaultParams, register, compute_verifier, begin_handshake,
 complete_handshake, ClientState, handshake, start_login, ServerSession,
 client_proof, server_proof, verify_client_proof, verify_server_proof,
 VerifierStore, MemoryVerifierStore, decoy_record, derive_key) # hush pyflakes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
