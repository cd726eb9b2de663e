
class SRPError(Exception):
    pass
class RandomSourceError(SRPError):
    """The entropy source could not supply random bytes. The whole operation
    may be retried by the caller; nothing is retried here."""
class AbortedHandshake(SRPError):
    """The peer sent a value that would collapse the shared secret (A, B or
    u is zero modulo N). Treat this as an active attack: throw away the
    ephemeral values and do not retry with them."""
    def __init__(self, reason):
        SRPError.__init__(self, reason)
        self.reason = reason
class ProofMismatch(SRPError):
    """The two sides do not hold the same session key. The message never
    says which side was wrong."""
class StorageLookupFailure(SRPError):
    """The verifier store has no record for this identifier."""
class WrongGroupError(SRPError):
    pass
