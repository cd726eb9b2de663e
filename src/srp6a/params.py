from hashlib import sha256
from .groups import SRP2048, MODP2048
from .util import H

# Both peers must agree on every value in here ahead of time: the group
# (N, g), the padding width W, and the multiplier k. None of it is ever
# negotiated during a session. If the two sides disagree, nothing fails
# loudly: they simply derive different keys.

class Params:
    def __init__(self, group):
        self.group = group
        self.W = group.element_size_bytes
        # SRP-6a multiplier: k = H(N, PAD(g)). SRP-6 used k=3.
        self.k = H(group.N_bytes, group.pad(group.g_bytes))

    def hash_params(self):
        # enough to tell two parameter sets apart when restoring saved state
        pieces = [self.group.N_bytes, self.group.g_bytes, self.k]
        return sha256(b"".join(pieces)).hexdigest()

# Params2048 is roughly as secure as a 112-bit symmetric key.
Params2048 = Params(SRP2048)
ParamsMODP2048 = Params(MODP2048)

DefaultParams = Params2048
