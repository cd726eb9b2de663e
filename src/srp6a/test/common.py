from hashlib import sha256
from itertools import count

class PRG:
    # this returns a callable which, when invoked with an integer N, will
    # return N pseudorandom bytes derived from the seed
    def __init__(self, seed):
        self.generator = self.block_generator(seed)

    def __call__(self, numbytes):
        return b"".join([next(self.generator) for i in range(numbytes)])

    def block_generator(self, seed):
        assert isinstance(seed, type(b""))
        for counter in count():
            cseed = b"".join([b"prng-",
                              str(counter).encode("ascii"),
                              b"-",
                              seed])
            block = sha256(cseed).digest()
            for i in range(len(block)):
                yield block[i:i+1]

def broken_entropy(numbytes):
    raise OSError("no entropy here")

def zero_u_hash(real_H):
    # stands in for util.H inside client/server: the two-part hash that
    # produces u comes back as all zeros, everything else is untouched
    def fake_H(*parts):
        if len(parts) == 2:
            return b"\x00" * 32
        return real_H(*parts)
    return fake_H
