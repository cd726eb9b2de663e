from .util import (size_bits, size_bytes, number_to_bytes, bytes_to_number,
                   pad)

"""Interface specification for a Group.

SRP-6a works in the multiplicative group of integers modulo a large safe
prime N (N = 2q+1 with q prime), with a generator g. All arithmetic that
produces protocol values is done modulo N:

* add(a, b) = (a + b) % N
* sub(a, b) = (a - b) % N, always non-negative
* mul(a, b) = (a * b) % N
* exp(base, e) = base**e % N

Operands may be given as non-negative integers or as big-endian byte
strings (the form they travel in). Results are always byte strings of
exactly element_size_bytes (the byte length of N, called W elsewhere), so
that a value with leading zero bytes hashes the same on both peers. Nothing
is ever mutated: every operation returns a new byte string.

Exponents are not reduced modulo N. SRP builds the client exponent as
a + u*x in plain integers; reducing that modulo N would only be harmless
when it happens to be smaller than N, which is not true for small test
groups.

    g = SRP2048

    v = g.exp(g.g, x)
    B = g.add(g.mul(k, v), g.exp(g.g, b))
    if g.is_zero(A): abort
    A_padded = g.pad(A)
"""

def _to_number(v):
    if isinstance(v, bytes):
        return bytes_to_number(v)
    if isinstance(v, int) and not isinstance(v, bool):
        if v < 0:
            raise ValueError("group operands must be non-negative")
        return v
    raise TypeError("group operands must be bytes or int, not %r" % type(v))

class IntegerGroup:
    def __init__(self, N, g):
        if N % 2 == 0 or N < 5:
            raise ValueError("N must be an odd prime")
        if not 1 < g < N:
            raise ValueError("generator must lie in (1, N)")
        # these are the public system parameters
        self.N = N
        self.g = g
        self.element_size_bits = size_bits(self.N)
        self.element_size_bytes = size_bytes(self.N)
        self.N_bytes = self.element_to_bytes(self.N)
        self.g_bytes = self.element_to_bytes(self.g)
        assert len(self.N_bytes) == self.element_size_bytes

    def element_to_bytes(self, i):
        # for sending to the other side, and hashing into u/k/proofs
        return number_to_bytes(i, self.N)

    def pad(self, b):
        return pad(b, self.element_size_bytes)

    def is_zero(self, v):
        return _to_number(v) % self.N == 0

    def add(self, a, b):
        return self.element_to_bytes((_to_number(a) + _to_number(b)) % self.N)

    def sub(self, a, b):
        # python's % already maps negative differences into [0, N)
        return self.element_to_bytes((_to_number(a) - _to_number(b)) % self.N)

    def mul(self, a, b):
        return self.element_to_bytes((_to_number(a) * _to_number(b)) % self.N)

    def exp(self, base, exponent):
        return self.element_to_bytes(pow(_to_number(base),
                                         _to_number(exponent), self.N))


# From RFC 5054 appendix A, the 2048-bit group. This is the same prime used
# by most SRP-6a deployments (pysrp, the SRP reference code).
SRP2048 = IntegerGroup(
    N=0xAC6BDB41324A9A9BF166DE5E1389582FAF72B6651987EE07FC3192943DB56050A37329CBB4A099ED8193E0757767A13DD52312AB4B03310DCD7F48A9DA04FD50E8083969EDB767B0CF6095179A163AB3661A05FBD5FAAAE82918A9962F0B93B855F97993EC975EEAA80D740ADBF4FF747359D041D5C33EA71D281E446B14773BCA97B43A23FB801676BD207A436C6481F1D2B9078717461A5B9D32E688F87748544523B524B0D57D5EA77A2775D2ECFA032CFBDBF52FB3786160279004E57AE6AF874E7303CE53299CCC041C7BC308D82A5698F3A8D0C38271AE35F8E9DBFBB694B5C803D89F7AE435DE236D525F54759B65E372FCD68EF20FA7111F9E4AFF73,
    g=2,
    )

# RFC 3526 group 14, the 2048-bit MODP group used by IKE and TLS DHE.
MODP2048 = IntegerGroup(
    N=0xFFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3BE39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF6955817183995497CEA956AE515D2261898FA051015728E5A8AACAA68FFFFFFFFFFFFFFFF,
    g=2,
    )
