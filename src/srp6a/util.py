import os, binascii, math, hmac
from hashlib import sha256
from .errors import RandomSourceError

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num, maxval):
    if num > maxval:
        raise ValueError
    num_bytes = size_bytes(maxval)
    fmt_str = "%0" + str(2*num_bytes) + "x"
    s_hex = fmt_str % num
    s = binascii.unhexlify(s_hex.encode("ascii"))
    assert len(s) == num_bytes
    assert isinstance(s, bytes)
    return s

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError
    if not s:
        return 0
    return int(binascii.hexlify(s), 16)

def random_bytes(count, entropy_f=os.urandom):
    """Return 'count' bytes from entropy_f, which is expected to behave like
    os.urandom. Any failure of the source becomes RandomSourceError."""
    try:
        data = entropy_f(count)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError("entropy source unavailable: %s" % (e,))
    if not isinstance(data, bytes) or len(data) != count:
        raise RandomSourceError("entropy source returned short read")
    return data

def H(*parts):
    # plain concatenation, no delimiters: every caller must pad fixed-width
    # values itself, and both sides must feed the same pieces in order
    for p in parts:
        if not isinstance(p, bytes):
            raise TypeError("H() only accepts bytes, got %r" % type(p))
    return sha256(b"".join(parts)).digest()

def pad(s, length):
    assert isinstance(s, bytes)
    if len(s) >= length:
        return s
    return b"\x00" * (length - len(s)) + s

def is_zero(s):
    # the plain integer test; protocol values (A, B, u) go through
    # IntegerGroup.is_zero, which reduces mod N first
    return bytes_to_number(s) == 0

def constant_time_equal(a, b):
    assert isinstance(a, bytes)
    assert isinstance(b, bytes)
    return hmac.compare_digest(a, b)

def xor_bytes(a, b):
    assert len(a) == len(b)
    return bytes(x ^ y for x, y in zip(a, b))
