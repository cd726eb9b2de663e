import unittest
from binascii import hexlify
from hashlib import sha256
from srp6a import util
from srp6a.errors import RandomSourceError
from .common import PRG, broken_entropy

class Utils(unittest.TestCase):
    def test_binsize(self):
        def sizebb(maxval):
            num_bits = util.size_bits(maxval)
            num_bytes = util.size_bytes(maxval)
            return (num_bytes, num_bits)
        self.assertEqual(sizebb(0x0f), (1, 4))
        self.assertEqual(sizebb(0x10), (1, 5))
        self.assertEqual(sizebb(0xff), (1, 8))
        self.assertEqual(sizebb(0x100), (2, 9))
        self.assertEqual(sizebb(0x1ff), (2, 9))
        self.assertEqual(sizebb(2**2048-1), (256, 2048))

    def test_number_to_bytes(self):
        n2b = util.number_to_bytes
        self.assertEqual(n2b(0x00, 0xff), b"\x00")
        self.assertEqual(n2b(0xff, 0xff), b"\xff")
        self.assertEqual(n2b(0x100, 0xffff), b"\x01\x00")
        self.assertEqual(n2b(0x1ff, 0xffff), b"\x01\xff")
        self.assertEqual(n2b(0x1, 0xffffffff), b"\x00\x00\x00\x01")
        self.assertRaises(ValueError, n2b, 0x10000, 0xff)

    def test_bytes_to_number(self):
        b2n = util.bytes_to_number
        self.assertEqual(b2n(b""), 0)
        self.assertEqual(b2n(b"\x00"), 0x00)
        self.assertEqual(b2n(b"\xff"), 0xff)
        self.assertEqual(b2n(b"\x01\x02"), 0x0102)
        self.assertEqual(b2n(b"\x00\x00\x00\x01"), 0x01)
        self.assertRaises(TypeError, b2n, 42)
        self.assertRaises(TypeError, b2n, "not bytes")

class Pad(unittest.TestCase):
    def test_pad(self):
        self.assertEqual(util.pad(b"\x01", 4), b"\x00\x00\x00\x01")
        self.assertEqual(util.pad(b"", 2), b"\x00\x00")

    def test_idempotent(self):
        once = util.pad(b"\x07\x08", 8)
        self.assertEqual(util.pad(once, 8), once)
        self.assertEqual(util.pad(b"\x01\x02\x03", 3), b"\x01\x02\x03")

    def test_never_truncates(self):
        self.assertEqual(util.pad(b"\x01\x02\x03\x04", 2),
                         b"\x01\x02\x03\x04")

class Zero(unittest.TestCase):
    def test_is_zero(self):
        self.assertTrue(util.is_zero(b""))
        self.assertTrue(util.is_zero(b"\x00"))
        self.assertTrue(util.is_zero(b"\x00" * 256))
        self.assertFalse(util.is_zero(b"\x00\x01"))
        self.assertFalse(util.is_zero(b"\x80" + b"\x00" * 31))

class Hash(unittest.TestCase):
    def test_deterministic(self):
        self.assertEqual(util.H(b"a", b"b"), util.H(b"a", b"b"))
        self.assertEqual(len(util.H(b"a")), 32)

    def test_is_plain_sha256_of_concatenation(self):
        self.assertEqual(hexlify(util.H(b"ab", b"c")),
                         hexlify(sha256(b"abc").digest()))
        self.assertEqual(util.H(), sha256(b"").digest())

    def test_order_matters(self):
        self.assertNotEqual(util.H(b"alice", b"bob"),
                            util.H(b"bob", b"alice"))

    def test_only_bytes(self):
        self.assertRaises(TypeError, util.H, b"ok", "text")
        self.assertRaises(TypeError, util.H, 5)

class ConstantTime(unittest.TestCase):
    def test_equal(self):
        self.assertTrue(util.constant_time_equal(b"abc", b"abc"))
        self.assertFalse(util.constant_time_equal(b"abc", b"abd"))
        self.assertFalse(util.constant_time_equal(b"abc", b"abcd"))

    def test_xor(self):
        self.assertEqual(util.xor_bytes(b"\x0f\xf0", b"\xff\xff"),
                         b"\xf0\x0f")

class Random(unittest.TestCase):
    def test_length(self):
        self.assertEqual(len(util.random_bytes(16)), 16)
        self.assertEqual(len(util.random_bytes(32, PRG(b"0"))), 32)

    def test_deterministic_source(self):
        self.assertEqual(util.random_bytes(32, PRG(b"seed")),
                         util.random_bytes(32, PRG(b"seed")))

    def test_broken_source(self):
        self.assertRaises(RandomSourceError,
                          util.random_bytes, 16, broken_entropy)

    def test_short_read(self):
        self.assertRaises(RandomSourceError,
                          util.random_bytes, 16, lambda n: b"\x01" * (n-1))