import sys
import unittest

from atmfjstc.lib.endianness import ByteOrder


class ByteOrderTest(unittest.TestCase):
    def test_values_match_int_from_bytes(self):
        self.assertEqual(int.from_bytes(b'\x01\x02', ByteOrder.BIG_ENDIAN.value), 258)
        self.assertEqual(int.from_bytes(b'\x01\x02', ByteOrder.LITTLE_ENDIAN.value), 513)

    def test_native(self):
        self.assertEqual(ByteOrder.native().value, sys.byteorder)

    def test_opposite(self):
        self.assertIs(ByteOrder.BIG_ENDIAN.opposite(), ByteOrder.LITTLE_ENDIAN)
        self.assertIs(ByteOrder.LITTLE_ENDIAN.opposite(), ByteOrder.BIG_ENDIAN)

    def test_struct_prefix(self):
        self.assertEqual(ByteOrder.BIG_ENDIAN.struct_prefix(), '>')
        self.assertEqual(ByteOrder.LITTLE_ENDIAN.struct_prefix(), '<')


class ParseByteOrderTest(unittest.TestCase):
    def test_member(self):
        self.assertIs(ByteOrder.parse(ByteOrder.BIG_ENDIAN), ByteOrder.BIG_ENDIAN)

    def test_names(self):
        self.assertIs(ByteOrder.parse('little'), ByteOrder.LITTLE_ENDIAN)
        self.assertIs(ByteOrder.parse('big'), ByteOrder.BIG_ENDIAN)

    def test_aliases(self):
        self.assertIs(ByteOrder.parse(' LE '), ByteOrder.LITTLE_ENDIAN)
        self.assertIs(ByteOrder.parse('Be'), ByteOrder.BIG_ENDIAN)
        self.assertIs(ByteOrder.parse('<'), ByteOrder.LITTLE_ENDIAN)
        self.assertIs(ByteOrder.parse('>'), ByteOrder.BIG_ENDIAN)

    def test_unknown(self):
        with self.assertRaises(ValueError):
            ByteOrder.parse('middle')

    def test_wrong_type(self):
        with self.assertRaises(TypeError):
            ByteOrder.parse(1)


if __name__ == '__main__':
    unittest.main()
