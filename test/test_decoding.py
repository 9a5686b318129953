import unittest
from recovery.encoding import decode_value, encode_value
from recovery.errors import InvalidBase, InvalidDigit, ReconstructionError

class DecodingAudit(unittest.TestCase):
    def test_known_values(self):
        """Standard positional interpretation"""
        self.assertEqual(decode_value(10, "0"), 0)
        self.assertEqual(decode_value(2, "1010"), 10)
        self.assertEqual(decode_value(16, "ff"), 255)
        self.assertEqual(decode_value(36, "z"), 35)
        self.assertEqual(decode_value(4, "213"), 39)

    def test_case_insensitive(self):
        self.assertEqual(decode_value(16, "FF"), 255)
        self.assertEqual(decode_value(16, "aBcD"), decode_value(16, "abcd"))

    def test_textual_base(self):
        """Bases arrive as strings in share records"""
        self.assertEqual(decode_value("16", "ff"), 255)
        self.assertEqual(decode_value("2", "111"), 7)

    def test_beyond_machine_words(self):
        self.assertEqual(decode_value(16, "1" + "0" * 24), 2**96)
        self.assertEqual(decode_value(10, "79228162514264337593543950336"), 2**96)
        self.assertEqual(decode_value(2, "1" * 200), 2**200 - 1)

    def test_leading_zeros(self):
        self.assertEqual(decode_value(10, "000123"), 123)

    def test_digit_out_of_range(self):
        with self.assertRaises(InvalidDigit):
            decode_value(2, "102")
        with self.assertRaises(InvalidDigit):
            decode_value(10, "1a")
        with self.assertRaises(InvalidDigit):
            decode_value(16, "fg")

    def test_non_alphanumeric_digit(self):
        for digits in ("12-3", "1.5", " 12", "+7", "１２"):
            with self.assertRaises(InvalidDigit):
                decode_value(10, digits)

    def test_empty_digits(self):
        with self.assertRaises(InvalidDigit):
            decode_value(10, "")

    def test_invalid_base(self):
        for base in (0, 1, 37, -16, "sixteen", None):
            with self.assertRaises(InvalidBase):
                decode_value(base, "1")

    def test_non_integral_numeric_base(self):
        """Floats are never truncated into a base"""
        for base in (16.9, 2.5, float("inf"), float("-inf"), float("nan"), 1e999, True, "16.0"):
            with self.assertRaises(InvalidBase):
                decode_value(base, "1")

    def test_integer_valued_float_base(self):
        self.assertEqual(decode_value(16.0, "ff"), 255)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            decode_value(8, "9")
        self.assertTrue(issubclass(InvalidBase, ReconstructionError))

    def test_round_trip_canonical(self):
        """Encoding a decoded value yields canonical lowercase digits"""
        cases = [(2, "1010"), (16, "FF"), (36, "Zz09"), (10, "00042"), (7, "0")]
        for base, digits in cases:
            canonical = digits.lower().lstrip("0") or "0"
            self.assertEqual(encode_value(decode_value(base, digits), base), canonical)

    def test_encode(self):
        self.assertEqual(encode_value(0, 2), "0")
        self.assertEqual(encode_value(255, 16), "ff")
        self.assertEqual(encode_value(2**96, 8), "1" + "0" * 32)
        with self.assertRaises(ValueError):
            encode_value(-1, 10)
        with self.assertRaises(InvalidBase):
            encode_value(5, 40)

if __name__ == '__main__':
    unittest.main()
