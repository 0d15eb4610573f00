from unittest import TestCase

from rtkit.errors import InvalidArgument, ArithmeticOverflow, ArithmeticUnderflow
from rtkit import numeric
from rtkit.numeric import INT_MAX, INT_MIN


# -----------------------------------------------------------------------------


class TestNumeric(TestCase):
    def test_clamp(self):
        self.assertEqual(60, numeric.clamp(60, 50, 100))
        self.assertEqual(50, numeric.clamp(18, 50, 100))
        self.assertEqual(100, numeric.clamp(200, 50, 100))
        self.assertEqual(0.5, numeric.clamp(0.5, 0.0, 1.0))
        with self.assertRaises(InvalidArgument):
            numeric.clamp(50, 100, 20)

    def test_digits_of(self):
        self.assertEqual(3, numeric.digits_of(200))
        self.assertEqual(2, numeric.digits_of(-30))
        self.assertEqual(1, numeric.digits_of(0))

    def test_factorial(self):
        self.assertEqual(5040, numeric.factorial(7))
        self.assertEqual(1, numeric.factorial(0))
        with self.assertRaises(InvalidArgument):
            numeric.factorial(-3)

    def test_div_rem(self):
        quotient, remainder = numeric.div_rem(12, 3)
        self.assertEqual(4, quotient)
        self.assertEqual(0, remainder)
        quotient, remainder = numeric.div_rem(7, 2)
        self.assertEqual(3.5, quotient)
        self.assertEqual(1, remainder)


class TestParsing(TestCase):
    def test_parse_int(self):
        self.assertEqual((True, 204), numeric.try_parse_int("204"))
        self.assertEqual((True, -17), numeric.try_parse_int(" -17\n"))
        self.assertEqual((True, INT_MAX), numeric.try_parse_int(str(INT_MAX)))
        self.assertEqual((True, INT_MIN), numeric.try_parse_int(str(INT_MIN)))

    def test_parse_int_failures(self):
        for text in ("123abc", "", "1.5", "0x10", "+", str(INT_MAX + 1), str(INT_MIN - 1)):
            self.assertEqual((False, 0), numeric.try_parse_int(text), text)

    def test_parse_float(self):
        self.assertEqual((True, 3.14), numeric.try_parse_float("3.14"))
        self.assertEqual((True, -0.5), numeric.try_parse_float("-.5"))
        self.assertEqual((True, 1e3), numeric.try_parse_float("1e3"))
        self.assertEqual((True, 12.0), numeric.try_parse_float("12"))

    def test_parse_float_failures(self):
        for text in ("123abc.456", "", ".", "nan", "inf", "1e"):
            self.assertEqual((False, 0.0), numeric.try_parse_float(text), text)


class TestCheckedArithmetic(TestCase):
    def test_add(self):
        self.assertEqual(5, numeric.checked_add(2, 3))
        self.assertEqual(INT_MAX, numeric.checked_add(INT_MAX - 1, 1))
        with self.assertRaises(ArithmeticOverflow):
            numeric.checked_add(INT_MAX, 1)
        with self.assertRaises(ArithmeticUnderflow):
            numeric.checked_add(INT_MIN, -1)

    def test_subtract(self):
        self.assertEqual(-1, numeric.checked_subtract(2, 3))
        with self.assertRaises(ArithmeticUnderflow):
            numeric.checked_subtract(INT_MIN, 1)
        with self.assertRaises(ArithmeticOverflow):
            numeric.checked_subtract(INT_MAX, -1)

    def test_builtin_bases(self):
        with self.assertRaises(OverflowError):
            numeric.checked_add(INT_MAX, INT_MAX)
        with self.assertRaises(ArithmeticError):
            numeric.checked_subtract(INT_MIN, INT_MAX)

    def test_try_variants(self):
        self.assertEqual((True, 5), numeric.try_checked_add(2, 3))
        self.assertEqual((False, 0), numeric.try_checked_add(INT_MAX, 1))
        self.assertEqual((True, -1), numeric.try_checked_subtract(2, 3))
        self.assertEqual((False, 0), numeric.try_checked_subtract(INT_MIN, 1))


# -----------------------------------------------------------------------------
