"""Tests for fftpeaks.buffer – padding and even/odd splitting."""

import unittest

from fftpeaks.buffer import (
    TransformBuffer,
    is_power_of_two,
    next_power_of_two,
    normalize,
)
from fftpeaks.complexnum import ZERO, Complex
from fftpeaks.errors import InvalidInput


class TestPowerOfTwo(unittest.TestCase):
    def test_is_power_of_two(self):
        self.assertTrue(all(is_power_of_two(n) for n in (1, 2, 4, 1024)))
        self.assertFalse(any(is_power_of_two(n) for n in (0, 3, 6, 1000)))

    def test_next_power_of_two(self):
        self.assertEqual(next_power_of_two(1), 1)
        self.assertEqual(next_power_of_two(5), 8)
        self.assertEqual(next_power_of_two(8), 8)
        self.assertEqual(next_power_of_two(1025), 2048)


class TestNormalize(unittest.TestCase):
    def test_no_padding(self):
        self.assertEqual(normalize([ZERO] * 4), TransformBuffer([ZERO] * 4))

    def test_needs_padding(self):
        self.assertEqual(normalize([ZERO] * 5), TransformBuffer([ZERO] * 8))

    def test_padding_appends_zeros(self):
        buf = normalize([1.0, 2.0, 3.0])
        self.assertEqual(len(buf), 4)
        self.assertEqual(list(buf), [Complex(1), Complex(2), Complex(3), ZERO])

    def test_single_element_unchanged(self):
        self.assertEqual(normalize([Complex(7, -1)]), [Complex(7, -1)])

    def test_real_values_are_lifted(self):
        self.assertEqual(normalize([0.0] * 4), TransformBuffer([ZERO] * 4))

    def test_builtin_complex(self):
        self.assertEqual(normalize([1 + 2j, 3j]), [Complex(1, 2), Complex(0, 3)])

    def test_empty_rejected(self):
        with self.assertRaises(InvalidInput):
            normalize([])

    def test_single_complex_rejected(self):
        with self.assertRaises(InvalidInput):
            normalize(Complex(3, 4))

    def test_invalid_input_is_value_error(self):
        with self.assertRaises(ValueError):
            normalize([])


class TestSplit(unittest.TestCase):
    def test_even_odd(self):
        buf = normalize([float(x) for x in range(4)])
        even, odd = buf.split()
        self.assertEqual(even, [Complex(0), Complex(2)])
        self.assertEqual(odd, [Complex(1), Complex(3)])

    def test_split_consumes(self):
        buf = normalize([1.0, 2.0])
        buf.split()
        self.assertEqual(len(buf), 0)
        with self.assertRaises(InvalidInput):
            buf.split()

    def test_odd_length_rejected(self):
        buf = TransformBuffer([ZERO] * 3)
        with self.assertRaises(InvalidInput):
            buf.split()


class TestExtend(unittest.TestCase):
    def test_moves_elements(self):
        a = TransformBuffer([Complex(1)])
        b = TransformBuffer([Complex(2)])
        a.extend(b)
        self.assertEqual(a, [Complex(1), Complex(2)])
        self.assertEqual(len(b), 0)
        with self.assertRaises(InvalidInput):
            b.split()


if __name__ == "__main__":
    unittest.main()
