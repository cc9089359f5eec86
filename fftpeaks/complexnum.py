"""Immutable complex numbers for the transform engine."""

import math
import numbers
from collections import namedtuple


class Complex(namedtuple("Complex", "re im")):
    """A point ``re + im·i`` in the complex plane.

    Instances are immutable; every arithmetic operation returns a new value.
    Both parts are stored as ``float``.
    """

    __slots__ = ()

    def __new__(cls, re=0.0, im=0.0):
        return super().__new__(cls, float(re), float(im))

    @classmethod
    def lift(cls, value):
        """Return *value* as a :class:`Complex`.

        Real numbers get a zero imaginary part.  Builtin ``complex`` values
        keep both parts.
        """
        if isinstance(value, Complex):
            return value
        if isinstance(value, numbers.Complex):
            value = complex(value)
            return cls(value.real, value.imag)
        raise TypeError(f"Cannot convert {type(value).__name__} to Complex")

    # -- arithmetic -----------------------------------------------------------

    def add(self, other):
        return Complex(self.re + other.re, self.im + other.im)

    def subtract(self, other):
        return Complex(self.re - other.re, self.im - other.im)

    def multiply(self, other):
        """Standard product ``(a+bi)(c+di) = (ac-bd) + (ad+bc)i``."""
        a, b = self
        c, d = other
        return Complex(a * c - b * d, a * d + b * c)

    def scale(self, factor):
        """Multiply both parts by the real number *factor*."""
        return Complex(self.re * factor, self.im * factor)

    def conjugate(self):
        return Complex(self.re, -self.im)

    def magnitude(self):
        """Euclidean norm ``sqrt(re² + im²)``."""
        return math.hypot(self.re, self.im)

    # Operator forms.  The tuple versions of + and * (concatenation and
    # repetition) make no sense for a number, so all of them, reflected
    # ones included, are replaced here.  Real operands are lifted.
    def __add__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return self.add(other)

    def __radd__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return other.add(self)

    def __sub__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return self.subtract(other)

    def __rsub__(self, other):
        other = _operand(other)
        if other is NotImplemented:
            return other
        return other.subtract(self)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        if isinstance(other, Complex):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __abs__(self):
        return self.magnitude()

    def __complex__(self):
        return complex(self.re, self.im)

    def __repr__(self):
        return f"Complex({self.re!r}, {self.im!r})"


ZERO = Complex(0.0, 0.0)


def from_angle(theta):
    """Return the unit-magnitude complex number ``e^{iθ} = (cos θ, sin θ)``."""
    return Complex(math.cos(theta), math.sin(theta))


def _operand(value):
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Real):
        return Complex(value, 0.0)
    return NotImplemented
