"""Forward and inverse FFT (recursive radix-2 Cooley-Tukey, decimation in time)."""

import math

from .buffer import normalize
from .complexnum import from_angle


def transform(sequence):
    """Compute the DFT of *sequence* (reals, complex or Complex values).

    The input is zero-padded to the next power of two, so the result has
    the padded length.  Bins are in the usual order: bin 0 is the DC term,
    and for real input bins ``k`` and ``N-k`` are complex conjugates.

    Raises
    ------
    InvalidInput
        If *sequence* is empty.
    """
    return _transform_buffer(normalize(sequence), inverse=False)


def inverse_transform(sequence):
    """Compute the inverse DFT of spectrum *sequence*.

    Uses the forward recursion with the twiddle angle negated, then scales
    every element by ``1/N`` where *N* is the padded length.
    """
    buf = normalize(sequence)
    n = len(buf)
    result = _transform_buffer(buf, inverse=True)
    for i in range(n):
        result[i] = result[i].scale(1.0 / n)
    return result


def _transform_buffer(buf, inverse):
    """Radix-2 FFT of *buf*, which it consumes.  ``len(buf)`` must be 2^k."""
    n = len(buf)
    if n == 1:
        return buf

    even, odd = buf.split()
    result = _transform_buffer(even, inverse)
    result.extend(_transform_buffer(odd, inverse))

    sign = 1.0 if inverse else -1.0
    half = n // 2
    for k in range(half):
        w = from_angle(sign * 2.0 * math.pi * k / n)
        x = result[k]
        t = w * result[k + half]
        result[k] = x + t
        result[k + half] = x - t
    return result
