"""Power-of-two buffers of complex samples for the recursive FFT."""

from .complexnum import ZERO, Complex
from .errors import InvalidInput


def is_power_of_two(n):
    """Return True if *n* is a positive power of two (1 counts)."""
    return n > 0 and n & (n - 1) == 0


def next_power_of_two(n):
    """Return the smallest power-of-two >= *n*."""
    p = 1
    while p < n:
        p <<= 1
    return p


class TransformBuffer:
    """An owned sequence of :class:`Complex` values.

    The buffer takes ownership of the list it is given.  :meth:`split` and
    :meth:`extend` move elements out of a buffer rather than copying, after
    which the drained buffer refuses to be split again.
    """

    __slots__ = ("data", "_consumed")

    def __init__(self, data=None):
        self.data = data if data is not None else []
        self._consumed = False

    def split(self):
        """Consume the buffer and return ``(even, odd)`` sub-buffers.

        *even* holds the elements at positions 0, 2, 4, … and *odd* those at
        1, 3, 5, …, each in their original order.
        """
        self._check_usable()
        if len(self.data) % 2:
            raise InvalidInput(
                f"Cannot split a buffer of odd length {len(self.data)}"
            )
        data = self._take()
        return TransformBuffer(data[0::2]), TransformBuffer(data[1::2])

    def extend(self, other):
        """Move every element of *other* onto the end of this buffer."""
        self._check_usable()
        other._check_usable()
        self.data.extend(other._take())

    def _take(self):
        data, self.data = self.data, []
        self._consumed = True
        return data

    def _check_usable(self):
        if self._consumed:
            raise InvalidInput("Buffer has already been consumed")

    # -- sequence protocol ----------------------------------------------------

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __setitem__(self, index, value):
        self.data[index] = value

    def __eq__(self, other):
        if isinstance(other, TransformBuffer):
            return self.data == other.data
        if isinstance(other, list):
            return self.data == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"TransformBuffer({self.data!r})"


def normalize(sequence):
    """Build a :class:`TransformBuffer` from *sequence*, zero-padded to 2^k.

    Parameters
    ----------
    sequence : iterable of float | complex | Complex
        Input samples.  Real values are lifted to complex values with a
        zero imaginary part.

    Returns
    -------
    TransformBuffer
        A buffer whose length is the smallest power of two >= the input
        length.  Inputs that are already a power of two in length are not
        padded.

    Raises
    ------
    InvalidInput
        If *sequence* is empty or is a single :class:`Complex` value.
    """
    if isinstance(sequence, Complex):
        raise InvalidInput("Expected a sequence of samples, got a single Complex")
    if isinstance(sequence, TransformBuffer):
        sequence._check_usable()
    data = [Complex.lift(v) for v in sequence]
    n = len(data)
    if n == 0:
        raise InvalidInput("Cannot transform an empty sequence")
    if not is_power_of_two(n):
        data.extend([ZERO] * (next_power_of_two(n) - n))
    return TransformBuffer(data)
