"""Exception types raised by fftpeaks."""


class FFTPeaksError(Exception):
    """Base class for all fftpeaks errors."""


class InvalidInput(FFTPeaksError, ValueError):
    """Raised when a transform or analysis is given unusable input."""
