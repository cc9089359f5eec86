"""fftpeaks – recursive radix-2 FFT and spectral peak detection in pure Python."""

import logging

__version__ = "0.1.0"

from .buffer import TransformBuffer, normalize
from .complexnum import ZERO, Complex, from_angle
from .errors import FFTPeaksError, InvalidInput
from .fft import inverse_transform, transform
from .peaks import (
    FrequencyComponent,
    bin_frequencies,
    dominant_frequency,
    find_peaks,
    magnitude_spectrum,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Complex",
    "FFTPeaksError",
    "FrequencyComponent",
    "InvalidInput",
    "TransformBuffer",
    "ZERO",
    "bin_frequencies",
    "dominant_frequency",
    "find_peaks",
    "from_angle",
    "inverse_transform",
    "magnitude_spectrum",
    "normalize",
    "transform",
]
