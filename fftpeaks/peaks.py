"""Spectral peak detection on top of the FFT engine.

A real signal is transformed, reduced to its one-sided magnitude spectrum
and scanned for strict local maxima above a threshold.  Each maximum is
reported as a :class:`FrequencyComponent`.

All bin arithmetic uses the zero-padded transform length, never the raw
sample count, so bin sizes always agree with the spectrum being scanned.
"""

import logging
import sys
from collections import namedtuple

from .buffer import is_power_of_two
from .errors import InvalidInput
from .fft import transform

logger = logging.getLogger(__name__)

# Magnitudes below this are rounding noise and are treated as zero.
_EPSILON = sys.float_info.epsilon


class FrequencyComponent(namedtuple("FrequencyComponent", "f coeff")):
    """A detected peak: frequency *f* in Hz and its spectral magnitude *coeff*."""

    __slots__ = ()

    @property
    def frequency(self):
        return self.f

    @property
    def coefficient(self):
        return self.coeff


def _to_floats(samples):
    try:
        return [float(s) for s in samples]
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"Samples must be real numbers: {exc}") from exc


def _check_sample_rate(sample_rate):
    if sample_rate <= 0:
        raise InvalidInput(f"sample_rate must be > 0, got {sample_rate}")


def magnitude_spectrum(samples):
    """Return the one-sided magnitude spectrum of a real signal.

    Parameters
    ----------
    samples : iterable of real numbers
        Time-domain samples; anything ``float()`` accepts.

    Returns
    -------
    (list[float], int)
        ``|X[k]| / N`` for ``k`` in ``[0, N/2)``, and the padded length *N*.

    Raises
    ------
    InvalidInput
        If *samples* is empty or holds non-numeric values.
    """
    values = _to_floats(samples)
    if not values:
        raise InvalidInput("Cannot analyse an empty sample sequence")

    spectrum = transform(values)
    n = len(spectrum)
    mags = []
    for k in range(n // 2):
        m = spectrum[k].magnitude() / n
        mags.append(m if m >= _EPSILON else 0.0)
    return mags, n


def bin_frequencies(n_padded, sample_rate):
    """Return the centre frequency in Hz of each one-sided bin."""
    if not is_power_of_two(n_padded):
        raise InvalidInput(
            f"n_padded must be a positive power of two, got {n_padded}"
        )
    _check_sample_rate(sample_rate)
    bin_size = sample_rate / n_padded
    return [k * bin_size for k in range(n_padded // 2)]


def find_peaks(samples, sample_rate, threshold):
    """Detect the dominant frequency components of a real signal.

    Parameters
    ----------
    samples : iterable of real numbers
        Mono time-domain samples.
    sample_rate : int | float
        Sampling rate in Hz.  Must be > 0.
    threshold : float
        A bin must have a magnitude strictly greater than this to count.

    Returns
    -------
    list[FrequencyComponent]
        One entry per strict local maximum of the magnitude spectrum, in
        increasing frequency order.  The DC bin and the last bin of the
        half-spectrum are never reported.

    Raises
    ------
    InvalidInput
        If *samples* is empty or *sample_rate* is not positive.
    """
    _check_sample_rate(sample_rate)
    mags, n = magnitude_spectrum(samples)
    bin_size = sample_rate / n
    logger.debug("Analysing %d bins (padded length %d), bin size %.4f Hz",
                 len(mags), n, bin_size)

    peaks = []
    for k in range(1, n // 2 - 1):
        m = mags[k]
        if m <= threshold:
            continue
        if mags[k - 1] < m > mags[k + 1]:
            peaks.append(FrequencyComponent(k * bin_size, m))

    logger.debug("Found %d peak(s) above %g", len(peaks), threshold)
    return peaks


def dominant_frequency(samples, sample_rate, threshold=0.0):
    """Return the strongest peak found by :func:`find_peaks`, or None."""
    peaks = find_peaks(samples, sample_rate, threshold)
    if not peaks:
        return None
    return max(peaks, key=lambda p: p.coeff)
