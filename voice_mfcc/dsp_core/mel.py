"""
Mel filterbank built from FFT bin indices.

Filters are triangles over integer FFT bins (HTK-style, natural-log mel
scale) defined by n_filters + 2 boundary bins. The filterbank is immutable
once built and can be shared by every frame of an extraction.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .fft import next_power_of_two

logger = logging.getLogger(__name__)


def hz_to_mel(frequencies: np.ndarray) -> np.ndarray:
    """mel(f) = 1127 * ln(1 + f / 700)."""
    frequencies = np.asarray(frequencies, dtype=np.float64)
    return 1127.0 * np.log(1.0 + frequencies / 700.0)


def mel_to_hz(mels: np.ndarray) -> np.ndarray:
    """Inverse of hz_to_mel: f = 700 * (e^(m / 1127) - 1)."""
    mels = np.asarray(mels, dtype=np.float64)
    return 700.0 * (np.exp(mels / 1127.0) - 1.0)


def mel_bin_points(n_filters: int, fft_size: int, sr: int) -> np.ndarray:
    """
    FFT bin index of each of the n_filters + 2 filter boundaries.

    Boundaries are equally spaced on the mel scale from 0 Hz to sr / 2 and
    mapped to bins with floor((fft_size + 1) * f / sr).
    """
    mel_min = hz_to_mel(0.0)
    mel_max = hz_to_mel(sr / 2.0)

    i = np.arange(n_filters + 2)
    mel_points = mel_min + i * (mel_max - mel_min) / (n_filters + 1)
    hz_points = mel_to_hz(mel_points)

    return np.floor((fft_size + 1) * hz_points / sr).astype(np.int64)


@dataclass(frozen=True)
class MelFilterbank:
    """
    Triangular Mel filterbank.

    Filter m (0-based) spans bins (bin_points[m], bin_points[m + 1],
    bin_points[m + 2]) as (start, center, end).

    Attributes:
        bin_points: Non-decreasing boundary bins, length n_filters + 2 (read-only)
        weights: Dense weight matrix, shape (n_filters, n_bins) (read-only)
    """
    bin_points: np.ndarray
    weights: np.ndarray

    @property
    def n_filters(self) -> int:
        return len(self.bin_points) - 2

    @property
    def n_bins(self) -> int:
        return self.weights.shape[1]

    def filters(self):
        """Yield (start, center, end) for every filter in order."""
        for m in range(self.n_filters):
            yield tuple(int(b) for b in self.bin_points[m:m + 3])


def triangular_weights(bin_points: np.ndarray, n_bins: int) -> np.ndarray:
    """
    Weight matrix for triangular filters over integer FFT bins.

    Rising edge: (k - start) / (center - start) for start <= k <= center.
    Falling edge: (end - k) / (end - center) for center < k <= end.
    A zero-width edge uses a denominator of 1 instead of failing.
    """
    n_filters = len(bin_points) - 2
    weights = np.zeros((n_filters, n_bins), dtype=np.float64)

    for m in range(n_filters):
        start, center, end = (int(b) for b in bin_points[m:m + 3])

        rise = (center - start) or 1
        for k in range(start, center + 1):
            weights[m, k] = (k - start) / rise

        fall = (end - center) or 1
        for k in range(center + 1, end + 1):
            weights[m, k] = (end - k) / fall

    return weights


def build_mel_filterbank(n_filters: int, fft_size: int, sr: int) -> MelFilterbank:
    """
    Build the Mel filterbank for one extraction configuration.

    Args:
        n_filters: Number of triangular filters
        fft_size: Analysis frame length in samples
        sr: Sample rate of the framed signal

    Returns:
        MelFilterbank whose weights cover the one-sided spectrum of the
        (power-of-two padded) FFT of a fft_size frame
    """
    bin_points = mel_bin_points(n_filters, fft_size, sr)
    n_bins = next_power_of_two(fft_size) // 2 + 1

    if np.any(np.diff(bin_points) < 0):
        raise ValueError(f"Mel bin points are not monotonic: {bin_points}")

    degenerate = int(np.sum((bin_points[1:-1] == bin_points[:-2])
                            | (bin_points[2:] == bin_points[1:-1])))
    if degenerate:
        logger.warning(
            "%d of %d Mel filters have a zero-width edge (fft_size=%d, sr=%d)",
            degenerate, n_filters, fft_size, sr,
        )

    weights = triangular_weights(bin_points, n_bins)

    bin_points.setflags(write=False)
    weights.setflags(write=False)
    return MelFilterbank(bin_points=bin_points, weights=weights)


def apply_filterbank(power: np.ndarray, filterbank: MelFilterbank) -> np.ndarray:
    """
    Project power spectra onto the filterbank.

    Args:
        power: One-sided power spectrum, shape (n_bins,) or (n_frames, n_bins)

    Returns:
        Filter energies, shape (n_filters,) or (n_frames, n_filters)
    """
    power = np.asarray(power, dtype=np.float64)
    if power.shape[-1] != filterbank.n_bins:
        raise ValueError(
            f"Power spectrum has {power.shape[-1]} bins, filterbank expects {filterbank.n_bins}"
        )
    # mel_energy[t, m] = Σ_k power[t, k] * weights[m, k]
    return np.dot(power, filterbank.weights.T)
