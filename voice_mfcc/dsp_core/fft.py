"""
Radix-2 FFT using Numba JIT

Iterative Cooley-Tukey decimation-in-time transform over separate real and
imaginary float64 buffers:
1. Zero-pad to the next power of two
2. In-place bit-reversal permutation
3. Butterfly stages of size 2, 4, ..., N with twiddle e^{-2πik/size}

Each twiddle is evaluated directly from its angle rather than by repeated
multiplication, so the result matches the recursive even/odd split bit for bit
and does not depend on thread scheduling.
"""

import math
from typing import Tuple

import numpy as np
from numba import jit, prange


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (n >= 1)."""
    if n < 1:
        raise ValueError(f"Length must be positive, got {n}")
    size = 1
    while size < n:
        size <<= 1
    return size


@jit(nopython=True, cache=True)
def _bit_reverse(x: int, n_bits: int) -> int:
    """Reverse the bits of x with n_bits."""
    result = 0
    for _ in range(n_bits):
        result = (result << 1) | (x & 1)
        x >>= 1
    return result


@jit(nopython=True, cache=True)
def _fft_radix2_inplace(real: np.ndarray, imag: np.ndarray) -> None:
    """
    In-place iterative radix-2 DIT FFT.

    len(real) == len(imag) must be a power of two. A length-1 buffer is
    left untouched (its transform is itself).
    """
    N = real.shape[0]
    n_bits = 0
    while (1 << n_bits) < N:
        n_bits += 1

    # Bit-reversal permutation
    for i in range(N):
        j = _bit_reverse(i, n_bits)
        if j > i:
            real[i], real[j] = real[j], real[i]
            imag[i], imag[j] = imag[j], imag[i]

    stage_size = 2
    while stage_size <= N:
        half_size = stage_size // 2
        for j in range(half_size):
            angle = -2.0 * math.pi * j / stage_size
            w_re = math.cos(angle)
            w_im = math.sin(angle)

            for k in range(0, N, stage_size):
                even_idx = k + j
                odd_idx = k + j + half_size

                t_re = w_re * real[odd_idx] - w_im * imag[odd_idx]
                t_im = w_re * imag[odd_idx] + w_im * real[odd_idx]

                real[odd_idx] = real[even_idx] - t_re
                imag[odd_idx] = imag[even_idx] - t_im
                real[even_idx] = real[even_idx] + t_re
                imag[even_idx] = imag[even_idx] + t_im

        stage_size *= 2


def fft(x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute the discrete Fourier Transform of a real 1-D signal.

    Parameters
    ----------
    x : np.ndarray
        Real-valued input, any length >= 1

    Returns
    -------
    (real, imag) : tuple of np.ndarray
        Both of length next_power_of_two(len(x)); input is zero-padded first

    Examples
    --------
    >>> real, imag = fft(np.array([1.0, 0.0, 0.0, 0.0]))
    >>> real  # array([1., 1., 1., 1.])
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"Input must be 1D, got shape {x.shape}")

    n = next_power_of_two(len(x))
    real = np.zeros(n, dtype=np.float64)
    real[:len(x)] = x
    imag = np.zeros(n, dtype=np.float64)

    _fft_radix2_inplace(real, imag)
    return real, imag


def power_spectrum(real: np.ndarray, imag: np.ndarray) -> np.ndarray:
    """
    One-sided power spectrum from FFT output of length n.

    power[k] = (real[k]^2 + imag[k]^2) / n for k = 0 .. n/2 inclusive.
    The input is real-valued, so the upper half mirrors the lower half.
    """
    real = np.asarray(real, dtype=np.float64)
    imag = np.asarray(imag, dtype=np.float64)
    if real.shape != imag.shape:
        raise ValueError(f"Real/imag shapes differ: {real.shape} vs {imag.shape}")

    n = len(real)
    n_bins = n // 2 + 1
    return (real[:n_bins] ** 2 + imag[:n_bins] ** 2) / n


# ============== Batch operation for framed signals ==============

@jit(nopython=True, cache=True, parallel=True)
def _power_spectrum_batch(frames: np.ndarray) -> np.ndarray:
    """Parallel per-frame FFT + power; n_fft must be a power of two."""
    n_frames, n_fft = frames.shape
    n_bins = n_fft // 2 + 1
    result = np.empty((n_frames, n_bins), dtype=np.float64)

    for i in prange(n_frames):
        real = frames[i].copy()
        imag = np.zeros(n_fft, dtype=np.float64)
        _fft_radix2_inplace(real, imag)
        for k in range(n_bins):
            result[i, k] = (real[k] * real[k] + imag[k] * imag[k]) / n_fft

    return result


def power_spectrum_batch(frames: np.ndarray) -> np.ndarray:
    """
    Per-frame FFT + one-sided power spectrum, frames processed in parallel.

    Parameters
    ----------
    frames : np.ndarray
        Windowed frames, shape (n_frames, frame_length); rows are zero-padded
        to n_fft = next_power_of_two(frame_length) as in fft()

    Returns
    -------
    np.ndarray
        Power spectra, shape (n_frames, n_fft // 2 + 1), row i from frame i
    """
    frames = np.asarray(frames, dtype=np.float64)
    if frames.ndim != 2:
        raise ValueError(f"Frames must be 2D, got shape {frames.shape}")

    n_frames, frame_length = frames.shape
    n_fft = next_power_of_two(frame_length)
    if n_fft != frame_length:
        frames = np.pad(frames, ((0, 0), (0, n_fft - frame_length)), mode='constant')

    if n_frames == 0:
        return np.empty((0, n_fft // 2 + 1), dtype=np.float64)

    return _power_spectrum_batch(np.ascontiguousarray(frames))
