import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


def resample(y: np.ndarray, orig_sr: int, target_sr: int) -> np.ndarray:
    """
    Nearest-neighbour resampling.

    Parameters
    ----------
    y : np.ndarray
        Mono waveform
    orig_sr : int
        Sample rate of y
    target_sr : int
        Desired sample rate

    Returns
    -------
    np.ndarray
        y itself when the rates match; otherwise round(len(y) / ratio) samples
        with out[i] = y[floor(i * ratio)], ratio = orig_sr / target_sr.

    Notes
    -----
    No anti-aliasing filter is applied, so downsampling folds content above
    the new Nyquist frequency back into the band.
    """
    y = np.asarray(y, dtype=np.float64)
    if orig_sr <= 0 or target_sr <= 0:
        raise ValueError(f"Sample rates must be positive, got {orig_sr} -> {target_sr}")

    if orig_sr == target_sr:
        return y

    ratio = orig_sr / target_sr
    # round half up, not Python's banker's rounding
    new_length = int(math.floor(len(y) / ratio + 0.5))
    indices = np.floor(np.arange(new_length) * ratio).astype(np.int64)
    # floating point can push the last index one past the end
    np.minimum(indices, len(y) - 1, out=indices)

    logger.debug("Resampled %d -> %d samples (%d Hz -> %d Hz)",
                 len(y), new_length, orig_sr, target_sr)
    return y[indices]


def hamming_window(win_length: int) -> np.ndarray:
    """
    Symmetric Hamming window: w[n] = 0.54 - 0.46 * cos(2πn / (N - 1)).

    Unlike the periodic ("DFT-even") form, both end points equal 0.08.
    """
    if win_length < 2:
        raise ValueError(f"Window length must be at least 2, got {win_length}")
    n = np.arange(win_length)
    return 0.54 - 0.46 * np.cos(2 * np.pi * n / (win_length - 1))


def num_frames(length: int, frame_length: int, hop_length: int) -> int:
    """Number of full frames: floor((L - frame_length) / hop) + 1, or 0 if L < frame_length."""
    if hop_length <= 0:
        raise ValueError(f"hop_length must be positive, got {hop_length}")
    if length < frame_length:
        return 0
    return (length - frame_length) // hop_length + 1


def frame_signal(y: np.ndarray, frame_length: int, hop_length: int) -> np.ndarray:
    """
    Slice a waveform into overlapping full-length frames.

    Frames start at 0, hop, 2*hop, ... while start + frame_length <= len(y).
    Samples after the last full frame are dropped; there is no padding.

    Returns
    -------
    np.ndarray
        Frames, shape (n_frames, frame_length); n_frames may be 0
    """
    y = np.asarray(y, dtype=np.float64)
    if y.ndim != 1:
        raise ValueError(f"Input must be 1D, got shape {y.shape}")

    n = num_frames(len(y), frame_length, hop_length)
    if n == 0:
        return np.empty((0, frame_length), dtype=np.float64)

    frame_starts = np.arange(n) * hop_length
    frame_indices = frame_starts[:, np.newaxis] + np.arange(frame_length)
    return y[frame_indices]


def windowed_frames(y: np.ndarray, frame_length: int, hop_length: int) -> np.ndarray:
    """Frames of y multiplied by a Hamming window of frame_length."""
    frames = frame_signal(y, frame_length, hop_length)
    return frames * hamming_window(frame_length)
