"""
Audio decoding for captured recordings.

Decoding is the only place this package touches librosa; the extraction
pipeline itself works on plain numpy arrays.
"""

import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
import librosa

logger = logging.getLogger(__name__)


class AudioLoadError(RuntimeError):
    """Raised when a recording cannot be decoded."""


def first_channel(waveform: np.ndarray) -> np.ndarray:
    """
    Keep only the first channel.

    Args:
        waveform: shape (samples,) or (channels, samples)

    Returns:
        Mono waveform of shape (samples,)
    """
    waveform = np.asarray(waveform)
    if waveform.ndim == 1:
        return waveform
    if waveform.ndim != 2:
        raise ValueError(f"Expected 1D or 2D waveform, got shape {waveform.shape}")
    return waveform[0]


def load_audio(path: Union[str, Path]) -> Tuple[np.ndarray, int]:
    """
    Decode an audio file at its native sample rate.

    Args:
        path: Path to a file readable by librosa (wav, flac, ogg, ...)

    Returns:
        (waveform, sr): first channel as float64 in [-1, 1], and its sample rate
    """
    try:
        y, sr = librosa.load(str(path), sr=None, mono=False)
    except Exception as e:
        raise AudioLoadError(f"Failed to decode {path}: {e}") from e

    if y.ndim == 2 and y.shape[0] > 1:
        logger.debug("%s has %d channels, keeping the first", path, y.shape[0])

    return first_channel(y).astype(np.float64), int(sr)
