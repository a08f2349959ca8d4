import logging
from typing import List, Optional

import numpy as np

from ..config import MFCCConfig
from .fft import next_power_of_two, power_spectrum_batch
from .framing import resample, windowed_frames
from .mel import MelFilterbank, apply_filterbank, build_mel_filterbank

logger = logging.getLogger(__name__)

# Substituted for non-positive filter energies in place of their logarithm
LOG_FLOOR = 1e-12


def log_compress(energies: np.ndarray, floor: float = LOG_FLOOR) -> np.ndarray:
    """
    Natural log of filter energies.

    Energies <= 0 become `floor` itself (not log(floor)), so a silent frame
    yields values of 1e-12 rather than -27.6.
    """
    energies = np.asarray(energies, dtype=np.float64)
    positive = energies > 0
    # log only where defined; np.where would still evaluate log(0)
    safe = np.where(positive, energies, 1.0)
    return np.where(positive, np.log(safe), floor)


def dct(x: np.ndarray, n_coeffs: Optional[int] = None, norm: Optional[str] = None) -> np.ndarray:
    """
    DCT-II along the last axis.

    out[k] = Σ_n x[n] * cos(π * (n + 0.5) * k / N), k = 0 .. n_coeffs - 1

    With norm=None no scaling is applied (half of scipy's unnormalized
    DCT-II). norm='ortho' gives the orthonormal variant.
    """
    x = np.asarray(x, dtype=np.float64)
    N = x.shape[-1]

    if n_coeffs is None:
        n_coeffs = N

    n = np.arange(N)
    k = np.arange(n_coeffs)[:, np.newaxis]

    dct_matrix = np.cos(np.pi * (n + 0.5) * k / N)

    if norm == 'ortho':
        dct_matrix[0] *= 1.0 / np.sqrt(N)
        dct_matrix[1:] *= np.sqrt(2.0 / N)
    elif norm is not None:
        raise ValueError(f"Unknown DCT norm: {norm}")

    return np.dot(x, dct_matrix.T)


class MFCCExtractor:
    """
    Stateless MFCC front end.

    The Mel filterbank depends only on the configuration, so it is built once
    in the constructor and reused (read-only) for every frame of every call.

    Examples
    --------
    >>> extractor = MFCCExtractor(MFCCConfig(n_coeffs=20))
    >>> feats = extractor.extract(y, sr=44100)
    >>> feats.shape  # (n_frames, 20)
    """

    def __init__(self, config: Optional[MFCCConfig] = None, **overrides):
        config = config if config is not None else MFCCConfig()
        if overrides:
            config = config.replace(**overrides)
        self.config = config

        if config.fft_size & (config.fft_size - 1):
            logger.warning(
                "fft_size=%d is not a power of two; frames are zero-padded to %d",
                config.fft_size, next_power_of_two(config.fft_size),
            )

        self.filterbank: MelFilterbank = build_mel_filterbank(
            config.n_mel_filters, config.fft_size, config.target_sample_rate
        )

    def extract(self, y: np.ndarray, sr: int) -> np.ndarray:
        """
        Compute MFCCs for a complete mono waveform.

        Args:
            y: Mono waveform, values roughly in [-1, 1]
            sr: Sample rate of y in Hz

        Returns:
            MFCCs, shape (n_frames, n_coeffs) in chronological order;
            (0, n_coeffs) when the resampled signal is shorter than one frame
        """
        y = np.asarray(y, dtype=np.float64)
        if y.ndim != 1:
            raise ValueError(f"Input must be 1D, got shape {y.shape}")
        if sr <= 0:
            raise ValueError(f"Sample rate must be positive, got {sr}")

        cfg = self.config

        # Step 1: Resample
        y = resample(y, sr, cfg.target_sample_rate)

        # Step 2: Frame + Hamming window
        frames = windowed_frames(y, cfg.fft_size, cfg.hop_size)
        n_frames = frames.shape[0]
        logger.debug("Extracting MFCCs from %d frames (%d samples @ %d Hz)",
                     n_frames, len(y), cfg.target_sample_rate)

        if n_frames == 0:
            return np.empty((0, cfg.n_coeffs), dtype=np.float64)

        # Step 3: FFT + one-sided power spectrum, frames in parallel
        power = power_spectrum_batch(frames)

        # Step 4: Mel filter energies
        mel_energies = apply_filterbank(power, self.filterbank)

        # Step 5: Log compression
        log_mel = log_compress(mel_energies)

        # Step 6: DCT to cepstral coefficients
        return dct(log_mel, n_coeffs=cfg.n_coeffs)

    __call__ = extract


def extract_mfcc(
    y: np.ndarray,
    sr: int,
    config: Optional[MFCCConfig] = None,
    **overrides
) -> np.ndarray:
    """
    One-shot MFCC extraction.

    Examples
    --------
    >>> y = np.sin(2 * np.pi * 440 * np.arange(44100) / 44100)
    >>> extract_mfcc(y, sr=44100).shape  # (97, 13)
    """
    return MFCCExtractor(config, **overrides).extract(y, sr)


def features_to_list(features: np.ndarray) -> List[List[float]]:
    """Nested lists of Python floats, ready for JSON."""
    return np.asarray(features, dtype=np.float64).tolist()
