"""
DSP Core Module - Hand-written MFCC front end

From-scratch implementations of each stage of the MFCC pipeline:

    resample -> frame + Hamming window -> FFT -> power spectrum
    -> Mel filterbank -> log -> DCT

Modules:
    - framing: Nearest-neighbour resampling, framing, Hamming window
    - fft: Radix-2 Cooley-Tukey FFT (Numba JIT) and power spectrum
    - mel: Mel scale conversion and triangular filterbank
    - mfcc: Log compression, DCT and the MFCCExtractor pipeline
"""

from .fft import fft, power_spectrum, power_spectrum_batch, next_power_of_two
from .framing import resample, hamming_window, num_frames, frame_signal, windowed_frames
from .mel import (
    MelFilterbank,
    hz_to_mel,
    mel_to_hz,
    mel_bin_points,
    build_mel_filterbank,
    apply_filterbank,
)
from .mfcc import LOG_FLOOR, MFCCExtractor, extract_mfcc, features_to_list, log_compress, dct

__all__ = [
    # FFT functions
    'fft',
    'power_spectrum',
    'power_spectrum_batch',
    'next_power_of_two',
    # Framing functions
    'resample',
    'hamming_window',
    'num_frames',
    'frame_signal',
    'windowed_frames',
    # Mel functions
    'MelFilterbank',
    'hz_to_mel',
    'mel_to_hz',
    'mel_bin_points',
    'build_mel_filterbank',
    'apply_filterbank',
    # MFCC functions
    'LOG_FLOOR',
    'MFCCExtractor',
    'extract_mfcc',
    'features_to_list',
    'log_compress',
    'dct',
]
