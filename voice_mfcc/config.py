"""
Configuration for MFCC extraction.

MFCCConfig is an immutable record; callers override any subset of fields
and the rest fall back to the defaults below. YAML config files are read
with PyYAML and carry the fields under an ``mfcc:`` section.
"""

import dataclasses
import numbers
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


class InvalidConfigError(ValueError):
    """Raised when an MFCC configuration cannot drive the pipeline."""


@dataclass(frozen=True)
class MFCCConfig:
    """
    MFCC extraction parameters.

    Attributes:
        n_coeffs: Cepstral coefficients kept per frame
        n_mel_filters: Number of triangular Mel filters
        fft_size: Frame length in samples (zero-padded to a power of two for the FFT)
        hop_size: Samples between consecutive frame starts (160 = 10 ms at 16 kHz)
        target_sample_rate: Rate the waveform is resampled to before framing
    """
    n_coeffs: int = 13
    n_mel_filters: int = 26
    fft_size: int = 512
    hop_size: int = 160
    target_sample_rate: int = 16000

    def __post_init__(self):
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            # bool is Integral but never a meaningful size
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfigError(
                    f"{field.name} must be an integer, got {value!r}"
                )
            value = int(value)
            object.__setattr__(self, field.name, value)
            if value <= 0:
                raise InvalidConfigError(f"{field.name} must be positive, got {value}")

        if self.fft_size < 2:
            raise InvalidConfigError(f"fft_size must be at least 2, got {self.fft_size}")

    @classmethod
    def field_names(cls):
        return tuple(f.name for f in dataclasses.fields(cls))

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None) -> 'MFCCConfig':
        """Build a config from a (possibly partial) mapping of overrides."""
        return cls().replace(**(values or {}))

    def replace(self, **overrides) -> 'MFCCConfig':
        """Return a copy with the given fields overridden."""
        unknown = sorted(set(overrides) - set(self.field_names()))
        if unknown:
            raise InvalidConfigError(f"Unknown MFCC config fields: {', '.join(unknown)}")
        return dataclasses.replace(self, **overrides)

    def to_dict(self) -> Dict[str, int]:
        return dataclasses.asdict(self)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InvalidConfigError(f"{config_path} must contain a mapping at the top level")
    return config


def mfcc_config_from_yaml(config_path: Union[str, Path]) -> MFCCConfig:
    """Read the ``mfcc`` section of a YAML file into an MFCCConfig."""
    config = load_config(config_path)
    section = config.get('mfcc') or {}
    if not isinstance(section, dict):
        raise InvalidConfigError(f"'mfcc' section in {config_path} must be a mapping")
    return MFCCConfig.from_dict(section)
