"""
voice-mfcc: MFCC feature extraction for recorded speech prompts.
"""

from .config import MFCCConfig, InvalidConfigError, load_config, mfcc_config_from_yaml
from .dsp_core import MFCCExtractor, extract_mfcc, features_to_list

__all__ = [
    'MFCCConfig',
    'InvalidConfigError',
    'load_config',
    'mfcc_config_from_yaml',
    'MFCCExtractor',
    'extract_mfcc',
    'features_to_list',
]

__version__ = '1.0.0'
