"""
Utility modules.
"""

from .audio import AudioLoadError, load_audio, first_channel
from .logging import setup_logging, log_config

__all__ = ['AudioLoadError', 'load_audio', 'first_channel', 'setup_logging', 'log_config']
