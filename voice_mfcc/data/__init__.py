"""
Recording metadata and feature persistence.
"""

from .recordings import Gender, Demographics, recording_basename, audio_filename, feature_key
from .store import FeatureStore

__all__ = [
    'Gender',
    'Demographics',
    'recording_basename',
    'audio_filename',
    'feature_key',
    'FeatureStore',
]
