"""
JSON-backed feature store.

A flat key -> value map kept in one JSON file, where each value is the
nested-list form of an MFCC sequence. Nothing about the arrays is validated
beyond being numeric.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Union

import numpy as np

logger = logging.getLogger(__name__)


class FeatureStore:
    """
    Persist MFCC sequences under caller-chosen string keys.

    Args:
        path: JSON file holding the store; created on first save
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, List[List[float]]]:
        if not self.path.exists():
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _write(self, data: Dict[str, List[List[float]]]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # atomic replace
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def save(self, key: str, features) -> None:
        """Store features (array-like of shape (n_frames, n_coeffs)) under key."""
        data = self._read()
        data[key] = np.asarray(features, dtype=np.float64).tolist()
        self._write(data)
        logger.info("Saved %d feature vectors with key: %s", len(data[key]), key)

    def load(self, key: str) -> np.ndarray:
        """Features stored under key as a float array; raises KeyError if absent."""
        data = self._read()
        if key not in data:
            raise KeyError(key)
        features = np.asarray(data[key], dtype=np.float64)
        if features.size == 0:
            return features.reshape(0, 0)
        return features

    def delete(self, key: str) -> None:
        data = self._read()
        if key not in data:
            raise KeyError(key)
        del data[key]
        self._write(data)

    def keys(self) -> List[str]:
        return sorted(self._read())

    def __contains__(self, key: str) -> bool:
        return key in self._read()

    def __len__(self) -> int:
        return len(self._read())
