# Path: vaultcore/embedders/word_vectors.py
# Purpose: Cache per-word vectors and derive deterministic vectors for unseen words.
# Layer: core/embedders.
# Details: Unseen words hash to a sine-based pseudo-random unit vector, computed once per cache.

from __future__ import annotations

import math
import threading
from typing import Callable, Dict, Mapping

import numpy as np

_SINE_SCALE = 43758.5453123
_DIM_STRIDE = 31


def rolling_hash(word: str) -> int:
    """Return the signed 32-bit ``h * 31 + ord(c)`` rolling hash of ``word``."""

    value = 0
    for char in word:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def hash_vector(word: str, dim: int) -> np.ndarray:
    """
    Derive a unit vector for ``word`` from its rolling hash.

    Component ``i`` is ``2 * frac(sin(h + 31 * i) * 43758.5453123) - 1``, which
    spreads values over ``[-1, 1)`` independently of the sign of the sine.
    """

    seed = rolling_hash(word)
    components = []
    for i in range(dim):
        scaled = math.sin(seed + i * _DIM_STRIDE) * _SINE_SCALE
        components.append(2.0 * (scaled - math.floor(scaled)) - 1.0)
    vector = np.asarray(components, dtype=np.float64)
    norm = np.linalg.norm(vector)
    if norm == 0:
        return vector.astype(np.float32)
    return (vector / norm).astype(np.float32)


class WordVectorCache:
    """Lowercase word to unit vector mapping, filled lazily and guarded by a lock."""

    def __init__(self, dim: int) -> None:
        self.dim = dim
        self._vectors: Dict[str, np.ndarray] = {}
        self._lock = threading.RLock()

    def get_or_create(self, word: str, factory: Callable[[str], np.ndarray]) -> np.ndarray:
        """Return the cached vector for ``word``, building it with ``factory`` on first use."""

        with self._lock:
            vector = self._vectors.get(word)
            if vector is None:
                vector = factory(word)
                self._vectors[word] = vector
            return vector

    def update(self, vectors: Mapping[str, np.ndarray]) -> None:
        """Insert or overwrite vectors for several words."""

        with self._lock:
            self._vectors.update(vectors)

    def to_dict(self) -> Dict[str, np.ndarray]:
        """Return a shallow copy of the cache."""

        with self._lock:
            return dict(self._vectors)

    def replace(self, vectors: Mapping[str, np.ndarray]) -> None:
        """Swap in a complete cache, discarding current entries."""

        with self._lock:
            self._vectors = dict(vectors)

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._vectors

    def __len__(self) -> int:
        with self._lock:
            return len(self._vectors)
