# Path: vaultcore/embedders/base.py
# Purpose: Define the Embedder interface for text embeddings.
# Layer: core/embedders.
# Details: Provides abstract methods to ensure pluggable embedder implementations.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np


class Embedder(ABC):
    """Abstract base class for all embedders used in the search pipeline."""

    name: str
    dim: int

    @abstractmethod
    def embed_text(self, text: str) -> np.ndarray:
        """Return an embedding for a given text."""

    def embed_texts(self, texts: Iterable[str]) -> np.ndarray:
        """Return a ``(N, dim)`` matrix with one embedding per text."""

        vectors = [self.embed_text(text) for text in texts]
        if not vectors:
            return np.empty((0, self.dim), dtype=np.float32)
        return np.vstack(vectors).astype(np.float32)

    @staticmethod
    def _normalize(vector: np.ndarray) -> np.ndarray:
        """Normalize embedding vectors to unit length to simplify similarity comparisons."""

        norm = np.linalg.norm(vector)
        if norm == 0:
            return vector.astype(np.float32)
        return (vector / norm).astype(np.float32)
