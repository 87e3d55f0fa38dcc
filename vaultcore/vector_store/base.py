# Path: vaultcore/vector_store/base.py
# Purpose: Define the VectorStore interface for caching and searching document embeddings.
# Layer: core/vector_store.
# Details: Provides abstract methods for upserts, removal, search, and payload retrieval.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

import numpy as np


class VectorStore(ABC):
    """Abstract base class for pluggable vector store backends."""

    name: str
    dim: int

    @abstractmethod
    def add(self, ids: List[str], vectors: np.ndarray, payloads: Optional[List[Dict]] = None) -> None:
        """Add or replace vectors and optional payloads in the index."""

    @abstractmethod
    def remove(self, id: str) -> bool:
        """Remove an entry, returning True if it was present."""

    @abstractmethod
    def search(self, query: np.ndarray, k: int, filter: Optional[Dict[str, str]] = None) -> List[Tuple[str, float]]:
        """Search for the most similar entries and return (id, score) pairs."""

    @abstractmethod
    def get_vector(self, id: str) -> Optional[np.ndarray]:
        """Return the stored embedding for the given identifier if available."""

    @abstractmethod
    def get_payload(self, id: str) -> Optional[Dict]:
        """Return stored payload data for the given identifier if available."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of stored entries."""
