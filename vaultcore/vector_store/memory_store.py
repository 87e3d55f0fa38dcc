# Path: vaultcore/vector_store/memory_store.py
# Purpose: Provide an in-memory cosine-similarity vector store.
# Layer: core/vector_store.
# Details: Keeps one numpy row per document id; re-adding an id replaces its row in place.

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np

from vaultcore.errors import DimensionMismatchError
from vaultcore.search.similarity import rank_vectors

from .base import VectorStore


class MemoryVectorStore(VectorStore):
    """Minimal vector store caching document embeddings for the search pipeline.

    Ties in score are broken by insertion order, so results are deterministic.
    """

    def __init__(self, dim: int, name: str = "memory") -> None:
        self.dim = dim
        self.name = name
        self._ids: List[str] = []
        self._rows: Dict[str, int] = {}
        self._vectors: np.ndarray = np.empty((0, dim), dtype=np.float32)
        self._payloads: Dict[str, Dict] = {}

    def add(self, ids: List[str], vectors: np.ndarray, payloads: Optional[List[Dict]] = None) -> None:
        """Add vectors to the store with optional payload metadata."""

        vectors = np.atleast_2d(np.asarray(vectors, dtype=np.float32))
        if vectors.shape[0] != len(ids):
            raise ValueError("Vectors length must match ids length.")
        if len(ids) and vectors.shape[1] != self.dim:
            raise DimensionMismatchError(self.dim, vectors.shape[1])

        payloads = payloads or [{} for _ in ids]
        if len(payloads) != len(ids):
            raise ValueError("Payloads length must match ids length.")

        fresh_ids: List[str] = []
        fresh_vectors: List[np.ndarray] = []
        for item_id, vector, payload in zip(ids, vectors, payloads):
            row = self._rows.get(item_id)
            if row is not None:
                self._vectors[row] = vector
            else:
                self._rows[item_id] = len(self._ids) + len(fresh_ids)
                fresh_ids.append(item_id)
                fresh_vectors.append(vector)
            self._payloads[item_id] = payload

        if fresh_ids:
            self._vectors = np.vstack([self._vectors, np.vstack(fresh_vectors)])
            self._ids.extend(fresh_ids)

    def remove(self, id: str) -> bool:
        """Drop an entry and compact the matrix."""

        row = self._rows.pop(id, None)
        if row is None:
            return False
        self._vectors = np.delete(self._vectors, row, axis=0)
        del self._ids[row]
        self._payloads.pop(id, None)
        self._rows = {item_id: index for index, item_id in enumerate(self._ids)}
        return True

    def search(self, query: np.ndarray, k: int, filter: Optional[Dict[str, str]] = None) -> List[Tuple[str, float]]:
        """Return the k most similar entries by cosine similarity."""

        if len(self._ids) == 0 or k <= 0:
            return []

        if query.shape[0] != self.dim:
            raise DimensionMismatchError(self.dim, query.shape[0])

        ranked = rank_vectors(query, self._vectors, len(self._ids))
        results: List[Tuple[str, float]] = []
        for row, score in ranked:
            item_id = self._ids[row]
            payload = self._payloads.get(item_id)
            if filter and payload is not None:
                if any(payload.get(key) != value for key, value in filter.items()):
                    continue
            results.append((item_id, score))
            if len(results) >= k:
                break
        return results

    def get_vector(self, id: str) -> Optional[np.ndarray]:
        """Retrieve the embedding previously stored for the given id."""

        row = self._rows.get(id)
        if row is None:
            return None
        return self._vectors[row].copy()

    def get_payload(self, id: str) -> Optional[Dict]:
        """Retrieve payload previously associated with the given id."""

        return self._payloads.get(id)

    def __len__(self) -> int:
        return len(self._ids)
