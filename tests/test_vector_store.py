"""
Unit tests for the in-memory vector store.
"""

import numpy as np
import pytest

from vaultcore.errors import DimensionMismatchError
from vaultcore.vector_store.memory_store import MemoryVectorStore


@pytest.fixture
def store() -> MemoryVectorStore:
    store = MemoryVectorStore(dim=3)
    store.add(
        ["a", "b"],
        np.array([[1, 0, 0], [0, 1, 0]], dtype=np.float32),
        [{"title": "x"}, {"title": "y"}],
    )
    return store


class TestMemoryVectorStore:
    """Tests for MemoryVectorStore."""

    def test_search_returns_best_match(self, store):
        results = store.search(np.array([1, 0, 0], dtype=np.float32), k=1)

        assert len(results) == 1
        assert results[0][0] == "a"
        assert results[0][1] == pytest.approx(1.0)

    def test_add_upserts_existing_id(self, store):
        store.add(["a"], np.array([[0, 0, 1]], dtype=np.float32))

        assert len(store) == 2
        assert np.allclose(store.get_vector("a"), [0, 0, 1])

    def test_remove_compacts(self, store):
        assert store.remove("a") is True
        assert store.remove("a") is False
        assert len(store) == 1
        assert [item_id for item_id, _ in store.search(np.ones(3, dtype=np.float32), k=5)] == ["b"]
        assert store.get_payload("a") is None

    def test_filter_matches_payload(self, store):
        results = store.search(np.array([1, 1, 0], dtype=np.float32), k=5, filter={"title": "y"})
        assert [item_id for item_id, _ in results] == ["b"]

    def test_ties_keep_insertion_order(self):
        store = MemoryVectorStore(dim=2)
        store.add(["first", "second"], np.array([[1, 1], [1, 1]], dtype=np.float32))

        results = store.search(np.array([1, 1], dtype=np.float32), k=2)

        assert [item_id for item_id, _ in results] == ["first", "second"]

    def test_dimension_mismatch(self, store):
        with pytest.raises(DimensionMismatchError):
            store.add(["c"], np.ones((1, 4), dtype=np.float32))
        with pytest.raises(DimensionMismatchError):
            store.search(np.ones(4, dtype=np.float32), k=1)

    def test_length_mismatch(self, store):
        with pytest.raises(ValueError):
            store.add(["c", "d"], np.ones((1, 3), dtype=np.float32))

    def test_empty_store(self):
        assert MemoryVectorStore(dim=3).search(np.ones(3, dtype=np.float32), k=3) == []

    def test_get_vector_returns_copy(self, store):
        vector = store.get_vector("a")
        vector[:] = 0
        assert np.allclose(store.get_vector("a"), [1, 0, 0])
        assert store.get_vector("missing") is None
