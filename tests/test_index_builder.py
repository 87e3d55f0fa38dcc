"""
Unit tests for the index builder.
"""

import logging

import numpy as np
import pytest

from vaultcore.indexing.index_builder import IndexBuilder
from vaultcore.indexing.sources import InMemoryDocumentSource
from vaultcore.models.domain import Note
from vaultcore.vector_store.memory_store import MemoryVectorStore


class TestIndexBuilder:
    """Tests for IndexBuilder.build_index."""

    def test_indexes_every_note(self, embedder, vault_source):
        store = MemoryVectorStore(dim=embedder.dim)

        notes = IndexBuilder(embedder, store, show_progress=False).build_index(vault_source)

        assert [note.id for note in notes] == ["m", "g", "r"]
        assert len(store) == 3
        assert store.get_payload("g") == {"title": "Garden"}

    def test_refreshes_idf_from_corpus(self, embedder, vault_source):
        store = MemoryVectorStore(dim=embedder.dim)
        IndexBuilder(embedder, store, show_progress=False).build_index(vault_source)

        assert embedder.idf.get("tomatoes") == pytest.approx(1.0986, abs=1e-3)

    def test_skips_unreadable_notes(self, embedder, vault_source, caplog):
        store = MemoryVectorStore(dim=embedder.dim)
        builder = IndexBuilder(embedder, store, batch_size=1, show_progress=False)

        with caplog.at_level(logging.WARNING):
            notes = builder.build_index(vault_source, ids=["m", "ghost", "r"])

        assert [note.id for note in notes] == ["m", "r"]
        assert len(store) == 2
        assert "ghost" in caplog.text

    def test_skip_idf_update(self, embedder, vault_source):
        store = MemoryVectorStore(dim=embedder.dim)
        IndexBuilder(embedder, store, show_progress=False).build_index(vault_source, update_idf=False)

        assert "tomatoes" not in embedder.idf

    def test_empty_source(self, embedder):
        store = MemoryVectorStore(dim=embedder.dim)
        assert IndexBuilder(embedder, store, show_progress=False).build_index(InMemoryDocumentSource()) == []
        assert len(store) == 0

    def test_single_note_vault_gets_unit_vector(self, embedder):
        source = InMemoryDocumentSource([Note(id="n", title="Garden", body="Tomatoes need watering")])
        store = MemoryVectorStore(dim=embedder.dim)

        IndexBuilder(embedder, store, show_progress=False).build_index(source)

        assert np.linalg.norm(store.get_vector("n")) == pytest.approx(1.0, abs=1e-5)
        assert store.search(embedder.embed_text("tomatoes"), k=1)[0][1] > 0
