"""
Integration tests for the ContextEngine facade.
"""

import numpy as np
import pytest

from vaultconfig.settings import AppSettings, EmbedderSettings
from vaultcore import ContextEngine, create_engine
from vaultcore.models.domain import Document


@pytest.fixture
def engine(vault_source) -> ContextEngine:
    return create_engine(AppSettings(), source=vault_source)


class TestContextEngine:
    """End-to-end behaviour across indexing, search, and context assembly."""

    def test_index_and_search(self, engine):
        indexed = engine.index()

        assert len(indexed) == 3
        assert engine.search("meeting discussion", k=1)[0].id == "m"
        assert engine.stats().note_count == 3

    def test_reindex_does_not_duplicate_notes(self, engine):
        engine.index()
        engine.index(ids=["m"])

        assert len(engine.notes) == 3
        assert len(engine.vector_store) == 3

    def test_build_context_uses_indexed_notes(self, engine):
        engine.index()

        context = engine.build_context("meeting roadmap", pinned_ids=["g"])

        assert context.startswith("=== SELECTED NOTES ===\n📄 Garden:")
        assert "📝 Weekly meeting:" in context
        assert "Notes: 3" in context

    def test_answer_uses_assembled_context(self, engine):
        engine.index()
        assert engine.answer("Where is the meeting agenda?").startswith("Based on your vault:")

    def test_embed_and_find_similar(self, engine):
        assert engine.embed("hello world").shape == (128,)

        items = [Document(id="x", text="garden tomatoes"), Document(id="y", text="meeting agenda")]
        assert engine.find_similar("meeting", items, top_k=1)[0].id == "y"

    def test_update_idf(self, engine):
        assert engine.update_idf(["alpha beta", "alpha"]) == 2

    def test_snapshot_round_trip(self, engine, vault_source):
        engine.index()
        restored = create_engine(AppSettings(), source=vault_source)
        restored.deserialize(engine.serialize())

        assert np.allclose(engine.embed("team meeting"), restored.embed("team meeting"))

    def test_index_without_source(self):
        with pytest.raises(ValueError):
            create_engine(AppSettings()).index()

    def test_folder_source_from_settings(self, tmp_path):
        (tmp_path / "plan.md").write_text("Plan the quarterly review.", encoding="utf-8")

        engine = create_engine(AppSettings(notes_folder=tmp_path))

        assert [note.id for note in engine.index()] == ["plan.md"]

    def test_dimension_from_settings(self):
        engine = create_engine(AppSettings(embedder=EmbedderSettings(dim=32)))

        assert engine.embed("weekly plan").shape == (32,)
        assert engine.vector_store.dim == 32
