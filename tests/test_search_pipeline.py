"""
Unit tests for the search pipeline over an indexed vault.
"""

import pytest

from vaultcore.indexing.index_builder import IndexBuilder
from vaultcore.models.domain import Document
from vaultcore.search.pipeline import SearchPipeline
from vaultcore.vector_store.memory_store import MemoryVectorStore


@pytest.fixture
def pipeline(embedder, vault_source) -> SearchPipeline:
    store = MemoryVectorStore(dim=embedder.dim)
    IndexBuilder(embedder, store, show_progress=False).build_index(vault_source)
    return SearchPipeline(embedder, store)


class TestSearchPipeline:
    """Tests for SearchPipeline."""

    def test_search_ranks_topical_note_first(self, pipeline):
        results = pipeline.search("meeting discussion", k=3)

        assert results[0].id == "m"
        assert results[0].payload == {"title": "Weekly meeting"}
        assert [result.rank for result in results] == [1, 2, 3]

    def test_search_respects_k(self, pipeline):
        assert len(pipeline.search("bread", k=1)) == 1

    def test_search_filters_by_payload(self, pipeline):
        results = pipeline.search("meeting", k=3, filters={"title": "Garden"})
        assert [result.id for result in results] == ["g"]

    def test_find_similar_ranks_ad_hoc_documents(self, pipeline):
        items = [Document(id="x", text="yeast and flour"), Document(id="y", text="meeting and discussion")]

        results = pipeline.find_similar("meeting", items, top_k=1)

        assert [result.id for result in results] == ["y"]
