# Path: vaultcore/search/pipeline.py
# Purpose: Orchestrate search workflow by combining the embedder and the vector store.
# Layer: core/search.
# Details: Embeds queries once, then delegates retrieval to the store or ranks ad-hoc documents.

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from vaultcore.embedders.base import Embedder
from vaultcore.models.domain import Document, SearchResult, SimilarityResult
from vaultcore.vector_store.base import VectorStore

from .similarity import find_similar


class SearchPipeline:
    """High-level service bridging callers with the embedder and vector store."""

    def __init__(self, embedder: Embedder, vector_store: VectorStore) -> None:
        self.embedder = embedder
        self.vector_store = vector_store

    def search(self, query: str, k: int = 5, filters: Optional[Dict[str, str]] = None) -> List[SearchResult]:
        """
        Execute a text query against the indexed documents.

        External calls:
        - vaultcore/embedders/hash_embedder.py::HashEmbedder.embed_text - constructs the query embedding.
        - vaultcore/vector_store/memory_store.py::MemoryVectorStore.search - ranks stored embeddings.
        - vaultcore/vector_store/memory_store.py::MemoryVectorStore.get_payload - fetches metadata for matched ids.
        """

        query_embedding = self.embedder.embed_text(query)
        raw_results = self.vector_store.search(query_embedding, k=k, filter=filters)
        results: List[SearchResult] = []
        for rank, (result_id, score) in enumerate(raw_results, start=1):
            payload = self.vector_store.get_payload(result_id)
            results.append(SearchResult(id=result_id, score=score, rank=rank, payload=payload))
        return results

    def find_similar(self, query: str, items: Sequence[Document], top_k: int = 5) -> List[SimilarityResult]:
        """Rank caller-supplied documents against ``query``."""

        return find_similar(self.embedder, query, items, top_k=top_k)
