# Path: vaultcore/engine.py
# Purpose: Compose the embedder, vector store, assembler, and provider into one service.
# Layer: core.
# Details: create_engine wires every collaborator from AppSettings; callers use ContextEngine only.

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from vaultconfig.settings import AppSettings
from vaultcore.context.assembler import ContextAssembler
from vaultcore.embedders.hash_embedder import HashEmbedder
from vaultcore.indexing.index_builder import IndexBuilder
from vaultcore.indexing.sources import DocumentSource, FolderDocumentSource
from vaultcore.logging_config import configure_logging
from vaultcore.models.domain import Document, Note, SearchResult, SimilarityResult, VaultStats
from vaultcore.providers import Provider, create_provider
from vaultcore.search.pipeline import SearchPipeline
from vaultcore.vector_store.memory_store import MemoryVectorStore

logger = logging.getLogger(__name__)


class ContextEngine:
    """Facade exposing embedding, retrieval, and context assembly over one vault."""

    def __init__(
        self,
        settings: AppSettings,
        embedder: HashEmbedder,
        vector_store: MemoryVectorStore,
        provider: Provider,
        source: Optional[DocumentSource] = None,
    ) -> None:
        self.settings = settings
        self.embedder = embedder
        self.vector_store = vector_store
        self.provider = provider
        self.source = source
        self.pipeline = SearchPipeline(embedder, vector_store)
        self.assembler = ContextAssembler(settings.context, source)
        self.notes: List[Note] = []

    # Embedding
    def embed(self, text: str) -> np.ndarray:
        return self.embedder.embed_text(text)

    def update_idf(self, documents: Iterable[str]) -> int:
        return self.embedder.update_idf(documents)

    def find_similar(self, query: str, items: Sequence[Document], top_k: int = 5) -> List[SimilarityResult]:
        return self.pipeline.find_similar(query, items, top_k=top_k)

    # Index
    def index(self, ids: Optional[Iterable[str]] = None, show_progress: bool = False) -> List[Note]:
        """
        Index notes from the configured source and remember them as context candidates.

        External calls:
        - vaultcore/indexing/index_builder.py::IndexBuilder.build_index - read, weight, and embed notes.
        """

        if self.source is None:
            raise ValueError("No document source configured; pass one to create_engine or set notes_folder.")
        builder = IndexBuilder(self.embedder, self.vector_store, show_progress=show_progress)
        indexed = builder.build_index(self.source, ids=ids)

        by_id: Dict[str, Note] = {note.id: note for note in self.notes}
        by_id.update({note.id: note for note in indexed})
        self.notes = list(by_id.values())
        return indexed

    def search(self, query: str, k: int = 5, filters: Optional[Dict[str, str]] = None) -> List[SearchResult]:
        return self.pipeline.search(query, k=k, filters=filters)

    def stats(self) -> VaultStats:
        return VaultStats.from_notes(self.notes)

    # Context
    def build_context(
        self,
        query: str,
        pinned_ids: Sequence[str] = (),
        candidates: Optional[Sequence[Note]] = None,
        total_budget_chars: Optional[int] = None,
    ) -> str:
        """Assemble context for ``query``; candidates default to the indexed notes."""

        pool = self.notes if candidates is None else candidates
        return self.assembler.build_context(query, pinned_ids, pool, total_budget_chars)

    def answer(self, question: str, pinned_ids: Sequence[str] = ()) -> str:
        """Build context for ``question`` and hand it to the provider."""

        context = self.build_context(question, pinned_ids)
        return self.provider.answer_question(question, context)

    # Snapshot
    def serialize(self) -> str:
        return self.embedder.serialize()

    def deserialize(self, data: str) -> None:
        self.embedder.deserialize(data)


def create_engine(settings: Optional[AppSettings] = None, source: Optional[DocumentSource] = None) -> ContextEngine:
    """Build a ContextEngine and configure package logging from ``settings``."""

    settings = settings or AppSettings()
    configure_logging(settings.log_level, structured=settings.structured_logs)

    if source is None and settings.notes_folder is not None:
        source = FolderDocumentSource(settings.notes_folder)

    embedder = HashEmbedder.from_settings(settings.embedder)
    vector_store = MemoryVectorStore(dim=embedder.dim)
    provider = create_provider(settings.provider, embedder)
    logger.info(f"Engine ready: embedder={embedder.name} dim={embedder.dim} provider={provider.id}")
    return ContextEngine(settings, embedder, vector_store, provider, source)
