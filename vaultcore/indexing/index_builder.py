# Path: vaultcore/indexing/index_builder.py
# Purpose: Build and update embedding indexes from a document source.
# Layer: core/indexing.
# Details: Refreshes IDF statistics from the corpus, then embeds notes in batches with progress reporting.

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from tqdm import tqdm

from vaultcore.embedders.hash_embedder import HashEmbedder
from vaultcore.errors import UnreadableDocumentError
from vaultcore.models.domain import Note
from vaultcore.vector_store.base import VectorStore

from .sources import DocumentSource

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Batch process notes to populate the configured vector store."""

    def __init__(
        self,
        embedder: HashEmbedder,
        vector_store: VectorStore,
        batch_size: int = 32,
        show_progress: bool = True,
    ) -> None:
        self.embedder = embedder
        self.vector_store = vector_store
        self.batch_size = batch_size
        self.show_progress = show_progress

    def build_index(
        self,
        source: DocumentSource,
        ids: Optional[Iterable[str]] = None,
        update_idf: bool = True,
    ) -> List[Note]:
        """
        Read notes, refresh IDF from them, and push their embeddings into the vector store.

        Unreadable notes are skipped with a warning. Returns the notes that were indexed.

        External calls:
        - vaultcore/indexing/sources.py::DocumentSource.read - resolve each note body.
        - vaultcore/embedders/hash_embedder.py::HashEmbedder.update_idf - refresh corpus statistics.
        - vaultcore/vector_store/memory_store.py::MemoryVectorStore.add - upsert vectors into the index.
        """

        doc_ids = list(ids) if ids is not None else source.list_ids()
        notes: List[Note] = []
        for doc_id in tqdm(doc_ids, desc="Reading notes", unit="note", disable=not self.show_progress):
            note = self._load_note(source, doc_id)
            if note is not None:
                notes.append(note)

        texts = [note.to_document().text for note in notes]
        if update_idf and texts:
            self.embedder.update_idf(texts)

        batch_ids: List[str] = []
        batch_texts: List[str] = []
        batch_payloads: List[dict] = []
        for note, text in zip(notes, texts):
            batch_ids.append(note.id)
            batch_texts.append(text)
            batch_payloads.append({"title": note.title})

            if len(batch_ids) >= self.batch_size:
                self._flush(batch_ids, batch_texts, batch_payloads)
                batch_ids, batch_texts, batch_payloads = [], [], []

        if batch_ids:
            self._flush(batch_ids, batch_texts, batch_payloads)

        logger.info(f"Indexed {len(notes)} of {len(doc_ids)} notes")
        return notes

    def _flush(self, ids: List[str], texts: List[str], payloads: List[dict]) -> None:
        """Embed the accumulated batch and send it to the vector store."""

        matrix = self.embedder.embed_texts(texts)
        self.vector_store.add(ids, matrix, payloads)

    @staticmethod
    def _load_note(source: DocumentSource, doc_id: str) -> Optional[Note]:
        """Read a note, returning None if the source cannot resolve it."""

        try:
            return source.read(doc_id)
        except UnreadableDocumentError as exc:
            logger.warning(f"Skipping note {doc_id}: {exc}")
            return None
