# Path: vaultcore/models/domain.py
# Purpose: Define domain models shared across embedding, search, indexing, and context workflows.
# Layer: core/models.
# Details: Lightweight dataclasses passed between the engine and its callers.

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

import numpy as np

from vaultcore.text import count_words


@dataclass
class Document:
    """Caller-owned text to rank, optionally carrying a precomputed embedding."""

    id: str
    text: str
    embedding: Optional[np.ndarray] = None


@dataclass
class Note:
    """A resolved note as returned by a document source."""

    id: str
    title: str
    body: str
    last_modified: Optional[datetime] = None

    @property
    def word_count(self) -> int:
        return count_words(self.body)

    def to_document(self) -> Document:
        """Return the rankable form of this note (title and body)."""

        return Document(id=self.id, text=f"{self.title}\n{self.body}")


@dataclass
class SimilarityResult:
    """A ranked item returned by ``find_similar``."""

    id: str
    text: str
    score: float


@dataclass
class SearchResult:
    """Search result item combining store scores with payload metadata."""

    id: str
    score: float
    rank: int
    payload: Optional[Dict[str, str]] = None


@dataclass
class VaultStats:
    """Aggregate counts over a pool of notes."""

    note_count: int
    total_words: int

    @property
    def average_words(self) -> int:
        if self.note_count == 0:
            return 0
        return round(self.total_words / self.note_count)

    @classmethod
    def from_notes(cls, notes: List[Note]) -> "VaultStats":
        return cls(note_count=len(notes), total_words=sum(note.word_count for note in notes))

    def describe(self) -> str:
        return f"Notes: {self.note_count} | Words: {self.total_words} | Avg: {self.average_words} words/note"
