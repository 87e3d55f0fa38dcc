# Path: vaultcore/context/assembler.py
# Purpose: Assemble a budgeted, prioritized context blob from pinned and candidate notes.
# Layer: core/context.
# Details: Three cumulative tiers (pinned, relevant, metadata); empty tiers are omitted.

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set

from vaultconfig.settings import ContextSettings
from vaultcore.errors import UnreadableDocumentError
from vaultcore.indexing.sources import DocumentSource
from vaultcore.models.domain import Note, VaultStats
from vaultcore.text import extract_keywords

from .budget import TIER_METADATA, TIER_PINNED, TIER_RELEVANT, ContextBudget, estimate_tokens, is_within_limits
from .truncation import extract_relevant_section, smart_truncate

logger = logging.getLogger(__name__)

HEADER_PINNED = "=== SELECTED NOTES ==="
HEADER_RELEVANT = "=== RELEVANT NOTES ==="
HEADER_METADATA = "=== VAULT CONTEXT ==="
PINNED_MARK = "\U0001F4C4"
RELEVANT_MARK = "\U0001F4DD"
SECTION_SEPARATOR = "\n\n"
ENTRY_SEPARATOR = "\n\n"
TITLE_WEIGHT = 3
BODY_WEIGHT = 1


class _SectionWriter:
    """Accumulate entries for one tier while tracking the cumulative blob length."""

    def __init__(self, header: str, start: int) -> None:
        self.header = header
        self.start = start
        self.entries: List[str] = []
        self._length = 0

    @property
    def end(self) -> int:
        """Cumulative blob length after this section as rendered so far."""

        return self.start + self._length

    def overhead(self) -> int:
        """Characters written ahead of the next entry (header line or separator)."""

        if self.entries:
            return len(ENTRY_SEPARATOR)
        return len(self.header) + 1

    def fits(self, entry: str, limit: int) -> bool:
        return self.end + self.overhead() + len(entry) <= limit

    def add(self, entry: str) -> None:
        self._length += self.overhead() + len(entry)
        self.entries.append(entry)

    def render(self) -> str:
        if not self.entries:
            return ""
        return f"{self.header}\n" + ENTRY_SEPARATOR.join(self.entries)


class ContextAssembler:
    """Build the context handed to a language model for a user query."""

    def __init__(self, settings: Optional[ContextSettings] = None, source: Optional[DocumentSource] = None) -> None:
        self.settings = settings or ContextSettings()
        self.source = source

    def build_context(
        self,
        query: str,
        pinned_ids: Sequence[str] = (),
        candidates: Sequence[Note] = (),
        total_budget_chars: Optional[int] = None,
    ) -> str:
        """
        Return the assembled context for ``query``.

        Pinned ids are resolved through the document source in caller order;
        unreadable ones are logged and skipped. Candidates feed both the
        keyword-ranked relevant tier and the vault statistics line. The result
        never exceeds the metadata ceiling of the budget.

        External calls:
        - vaultcore/indexing/sources.py::DocumentSource.read - resolve pinned notes.
        - vaultcore/context/truncation.py::smart_truncate - shorten pinned bodies.
        - vaultcore/context/truncation.py::extract_relevant_section - excerpt ranked notes.
        """

        budget = ContextBudget.from_settings(self.settings, total_budget_chars)
        keywords = extract_keywords(query, self.settings.min_keyword_length)

        sections: List[str] = []
        pinned = self._pinned_section(pinned_ids, self._offset(sections), budget.limit(TIER_PINNED))
        self._append(sections, pinned)

        relevant = self._relevant_section(
            keywords, candidates, set(pinned_ids), self._offset(sections), budget.limit(TIER_RELEVANT)
        )
        self._append(sections, relevant)

        metadata = self._metadata_section(candidates, self._offset(sections), budget.limit(TIER_METADATA))
        self._append(sections, metadata)

        context = SECTION_SEPARATOR.join(sections)
        logger.debug(f"Assembled context of {len(context)} chars in {len(sections)} sections")
        return context

    def rank_candidates(self, keywords: Sequence[str], candidates: Sequence[Note], exclude: Set[str]) -> List[Note]:
        """Return candidates with a positive keyword score, best first; ties keep input order."""

        scored = []
        for note in candidates:
            if note.id in exclude:
                continue
            score = self.score_note(note, keywords)
            if score > 0:
                scored.append((score, note))
        scored.sort(key=lambda item: -item[0])
        return [note for _, note in scored]

    @staticmethod
    def score_note(note: Note, keywords: Sequence[str]) -> int:
        """Weight keyword hits in the title three times higher than hits in the body."""

        title = note.title.lower()
        body = note.body.lower()
        score = 0
        for keyword in keywords:
            if keyword in title:
                score += TITLE_WEIGHT
            if keyword in body:
                score += BODY_WEIGHT
        return score

    def estimate_tokens(self, text: str) -> int:
        return estimate_tokens(text, self.settings.chars_per_token)

    def is_within_limits(self, text: str) -> bool:
        return is_within_limits(text, self.settings.max_tokens, self.settings.chars_per_token)

    def _pinned_section(self, pinned_ids: Sequence[str], start: int, limit: int) -> str:
        writer = _SectionWriter(HEADER_PINNED, start)
        ellipsis = self.settings.ellipsis
        for doc_id in pinned_ids:
            note = self._read_pinned(doc_id)
            if note is None:
                continue

            label = f"{PINNED_MARK} {note.title}:\n"
            room = limit - writer.end - writer.overhead() - len(label) - len(ellipsis)
            cap = min(self.settings.pinned_doc_chars, room)
            if cap < self.settings.min_entry_chars:
                logger.debug(f"Pinned tier full, stopping before {doc_id}")
                break

            writer.add(label + smart_truncate(note.body, cap, ellipsis))
        return writer.render()

    def _relevant_section(
        self,
        keywords: Sequence[str],
        candidates: Sequence[Note],
        exclude: Set[str],
        start: int,
        limit: int,
    ) -> str:
        writer = _SectionWriter(HEADER_RELEVANT, start)
        if not keywords:
            return ""

        ranked = self.rank_candidates(keywords, candidates, exclude)[: self.settings.max_relevant_notes]
        for note in ranked:
            excerpt = extract_relevant_section(note.body, keywords, self.settings.excerpt_chars, self.settings.ellipsis)
            entry = f"{RELEVANT_MARK} {note.title}: {excerpt}"
            if not writer.fits(entry, limit):
                break
            writer.add(entry)
        return writer.render()

    @staticmethod
    def _metadata_section(candidates: Sequence[Note], start: int, limit: int) -> str:
        if not candidates:
            return ""
        writer = _SectionWriter(HEADER_METADATA, start)
        entry = VaultStats.from_notes(list(candidates)).describe()
        if writer.fits(entry, limit):
            writer.add(entry)
        return writer.render()

    def _read_pinned(self, doc_id: str) -> Optional[Note]:
        if self.source is None:
            logger.warning(f"Skipping pinned note {doc_id}: no document source configured")
            return None
        try:
            return self.source.read(doc_id)
        except UnreadableDocumentError as exc:
            logger.warning(f"Skipping pinned note {doc_id}: {exc}")
            return None

    @staticmethod
    def _offset(sections: List[str]) -> int:
        """Length the blob will have when the next section starts."""

        if not sections:
            return 0
        return sum(len(section) for section in sections) + len(SECTION_SEPARATOR) * len(sections)

    @staticmethod
    def _append(sections: List[str], section: str) -> None:
        if section:
            sections.append(section)
