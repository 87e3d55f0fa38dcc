# Path: vaultcore/context/truncation.py
# Purpose: Shorten note bodies for context assembly while keeping meaningful units whole.
# Layer: core/context.
# Details: Paragraph-preserving truncation for pinned notes and keyword-driven excerpts for ranked notes.

from __future__ import annotations

from typing import List, Sequence, Tuple

from vaultcore.text import split_paragraphs, split_sentences

PARAGRAPH_SEPARATOR = "\n\n"
MIN_PARTIAL_PARAGRAPH = 100


def truncate_prefix(text: str, cap: int, ellipsis: str = "...") -> str:
    """Return ``text`` if it fits ``cap``, else a prefix that, with the ellipsis, is exactly ``cap`` long."""

    if len(text) <= cap:
        return text
    keep = cap - len(ellipsis)
    if keep <= 0:
        return text[: max(cap, 0)]
    return text[:keep] + ellipsis


def smart_truncate(text: str, cap: int, ellipsis: str = "...") -> str:
    """
    Truncate ``text`` to about ``cap`` characters at paragraph boundaries.

    Whole paragraphs are kept while they fit. A paragraph is cut only when it
    is the first one and alone exceeds the cap, or when it follows kept
    paragraphs and more than 100 characters of room remain for a partial
    prefix. The result is at most ``cap + len(ellipsis)`` characters.
    """

    if len(text) <= cap:
        return text

    kept: List[str] = []
    used = 0
    for paragraph in split_paragraphs(text):
        separator = len(PARAGRAPH_SEPARATOR) if kept else 0
        if used + separator + len(paragraph) <= cap:
            kept.append(paragraph)
            used += separator + len(paragraph)
            continue

        if not kept:
            return text[:cap] + ellipsis

        remaining = cap - used - separator
        if remaining > MIN_PARTIAL_PARAGRAPH:
            kept.append(paragraph[:remaining] + ellipsis)
        break

    return PARAGRAPH_SEPARATOR.join(kept)


def score_sentences(text: str, keywords: Sequence[str]) -> List[Tuple[int, str]]:
    """Return ``(score, sentence)`` pairs where score counts the keywords a sentence contains."""

    scored = []
    for sentence in split_sentences(text):
        lowered = sentence.lower()
        scored.append((sum(1 for keyword in keywords if keyword in lowered), sentence))
    return scored


def extract_relevant_section(text: str, keywords: Sequence[str], cap: int, ellipsis: str = "...") -> str:
    """
    Return the sentences of ``text`` that best match ``keywords``, within ``cap`` characters.

    Sentences are ordered by keyword count (ties keep document order) and
    joined while they fit. Without any matching sentence the body prefix is
    returned instead.
    """

    ranked = sorted(score_sentences(text, keywords), key=lambda item: -item[0])

    selected: List[str] = []
    length = 0
    for score, sentence in ranked:
        if score == 0:
            break
        extra = len(sentence) + (1 if selected else 0)
        if length + extra > cap:
            break
        selected.append(sentence)
        length += extra

    if selected:
        return " ".join(selected)
    return truncate_prefix(text, cap, ellipsis)
