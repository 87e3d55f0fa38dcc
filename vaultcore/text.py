# Path: vaultcore/text.py
# Purpose: Shared text helpers for tokenizing, keyword extraction, and splitting notes.
# Layer: core.
# Details: Pure functions reused by the embedder, the context assembler, and providers.

from __future__ import annotations

import re
from typing import List

_NON_WORD_RE = re.compile(r"[^\w\s]")
_PARAGRAPH_RE = re.compile(r"\n[ \t]*\n")
_SENTENCE_RE = re.compile(r"[^.!?]+(?:[.!?]+|$)")
_FRONTMATTER_RE = re.compile(r"\A---\n.*?\n---\n", re.DOTALL)
_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")
_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_MARKUP_RE = re.compile(r"[#*_~`\[\]()]")
_WORD_RE = re.compile(r"\b\w+\b")

MIN_TOKEN_LENGTH = 3
MAX_TOKEN_LENGTH = 19


def tokenize(text: str) -> List[str]:
    """Lowercase ``text``, drop punctuation, and keep tokens of 3 to 19 characters."""

    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if MIN_TOKEN_LENGTH <= len(token) <= MAX_TOKEN_LENGTH]


def extract_keywords(query: str, min_length: int = 4) -> List[str]:
    """Return distinct lowercase query words of at least ``min_length`` characters, in query order."""

    cleaned = _NON_WORD_RE.sub(" ", query.lower())
    keywords: List[str] = []
    for word in cleaned.split():
        if len(word) >= min_length and word not in keywords:
            keywords.append(word)
    return keywords


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank-line boundaries."""

    return _PARAGRAPH_RE.split(text)


def split_sentences(text: str) -> List[str]:
    """Split text into sentences ending at ``.``, ``!`` or ``?``; a trailing fragment counts as one."""

    sentences = []
    for match in _SENTENCE_RE.finditer(text):
        sentence = match.group(0).strip()
        if sentence:
            sentences.append(sentence)
    return sentences


def count_words(content: str) -> int:
    """Count words in a markdown note, ignoring frontmatter and link/image markup."""

    body = _FRONTMATTER_RE.sub("", content)
    body = _IMAGE_RE.sub("", body)
    body = _LINK_RE.sub(r"\1", body)
    body = _MARKUP_RE.sub("", body)
    return len(_WORD_RE.findall(body))


__all__ = [
    "MAX_TOKEN_LENGTH",
    "MIN_TOKEN_LENGTH",
    "count_words",
    "extract_keywords",
    "split_paragraphs",
    "split_sentences",
    "tokenize",
]
