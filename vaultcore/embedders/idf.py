# Path: vaultcore/embedders/idf.py
# Purpose: Maintain inverse-document-frequency statistics for embedding weights.
# Layer: core/embedders.
# Details: Lazily memoizes a default IDF for unseen words; corpus updates overwrite entries.

from __future__ import annotations

import logging
import math
import threading
from collections import Counter
from typing import Dict, Iterable

from vaultcore.text import tokenize

logger = logging.getLogger(__name__)

DEFAULT_IDF = math.log(100)


class IDFTable:
    """Word to IDF mapping guarded by a lock, since reads memoize defaults."""

    def __init__(self, default_idf: float = DEFAULT_IDF) -> None:
        self.default_idf = default_idf
        self._scores: Dict[str, float] = {}
        self._lock = threading.RLock()

    def get(self, word: str) -> float:
        """
        Return the IDF of ``word``, memoizing the default on first use.

        A stored IDF of 0 (a word present in every corpus document) is treated
        as missing, so every qualifying token keeps a positive weight.
        """

        key = word.lower()
        with self._lock:
            score = self._scores.get(key)
            if not score:
                score = self.default_idf
                self._scores[key] = score
            return score

    def update(self, documents: Iterable[str]) -> int:
        """
        Recompute IDF for every token found in ``documents``.

        Sets ``idf(word) = ln(total_docs / document_frequency(word))`` and
        overwrites any memoized value. Words absent from the corpus keep their
        current entry.

        Returns:
            Number of words whose IDF was written.
        """

        document_frequency: Counter = Counter()
        total_docs = 0
        for document in documents:
            total_docs += 1
            document_frequency.update(set(tokenize(document)))

        if total_docs == 0:
            return 0

        scores = {word: math.log(total_docs / freq) for word, freq in document_frequency.items()}
        with self._lock:
            self._scores.update(scores)

        logger.debug(f"Updated IDF for {len(scores)} words from {total_docs} documents")
        return len(scores)

    def to_dict(self) -> Dict[str, float]:
        """Return a copy of the table."""

        with self._lock:
            return dict(self._scores)

    def replace(self, scores: Dict[str, float]) -> None:
        """Swap in a complete table, discarding current entries."""

        with self._lock:
            self._scores = dict(scores)

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._scores

    def __len__(self) -> int:
        with self._lock:
            return len(self._scores)
