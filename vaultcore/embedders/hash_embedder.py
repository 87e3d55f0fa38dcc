# Path: vaultcore/embedders/hash_embedder.py
# Purpose: Provide a model-free text embedder built from hashed word vectors and TF-IDF weights.
# Layer: core/embedders.
# Details: Mean-pools word vectors (semantic priors or hashed) weighted by TF-IDF; state can be snapshotted.

from __future__ import annotations

import json
import logging
import math
from collections import Counter
from typing import Any, Dict, Iterable, Optional

import numpy as np

from vaultconfig.settings import EmbedderSettings
from vaultcore.errors import SerializationCorruptError
from vaultcore.text import tokenize

from .base import Embedder
from .idf import DEFAULT_IDF, IDFTable
from .priors import build_prior_vectors
from .word_vectors import WordVectorCache, hash_vector

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class HashEmbedder(Embedder):
    """Deterministic pseudo-embedder approximating a trained model without one.

    Example:
        >>> embedder = HashEmbedder()
        >>> embedder.update_idf(["the cat sat", "the dog ran"])
        >>> vector = embedder.embed_text("a cat on a mat")
    """

    def __init__(
        self,
        dim: int = 128,
        prior_seed: int = 1729,
        default_idf: float = DEFAULT_IDF,
        name: str = "hash",
    ) -> None:
        self.name = name
        self.dim = dim
        self.prior_seed = prior_seed
        self.idf = IDFTable(default_idf)
        self.word_vectors = WordVectorCache(dim)
        self.word_vectors.update(build_prior_vectors(dim, prior_seed))

    @classmethod
    def from_settings(cls, settings: Optional[EmbedderSettings] = None) -> "HashEmbedder":
        settings = settings or EmbedderSettings()
        return cls(
            dim=settings.dim,
            prior_seed=settings.prior_seed,
            default_idf=settings.default_idf,
            name=settings.name,
        )

    def embed_text(self, text: str) -> np.ndarray:
        """Embed ``text``; text without qualifying tokens yields the zero vector."""

        tokens = tokenize(text)
        if not tokens:
            return np.zeros(self.dim, dtype=np.float32)

        counts = Counter(tokens)
        total = len(tokens)
        pooled = np.zeros(self.dim, dtype=np.float64)
        for token in tokens:
            weight = (counts[token] / total) * self.idf.get(token)
            pooled += weight * self.word_vector(token)
        pooled /= total
        return self._normalize(pooled)

    def word_vector(self, word: str) -> np.ndarray:
        """Return the cached, prior, or freshly hashed vector for ``word``."""

        return self.word_vectors.get_or_create(word.lower(), lambda w: hash_vector(w, self.dim))

    def update_idf(self, documents: Iterable[str]) -> int:
        """Recompute IDF statistics from a reference corpus."""

        return self.idf.update(documents)

    def serialize(self) -> str:
        """Return an opaque snapshot of the word-vector cache and IDF table."""

        payload = {
            "version": SNAPSHOT_VERSION,
            "dim": self.dim,
            "idf": self.idf.to_dict(),
            "word_vectors": {word: vector.tolist() for word, vector in self.word_vectors.to_dict().items()},
        }
        return json.dumps(payload, sort_keys=True)

    def deserialize(self, data: str) -> None:
        """
        Restore a snapshot produced by :meth:`serialize`.

        Every entry is validated before anything is replaced, so a corrupt
        payload raises :class:`SerializationCorruptError` and leaves the
        current caches untouched.
        """

        try:
            payload = json.loads(data)
        except (TypeError, ValueError) as exc:
            raise SerializationCorruptError(f"Snapshot is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise SerializationCorruptError("Snapshot must be a JSON object.")
        if payload.get("version") != SNAPSHOT_VERSION:
            raise SerializationCorruptError(f"Unsupported snapshot version: {payload.get('version')!r}")
        if payload.get("dim") != self.dim:
            raise SerializationCorruptError(
                f"Snapshot dimensionality {payload.get('dim')!r} does not match embedder dimension {self.dim}."
            )

        idf = self._parse_idf(payload.get("idf"))
        vectors = self._parse_word_vectors(payload.get("word_vectors"))

        self.word_vectors.replace(vectors)
        self.idf.replace(idf)
        logger.debug(f"Restored snapshot with {len(vectors)} word vectors and {len(idf)} IDF entries")

    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)

    def _parse_idf(self, raw: Any) -> Dict[str, float]:
        if not isinstance(raw, dict):
            raise SerializationCorruptError("Snapshot field 'idf' must be an object.")
        scores: Dict[str, float] = {}
        for word, score in raw.items():
            if not self._is_number(score):
                raise SerializationCorruptError(f"IDF entry for {word!r} is not a finite number.")
            scores[word] = float(score)
        return scores

    def _parse_word_vectors(self, raw: Any) -> Dict[str, np.ndarray]:
        if not isinstance(raw, dict):
            raise SerializationCorruptError("Snapshot field 'word_vectors' must be an object.")
        vectors: Dict[str, np.ndarray] = {}
        for word, values in raw.items():
            if not isinstance(values, list) or len(values) != self.dim:
                raise SerializationCorruptError(f"Word vector for {word!r} must have {self.dim} components.")
            if not all(self._is_number(value) for value in values):
                raise SerializationCorruptError(f"Word vector for {word!r} contains non-numeric components.")
            vectors[word] = np.asarray(values, dtype=np.float32)
        return vectors
