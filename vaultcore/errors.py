# Path: vaultcore/errors.py
# Purpose: Define the exception hierarchy raised by the engine.
# Layer: core.
# Details: Separates hard programmer errors from per-document failures that callers skip.

from __future__ import annotations

from typing import Optional


class VaultCoreError(Exception):
    """Base exception for all engine errors."""


class DimensionMismatchError(VaultCoreError, ValueError):
    """
    Vectors of different lengths were compared.

    Raised when:
    - cosine similarity is requested over unequal-length vectors
    - a vector added to or searched in a store does not match its dimension
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Vector dimensions must match: {expected} != {actual}")
        self.expected = expected
        self.actual = actual


class UnreadableDocumentError(VaultCoreError):
    """
    A document source could not resolve a document.

    Raised when:
    - the id is unknown to the source
    - the backing file is missing, unreadable, or not valid text

    Callers treat this as a skip, never as a reason to abort.
    """

    def __init__(self, doc_id: str, reason: Optional[str] = None) -> None:
        message = f"Document {doc_id!r} is unreadable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.doc_id = doc_id
        self.reason = reason


class SerializationCorruptError(VaultCoreError, ValueError):
    """
    A snapshot payload could not be restored.

    Raised when:
    - the payload is not valid JSON or not an object
    - the dimension differs from the embedder's
    - a word vector or IDF entry is malformed
    """


__all__ = [
    "VaultCoreError",
    "DimensionMismatchError",
    "UnreadableDocumentError",
    "SerializationCorruptError",
]
