# Path: vaultcore/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across embedding, search, indexing, and context layers.

from .domain import Document, Note, SearchResult, SimilarityResult, VaultStats

__all__ = ["Document", "Note", "SearchResult", "SimilarityResult", "VaultStats"]
