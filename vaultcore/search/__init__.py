# Path: vaultcore/search/__init__.py
# Purpose: Package initializer for similarity ranking and pipeline orchestration.
# Layer: core/search.
# Details: Exposes cosine ranking helpers and the main search pipeline entrypoint.

from .similarity import cosine_similarity, find_similar, rank_vectors
from .pipeline import SearchPipeline

__all__ = [
    "SearchPipeline",
    "cosine_similarity",
    "find_similar",
    "rank_vectors",
]
