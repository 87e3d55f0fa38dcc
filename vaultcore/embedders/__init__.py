# Path: vaultcore/embedders/__init__.py
# Purpose: Package initializer for embedder implementations and interfaces.
# Layer: core/embedders.
# Details: Exposes the base interface, the hash embedder, and its cache objects.

from .base import Embedder
from .hash_embedder import HashEmbedder
from .idf import IDFTable
from .priors import SEMANTIC_GROUPS, build_prior_vectors
from .word_vectors import WordVectorCache, hash_vector, rolling_hash

__all__ = [
    "Embedder",
    "HashEmbedder",
    "IDFTable",
    "SEMANTIC_GROUPS",
    "WordVectorCache",
    "build_prior_vectors",
    "hash_vector",
    "rolling_hash",
]
