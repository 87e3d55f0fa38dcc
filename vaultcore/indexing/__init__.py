# Path: vaultcore/indexing/__init__.py
# Purpose: Package initializer for indexing utilities.
# Layer: core/indexing.
# Details: Exposes document sources and the index builder.

from .sources import DocumentSource, FolderDocumentSource, InMemoryDocumentSource
from .index_builder import IndexBuilder

__all__ = ["DocumentSource", "FolderDocumentSource", "InMemoryDocumentSource", "IndexBuilder"]
