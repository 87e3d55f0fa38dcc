# Path: vaultcore/__init__.py
# Purpose: Package initializer for the vault retrieval and context engine.
# Layer: core.
# Details: Re-exports the engine facade and the error hierarchy.

from .engine import ContextEngine, create_engine
from .errors import DimensionMismatchError, SerializationCorruptError, UnreadableDocumentError, VaultCoreError

__all__ = [
    "ContextEngine",
    "DimensionMismatchError",
    "SerializationCorruptError",
    "UnreadableDocumentError",
    "VaultCoreError",
    "create_engine",
]
