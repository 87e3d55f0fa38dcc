# Path: vaultconfig/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models for engine-wide configuration.

from .settings import AppSettings, ContextSettings, EmbedderSettings, ProviderSettings

__all__ = ["AppSettings", "ContextSettings", "EmbedderSettings", "ProviderSettings"]
