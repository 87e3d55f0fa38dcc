# Path: vaultcore/providers/__init__.py
# Purpose: Package initializer and registry for text providers.
# Layer: core/providers.
# Details: Providers are selected by ``ProviderSettings.name`` through ``create_provider``.

from __future__ import annotations

from typing import Dict, Optional, Type

from vaultconfig.settings import ProviderSettings
from vaultcore.embedders.hash_embedder import HashEmbedder

from .base import SUMMARY_STYLES, Provider
from .extractive import ExtractiveProvider

PROVIDERS: Dict[str, Type[Provider]] = {
    ExtractiveProvider.id: ExtractiveProvider,
}


def create_provider(settings: Optional[ProviderSettings] = None, embedder: Optional[HashEmbedder] = None) -> Provider:
    """Instantiate the provider named in ``settings``."""

    settings = settings or ProviderSettings()
    provider_cls = PROVIDERS.get(settings.name)
    if provider_cls is None:
        raise ValueError(f"Unknown provider: {settings.name}")
    return provider_cls(embedder=embedder, summary_length=settings.summary_length)


__all__ = ["ExtractiveProvider", "PROVIDERS", "Provider", "SUMMARY_STYLES", "create_provider"]
