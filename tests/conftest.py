"""
Shared test fixtures for the vault context engine.
"""

from typing import List

import pytest

from vaultconfig.settings import ContextSettings
from vaultcore.embedders.hash_embedder import HashEmbedder
from vaultcore.indexing.sources import InMemoryDocumentSource
from vaultcore.models.domain import Note


@pytest.fixture
def embedder() -> HashEmbedder:
    """Fresh embedder with default dimension and prior seed."""
    return HashEmbedder()


@pytest.fixture
def vault_notes() -> List[Note]:
    """Small vault with clearly separated topics."""
    return [
        Note(id="m", title="Weekly meeting", body="Agenda for the team meeting and discussion of the roadmap."),
        Note(id="g", title="Garden", body="Tomatoes need watering every morning in summer."),
        Note(id="r", title="Recipes", body="Bake bread with flour, water and yeast."),
    ]


@pytest.fixture
def vault_source(vault_notes) -> InMemoryDocumentSource:
    return InMemoryDocumentSource(vault_notes)


@pytest.fixture
def context_settings() -> ContextSettings:
    return ContextSettings()
