# Path: vaultconfig/settings.py
# Purpose: Provide typed configuration models for the retrieval and context engine.
# Layer: config.
# Details: Centralizes settings for the embedder, context budgets, providers, and logging.

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class EmbedderSettings(BaseModel):
    """Settings describing the hash embedder and its vocabulary statistics."""

    name: str = Field(default="hash", description="Identifier of the embedder implementation.")
    dim: int = Field(default=128, gt=0, description="Dimensionality of every embedding vector.")
    prior_seed: int = Field(default=1729, description="Seed for the semantic-group prior jitter.")
    default_corpus_size: int = Field(
        default=100,
        gt=1,
        description="Assumed corpus size used to derive the IDF of unseen words.",
    )

    @property
    def default_idf(self) -> float:
        """IDF assigned to a word the table has never seen."""

        return math.log(self.default_corpus_size)


class ContextSettings(BaseModel):
    """Settings controlling context budgets, tiers, and excerpt sizes."""

    max_tokens: int = Field(default=4000, gt=0, description="Approximate token limit of the consumer.")
    reserved_tokens: int = Field(default=1000, ge=0, description="Tokens kept free for the query and response.")
    chars_per_token: int = Field(default=4, gt=0, description="Rough characters-per-token estimate.")
    pinned_ratio: float = Field(default=0.6, gt=0, le=1, description="Cumulative ceiling of the pinned tier.")
    relevant_ratio: float = Field(default=0.8, gt=0, le=1, description="Cumulative ceiling of the relevant tier.")
    metadata_ratio: float = Field(default=0.95, gt=0, le=1, description="Cumulative ceiling of the metadata tier.")
    pinned_doc_chars: int = Field(default=1500, gt=0, description="Per-document cap for pinned notes.")
    excerpt_chars: int = Field(default=500, gt=0, description="Per-document cap for relevant excerpts.")
    max_relevant_notes: int = Field(default=3, ge=0, description="Number of relevance-ranked notes to include.")
    min_keyword_length: int = Field(default=4, gt=0, description="Shortest query word treated as a keyword.")
    min_entry_chars: int = Field(default=20, gt=0, description="Smallest truncation cap worth emitting.")
    ellipsis: str = Field(default="...", description="Marker appended to truncated text.")

    @model_validator(mode="after")
    def _check_tiers(self) -> "ContextSettings":
        if not self.pinned_ratio <= self.relevant_ratio <= self.metadata_ratio:
            raise ValueError("Tier ratios must be non-decreasing: pinned <= relevant <= metadata.")
        if self.reserved_tokens >= self.max_tokens:
            raise ValueError("reserved_tokens must be smaller than max_tokens.")
        return self

    @property
    def total_budget_chars(self) -> int:
        """Default character budget left for assembled context."""

        return (self.max_tokens - self.reserved_tokens) * self.chars_per_token


class ProviderSettings(BaseModel):
    """Settings selecting the text provider capability implementation."""

    name: str = Field(default="extractive", description="Identifier of the provider implementation.")
    summary_length: int = Field(default=150, gt=0, description="Default summary length in characters.")


class AppSettings(BaseModel):
    """Top-level settings shared across the engine and its collaborators."""

    notes_folder: Optional[Path] = Field(default=None, description="Folder of notes for the folder document source.")
    log_level: str = Field(default="INFO", description="Verbosity level for engine logs.")
    structured_logs: bool = Field(default=False, description="Emit JSON log lines instead of plain text.")
    embedder: EmbedderSettings = Field(default_factory=EmbedderSettings)
    context: ContextSettings = Field(default_factory=ContextSettings)
    provider: ProviderSettings = Field(default_factory=ProviderSettings)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Instantiate settings, applying ``VAULTCORE_*`` environment overrides when present."""

        env = os.environ
        overrides: Dict[str, Any] = {}
        if env.get("VAULTCORE_NOTES_FOLDER"):
            overrides["notes_folder"] = env["VAULTCORE_NOTES_FOLDER"]
        if env.get("VAULTCORE_LOG_LEVEL"):
            overrides["log_level"] = env["VAULTCORE_LOG_LEVEL"]
        if env.get("VAULTCORE_STRUCTURED_LOGS"):
            overrides["structured_logs"] = env["VAULTCORE_STRUCTURED_LOGS"].lower() in {"1", "true", "yes"}
        if env.get("VAULTCORE_EMBEDDING_DIM"):
            overrides["embedder"] = {"dim": env["VAULTCORE_EMBEDDING_DIM"]}
        if env.get("VAULTCORE_PROVIDER"):
            overrides["provider"] = {"name": env["VAULTCORE_PROVIDER"]}
        return cls.model_validate(overrides)


__all__ = ["AppSettings", "ContextSettings", "EmbedderSettings", "ProviderSettings"]
