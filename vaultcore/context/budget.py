# Path: vaultcore/context/budget.py
# Purpose: Describe the character budget for assembled context and its cumulative tiers.
# Layer: core/context.
# Details: Also provides the rough characters-per-token estimate used to size budgets.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from vaultconfig.settings import ContextSettings

TIER_PINNED = "pinned"
TIER_RELEVANT = "relevant"
TIER_METADATA = "metadata"


@dataclass(frozen=True)
class ContextBudget:
    """Total character budget split into cumulative priority tiers."""

    total_chars: int
    pinned_ratio: float = 0.6
    relevant_ratio: float = 0.8
    metadata_ratio: float = 0.95

    def __post_init__(self) -> None:
        if self.total_chars < 0:
            raise ValueError(f"total_chars must be non-negative, got {self.total_chars}")
        if not 0 < self.pinned_ratio <= self.relevant_ratio <= self.metadata_ratio <= 1:
            raise ValueError("Tier ratios must satisfy 0 < pinned <= relevant <= metadata <= 1.")

    @classmethod
    def from_settings(cls, settings: ContextSettings, total_chars: Optional[int] = None) -> "ContextBudget":
        return cls(
            total_chars=settings.total_budget_chars if total_chars is None else total_chars,
            pinned_ratio=settings.pinned_ratio,
            relevant_ratio=settings.relevant_ratio,
            metadata_ratio=settings.metadata_ratio,
        )

    def limit(self, tier: str) -> int:
        """Return the cumulative character ceiling of ``tier``."""

        ratios = {
            TIER_PINNED: self.pinned_ratio,
            TIER_RELEVANT: self.relevant_ratio,
            TIER_METADATA: self.metadata_ratio,
        }
        if tier not in ratios:
            raise ValueError(f"Unknown context tier: {tier}")
        # Tolerance keeps e.g. 200 * 0.6 at 120 despite float rounding.
        return min(self.total_chars, math.floor(self.total_chars * ratios[tier] + 1e-9))


def estimate_tokens(text: str, chars_per_token: int = 4) -> int:
    """Rough token estimate: one token per ``chars_per_token`` characters."""

    return math.ceil(len(text) / chars_per_token)


def is_within_limits(text: str, max_tokens: int = 4000, chars_per_token: int = 4) -> bool:
    """Return True if ``text`` is estimated to stay under ``max_tokens``."""

    return estimate_tokens(text, chars_per_token) < max_tokens
