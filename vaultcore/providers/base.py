# Path: vaultcore/providers/base.py
# Purpose: Define the text provider capability interface.
# Layer: core/providers.
# Details: Providers summarize notes, answer questions from assembled context, and embed text.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Set

import numpy as np

SUMMARY_STYLES: Set[str] = {"brief", "bullet-points", "detailed"}


class Provider(ABC):
    """Interface for components that turn vault text into answers and summaries."""

    id: str
    description: str

    @abstractmethod
    def summarize(self, text: str, max_length: Optional[int] = None, style: str = "brief") -> str:
        """Return a summary of ``text`` in the requested style."""

    @abstractmethod
    def answer_question(self, question: str, context: str) -> str:
        """Answer ``question`` using only the supplied ``context``."""

    @abstractmethod
    def embed(self, text: str) -> np.ndarray:
        """Return a unit-norm (or zero) embedding for ``text``."""
