# Path: vaultcore/context/__init__.py
# Purpose: Package initializer for context assembly.
# Layer: core/context.
# Details: Exposes the budget, truncation helpers, and the tiered assembler.

from .budget import ContextBudget, estimate_tokens, is_within_limits
from .truncation import extract_relevant_section, smart_truncate
from .assembler import ContextAssembler

__all__ = [
    "ContextAssembler",
    "ContextBudget",
    "estimate_tokens",
    "extract_relevant_section",
    "is_within_limits",
    "smart_truncate",
]
