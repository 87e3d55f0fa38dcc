# Path: vaultcore/embedders/priors.py
# Purpose: Build semantic-group prior vectors for hand-picked topic clusters.
# Layer: core/embedders.
# Details: Words within a group share a base vector plus small seeded jitter, so they land near-parallel.

from __future__ import annotations

import math
from typing import Dict, List

import numpy as np

SEMANTIC_GROUPS: Dict[str, List[str]] = {
    "task": ["task", "todo", "work", "job", "assignment", "duty"],
    "time": ["time", "hour", "minute", "day", "week", "month", "schedule"],
    "project": ["project", "goal", "milestone", "objective", "target"],
    "note": ["note", "document", "file", "page", "content", "text"],
    "importance": ["important", "urgent", "priority", "critical", "key"],
    "completion": ["complete", "done", "finish", "accomplish", "achieve"],
    "planning": ["plan", "strategy", "approach", "method", "process"],
    "meeting": ["meeting", "discussion", "call", "conference", "sync"],
    "idea": ["idea", "thought", "concept", "notion", "insight"],
    "review": ["review", "check", "audit", "assess", "evaluate"],
}

BASE_NOISE = 0.15
WORD_JITTER = 0.05
_TRIG_DIMS = 20


def _unit(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    if norm == 0:
        return vector.astype(np.float32)
    return (vector / norm).astype(np.float32)


def group_base_vector(group_index: int, dim: int, rng: np.random.Generator) -> np.ndarray:
    """Return the unit base vector of one semantic group."""

    angle = group_index * 2 * math.pi / len(SEMANTIC_GROUPS)
    vector = rng.uniform(-BASE_NOISE, BASE_NOISE, dim)
    head = min(_TRIG_DIMS, dim)
    vector[:head] = np.sin(angle + np.arange(head) * 0.1) * 0.5
    primary = group_index * 10
    if primary < dim:
        vector[primary] = 1.0
    return _unit(vector)


def build_prior_vectors(dim: int, seed: int) -> Dict[str, np.ndarray]:
    """
    Return a unit vector for every seed word of every semantic group.

    The same ``(dim, seed)`` always yields the same vectors, so snapshots
    taken in one process stay valid in the next.
    """

    rng = np.random.default_rng(seed)
    vectors: Dict[str, np.ndarray] = {}
    for group_index, words in enumerate(SEMANTIC_GROUPS.values()):
        base = group_base_vector(group_index, dim, rng)
        for word in words:
            jitter = rng.uniform(-WORD_JITTER, WORD_JITTER, dim)
            vectors[word] = _unit(base + jitter)
    return vectors


__all__ = ["SEMANTIC_GROUPS", "build_prior_vectors", "group_base_vector"]
