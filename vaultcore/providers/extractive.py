# Path: vaultcore/providers/extractive.py
# Purpose: Model-free provider producing extractive summaries and keyword-matched answers.
# Layer: core/providers.
# Details: Used when no language model is available; embeddings come from the hash embedder.

from __future__ import annotations

import re
from typing import Optional

import numpy as np

from vaultcore.embedders.hash_embedder import HashEmbedder
from vaultcore.text import extract_keywords, split_paragraphs, split_sentences

from .base import SUMMARY_STYLES, Provider

_NUMBER_RE = re.compile(r"\d+")

NO_ANSWER_MESSAGE = (
    "I can help you search your vault, but answering this question needs a language model. "
    "Configure a model-backed provider to enable it."
)


class ExtractiveProvider(Provider):
    """Answer from the text itself: leading sentences for summaries, keyword hits for questions."""

    id = "extractive"
    description = "Extractive summaries and keyword answers without a language model."

    def __init__(self, embedder: Optional[HashEmbedder] = None, summary_length: int = 150) -> None:
        self.embedder = embedder or HashEmbedder()
        self.summary_length = summary_length

    def summarize(self, text: str, max_length: Optional[int] = None, style: str = "brief") -> str:
        if style not in SUMMARY_STYLES:
            raise ValueError(f"Unknown summary style: {style}")
        if max_length is None:
            max_length = self.summary_length

        sentences = split_sentences(text)
        if not sentences:
            return text[:max_length]

        if style == "brief":
            return " ".join(sentences[:3])[:max_length]
        if style == "bullet-points":
            bullets = "\n".join(f"• {sentence}" for sentence in sentences[:5])
            return bullets[: max_length * 2]
        paragraphs = split_paragraphs(text)
        return paragraphs[0][: max_length * 2]

    def answer_question(self, question: str, context: str) -> str:
        """
        Answer from the first context sentence that mentions a question keyword.

        Without a keyword hit, "how many" questions report the first number in
        the context and "what"/"which" questions echo the opening sentence.
        """

        keywords = extract_keywords(question, min_length=4)
        sentences = split_sentences(context)
        for sentence in sentences:
            lowered = sentence.lower()
            if any(keyword in lowered for keyword in keywords):
                return f"Based on your vault: {sentence}"

        question_lower = question.lower()
        if "how many" in question_lower:
            number = _NUMBER_RE.search(context)
            if number is not None:
                return f"Found {number.group()} in the context."

        if ("what" in question_lower or "which" in question_lower) and sentences:
            return f"From your notes: {sentences[0]}"

        return NO_ANSWER_MESSAGE

    def embed(self, text: str) -> np.ndarray:
        return self.embedder.embed_text(text)
