"""
Case style rewriting for the joined phrase.

Styles other than DEFAULT operate on the space-joined phrase and produce
their own delimiter, so they take precedence over a custom separator:

    "twenty four thousand"  camel  → "twentyFourThousand"
                            pascal → "TwentyFourThousand"
                            snake  → "twenty_four_thousand"
                            kebab  → "twenty-four-thousand"
                            macro  → "TWENTY_FOUR_THOUSAND"
                            train  → "Twenty-Four-Thousand"
"""

from __future__ import annotations

import re

from .models import CaseStyle

_WORD_BOUNDARY = re.compile(r"[\s_]+")


def apply_case_style(text: str, style: CaseStyle) -> str:
    """Rewrite a space-joined phrase in the given case style."""
    if style is CaseStyle.DEFAULT:
        return text

    words = split_words(text)

    if style is CaseStyle.CAMEL:
        joined = "".join(_capitalize(w) for w in words)
        return joined[:1].lower() + joined[1:]
    if style is CaseStyle.PASCAL:
        return "".join(_capitalize(w) for w in words)
    if style is CaseStyle.SNAKE:
        return "_".join(words).lower()
    if style is CaseStyle.KEBAB:
        return "-".join(words).lower()
    if style is CaseStyle.MACRO:
        return "_".join(words).upper()
    if style is CaseStyle.TRAIN:
        return "-".join(_capitalize(w) for w in words)

    raise ValueError(f"Unhandled case style: {style!r}")


def split_words(text: str) -> list[str]:
    """Split on whitespace and underscores, dropping empty pieces."""
    return [w for w in _WORD_BOUNDARY.split(text) if w]


def _capitalize(word: str) -> str:
    # First character only; the rest of the word keeps its case
    return word[:1].upper() + word[1:]
