"""
Fuse "one" + magnitude into a single short form.

    en: ["one", "thousand", "one", "hundred", "eleven"]
        → ["a thousand", "a hundred", "eleven"]
    id: ["satu", "ribu"] → ["seribu"]

The fused token is the table's simplyWord glued directly to the magnitude
word, so any spacing lives in simplyWord itself ("a " vs "se").
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def simplify_tokens(
    tokens: Sequence[str], one: str, simply_word: str, triggers: Iterable[str]
) -> list[str]:
    """Single left-to-right pass; a fused token is never scanned again."""
    trigger_set = frozenset(triggers)
    simplified: list[str] = []
    i = 0

    while i < len(tokens):
        token = tokens[i]
        if token == one and i + 1 < len(tokens) and tokens[i + 1] in trigger_set:
            simplified.append(simply_word + tokens[i + 1])
            i += 2
        else:
            simplified.append(token)
            i += 1

    return simplified
