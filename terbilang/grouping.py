"""
Number → token conversion for both numbering systems.

Default grammar (base-1000):
    24434 → [24][434] → "twenty four" + "thousand" + "four hundred thirty four"

    Groups are produced least-significant first and prepended, so the final
    token list reads most-significant first. A zero group contributes nothing,
    not even its magnitude word (1,000,000 never says "thousand").

Japanese grammar (recursive base-10000):
    24434 → 2 × 10000 + 4434 → "二" "万" + "四千" "四百" "三十" "四"

    Every 10000^k magnitude takes a multiplier that is itself converted with
    the same grammar. Inputs above RuleTable.max_number are rejected first,
    so the multiplier of the largest magnitude always fits in one sub-chunk.

Apart mode skips grouping entirely and spells each decimal digit.
"""

from __future__ import annotations

from .exceptions import UnsupportedNumberError
from .models import JAPANESE_MAGNITUDE_LEVELS, NumberingSystem, RuleTable


# ─── Dispatch ────────────────────────────────────────────────────────


def number_to_tokens(number: int, rules: RuleTable) -> list[str]:
    """Convert a number with the grammar selected by the rule table.

    Raises:
        UnsupportedNumberError: If the number exceeds rules.max_number.
    """
    ensure_supported(number, rules)
    if rules.numbering_system is NumberingSystem.JAPANESE:
        return group_japanese(number, rules)
    return group_default(number, rules)


def ensure_supported(number: int, rules: RuleTable) -> None:
    """Reject numbers the table's magnitude words cannot express."""
    if number > rules.max_number:
        raise UnsupportedNumberError(
            f"{number} exceeds the largest number this language table can "
            f"express ({rules.max_number})",
            {"number": str(number), "max_number": str(rules.max_number)},
        )


# ─── Default Grammar ─────────────────────────────────────────────────


def group_default(number: int, rules: RuleTable) -> list[str]:
    """Split into base-1000 groups and attach a magnitude word to each."""
    if number == 0:
        return [rules.zero]

    tokens: list[str] = []
    index = 0

    while number > 0:
        number, chunk = divmod(number, 1000)
        if chunk > 0:
            chunk_tokens = convert_chunk(chunk, rules)
            if index > 0:
                chunk_tokens.append(rules.magnitudes[index - 1])
            tokens = chunk_tokens + tokens
        index += 1

    return tokens


def convert_chunk(number: int, rules: RuleTable) -> list[str]:
    """Convert 0-999 to tokens. Zero yields an empty list."""
    tokens: list[str] = []

    if number >= 100:
        tokens.append(rules.units[number // 100])
        assert rules.hundred_word is not None
        tokens.append(rules.hundred_word)
        number %= 100

    if 10 <= number < 20:
        tokens.append(rules.teens[number - 10])
        number = 0

    if number >= 20:
        tokens.append(rules.tens[number // 10 - 1])
        number %= 10

    if number > 0:
        tokens.append(rules.units[number])

    return tokens


# ─── Japanese Grammar ────────────────────────────────────────────────


def group_japanese(number: int, rules: RuleTable) -> list[str]:
    """Recursive base-10000 grouping: multiplier tokens, then the magnitude word."""
    if number == 0:
        return [rules.zero]

    magnitudes = rules.magnitudes[:JAPANESE_MAGNITUDE_LEVELS]
    # Largest magnitude first: 10000^4, 10000^3, ...
    scale = [(10_000 ** (i + 1), label) for i, label in enumerate(magnitudes)]
    scale.reverse()

    tokens: list[str] = []
    for value, label in scale:
        if number >= value:
            multiplier, number = divmod(number, value)
            tokens.extend(group_japanese(multiplier, rules))
            tokens.append(label)

    tokens.extend(convert_sub_chunk(number, rules))
    return tokens


def convert_sub_chunk(number: int, rules: RuleTable) -> list[str]:
    """Convert 0-9999 to tokens using the per-digit multiplier tables."""
    tokens: list[str] = []

    if number >= 1000:
        tokens.append(rules.thousands[number // 1000 - 1])
        number %= 1000

    if number >= 100:
        tokens.append(rules.hundreds[number // 100 - 1])
        number %= 100

    # `teens` holds 10, 20, ..., 90 in this grammar
    if number >= 10:
        tokens.append(rules.teens[number // 10 - 1])
        number %= 10

    if number > 0:
        tokens.append(rules.units[number])

    return tokens


# ─── Apart Mode ──────────────────────────────────────────────────────


def split_digits(number: int, rules: RuleTable) -> list[str]:
    """Spell each decimal digit independently, left to right."""
    return [rules.units[int(digit)] for digit in str(number)]
