"""
Conversion façade. Configures and runs the number-to-words pipeline.

Flow:
    rule table ──► grouper (default | japanese) or digit splitter
               ──► simplifier (optional)
               ──► join with " "
               ──► separator substitution  (DEFAULT case style)
                   or case style rewrite   (any other style)

Every builder holds its own configuration, custom rules included. Nothing is
shared between builders except the cached, immutable base rule tables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from . import config
from .case_style import apply_case_style
from .exceptions import UnsupportedNumberError
from .grouping import number_to_tokens, split_digits
from .models import CaseStyle, RuleTable
from .rules import load_rules, merge_rules
from .simplify import simplify_tokens

logger = logging.getLogger(__name__)

CustomRules = Mapping[str, Any] | str | Path


def terbilang(number: int, apart: bool = False) -> Terbilang:
    """Start a conversion in the configured default language.

    Usage:
        str(terbilang(24434))                      # "twenty four thousand ..."
        terbilang(1111).simplify().render()        # "a thousand a hundred eleven"
        terbilang(24434).language("ja").separator("").render()  # "二万四千四百三十四"
    """
    return Terbilang(number, apart=apart)


class Terbilang:
    """Builder for a single number-to-words conversion.

    Configuration methods return the builder itself so calls can be chained.
    render() can be called any number of times and always gives the same
    result for the same configuration.
    """

    def __init__(self, number: int, apart: bool = False, language: str | None = None):
        self.number = _check_number(number)
        self.apart = apart
        self.language_code = language or config.default_language()
        self.rules: RuleTable = load_rules(self.language_code)
        self._simplify = False
        self._triggers: tuple[str, ...] | None = None
        self._separator = " "
        self._case_style = CaseStyle.DEFAULT

    def __repr__(self) -> str:
        return (
            f"Terbilang(number={self.number!r}, apart={self.apart!r}, "
            f"language={self.language_code!r})"
        )

    def __str__(self) -> str:
        return self.render()

    # ─── Configuration ──────────────────────────────────────────────

    def language(self, code: str) -> Terbilang:
        """Switch to another language's base table.

        Custom rules merged earlier and any explicit simplify trigger set
        belong to the previous table and are dropped.
        """
        self.rules = load_rules(code)
        self.language_code = code
        self._triggers = None
        return self

    def with_custom_rules(self, data: CustomRules) -> Terbilang:
        """Merge a partial rule table (mapping or JSON file path) over the current one.

        Raises:
            InvalidRuleDataError: If the data is malformed or the file is missing.
        """
        self.rules = merge_rules(self.rules, data)
        logger.info("Applied custom rules over %r table", self.language_code)
        return self

    def simplify(self, mode: bool | Iterable[str] = True) -> Terbilang:
        """Enable/disable "one" + magnitude fusion, or enable it for given triggers only."""
        if isinstance(mode, bool):
            self._simplify = mode
        elif isinstance(mode, str):
            raise TypeError("simplify() takes a bool or a collection of magnitude words, not a str")
        else:
            self._triggers = tuple(mode)
            self._simplify = True
        return self

    def separator(self, separator: str) -> Terbilang:
        self._separator = separator
        return self

    def case_style(self, style: CaseStyle | str) -> Terbilang:
        """Select the output case style.

        Raises:
            ValueError: If the style name is unknown.
        """
        self._case_style = CaseStyle(style)
        return self

    # ─── Execution ──────────────────────────────────────────────────

    def tokens(self) -> list[str]:
        """The word tokens in reading order, after simplification."""
        if self.apart:
            return split_digits(self.number, self.rules)

        words = number_to_tokens(self.number, self.rules)
        if self._simplify:
            triggers = self.rules.default_triggers if self._triggers is None else self._triggers
            words = simplify_tokens(words, self.rules.one, self.rules.simply_word, triggers)
        return words

    def render(self) -> str:
        """Run the full pipeline and return the phrase.

        Raises:
            UnsupportedNumberError: If the number is too large for the table.
        """
        phrase = " ".join(self.tokens())
        logger.debug(
            "Rendered %d (%s, apart=%s, case=%s)",
            self.number,
            self.language_code,
            self.apart,
            self._case_style.value,
        )

        if self._case_style is CaseStyle.DEFAULT:
            return phrase.replace(" ", self._separator)
        return apply_case_style(phrase, self._case_style)


# ─── Input Validation ───────────────────────────────────────────────


def _check_number(number: Any) -> int:
    # bool is an int subclass, but True/False are not numbers to spell out
    if isinstance(number, bool) or not isinstance(number, int):
        raise UnsupportedNumberError(
            f"Input must be an integer, got {type(number).__name__}",
            {"type": type(number).__name__},
        )
    if number < 0:
        raise UnsupportedNumberError(
            f"Input must be non-negative, got {number}", {"number": str(number)}
        )
    return number
