"""
Pydantic models for language rule tables, validated strictly at load time.

A rule table is validated once, when it is resolved. If a table does not fit
the grammar it declares, it fails loudly at the boundary, not with an
IndexError deep inside chunk conversion.

Table conventions (default grammar):
    units   10 tokens, index = digit 0-9
    teens   10 tokens for 10-19
    tens     9 tokens for 10, 20, ..., 90, indexed by tens digit - 1
             (index 0 is never read: 10-19 always go through `teens`)
    hundredWord       the hundred multiplier word
    magnitudes        thousand and up: thousand, million, billion, ...

Table conventions (japanese grammar):
    units   10 tokens, index = digit 0-9
    teens    9 tokens for 10, 20, ..., 90 (the tens multiplier role)
    hundreds 9 tokens for 100, 200, ..., 900
    thousands 9 tokens for 1000, 2000, ..., 9000
    magnitudes        10000^1, 10000^2, ... (only the first four are used)

simplifyTriggers defaults to the magnitude words when a table omits it. The
bundled ja table sets it to [] because 一万 is the usual written form, so
simplify() fuses nothing in Japanese unless a trigger set is passed, e.g.
simplify(["万"]). The ko table fuses 일만 into 만.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Japanese-style grouping stops at 10000^4.
JAPANESE_MAGNITUDE_LEVELS = 4


# ─── Enums ──────────────────────────────────────────────────────────


class NumberingSystem(str, Enum):
    """Grammar variant a rule table is written for."""

    DEFAULT = "default"  # base-1000 groups (en, id, ms, ...)
    JAPANESE = "japanese"  # recursive base-10000 groups (ja, ko, ...)


class CaseStyle(str, Enum):
    """Output case style applied after the tokens are joined."""

    DEFAULT = "default"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"
    MACRO = "macro"
    TRAIN = "train"


# ─── Rule Table ─────────────────────────────────────────────────────


class RuleTable(BaseModel):
    """The validated token tables for one language.

    Field names follow Python conventions; the JSON keys (``hundredWord``,
    ``simplyWord``, ``simplifyTriggers``, ``numberingSystem``) are accepted
    as aliases so language files can be validated directly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    units: tuple[str, ...]
    teens: tuple[str, ...]
    tens: tuple[str, ...] = ()
    hundred_word: Optional[str] = Field(default=None, alias="hundredWord")
    hundreds: tuple[str, ...] = ()
    thousands: tuple[str, ...] = ()
    magnitudes: tuple[str, ...] = ()
    simply_word: str = Field(default="", alias="simplyWord")
    simplify_triggers: Optional[tuple[str, ...]] = Field(
        default=None, alias="simplifyTriggers"
    )
    numbering_system: NumberingSystem = Field(
        default=NumberingSystem.DEFAULT, alias="numberingSystem"
    )

    @field_validator("units", "teens", "tens", "hundreds", "thousands", "magnitudes")
    @classmethod
    def check_tokens(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for position, token in enumerate(value):
            if not token.strip():
                raise ValueError(f"token at index {position} is blank")
        return value

    @model_validator(mode="after")
    def check_grammar_shape(self) -> RuleTable:
        if len(self.units) != 10:
            raise ValueError(f"'units' must have exactly 10 entries, got {len(self.units)}")

        if self.numbering_system is NumberingSystem.DEFAULT:
            _require_arity("teens", self.teens, 10)
            _require_arity("tens", self.tens, 9)
            if not self.hundred_word:
                raise ValueError("'hundredWord' is required by the default numbering system")
        else:
            _require_arity("teens", self.teens, 9)
            _require_arity("hundreds", self.hundreds, 9)
            _require_arity("thousands", self.thousands, 9)

        return self

    # ─── Derived values ─────────────────────────────────────────────

    @property
    def zero(self) -> str:
        return self.units[0]

    @property
    def one(self) -> str:
        return self.units[1]

    @property
    def default_triggers(self) -> tuple[str, ...]:
        """Magnitude tokens eligible for "one" fusion when no override is given.

        An explicit simplifyTriggers wins, even when empty (the ja table).
        """
        if self.simplify_triggers is not None:
            return self.simplify_triggers
        if self.numbering_system is NumberingSystem.JAPANESE:
            return self.magnitudes
        assert self.hundred_word is not None
        return (self.hundred_word, *self.magnitudes)

    @property
    def max_number(self) -> int:
        """Largest integer this table's magnitude sequence can express."""
        if self.numbering_system is NumberingSystem.JAPANESE:
            levels = min(JAPANESE_MAGNITUDE_LEVELS, len(self.magnitudes))
            return 10_000 ** (levels + 1) - 1
        return 1_000 ** (len(self.magnitudes) + 1) - 1


def _require_arity(name: str, value: tuple[str, ...], expected: int) -> None:
    if len(value) != expected:
        raise ValueError(
            f"'{name}' must have exactly {expected} entries, got {len(value)}"
        )
