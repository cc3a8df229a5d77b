"""
Terbilang: spell non-negative integers out in words.

Architecture: Rule table → Grouper (base-1000 | base-10000) → Simplifier → Join → Case style
Philosophy:  Tables are validated once when loaded. Conversion is pure code.
"""

from .converter import Terbilang, terbilang
from .exceptions import (
    InvalidRuleDataError,
    RuleNotFoundError,
    TerbilangError,
    UnsupportedNumberError,
)
from .models import CaseStyle, NumberingSystem, RuleTable
from .rules import available_languages

__version__ = "1.0.0"

__all__ = [
    "CaseStyle",
    "InvalidRuleDataError",
    "NumberingSystem",
    "RuleNotFoundError",
    "RuleTable",
    "Terbilang",
    "TerbilangError",
    "UnsupportedNumberError",
    "available_languages",
    "terbilang",
]
