"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to one category of failure, so callers can tell a
configuration problem (bad language, bad rule data) apart from a bad input
number without parsing messages.
"""

from __future__ import annotations


class TerbilangError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class RuleNotFoundError(TerbilangError):
    """No rule table can be resolved for the requested language code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("RULE_NOT_FOUND", message, details)


class InvalidRuleDataError(TerbilangError):
    """Custom rule data is malformed, or the merged table breaks its shape."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_RULE_DATA", message, details)


class UnsupportedNumberError(TerbilangError):
    """The input is negative, not an integer, or too large for the table."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_NUMBER", message, details)
