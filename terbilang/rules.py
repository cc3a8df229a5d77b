"""
Language rule table resolution.

Resolves a language code to a validated RuleTable and merges user overrides
on top of it. Everything returned from here has already passed the RuleTable
shape checks, so the converters never see a malformed table.

Merge semantics:
    - override wins per key
    - nested mappings merge recursively
    - arrays are replaced wholesale, never element-merged
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from . import config
from .exceptions import InvalidRuleDataError, RuleNotFoundError
from .models import RuleTable

logger = logging.getLogger(__name__)

# Plain codes only ("en", "id", "pt-BR"); keeps lookups inside the language directory
_LANGUAGE_CODE = re.compile(r"^[a-z]{2,3}(?:[_-][A-Za-z0-9]+)?$")


# ─── Public API ──────────────────────────────────────────────────────


def load_rules(language: str, lang_dir: str | Path | None = None) -> RuleTable:
    """Resolve a language code to its rule table.

    Args:
        language: Language code, e.g. "en" or "ja".
        lang_dir: Directory holding <code>.json files. Defaults to config.lang_dir().

    Raises:
        RuleNotFoundError: If the code is malformed or has no table file.
        InvalidRuleDataError: If the table file exists but is malformed.
    """
    if not isinstance(language, str) or not _LANGUAGE_CODE.match(language):
        raise RuleNotFoundError(
            f"Invalid language code: {language!r}", {"language": language}
        )
    directory = Path(config.lang_dir() if lang_dir is None else lang_dir)
    return _load_rules_cached(language, directory.resolve())


def available_languages(lang_dir: str | Path | None = None) -> list[str]:
    """List the language codes with a table file in the language directory."""
    directory = Path(config.lang_dir() if lang_dir is None else lang_dir)
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob("*.json"))


def read_rule_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON rule file into a plain dict.

    Raises:
        InvalidRuleDataError: If the file is missing, unreadable, not JSON,
            or its top level is not an object.
    """
    resolved = Path(path)
    if not resolved.is_file():
        raise InvalidRuleDataError(
            f"Language file not found: {resolved}", {"path": str(resolved)}
        )

    try:
        with resolved.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:  # ValueError covers JSON and UTF-8 decode errors
        raise InvalidRuleDataError(
            f"Could not read language file {resolved}: {exc}", {"path": str(resolved)}
        ) from exc

    if not isinstance(data, dict):
        raise InvalidRuleDataError(
            f"Language file {resolved} must contain a JSON object, "
            f"got {type(data).__name__}",
            {"path": str(resolved)},
        )
    return data


def merge_rules(base: RuleTable, override: Mapping[str, Any] | str | Path) -> RuleTable:
    """Deep-merge an override (mapping or JSON file path) over a base table.

    Raises:
        InvalidRuleDataError: If the override is neither a mapping nor a path
            to an existing JSON file, or if the merged table is malformed.
    """
    if isinstance(override, (str, Path)):
        override_data: Mapping[str, Any] = read_rule_file(override)
    elif isinstance(override, Mapping):
        override_data = override
    else:
        raise InvalidRuleDataError(
            "Invalid language data provided. Must be a mapping or a file path.",
            {"type": type(override).__name__},
        )

    bad_keys = [key for key in override_data if not isinstance(key, str)]
    if bad_keys:
        raise InvalidRuleDataError(
            f"Rule keys must be strings, got {bad_keys!r}",
            {"keys": [repr(key) for key in bad_keys]},
        )

    merged = _deep_merge(
        base.model_dump(mode="json", by_alias=True, exclude_none=True), override_data
    )
    table = validate_rules(merged, source="custom rules")
    logger.debug("Merged custom rule keys: %s", sorted(override_data))
    return table


def validate_rules(data: Mapping[str, Any], source: str = "rule data") -> RuleTable:
    """Build a RuleTable, translating pydantic errors into InvalidRuleDataError."""
    try:
        return RuleTable.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidRuleDataError(
            f"Invalid {source}: {exc.error_count()} problem(s) found",
            {
                "source": source,
                "errors": [
                    {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                    for err in exc.errors()
                ],
            },
        ) from exc


# ─── Internal Helpers ────────────────────────────────────────────────


@lru_cache(maxsize=None)
def _load_rules_cached(language: str, directory: Path) -> RuleTable:
    path = directory / f"{language}.json"
    if not path.is_file():
        raise RuleNotFoundError(
            f"Language file not found: {path}",
            {"language": language, "path": str(path)},
        )

    table = validate_rules(read_rule_file(path), source=f"language file {path.name}")
    logger.info(
        "Loaded %r rule table (%s numbering system)",
        language,
        table.numbering_system.value,
    )
    return table


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict; the override wins per key, sequences replace wholesale."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged
