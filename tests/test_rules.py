"""
Tests for rule table loading, validation and custom rule merging.

Run: pytest tests/ -v
"""

from __future__ import annotations

import json
from typing import Any

import pytest
from pydantic import ValidationError

from terbilang.exceptions import InvalidRuleDataError, RuleNotFoundError
from terbilang.models import NumberingSystem, RuleTable
from terbilang.rules import (
    available_languages,
    load_rules,
    merge_rules,
    read_rule_file,
    validate_rules,
)


def _default_table(**overrides: Any) -> dict[str, Any]:
    """Minimal valid default-grammar table data."""
    data: dict[str, Any] = {
        "units": [f"u{i}" for i in range(10)],
        "teens": [f"t{i}" for i in range(10, 20)],
        "tens": [f"x{i}" for i in range(1, 10)],
        "hundredWord": "h",
        "magnitudes": ["k"],
    }
    data.update(overrides)
    return data


# ═══════════════════════════════════════════════════════════════════════
# LOADING
# ═══════════════════════════════════════════════════════════════════════


class TestLoadRules:
    def test_bundled_languages(self):
        assert {"en", "id", "ja", "ko", "ms"} <= set(available_languages())

    def test_every_bundled_table_is_valid(self):
        for code in available_languages():
            assert isinstance(load_rules(code), RuleTable)

    def test_english_shape(self, english):
        assert english.numbering_system is NumberingSystem.DEFAULT
        assert english.zero == "zero"
        assert english.one == "one"
        assert english.hundred_word == "hundred"
        assert english.magnitudes[0] == "thousand"

    def test_japanese_shape(self, japanese):
        assert japanese.numbering_system is NumberingSystem.JAPANESE
        assert japanese.magnitudes[:4] == ("万", "億", "兆", "京")

    def test_tables_are_cached(self):
        assert load_rules("en") is load_rules("en")

    def test_unknown_language(self):
        with pytest.raises(RuleNotFoundError) as exc_info:
            load_rules("zz")
        assert exc_info.value.code == "RULE_NOT_FOUND"

    def test_path_like_code_rejected(self):
        with pytest.raises(RuleNotFoundError, match="Invalid language code"):
            load_rules("../en")

    def test_custom_language_directory(self, tmp_path):
        (tmp_path / "xx.json").write_text(json.dumps(_default_table()), encoding="utf-8")
        table = load_rules("xx", lang_dir=tmp_path)
        assert table.zero == "u0"
        assert available_languages(tmp_path) == ["xx"]

    def test_malformed_language_file(self, tmp_path):
        (tmp_path / "yy.json").write_text(json.dumps({"units": ["a"]}), encoding="utf-8")
        with pytest.raises(InvalidRuleDataError):
            load_rules("yy", lang_dir=tmp_path)

    def test_missing_directory_lists_nothing(self, tmp_path):
        assert available_languages(tmp_path / "nope") == []


# ═══════════════════════════════════════════════════════════════════════
# TABLE VALIDATION
# ═══════════════════════════════════════════════════════════════════════


class TestRuleTableValidation:
    def test_minimal_default_table(self):
        table = validate_rules(_default_table())
        assert table.max_number == 999_999

    def test_units_arity(self):
        with pytest.raises(InvalidRuleDataError) as exc_info:
            validate_rules(_default_table(units=["a", "b"]))
        assert exc_info.value.details["errors"]

    def test_teens_arity(self):
        with pytest.raises(InvalidRuleDataError):
            validate_rules(_default_table(teens=["a"] * 9))

    def test_tens_arity_follows_offset_convention(self):
        # 8 entries means the table was written for tens[d - 2]
        with pytest.raises(InvalidRuleDataError):
            validate_rules(_default_table(tens=["a"] * 8))

    def test_hundred_word_required(self):
        data = _default_table()
        del data["hundredWord"]
        with pytest.raises(InvalidRuleDataError):
            validate_rules(data)

    def test_blank_token_rejected(self):
        with pytest.raises(InvalidRuleDataError):
            validate_rules(_default_table(magnitudes=["k", " "]))

    def test_non_string_token_rejected(self):
        with pytest.raises(InvalidRuleDataError):
            validate_rules(_default_table(units=list(range(10))))

    def test_unknown_numbering_system(self):
        with pytest.raises(InvalidRuleDataError):
            validate_rules(_default_table(numberingSystem="roman"))

    def test_unknown_key(self):
        with pytest.raises(InvalidRuleDataError):
            validate_rules(_default_table(ordinals=["first"]))

    def test_japanese_requires_multiplier_tables(self):
        with pytest.raises(InvalidRuleDataError):
            validate_rules(_default_table(numberingSystem="japanese"))

    def test_no_magnitudes(self):
        assert validate_rules(_default_table(magnitudes=[])).max_number == 999

    def test_default_triggers_include_hundred(self, english):
        assert english.default_triggers[:2] == ("hundred", "thousand")

    def test_explicit_triggers_win(self, japanese):
        assert japanese.default_triggers == ()

    def test_tables_are_frozen(self, english):
        with pytest.raises(ValidationError):
            english.simply_word = "the "


# ═══════════════════════════════════════════════════════════════════════
# CUSTOM RULE MERGING
# ═══════════════════════════════════════════════════════════════════════


class TestMergeRules:
    def test_override_wins_per_key(self, english):
        merged = merge_rules(english, {"hundredWord": "hundred and"})
        assert merged.hundred_word == "hundred and"
        assert merged.units == english.units

    def test_arrays_replaced_wholesale(self, english):
        merged = merge_rules(english, {"magnitudes": ["grand"]})
        assert merged.magnitudes == ("grand",)
        assert merged.max_number == 999_999

    def test_base_table_untouched(self, english):
        merge_rules(english, {"simplyWord": "one "})
        assert load_rules("en").simply_word == "a "

    def test_switch_to_japanese_grammar(self, english, japanese):
        merged = merge_rules(
            english,
            {
                "numberingSystem": "japanese",
                "teens": list(japanese.teens),
                "hundreds": list(japanese.hundreds),
                "thousands": list(japanese.thousands),
                "magnitudes": list(japanese.magnitudes),
            },
        )
        assert merged.numbering_system is NumberingSystem.JAPANESE

    def test_arity_violation_after_merge(self, english):
        with pytest.raises(InvalidRuleDataError, match="custom rules"):
            merge_rules(english, {"teens": ["ten"]})

    def test_from_file(self, english, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"simplyWord": "one-"}), encoding="utf-8")
        assert merge_rules(english, path).simply_word == "one-"
        assert merge_rules(english, str(path)).simply_word == "one-"

    def test_missing_file(self, english, tmp_path):
        with pytest.raises(InvalidRuleDataError, match="not found"):
            merge_rules(english, tmp_path / "missing.json")

    def test_invalid_json_file(self, english, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidRuleDataError):
            merge_rules(english, path)

    def test_json_array_file(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(InvalidRuleDataError, match="JSON object"):
            read_rule_file(path)

    def test_wrong_override_type(self, english):
        with pytest.raises(InvalidRuleDataError) as exc_info:
            merge_rules(english, 42)  # type: ignore[arg-type]
        assert exc_info.value.code == "INVALID_RULE_DATA"

    def test_non_utf8_file(self, english, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"simplyWord": "\xe9 "}')
        with pytest.raises(InvalidRuleDataError, match="Could not read"):
            merge_rules(english, path)

    def test_non_string_keys(self, english):
        with pytest.raises(InvalidRuleDataError, match="keys must be strings") as exc_info:
            merge_rules(english, {1: "x", "simplyWord": "b "})  # type: ignore[dict-item]
        assert exc_info.value.details["keys"] == ["1"]
