from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies default injection, type coercion, extension normalization and
strict-mode failures.
"""

import pytest

from unitycodemap.core.pipeline.stages.validator import validate_config


def test_valid_config_passes_untouched(mock_config_dict):
    clean, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert clean == mock_config_dict


def test_missing_keys_are_filled_with_defaults():
    clean, warnings = validate_config({"input_path": "/somewhere"})

    assert clean["input_path"] == "/somewhere"
    assert clean["output_path"] == "unity_code_structure.csv"
    assert clean["extensions"] == [".cs"]
    assert "bin" in clean["excluded_dirs"]
    assert clean["strict_parse"] is False
    assert warnings == []


def test_non_dict_config_falls_back_to_defaults():
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean["extensions"] == [".cs"]
    assert len(warnings) == 1


def test_non_dict_config_strict_raises():
    with pytest.raises(TypeError):
        validate_config("bad", strict=True)


def test_bool_and_list_coercion():
    clean, warnings = validate_config({
        "strict_parse": "yes",
        "excluded_dirs": "Library, Temp",
    })

    assert clean["strict_parse"] is True
    assert clean["excluded_dirs"] == ["Library", "Temp"]
    assert len(warnings) == 2


def test_extensions_are_normalized():
    clean, warnings = validate_config({"extensions": ["CS", ".cs", ".Csx"]})

    assert clean["extensions"] == [".cs", ".csx"]
    assert any("normalized" in w for w in warnings)


def test_extension_without_dot_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"extensions": ["cs"]}, strict=True)


def test_invalid_types_fall_back():
    clean, warnings = validate_config({"output_path": 42, "excluded_dirs": [1, "obj"]})

    assert clean["output_path"] == "unity_code_structure.csv"
    assert clean["excluded_dirs"] == ["obj"]
    assert len(warnings) == 2


def test_unknown_encoding_falls_back():
    clean, warnings = validate_config({"encoding": "no-such-codec"})

    assert clean["encoding"] == "utf-8"
    assert any("no-such-codec" in w for w in warnings)


@pytest.mark.parametrize("codec", ["rot13", "hex", "zlib"])
def test_non_text_encoding_falls_back(codec):
    clean, warnings = validate_config({"encoding": codec})

    assert clean["encoding"] == "utf-8"
    assert any(codec in w for w in warnings)


def test_non_text_encoding_strict_raises():
    with pytest.raises(ValueError, match="rot13"):
        validate_config({"encoding": "rot13"}, strict=True)


def test_text_encoding_is_kept():
    clean, warnings = validate_config({"encoding": "latin-1"})

    assert clean["encoding"] == "latin-1"
    assert warnings == []


def test_define_symbols_from_csv_string():
    clean, warnings = validate_config({"define_symbols": "UNITY_EDITOR, DEBUG"})

    assert clean["define_symbols"] == ["UNITY_EDITOR", "DEBUG"]
    assert len(warnings) == 1
