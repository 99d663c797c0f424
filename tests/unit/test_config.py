"""
Unit tests for config models and YAML I/O (usage_parser.config).

Tests Pydantic model validation and load/save of parser config files.
"""

import pytest
from pydantic import ValidationError

from usage_parser.config import DEFAULT_CONFIG, ParserConfig, load_config, save_config
from usage_parser.exceptions import ConfigValidationError


# ---------------------------------------------------------------------------
# ParserConfig
# ---------------------------------------------------------------------------

class TestParserConfig:
    """Tests for ParserConfig validation."""

    def test_defaults(self):
        cfg = ParserConfig()
        assert cfg.separator == ","
        assert cfg.hex_discriminant == "6"
        assert cfg.extended_discriminant == "4"
        assert cfg.max_workers == 1
        assert cfg.parallel_threshold == 1000

    def test_default_config_matches_defaults(self):
        assert DEFAULT_CONFIG == ParserConfig()

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.separator = ";"

    @pytest.mark.parametrize("field", ["separator", "hex_discriminant", "extended_discriminant"])
    def test_multi_char_rejected(self, field):
        with pytest.raises(ValidationError, match="single character"):
            ParserConfig(**{field: "ab"})

    @pytest.mark.parametrize("field", ["separator", "hex_discriminant", "extended_discriminant"])
    def test_empty_rejected(self, field):
        with pytest.raises(ValidationError, match="single character"):
            ParserConfig(**{field: ""})

    def test_colliding_discriminants_rejected(self):
        with pytest.raises(ValidationError, match="must all differ"):
            ParserConfig(hex_discriminant="4", extended_discriminant="4")

    def test_discriminant_equal_to_separator_rejected(self):
        with pytest.raises(ValidationError, match="must all differ"):
            ParserConfig(hex_discriminant=",")

    def test_max_workers_must_be_positive(self):
        with pytest.raises(ValidationError, match="max_workers"):
            ParserConfig(max_workers=0)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="delimiter"):
            ParserConfig(delimiter=";")


# ---------------------------------------------------------------------------
# YAML I/O
# ---------------------------------------------------------------------------

class TestLoadSaveConfig:
    """Tests for load_config() / save_config()."""

    def test_load_partial_file(self, tmp_path):
        path = tmp_path / "parser.yaml"
        path.write_text("separator: ';'\nmax_workers: 3\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg.separator == ";"
        assert cfg.max_workers == 3
        assert cfg.hex_discriminant == "6"

    def test_discriminants_as_yaml_ints(self, tmp_path):
        """Unquoted digits in YAML load as ints and must be rejected, not coerced."""
        path = tmp_path / "parser.yaml"
        path.write_text("hex_discriminant: 8\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="hex_discriminant"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="empty"):
            load_config(path)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("separator: '::'\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="Invalid parser config"):
            load_config(path)

    def test_save_writes_header(self, tmp_path):
        path = tmp_path / "nested" / "parser.yaml"
        save_config(ParserConfig(), path)
        text = path.read_text(encoding="utf-8")
        assert text.startswith("# usage-parser configuration")
        assert "hex_discriminant" in text
