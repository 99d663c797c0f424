"""
Configuration model and YAML I/O for usage-parser.

``ParserConfig`` holds the few knobs of the line grammar (separator and
format discriminants) plus batch execution settings. It is frozen so a
single instance can be shared by any number of concurrent callers.

Key functions:
- load_config(path) -> ParserConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Example YAML::

    separator: ","
    hex_discriminant: "6"
    extended_discriminant: "4"
    max_workers: 4
    parallel_threshold: 5000
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from usage_parser.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Line grammar and batch settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    separator: str = Field(",", description="Field separator between ID and payload tokens")
    hex_discriminant: str = Field(
        "6", description="Last ID character that selects the hex-packed format"
    )
    extended_discriminant: str = Field(
        "4", description="Last ID character that selects the extended format"
    )
    max_workers: int = Field(
        1, ge=1, description="Thread pool size for batch parsing; 1 disables the pool"
    )
    parallel_threshold: int = Field(
        1000, ge=1, description="Minimum batch size before the thread pool is used"
    )

    @model_validator(mode="after")
    def _check_single_distinct_chars(self) -> ParserConfig:
        """Validate that separator and discriminants are distinct single characters."""
        chars = {
            "separator": self.separator,
            "hex_discriminant": self.hex_discriminant,
            "extended_discriminant": self.extended_discriminant,
        }
        for name, value in chars.items():
            if len(value) != 1:
                raise ValueError(f"'{name}' must be a single character, got {value!r}")
        if len(set(chars.values())) != len(chars):
            raise ValueError(
                "separator, hex_discriminant and extended_discriminant must all differ: "
                f"{chars}"
            )
        return self


DEFAULT_CONFIG = ParserConfig()


def load_config(path: str | Path) -> ParserConfig:
    """Load and validate a parser config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty, not a mapping, or
            fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    try:
        config = ParserConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid parser config in {path}:\n{e}") from e
    logger.info("Loaded config from %s", path)
    return config


def save_config(config: ParserConfig, path: str | Path) -> None:
    """Serialize a ParserConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# usage-parser configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
