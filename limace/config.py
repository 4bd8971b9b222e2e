"""Configuration model and loaders for limace.

Responsibilities:
- Define slug settings as a typed, immutable dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `SlugConfig`: normalized settings used to build a `Slugifier`.
- `ConfigLoader`: static construction helpers for `SlugConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import parse_separator
from .slugifier import DEFAULT_SEPARATOR, Slugifier

SEPARATOR_ENV_KEY = "LIMACE_SEPARATOR"


@dataclass(frozen=True, slots=True)
class SlugConfig:
    """Settings for one slugification run.

    Attributes:
        separator: Character inserted for non-alphanumeric runs, default `-`.
    """

    separator: str = DEFAULT_SEPARATOR

    def validate(self) -> None:
        """Validate settings loaded from external sources."""

        if len(self.separator) != 1:
            raise ValueError("`separator` must be exactly one character.")
        if self.separator.isascii() and self.separator.isalnum():
            raise ValueError(
                f"`separator` must not be an ASCII letter or digit, got `{self.separator}`."
            )

    def to_slugifier(self) -> Slugifier:
        """Build the slugifier described by this config."""

        return Slugifier.default().with_separator(self.separator)


class ConfigLoader:
    """Factory methods for creating `SlugConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"separator"})

    @staticmethod
    def from_yaml(path: Path) -> SlugConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SlugConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        separator = (
            parse_separator(env_map.get(SEPARATOR_ENV_KEY), SEPARATOR_ENV_KEY)
            or DEFAULT_SEPARATOR
        )

        config = SlugConfig(separator=separator)
        config.validate()
        return config

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str = "mapping") -> SlugConfig:
        """Create a validated config from a normalized mapping payload."""

        ConfigLoader._validate_keys(payload, source_label)
        try:
            separator = parse_separator(payload.get("separator"), "separator")
            config = SlugConfig(separator=separator or DEFAULT_SEPARATOR)
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject unknown config keys with a deterministic error message."""

        unknown_keys = sorted(
            str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS
        )
        if unknown_keys:
            joined = ", ".join(f"`{key}`" for key in unknown_keys)
            raise ValueError(f"{source_label} contains unsupported keys: {joined}.")
