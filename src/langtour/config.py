"""Configuration for langtour runs.

``TourConfig`` holds the options shared by the CLI and the public API.
It can be built directly or loaded from a YAML mapping::

    strict: true
    topics: [classes, functions]
    output_format: yaml
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from langtour.errors import ConfigError

OUTPUT_FORMATS = ("json", "yaml")


@dataclass(frozen=True)
class TourConfig:
    """Options for listing, running and exporting demos.

    Parameters
    ----------
    strict:
        Fail a run when a demo does not print exactly one line.
    topics:
        Restrict ``run-all`` and ``list`` to these topics; empty means all.
    output_format:
        Default catalog export format, ``"json"`` or ``"yaml"``.
    """

    strict: bool = False
    topics: tuple[str, ...] = ()
    output_format: str = "json"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "TourConfig":
        """Build a config from a mapping, rejecting unknown keys and bad types.

        Raises
        ------
        ConfigError
            If *data* contains unknown keys or values of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

        strict = data.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError(f"strict must be a boolean, got {strict!r}")

        topics = data.get("topics", ())
        if isinstance(topics, str):
            topics = (topics,)
        if not isinstance(topics, (list, tuple)) or not all(
            isinstance(t, str) for t in topics
        ):
            raise ConfigError(f"topics must be a list of strings, got {topics!r}")

        output_format = data.get("output_format", "json")
        if not isinstance(output_format, str):
            raise ConfigError(f"output_format must be a string, got {output_format!r}")

        return cls(strict=strict, topics=tuple(topics), output_format=output_format)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TourConfig":
        """Load a config from a YAML file.

        An empty file yields the default configuration.

        Raises
        ------
        ConfigError
            If the file cannot be read, is not valid YAML, or is not a mapping.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return cls.from_dict(data)
