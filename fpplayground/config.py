"""
Configuration for the fpplayground command line.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from returns.result import Failure, Result, Success

from fpplayground.core.pairing import PairingStrategy
from fpplayground.shell.history import read_json

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class PlaygroundConfig:
    """Settings for logging and change reporting."""

    # Logging
    log_level: str = "info"
    log_json: bool = False  # JSON lines instead of console output

    # Change reporting
    pairing_strategy: str = "zip"  # "index" | "zip" | "fold"
    keep_empty_diffs: bool = False

    # Canonical country names, e.g. {"Polska": "Poland"}
    country_aliases: dict[str, str] = field(default_factory=dict)

    @property
    def pairing(self) -> PairingStrategy:
        """Pairing strategy as an enum member."""
        return PairingStrategy(self.pairing_strategy)

    def with_overrides(self, **overrides: Any) -> "PlaygroundConfig":
        """Copy with every non-None override applied."""
        data = self.to_dict()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return PlaygroundConfig.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "log_level": self.log_level,
            "log_json": self.log_json,
            "pairing_strategy": self.pairing_strategy,
            "keep_empty_diffs": self.keep_empty_diffs,
            "country_aliases": dict(self.country_aliases),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlaygroundConfig":
        """
        Create from dictionary.

        Raises:
            TypeError: If a field has the wrong JSON type
            ValueError: If log_level or pairing_strategy is not a known value
        """
        log_level = data.get("log_level", "info")
        if not isinstance(log_level, str) or log_level.lower() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level!r}")

        strategy = data.get("pairing_strategy", "zip")
        if strategy not in {member.value for member in PairingStrategy}:
            raise ValueError(f"Unknown pairing strategy: {strategy!r}")

        log_json = data.get("log_json", False)
        keep_empty_diffs = data.get("keep_empty_diffs", False)
        for name, flag in (("log_json", log_json), ("keep_empty_diffs", keep_empty_diffs)):
            if not isinstance(flag, bool):
                raise TypeError(f"{name} must be true or false, got {flag!r}")

        aliases = data.get("country_aliases", {})
        if not isinstance(aliases, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in aliases.items()
        ):
            raise TypeError(f"country_aliases must map names to names, got {aliases!r}")

        return cls(
            log_level=log_level.lower(),
            log_json=log_json,
            pairing_strategy=strategy,
            keep_empty_diffs=keep_empty_diffs,
            country_aliases=dict(aliases),
        )

    @classmethod
    def from_file(cls, path: Path) -> Result["PlaygroundConfig", str]:
        """
        Load configuration from a JSON file.

        Args:
            path: JSON file holding any subset of the fields

        Returns:
            Success with the config, or Failure describing what went wrong
        """
        data = read_json(path)
        if isinstance(data, Failure):
            return data

        content = data.unwrap()
        if not isinstance(content, dict):
            return Failure(f"Config must be a JSON object: {path}")
        try:
            return Success(cls.from_dict(content))
        except (TypeError, ValueError) as e:
            return Failure(f"Invalid config {path}: {e}")
