"""Engine configuration loader."""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .constants import (
    DEFAULT_ATTEMPT_FACTOR,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_MAX_GROUP_SIZE,
    DEFAULT_MIN_GROUP_SIZE,
    DEFAULT_SWAP_BUDGET,
)

# Fields that may be None; all others must be plain ints
_OPTIONAL_FIELDS = frozenset({"seed", "target_group_count"})


@dataclass(frozen=True)
class EngineConfig:
    """Tunables for one assignment run."""

    swap_budget: int = DEFAULT_SWAP_BUDGET
    attempt_factor: int = DEFAULT_ATTEMPT_FACTOR
    seed: int | None = None
    min_group_size: int = DEFAULT_MIN_GROUP_SIZE
    max_group_size: int = DEFAULT_MAX_GROUP_SIZE
    target_group_count: int | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None and f.name in _OPTIONAL_FIELDS:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{f.name} must be an integer, got {value!r}")

        if self.swap_budget < 0:
            raise ValueError("swap_budget must be >= 0")
        if self.attempt_factor < 1:
            raise ValueError("attempt_factor must be >= 1")
        if self.min_group_size < 1:
            raise ValueError("min_group_size must be >= 1")
        if self.max_group_size < self.min_group_size:
            raise ValueError("max_group_size must be >= min_group_size")
        if self.target_group_count is not None and self.target_group_count < 1:
            raise ValueError("target_group_count must be >= 1")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EngineConfig":
        """Build a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def with_overrides(self, **overrides: Any) -> "EngineConfig":
        """Copy with the given values replaced; None values are ignored."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


class ConfigLoader:
    """Loads EngineConfig from an optional JSON file."""

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to a JSON config file. When omitted,
                         groupsort.json in the working directory is used
                         if present. A missing file means defaults.
        """
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
        self.config_path = Path(config_path)

    def load(self) -> EngineConfig:
        """Read the config file, or return defaults if there is none."""
        if not self.config_path.exists():
            return EngineConfig()

        with open(self.config_path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file {self.config_path} must contain a JSON object")
        return EngineConfig.from_dict(data)
