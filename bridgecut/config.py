"""Configuration for partitioning runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass(frozen=True)
class PartitionConfig:
    """Parameters of a bridge-cut run."""

    # Number of highest-scoring edges to remove
    cut_size: int = 3

    # Worker processes for the betweenness computation (1 = in-process)
    parallelism: int = 1

    # Divide betweenness by the number of ordered node pairs
    normalized: bool = False

    def validate(self) -> "PartitionConfig":
        """Check value ranges and return self.

        Raises:
            ValueError: If a value is out of range or of the wrong type.
        """
        for name in ("cut_size", "parallelism"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if not isinstance(self.normalized, bool):
            raise ValueError(f"normalized must be a boolean, got {self.normalized!r}")
        return self

    def with_overrides(self, **overrides: Optional[Any]) -> "PartitionConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PartitionConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data).validate()

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "PartitionConfig":
        """Build a config from a YAML document.

        The document may be empty, a mapping of fields, or a mapping with a
        top-level ``partition`` section holding the fields.
        """
        data = yaml.safe_load(yaml_str)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Configuration YAML must be a mapping.")
        if "partition" in data:
            data = data["partition"]
            if data is not None and not isinstance(data, dict):
                raise ValueError("'partition' section must be a mapping.")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "PartitionConfig":
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))


# Default configuration instance
DEFAULT_CONFIG = PartitionConfig()
