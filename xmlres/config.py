#!/usr/bin/env python3
"""
Provider configuration.

A configuration file is a small YAML mapping:

```yaml
provider: xml
base_directory: Resources
solution_path: /work/MySolution   # optional
project_name: MyApp               # optional
```

A relative base_directory is resolved against solution_path, which defaults
to the directory holding the configuration file.
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

DEFAULT_PROJECT_NAME = "default"
DEFAULT_PROVIDER = "xml"


@dataclass
class ProviderConfig:
    """Settings for one provider instance."""
    base_directory: str = ""
    solution_path: Optional[str] = None
    project_name: str = DEFAULT_PROJECT_NAME
    provider: str = DEFAULT_PROVIDER

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.base_directory or not self.base_directory.strip():
            errors.append("base_directory is not set")
        if not self.project_name or not self.project_name.strip():
            errors.append("project_name is not set")
        return errors

    def with_overrides(self, **overrides: Any) -> "ProviderConfig":
        """Copy of this config with every non-None override applied."""
        data = asdict(self)
        for name, value in overrides.items():
            if name not in data:
                raise ValueError(f"Unknown configuration option: {name}")
            if value is not None:
                data[name] = value
        return ProviderConfig(**data)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ProviderConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")
        return cls(**{k: str(v) if v is not None else None for k, v in data.items()})


def load_config(path: Union[str, Path]) -> ProviderConfig:
    """
    Load provider configuration from a YAML file.

    Raises:
        ValueError: Invalid YAML or a root that is not a mapping
    """
    config_path = Path(path)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")

    config = ProviderConfig.from_dict(data)
    if config.solution_path is None:
        config.solution_path = str(config_path.parent.absolute())
    return config
