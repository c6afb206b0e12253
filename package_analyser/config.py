"""Run configuration: dataclass defaults, optional YAML file, CLI overrides."""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

DEFAULT_API_URL = "https://api.github.com"

# Keys a config file may set. The token comes from the environment or CLI.
_FILE_KEYS = {"bins": int, "bar_width": int, "workers": int, "api_url": str, "timeout": float}


@dataclass(frozen=True)
class AnalyserConfig:
    """Immutable settings passed into the pipeline."""

    bins: int = 5
    bar_width: int = 20
    workers: int = 1
    api_url: str = DEFAULT_API_URL
    token: Optional[str] = None
    timeout: float = 30.0

    def with_overrides(self, **overrides: Any) -> "AnalyserConfig":
        """Return a copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        return _validated(replace(self, **changes), "command line")


def _validated(config: AnalyserConfig, source: str) -> AnalyserConfig:
    if config.bins < 1:
        raise ConfigError(source, f"bins must be >= 1, got {config.bins}")
    if config.bar_width < 1:
        raise ConfigError(source, f"bar_width must be >= 1, got {config.bar_width}")
    if config.workers < 1:
        raise ConfigError(source, f"workers must be >= 1, got {config.workers}")
    if config.timeout <= 0:
        raise ConfigError(source, f"timeout must be > 0, got {config.timeout}")
    return config


def load_config(path: Optional[Path] = None) -> AnalyserConfig:
    """Load settings from a YAML mapping, falling back to defaults."""
    if path is None:
        return AnalyserConfig()
    try:
        data = yaml.safe_load(Path(path).read_text())
    except OSError as e:
        raise ConfigError(str(path), str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(str(path), f"malformed YAML: {e}") from e

    if data is None:
        return AnalyserConfig()
    if not isinstance(data, dict):
        raise ConfigError(str(path), "top level must be a mapping")

    values: dict[str, Any] = {}
    for key, cast in _FILE_KEYS.items():
        if key not in data:
            continue
        raw = data[key]
        if isinstance(raw, bool) or (cast is not str and isinstance(raw, str)):
            raise ConfigError(str(path), f"{key} has wrong type: {raw!r}")
        try:
            values[key] = cast(raw)
        except (TypeError, ValueError) as e:
            raise ConfigError(str(path), f"{key}: {e}") from e
    return _validated(AnalyserConfig(**values), str(path))
