"""Configuration loader for the deformat command line.

Loads output settings from a YAML file with priority resolution:
1. $DEFORMAT_CONFIG (highest priority)
2. User config: ~/.config/deformat/config.yaml
3. Project config: .deformat/config.yaml in current directory

The first file found wins. Settings only shape how results are printed;
every formatting category is always stripped.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ENV_VAR = "DEFORMAT_CONFIG"
OUTPUT_MODES = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml
        _yaml = yaml
    return _yaml


def config_locations() -> list[Path]:
    """Candidate config files in priority order."""
    locations = []
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        locations.append(Path(env_path).expanduser())
    locations.append(Path.home() / ".config" / "deformat" / "config.yaml")
    locations.append(Path.cwd() / ".deformat" / "config.yaml")
    return locations


@dataclass
class CliConfig:
    """Output settings for the command line."""
    output: str = "text"
    show_categories: bool = True
    log_level: str = "WARNING"
    source: Optional[Path] = None

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "CliConfig":
        """Load settings from ``path``, or from the first existing default location.

        Missing files mean defaults. Unreadable files, invalid YAML and
        invalid values are logged and skipped.
        """
        if path is not None:
            if path.is_file():
                return cls.from_file(path)
            logger.warning("Config file %s not found, using defaults", path)
            return cls()

        for candidate in config_locations():
            if candidate.is_file():
                return cls.from_file(candidate)
        return cls()

    @classmethod
    def from_file(cls, path: Path) -> "CliConfig":
        yaml = _get_yaml()
        config = cls(source=path)

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            return config

        if not data:
            return config
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: expected a mapping", path)
            return config

        config.apply(data)
        return config

    def apply(self, data: dict) -> None:
        """Overlay recognized keys from ``data``; unknown keys are ignored."""
        output = data.get("output")
        if output is not None:
            if str(output).lower() in OUTPUT_MODES:
                self.output = str(output).lower()
            else:
                logger.warning("Invalid output mode %r, keeping %r", output, self.output)

        show = data.get("show_categories")
        if show is not None:
            if isinstance(show, bool):
                self.show_categories = show
            else:
                logger.warning("show_categories must be true or false, got %r", show)

        level = data.get("log_level")
        if level is not None:
            if str(level).upper() in LOG_LEVELS:
                self.log_level = str(level).upper()
            else:
                logger.warning("Invalid log level %r, keeping %r", level, self.log_level)
