"""tagprint configuration system.

Configuration is YAML-based and optional: every setting has a default, and
templates can override output settings per instance.
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. Explicit path passed to load_config()
2. ./.tagprint/config.yaml
3. ./tagprint.yaml
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# =============================================================================
# Configuration Dataclasses
# =============================================================================

# Named line separators accepted in config files
NEWLINES = {
    "native": os.linesep,
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
}


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        newline: Line separator name (native, lf, crlf, cr)
        encoding: Encoding for byte streams and files (None = platform default)
    """

    newline: str = "native"
    encoding: str | None = None

    def __post_init__(self) -> None:
        """Validate output configuration."""
        if self.newline not in NEWLINES:
            raise ValueError(f"Invalid newline: {self.newline}. Valid: {set(NEWLINES)}")

    @property
    def separator(self) -> str:
        """Return the literal line separator string."""
        return NEWLINES[self.newline]


@dataclass
class LoggingConfig:
    """Logging configuration.

    Attributes:
        mode: Output mode (human, json)
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    mode: str = "human"
    level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate logging configuration."""
        valid_modes = {"human", "json"}
        if self.mode not in valid_modes:
            raise ValueError(f"Invalid log mode: {self.mode}. Valid: {valid_modes}")

        self.level = self.level.upper()
        if not isinstance(logging.getLevelName(self.level), int):
            raise ValueError(f"Invalid log level: {self.level}")

    @property
    def level_number(self) -> int:
        """Return the numeric logging level."""
        return logging.getLevelName(self.level)


@dataclass
class TagprintConfig:
    """Top-level tagprint configuration.

    Attributes:
        output: Line separator and encoding used by templates
        logging: Log output settings
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax for environment variable substitution.
    Example: ${TAGPRINT_ENCODING} -> value of TAGPRINT_ENCODING

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return pattern.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.tagprint/config.yaml
    2. ./tagprint.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".tagprint" / "config.yaml",
        start_path / "tagprint.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> TagprintConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        TagprintConfig instance
    """
    data = substitute_env_vars(data)

    config = TagprintConfig()

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            newline=output_data.get("newline", config.output.newline),
            encoding=output_data.get("encoding", config.output.encoding),
        )

    if "logging" in data:
        logging_data = data["logging"] or {}
        config.logging = LoggingConfig(
            mode=logging_data.get("mode", config.logging.mode),
            level=str(logging_data.get("level", config.logging.level)),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> TagprintConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        TagprintConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = TagprintConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# tagprint Configuration

# Output settings used by every TextTemplate built from this config
output:
  newline: "native"   # native (platform separator), lf, crlf, cr
  encoding: null      # null = platform default; applies to byte streams and files

# Library log output (see tagprint.utils.logging.configure_logging)
logging:
  mode: "human"       # human, json
  level: "WARNING"    # DEBUG, INFO, WARNING, ERROR, CRITICAL
'''
