"""Configuration file loader for depgrammar.

Handles discovery, loading, parsing, and validation of configuration files
for the depgrammar CLI. Supports two formats:

- ``depgrammar.toml``: settings under ``[depgrammar]`` table
- ``pyproject.toml``: settings under ``[tool.depgrammar]`` table

Discovery order:

1. Explicit path from ``--config`` or ``DEPGRAMMAR_CONFIG``
2. ``depgrammar.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.depgrammar]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``depgrammar.toml``)::

    [depgrammar]
    output_format = "json"
    fail_fast = true
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from depgrammar.exceptions import ConfigError
from depgrammar.utils.logger import get_logger
from depgrammar.constants import (
    DEFAULT_FAIL_FAST,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)

logger = get_logger("config")

_SECTION_NAME = "depgrammar"
_CONFIG_FILE_NAME = "depgrammar.toml"


@dataclass
class DepGrammarConfig:
    """Parsed and validated depgrammar configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        output_format: Default output format of the inspection commands
            (``table``, ``simple`` or ``json``).
        fail_fast: Stop at the first invalid input instead of reporting
            every input.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    output_format: str = DEFAULT_OUTPUT_FORMAT
    fail_fast: bool = DEFAULT_FAIL_FAST

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "output_format": self.output_format,
            "fail_fast": self.fail_fast,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    own_toml = cwd / _CONFIG_FILE_NAME
    if own_toml.is_file():
        logger.debug("Found %s: %s", _CONFIG_FILE_NAME, own_toml)
        return own_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_section(pyproject_toml):
        logger.debug("Found [tool.%s] in pyproject.toml: %s", _SECTION_NAME, pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.depgrammar]`` section.

    Parse errors are treated as "no section" so that a broken
    pyproject.toml falls back to defaults.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    return _SECTION_NAME in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> DepGrammarConfig:
    """Load and validate depgrammar configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`DepGrammarConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return DepGrammarConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get(_SECTION_NAME, {})
    else:
        section = raw.get(_SECTION_NAME, {})

    if not section:
        logger.debug("Config file found but no %s section, using defaults", _SECTION_NAME)
        return DepGrammarConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> DepGrammarConfig:
    """Parse and validate the ``[depgrammar]`` table.

    Raises:
        ConfigError: Unknown keys or incorrect types/values.
    """
    config = DepGrammarConfig()

    known_top = {"output_format", "fail_fast"}

    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "output_format" in section:
        val = section["output_format"]
        if not isinstance(val, str):
            raise ConfigError(
                f"output_format must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="output_format",
            )
        if val.lower() not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {val!r}",
                config_path=config_path,
                option="output_format",
            )
        config.output_format = val.lower()

    if "fail_fast" in section:
        val = section["fail_fast"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"fail_fast must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="fail_fast",
            )
        config.fail_fast = val

    return config
