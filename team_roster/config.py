"""Configuration loading for Team Roster."""

import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigLoadError
from .models import Configuration
from .validators import validate_config_data

TOML_SUFFIXES = {'.toml'}


def read_config_data(config_path: Path) -> Any:
    """Read and parse a configuration file without validating it.

    Files ending in ``.toml`` are parsed as TOML, anything else as YAML.

    Args:
        config_path: Path to the configuration file

    Returns:
        The parsed document

    Raises:
        ConfigLoadError: If the file is missing, unreadable, empty or not
            syntactically valid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigLoadError(config_path, "file not found")
    if not config_path.is_file():
        raise ConfigLoadError(config_path, "not a regular file")

    try:
        with open(config_path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise ConfigLoadError(config_path, e) from e

    try:
        text = raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ConfigLoadError(config_path, e) from e

    if config_path.suffix.lower() in TOML_SUFFIXES:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(config_path, e) from e
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(config_path, e) from e

    if data is None or data == {}:
        raise ConfigLoadError(config_path, "file is empty")

    return data


def parse_config(data: Mapping[str, Any]) -> Configuration:
    """Build a Configuration from an already parsed document.

    Raises:
        SchemaValidationError: If the document does not follow the schema
    """
    return validate_config_data(data)


def load_config(config_path: Path) -> Configuration:
    """Load a configuration from a YAML or TOML file.

    Args:
        config_path: Path to the configuration file

    Returns:
        The schema-valid Configuration

    Raises:
        ConfigLoadError: If the file cannot be read or parsed
        SchemaValidationError: If the configuration structure is invalid
    """
    return parse_config(read_config_data(config_path))
