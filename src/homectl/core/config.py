"""
Configuration management for CLI
Handles loading settings from homectl.yml in the project root
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "homectl.yml"
DEFAULT_COMPOSE_COMMAND = "docker-compose"
DEFAULT_NETWORK = "shared-network"
DEFAULT_OWNER = (1000, 1000)

KNOWN_KEYS = {"compose_command", "network", "owner"}


@dataclass
class Settings:
    """Runtime settings for one invocation"""

    root: Path = field(default_factory=Path.cwd)
    compose_command: str = DEFAULT_COMPOSE_COMMAND
    network: str = DEFAULT_NETWORK
    owner: Tuple[int, int] = DEFAULT_OWNER


def parse_owner(value: Any) -> Tuple[int, int]:
    """Parse an 'uid:gid' owner spec"""
    text = str(value)
    uid, sep, gid = text.partition(":")
    if not sep:
        raise ConfigError(f"Invalid owner '{text}' (use 'uid:gid')")
    try:
        return int(uid), int(gid)
    except ValueError:
        raise ConfigError(f"Invalid owner '{text}' (use 'uid:gid')")


def read_config_file(config_file: Path) -> Dict[str, Any]:
    """Read the settings mapping from a YAML file"""
    try:
        with config_file.open("r") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {config_file.name}: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping")

    unknown = set(config) - KNOWN_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown keys in {config_file.name}: {', '.join(sorted(unknown))}"
        )
    return config


def load_settings(root: Optional[Path] = None, config_file: Optional[Path] = None) -> Settings:
    """Load settings, falling back to defaults when no file is present"""
    root = Path(root) if root is not None else Path.cwd()
    explicit = config_file is not None
    config_file = Path(config_file) if explicit else root / CONFIG_FILENAME

    settings = Settings(root=root)

    if not config_file.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_file}")
        logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, root)
        return settings

    config = read_config_file(config_file)
    logger.debug("Loaded settings from %s: %s", config_file, config)

    if "compose_command" in config:
        command = str(config["compose_command"]).strip()
        if not command:
            raise ConfigError("compose_command must not be empty")
        settings.compose_command = command
    if "network" in config:
        settings.network = str(config["network"])
    if "owner" in config:
        settings.owner = parse_owner(config["owner"])

    return settings
