"""Configuration file loading and logging setup"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from .errors import ConfigError
from .reconciler import DEFAULT_CONFIG_DIR, DEFAULT_SUFFIX
from .wireguard import DEFAULT_ACTIVATE_COMMAND, DEFAULT_DUMP_COMMAND

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.wg-tui/config.yaml")


@dataclass
class AppConfig:
    """Settings for wg-tui (see config.example.yaml)"""
    # wireguard
    config_dir: Path = DEFAULT_CONFIG_DIR
    config_suffix: str = DEFAULT_SUFFIX
    dump_command: List[str] = field(default_factory=lambda: list(DEFAULT_DUMP_COMMAND))
    activate_command: List[str] = field(default_factory=lambda: list(DEFAULT_ACTIVATE_COMMAND))
    use_sudo: bool = False

    # display
    show_private_keys: bool = False

    # logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return section


def _command(value, name: str) -> List[str]:
    if isinstance(value, str):
        return value.split()
    if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
        return value
    raise ConfigError(f"'{name}' must be a command string or a list of strings")


def load_config(config_path: Path) -> AppConfig:
    """
    Load configuration file.

    A missing file is not an error: the defaults are used.

    Raises:
        ConfigError: If the file is not valid YAML or has bad values
    """
    config = AppConfig()
    config_path = Path(config_path).expanduser()

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return config

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    wireguard = _section(data, 'wireguard')
    if 'config_dir' in wireguard:
        config.config_dir = Path(wireguard['config_dir']).expanduser()
    if 'config_suffix' in wireguard:
        config.config_suffix = str(wireguard['config_suffix'])
    if 'dump_command' in wireguard:
        config.dump_command = _command(wireguard['dump_command'], 'dump_command')
    if 'activate_command' in wireguard:
        config.activate_command = _command(wireguard['activate_command'], 'activate_command')
    if 'use_sudo' in wireguard:
        config.use_sudo = bool(wireguard['use_sudo'])

    display = _section(data, 'display')
    if 'show_private_keys' in display:
        config.show_private_keys = bool(display['show_private_keys'])

    log = _section(data, 'logging')
    if 'level' in log:
        level = str(log['level']).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level: {log['level']}")
        config.log_level = level
    if log.get('file'):
        config.log_file = Path(log['file']).expanduser()

    logger.debug(f"Loaded config from {config_path}")
    return config


def setup_logging(config: AppConfig):
    """Setup logging"""
    log_file = config.log_file

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file) if log_file else logging.StreamHandler(),
        ]
    )
