"""Fold configured-but-down interfaces into the parsed dump"""

import logging
from pathlib import Path
from typing import Dict, List

from .errors import ConfigDirectoryError
from .models import InterfaceRecord

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("/etc/wireguard")
DEFAULT_SUFFIX = ".conf"


def discover_configured(config_dir: Path, suffix: str = DEFAULT_SUFFIX) -> List[str]:
    """
    List interface names that have a config file in config_dir.

    Only file names are looked at; contents are never read.

    Raises:
        ConfigDirectoryError: If the directory cannot be listed
    """
    config_dir = Path(config_dir)
    try:
        entries = [entry.name for entry in config_dir.iterdir()]
    except OSError as e:
        raise ConfigDirectoryError(config_dir, e) from e

    names = [
        entry[:-len(suffix)]
        for entry in entries
        if entry.endswith(suffix) and len(entry) > len(suffix)
    ]
    return sorted(names)


def reconcile(interfaces: Dict[str, InterfaceRecord], config_dir: Path,
              suffix: str = DEFAULT_SUFFIX) -> Dict[str, InterfaceRecord]:
    """
    Add a down placeholder for every configured interface not in the dump.

    Interfaces already present (up) are never replaced.

    Returns:
        New dict with the parsed interfaces plus the down placeholders
    """
    merged = dict(interfaces)

    for name in discover_configured(config_dir, suffix):
        if name not in merged:
            merged[name] = InterfaceRecord.down(name)
            logger.debug(f"Interface {name} is configured but down")

    return merged
