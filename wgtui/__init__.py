"""wg-tui - Terminal interface for WireGuard interfaces"""

__version__ = "0.1.0"

from .duration import format_duration
from .dump_parser import parse_dump
from .errors import (
    ConfigDirectoryError,
    DumpCommandError,
    DumpParseError,
    StaleStateError,
    UnknownInterfaceError,
    WgTuiError,
)
from .models import ActivationResult, InterfaceRecord, PeerRecord
from .reconciler import discover_configured, reconcile
from .registry import InterfaceRegistry
from .render import render_interface

__all__ = [
    'InterfaceRegistry',
    'InterfaceRecord',
    'PeerRecord',
    'ActivationResult',
    'parse_dump',
    'reconcile',
    'discover_configured',
    'render_interface',
    'format_duration',
    'WgTuiError',
    'DumpCommandError',
    'DumpParseError',
    'ConfigDirectoryError',
    'StaleStateError',
    'UnknownInterfaceError',
]
