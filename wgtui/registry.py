"""Shared snapshot of all known WireGuard interfaces"""

import logging
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .dump_parser import parse_dump
from .errors import StaleStateError, UnknownInterfaceError
from .locking import RWLock
from .models import ActivationResult, InterfaceRecord
from .reconciler import DEFAULT_CONFIG_DIR, DEFAULT_SUFFIX, reconcile
from .render import render_interface
from .wireguard import Activator, run_status_dump

logger = logging.getLogger(__name__)


class InterfaceRegistry:
    """Interface state shared by the front ends.

    Holds the name-sorted interface map, the global "show private keys"
    flag and the currently selected interface. All access goes through an
    RWLock: refresh, activate, select and the toggle are writers,
    everything else reads.

    Collaborators are injected so tests can run without `wg`:

        dump_source: callable returning raw `wg show all dump` text
        activator:   callable (name, up) -> ActivationResult
        clock:       callable returning epoch seconds, used for handshake ages
    """

    def __init__(self,
                 dump_source: Optional[Callable[[], str]] = None,
                 config_dir: Path = DEFAULT_CONFIG_DIR,
                 suffix: str = DEFAULT_SUFFIX,
                 activator: Optional[Callable[[str, bool], ActivationResult]] = None,
                 clock: Callable[[], float] = time.time,
                 show_private: bool = False):
        self.dump_source = dump_source or run_status_dump
        self.config_dir = Path(config_dir)
        self.suffix = suffix
        self.activator = activator or Activator()
        self.clock = clock

        self._lock = RWLock()
        self._interfaces: Dict[str, InterfaceRecord] = {}
        self._current_interface = ""
        self._show_private = show_private
        self.last_error: Optional[BaseException] = None

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def refresh(self):
        """
        Rebuild the interface map from a fresh dump and the config directory.

        The stored map is replaced wholesale on success. On failure it is
        left as it was, the error is kept in last_error and re-raised.

        Raises:
            DumpCommandError, DumpParseError, ConfigDirectoryError, or
            whatever the dump source itself raises
        """
        with self._lock.write():
            logger.debug("Refreshing interface state")
            try:
                parsed = parse_dump(self.dump_source())
                merged = reconcile(parsed, self.config_dir, self.suffix)
            except BaseException as e:
                # any failure, expected or not, leaves the stored view stale
                logger.error(f"Refresh failed: {e!r}")
                self.last_error = e
                raise

            self._interfaces = {name: merged[name] for name in sorted(merged)}
            self.last_error = None

            if self._current_interface not in self._interfaces:
                self._current_interface = ""

            up = sum(1 for i in self._interfaces.values() if i.enabled)
            logger.info(f"Refreshed: {len(self._interfaces)} interfaces ({up} up)")

    def toggle_secret_visibility(self) -> bool:
        """Flip the global private key flag and return its new value"""
        with self._lock.write():
            self._show_private = not self._show_private
            return self._show_private

    def select(self, name: str):
        """Make name the current interface"""
        with self._lock.write():
            if name not in self._interfaces:
                raise UnknownInterfaceError(name)
            self._current_interface = name

    def activate(self, name: str, desired_state: Optional[bool] = None) -> ActivationResult:
        """
        Ask wg-quick to bring an interface up (True) or down (False).

        With desired_state None the interface is toggled: an up interface
        is brought down and vice versa. The stored map is not touched;
        call refresh() to observe the result.
        """
        with self._lock.write():
            interface = self._interfaces.get(name)
            if interface is None:
                raise UnknownInterfaceError(name)

            up = (not interface.enabled) if desired_state is None else desired_state
            return self.activator(name, up)

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    @property
    def show_private(self) -> bool:
        with self._lock.read():
            return self._show_private

    @property
    def current_interface(self) -> str:
        with self._lock.read():
            return self._current_interface

    @property
    def interfaces(self) -> Dict[str, InterfaceRecord]:
        """Copy of the stored map, in name order"""
        with self._lock.read():
            return dict(self._interfaces)

    def names(self) -> List[str]:
        with self._lock.read():
            return list(self._interfaces)

    def get(self, name: str) -> InterfaceRecord:
        with self._lock.read():
            try:
                return self._interfaces[name]
            except KeyError:
                raise UnknownInterfaceError(name) from None

    def render(self, name: str) -> str:
        """
        Render the named interface with the current redaction setting.

        Raises:
            StaleStateError: If the last refresh failed
            UnknownInterfaceError: If name is not in the registry
        """
        with self._lock.read():
            if self.last_error is not None:
                raise StaleStateError(f"Interface state is stale: {self.last_error}")

            interface = self._interfaces.get(name)
            if interface is None:
                raise UnknownInterfaceError(name)

            return render_interface(interface, self._show_private, int(self.clock()))
