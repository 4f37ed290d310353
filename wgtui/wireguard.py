"""Invocation of the `wg` and `wg-quick` command line tools"""

import logging
import subprocess
from typing import List, Optional

from .errors import DumpCommandError
from .models import ActivationResult

logger = logging.getLogger(__name__)

DEFAULT_DUMP_COMMAND = ["wg", "show", "all", "dump"]
DEFAULT_ACTIVATE_COMMAND = ["wg-quick"]


def sudo_wrap(command: List[str], use_sudo: bool) -> List[str]:
    if use_sudo:
        return ["sudo"] + command
    return list(command)


def run_status_dump(command: Optional[List[str]] = None, use_sudo: bool = False) -> str:
    """
    Run the status dump command and return its stdout.

    Blocks until the command exits; there is no timeout.

    Raises:
        DumpCommandError: If the command is missing or exits non-zero
    """
    cmd = sudo_wrap(command or DEFAULT_DUMP_COMMAND, use_sudo)
    logger.debug(f"Running {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        logger.error(f"'{cmd[0]}' command not found - is WireGuard installed?")
        raise DumpCommandError(cmd, None, str(e)) from e

    if result.returncode != 0:
        raise DumpCommandError(cmd, result.returncode, result.stderr)

    return result.stdout


class Activator:
    """Brings interfaces up or down with wg-quick"""

    def __init__(self, command: Optional[List[str]] = None, use_sudo: bool = False):
        self.command = list(command or DEFAULT_ACTIVATE_COMMAND)
        self.use_sudo = use_sudo

    def __call__(self, name: str, up: bool) -> ActivationResult:
        """
        Run `wg-quick up|down <name>`.

        The outcome is not verified; refresh afterwards to see the new state.

        Returns:
            ActivationResult with the tool's diagnostic output verbatim
        """
        action = "up" if up else "down"
        cmd = sudo_wrap(self.command + [action, name], self.use_sudo)
        logger.info(f"Running {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", errors="replace")
        except FileNotFoundError as e:
            logger.error(f"'{cmd[0]}' command not found - is WireGuard installed?")
            return ActivationResult(name=name, action=action, returncode=127, output=str(e))

        # wg-quick reports everything, success included, on stderr
        output = result.stderr
        if result.stdout:
            output += result.stdout

        if result.returncode != 0:
            logger.warning(f"wg-quick {action} {name} failed with status {result.returncode}")

        return ActivationResult(
            name=name,
            action=action,
            returncode=result.returncode,
            output=output,
        )
