"""Exception types raised by wg-tui"""

from typing import List, Optional


class WgTuiError(Exception):
    """Base class for all wg-tui errors"""


class DumpCommandError(WgTuiError):
    """The status dump command could not be run or exited non-zero"""

    def __init__(self, command: List[str], returncode: Optional[int], stderr: str):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

        if returncode is None:
            message = f"Could not run {' '.join(command)}: {stderr}"
        else:
            message = f"{' '.join(command)} exited with status {returncode}: {stderr.strip()}"
        super().__init__(message)


class DumpParseError(WgTuiError):
    """A line of the status dump could not be parsed"""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line!r}")


class ConfigDirectoryError(WgTuiError):
    """The WireGuard configuration directory could not be listed"""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read configuration directory {path}: {cause}")


class ConfigError(WgTuiError):
    """The wg-tui config file is malformed"""


class StaleStateError(WgTuiError):
    """The last refresh failed, so the stored view may not match reality"""


class UnknownInterfaceError(WgTuiError, LookupError):
    """An interface name was requested that the registry does not know"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown interface: {name!r}")
