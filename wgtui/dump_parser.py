"""Parser for the tab-delimited output of `wg show all dump`"""

import logging
import re
from typing import Dict, List, Optional

from .errors import DumpParseError
from .models import InterfaceRecord, PeerRecord

logger = logging.getLogger(__name__)

INTERFACE_FIELDS = 5
PEER_FIELDS = 9

U16_MAX = 2 ** 16 - 1
U64_MAX = 2 ** 64 - 1

_DIGITS = re.compile(r"[0-9]+")


def _parse_uint(value: str, maximum: int, field_name: str, line_number: int, line: str) -> int:
    """Parse an unsigned decimal that must fit under maximum"""
    if not _DIGITS.fullmatch(value):
        raise DumpParseError(line_number, line, f"{field_name} is not an unsigned integer")

    number = int(value)
    if number > maximum:
        raise DumpParseError(line_number, line, f"{field_name} out of range")
    return number


def _parse_switch(value: str, field_name: str, line_number: int, line: str) -> bool:
    if value == "on":
        return True
    if value == "off":
        return False
    raise DumpParseError(line_number, line, f"{field_name} must be 'on' or 'off', got {value!r}")


def _parse_interface(fields: List[str], line_number: int, line: str) -> InterfaceRecord:
    name, private_key, public_key, listen_port, fwmark = fields

    return InterfaceRecord(
        name=name,
        enabled=True,
        private_key=private_key,
        public_key=public_key,
        listen_port=_parse_uint(listen_port, U16_MAX, "listen_port", line_number, line),
        fwmark=None if fwmark == "off" else fwmark,
        peers=[],
    )


def _parse_peer(fields: List[str], line_number: int, line: str) -> PeerRecord:
    if len(fields) < PEER_FIELDS:
        raise DumpParseError(
            line_number, line, f"expected at least {PEER_FIELDS} fields for a peer, got {len(fields)}"
        )

    # fields past the ninth are ignored
    (_, public_key, preshared_key, endpoint, allowed_ips,
     latest_handshake, transfer_rx, transfer_tx, keepalive) = fields[:PEER_FIELDS]

    return PeerRecord(
        public_key=public_key,
        preshared_key=None if preshared_key == "(none)" else preshared_key,
        endpoint=endpoint,
        allowed_ips=allowed_ips,
        latest_handshake=_parse_uint(latest_handshake, U64_MAX, "latest_handshake", line_number, line),
        transfer_rx=_parse_uint(transfer_rx, U64_MAX, "transfer_rx", line_number, line),
        transfer_tx=_parse_uint(transfer_tx, U64_MAX, "transfer_tx", line_number, line),
        persistent_keepalive=_parse_switch(keepalive, "persistent_keepalive", line_number, line),
    )


def parse_dump(text: str) -> Dict[str, InterfaceRecord]:
    """
    Parse `wg show all dump` output into interface records.

    A line with exactly five fields starts a new interface. The lines
    directly after it that carry the same interface name are its peers;
    the run stops at the first line with a different name. Lines outside
    such a run are dropped without being parsed.

    Args:
        text: Raw stdout of the dump command. The last element after
            splitting on newlines is the empty remainder of the trailing
            separator and is discarded.

    Returns:
        Dict of interface name -> InterfaceRecord, in header order

    Raises:
        DumpParseError: On any malformed numeric or on/off field. Nothing
            is returned for a dump with a bad line.
    """
    lines = text.split("\n")
    lines.pop()

    interfaces: Dict[str, InterfaceRecord] = {}
    current: Optional[InterfaceRecord] = None

    for line_number, line in enumerate(lines, 1):
        fields = line.split("\t")

        if len(fields) == INTERFACE_FIELDS:
            current = _parse_interface(fields, line_number, line)
            interfaces[current.name] = current
            continue

        if current is not None and fields[0] == current.name:
            current.peers.append(_parse_peer(fields, line_number, line))
            continue

        # Outside any interface's contiguous run
        logger.debug(f"Dropping unattributed dump line {line_number}: {fields[0]!r}")
        current = None

    logger.debug(
        f"Parsed {len(interfaces)} interfaces, "
        f"{sum(len(i.peers) for i in interfaces.values())} peers"
    )
    return interfaces
