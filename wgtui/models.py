"""Data model for WireGuard interfaces and peers as reported by `wg show all dump`"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PeerRecord:
    """One peer configured under an interface"""
    public_key: str
    preshared_key: Optional[str]  # None when the dump reports "(none)"
    endpoint: str  # e.g., "203.0.113.5:51820"
    allowed_ips: str  # e.g., "10.0.0.2/32,fd00::2/128", kept opaque
    latest_handshake: int  # epoch seconds, 0 = never
    transfer_rx: int  # bytes
    transfer_tx: int  # bytes
    persistent_keepalive: bool


@dataclass
class InterfaceRecord:
    """One WireGuard interface.

    A record with enabled=False carries only its name; everything else
    keeps the defaults below.
    """
    name: str
    enabled: bool = False
    private_key: str = ""
    public_key: str = ""
    listen_port: int = 0
    fwmark: Optional[str] = None  # None when the dump reports "off"
    peers: List[PeerRecord] = field(default_factory=list)

    @classmethod
    def down(cls, name: str) -> "InterfaceRecord":
        """Placeholder for an interface that is configured but not up"""
        return cls(name=name)


@dataclass
class ActivationResult:
    """Outcome of a wg-quick up/down invocation"""
    name: str
    action: str  # "up" or "down"
    returncode: int
    output: str  # diagnostic text, verbatim

    @property
    def success(self) -> bool:
        return self.returncode == 0
