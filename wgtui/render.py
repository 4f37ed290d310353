"""Plain-text rendering of interfaces and peers"""

import time
from typing import Optional

from .duration import format_duration
from .models import InterfaceRecord, PeerRecord

DOWN_MESSAGE = "Interface is down."
HIDDEN = "(hidden)"


def render_peer(peer: PeerRecord, now: int) -> str:
    since_handshake = format_duration(now - peer.latest_handshake)
    keepalive = "true" if peer.persistent_keepalive else "false"

    return (
        f"Public Key: {peer.public_key}\n"
        f"Preshared Key: {peer.preshared_key or '(none)'}\n"
        f"Endpoint: {peer.endpoint}\n"
        f"Allowed Ips: {peer.allowed_ips}\n"
        f"Latest handshake: {since_handshake}\n"
        f"Transfer: {peer.transfer_rx} B received, {peer.transfer_tx} B sent\n"
        f"Persistent Keepalive: {keepalive}\n"
    )


def render_interface(interface: InterfaceRecord, show_private: bool = False,
                     now: Optional[int] = None) -> str:
    """
    Render an interface and its peers as text.

    Down interfaces render as DOWN_MESSAGE alone, whatever else the record
    holds. The private key is replaced by "(hidden)" unless show_private.

    Args:
        interface: Record to render
        show_private: Reveal the private key
        now: Epoch seconds used for handshake ages (default: current time)
    """
    if not interface.enabled:
        return DOWN_MESSAGE

    if now is None:
        now = int(time.time())

    private_key = interface.private_key if show_private else HIDDEN

    text = (
        f"Private Key: {private_key}\n"
        f"Public Key: {interface.public_key}\n"
        f"Listen Port: {interface.listen_port}\n"
        f"fwmark: {interface.fwmark or 'off'}\n"
        "----- Peers -----\n"
    )

    for peer in interface.peers:
        text += render_peer(peer, now)
        # blank line between peers
        text += "\n"

    return text
