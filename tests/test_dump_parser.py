"""
Tests for the `wg show all dump` parser

Run with: python -m pytest tests/test_dump_parser.py -v
"""

import pytest

from conftest import (
    NOW, PEER_A, PEER_B, PEER_C, PEER_D, PSK,
    WG0_PRIVATE, WG0_PUBLIC, WG1_PUBLIC,
    dump, peer_line,
)
from wgtui.dump_parser import parse_dump
from wgtui.errors import DumpParseError


# ============================================================================
# STRUCTURE
# ============================================================================

class TestStructure:
    """Interfaces and the attribution of peers to them."""

    def test_two_interfaces(self, two_interface_dump):
        interfaces = parse_dump(two_interface_dump)

        assert list(interfaces) == ["wg0", "wg1"]
        assert [p.public_key for p in interfaces["wg0"].peers] == [PEER_A, PEER_B, PEER_C]
        assert interfaces["wg1"].peers == []

    def test_interface_fields(self, two_interface_dump):
        interfaces = parse_dump(two_interface_dump)
        wg0 = interfaces["wg0"]
        wg1 = interfaces["wg1"]

        assert wg0.enabled is True
        assert wg0.private_key == WG0_PRIVATE
        assert wg0.public_key == WG0_PUBLIC
        assert wg0.listen_port == 51820
        assert wg0.fwmark is None

        assert wg1.public_key == WG1_PUBLIC
        assert wg1.listen_port == 51821
        assert wg1.fwmark == "0xca6c"

    def test_peer_fields(self, two_interface_dump):
        peers = parse_dump(two_interface_dump)["wg0"].peers

        first = peers[0]
        assert first.preshared_key == PSK
        assert first.endpoint == "203.0.113.5:51820"
        assert first.allowed_ips == "10.0.0.2/32"
        assert first.latest_handshake == NOW - 65
        assert first.transfer_rx == 1024
        assert first.transfer_tx == 2048
        assert first.persistent_keepalive is True

        second = peers[1]
        assert second.preshared_key is None
        assert second.latest_handshake == 0
        assert second.persistent_keepalive is False

        assert peers[2].allowed_ips == "10.0.0.4/32,fd00::4/128"

    def test_peers_do_not_leak_across_interfaces(self):
        text = dump(
            ("wg0", "priv0", "pub0", 51820, "off"),
            peer_line("wg0", PEER_A),
            ("wg1", "priv1", "pub1", 51821, "off"),
            peer_line("wg1", PEER_B),
        )
        interfaces = parse_dump(text)

        assert [p.public_key for p in interfaces["wg0"].peers] == [PEER_A]
        assert [p.public_key for p in interfaces["wg1"].peers] == [PEER_B]

    def test_same_peer_key_under_two_interfaces(self):
        """Each interface owns its own record, even for a shared key."""
        text = dump(
            ("wg0", "priv0", "pub0", 51820, "off"),
            peer_line("wg0", PEER_A, rx=1),
            ("wg1", "priv1", "pub1", 51821, "off"),
            peer_line("wg1", PEER_A, rx=2),
        )
        interfaces = parse_dump(text)

        assert interfaces["wg0"].peers[0] is not interfaces["wg1"].peers[0]
        assert interfaces["wg0"].peers[0].transfer_rx == 1
        assert interfaces["wg1"].peers[0].transfer_rx == 2

    def test_non_contiguous_peers_are_dropped(self):
        """A wg0 peer after another interface's line is not attributed."""
        text = dump(
            ("wg0", "priv0", "pub0", 51820, "off"),
            peer_line("wg0", PEER_A),
            peer_line("wg9", PEER_B),
            peer_line("wg0", PEER_C),
        )
        interfaces = parse_dump(text)

        assert list(interfaces) == ["wg0"]
        assert [p.public_key for p in interfaces["wg0"].peers] == [PEER_A]

    def test_orphan_lines_are_not_parsed(self):
        """Bad fields on dropped lines do not fail the parse."""
        text = dump(
            peer_line("wg5", PEER_D, rx="garbage"),
            ("wg0", "priv0", "pub0", 51820, "off"),
        )
        interfaces = parse_dump(text)

        assert list(interfaces) == ["wg0"]

    def test_extra_peer_fields_are_ignored(self):
        text = dump(
            ("wg0", "priv0", "pub0", 51820, "off"),
            peer_line("wg0", PEER_A, keepalive="on") + ("extra", "fields"),
        )
        peer = parse_dump(text)["wg0"].peers[0]

        assert peer.public_key == PEER_A
        assert peer.transfer_tx == 2048
        assert peer.persistent_keepalive is True

    def test_header_order_is_preserved(self):
        text = dump(
            ("wg2", "p", "k", 1, "off"),
            ("wg0", "p", "k", 2, "off"),
            ("wg1", "p", "k", 3, "off"),
        )
        assert list(parse_dump(text)) == ["wg2", "wg0", "wg1"]

    def test_empty_output(self):
        assert parse_dump("") == {}
        assert parse_dump("\n") == {}

    def test_only_final_line_is_discarded(self):
        """The last element is dropped whether or not it is empty."""
        text = "wg0\tpriv\tpub\t51820\toff"
        assert parse_dump(text) == {}


# ============================================================================
# MALFORMED INPUT
# ============================================================================

class TestMalformed:
    """Every malformed field fails the whole parse."""

    def test_non_numeric_listen_port(self):
        text = dump(("wg0", "priv", "pub", "port", "off"))

        with pytest.raises(DumpParseError, match="listen_port") as excinfo:
            parse_dump(text)

        assert excinfo.value.line_number == 1

    def test_listen_port_out_of_range(self):
        text = dump(("wg0", "priv", "pub", 65536, "off"))

        with pytest.raises(DumpParseError, match="out of range"):
            parse_dump(text)

    def test_negative_listen_port(self):
        text = dump(("wg0", "priv", "pub", -1, "off"))

        with pytest.raises(DumpParseError):
            parse_dump(text)

    @pytest.mark.parametrize("field", ["handshake", "rx", "tx"])
    def test_non_numeric_peer_counter(self, field):
        text = dump(
            ("wg0", "priv", "pub", 51820, "off"),
            peer_line("wg0", PEER_A, **{field: "12a"}),
        )

        with pytest.raises(DumpParseError) as excinfo:
            parse_dump(text)

        assert excinfo.value.line_number == 2

    def test_counter_beyond_u64(self):
        text = dump(
            ("wg0", "priv", "pub", 51820, "off"),
            peer_line("wg0", PEER_A, rx=2 ** 64),
        )

        with pytest.raises(DumpParseError, match="transfer_rx"):
            parse_dump(text)

    def test_largest_u64_counter(self):
        text = dump(
            ("wg0", "priv", "pub", 51820, "off"),
            peer_line("wg0", PEER_A, rx=2 ** 64 - 1),
        )
        assert parse_dump(text)["wg0"].peers[0].transfer_rx == 2 ** 64 - 1

    def test_unknown_keepalive_value(self):
        text = dump(
            ("wg0", "priv", "pub", 51820, "off"),
            peer_line("wg0", PEER_A, keepalive="25"),
        )

        with pytest.raises(DumpParseError, match="persistent_keepalive"):
            parse_dump(text)

    def test_short_peer_line(self):
        text = dump(
            ("wg0", "priv", "pub", 51820, "off"),
            ("wg0", PEER_A, "(none)"),
        )

        with pytest.raises(DumpParseError, match="expected at least 9 fields"):
            parse_dump(text)

    def test_error_after_valid_interfaces(self):
        """Good interfaces before the bad line are not returned."""
        text = dump(
            ("wg0", "priv", "pub", 51820, "off"),
            peer_line("wg0", PEER_A),
            ("wg1", "priv", "pub", "x", "off"),
        )

        with pytest.raises(DumpParseError):
            parse_dump(text)
