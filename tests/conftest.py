"""Shared fixtures: synthetic `wg show all dump` output and config dirs"""

import pytest

WG0_PRIVATE = "yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk="
WG0_PUBLIC = "HIgo9xNzJMWLKASShiTqIybxZ0U3wGLiUeJ1PKf8ykw="
WG1_PRIVATE = "cGBAQlPEx2y5qj5lD5aVnA5Jnv6Xs5dtsG1kQmQ1kVc="
WG1_PUBLIC = "JsbdnVw3yZ1xEOi1cJdRkyzDJGhe9OhcAk7bjNP7bz0="

PEER_A = "xTIBA5rboUvnH4htodjb6e697QjLERt1NAB4mZqp8Dg="
PEER_B = "TrMvSoP4jYQlY6RIzBgbssQqY3vxI2Pi+y71lOWWXX0="
PEER_C = "gN65BkIKy1eCE9pP1wdc8ROUtkHLF2PfAqYdyYBz6EA="
PEER_D = "k5jRq3F5vR3Oq9Gm0BZ0R0ySc6TCRHcQ4AiwNBKgwGc="

PSK = "Vt6Dm0HJtIRbmP5TsBzgnrDXZQ5AI7XGNkXJJTvdMvU="

NOW = 1700000000


def dump(*lines):
    """Join rows of fields the way `wg show all dump` prints them"""
    return "".join("\t".join(str(f) for f in line) + "\n" for line in lines)


def peer_line(interface, public_key, handshake=NOW - 65, keepalive="off", psk="(none)",
              endpoint="203.0.113.5:51820", allowed_ips="10.0.0.2/32", rx=1024, tx=2048):
    return (interface, public_key, psk, endpoint, allowed_ips, handshake, rx, tx, keepalive)


@pytest.fixture
def two_interface_dump():
    """wg0 with three peers followed by wg1 with none"""
    return dump(
        ("wg0", WG0_PRIVATE, WG0_PUBLIC, 51820, "off"),
        peer_line("wg0", PEER_A, psk=PSK, keepalive="on"),
        peer_line("wg0", PEER_B, endpoint="(none)", handshake=0, rx=0, tx=0),
        peer_line("wg0", PEER_C, endpoint="[2001:db8::1]:51820", allowed_ips="10.0.0.4/32,fd00::4/128"),
        ("wg1", WG1_PRIVATE, WG1_PUBLIC, 51821, "0xca6c"),
    )


@pytest.fixture
def config_dir(tmp_path):
    """Config directory containing wg0.conf and wg1.conf"""
    directory = tmp_path / "wireguard"
    directory.mkdir()
    (directory / "wg0.conf").write_text("[Interface]\n")
    (directory / "wg1.conf").write_text("[Interface]\n")
    return directory
