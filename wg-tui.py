#!/usr/bin/env python3
"""
wg-tui - WireGuard interface viewer
A terminal UI for watching and toggling local WireGuard interfaces
"""

import sys

from wgtui.app import main


if __name__ == '__main__':
    sys.exit(main())
