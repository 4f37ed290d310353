"""
wg-tui - terminal interface for local WireGuard interfaces

Lists the interfaces reported by `wg show all dump` together with the ones
configured in /etc/wireguard but currently down, shows their peers, and
brings them up or down with wg-quick.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from . import __version__
from .config import DEFAULT_CONFIG_PATH, AppConfig, load_config, setup_logging
from .errors import WgTuiError
from .registry import InterfaceRegistry
from .tui import WgTui
from .wireguard import Activator, run_status_dump

logger = logging.getLogger(__name__)

console = Console()


def build_registry(config: AppConfig) -> InterfaceRegistry:
    """Wire the registry to the real wg / wg-quick commands"""
    return InterfaceRegistry(
        dump_source=lambda: run_status_dump(config.dump_command, config.use_sudo),
        config_dir=config.config_dir,
        suffix=config.config_suffix,
        activator=Activator(config.activate_command, config.use_sudo),
        show_private=config.show_private_keys,
    )


def cmd_tui(args, registry: InterfaceRegistry) -> int:
    """Launch interactive TUI"""
    WgTui(registry, console).run()
    return 0


def cmd_status(args, registry: InterfaceRegistry) -> int:
    """Show one line per interface (non-interactive)"""
    registry.refresh()
    interfaces = registry.interfaces

    if not interfaces:
        print("No WireGuard interfaces found")
        return 0

    print(f"{'Name':<16} {'State':<6} {'Port':>6} {'Peers':>6}")
    print("-" * 37)

    for interface in interfaces.values():
        if interface.enabled:
            print(f"{interface.name:<16} {'up':<6} {interface.listen_port:>6} {len(interface.peers):>6}")
        else:
            print(f"{interface.name:<16} {'down':<6} {'-':>6} {'-':>6}")

    return 0


def cmd_show(args, registry: InterfaceRegistry) -> int:
    """Print one interface with its peers"""
    registry.refresh()
    print(registry.render(args.name))
    return 0


def cmd_activate(args, registry: InterfaceRegistry) -> int:
    """Bring an interface up or down"""
    registry.refresh()
    result = registry.activate(args.name, args.command == 'up')

    print(result.output, end="" if result.output.endswith("\n") else "\n")
    return 0 if result.success else 1


COMMANDS = {
    'tui': cmd_tui,
    'status': cmd_status,
    'show': cmd_show,
    'up': cmd_activate,
    'down': cmd_activate,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wg-tui',
        description='wg-tui - terminal interface for WireGuard interfaces',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wg-tui                          Launch interactive TUI
  wg-tui status                   List interfaces
  wg-tui show wg0                 Show wg0 and its peers
  wg-tui --show-private show wg0  Same, with the private key
  wg-tui up wg1                   Bring wg1 up with wg-quick
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '-c', '--config',
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help='Config file path (default: ~/.wg-tui/config.yaml)'
    )
    parser.add_argument('--config-dir', type=Path, help='WireGuard config directory (default: /etc/wireguard)')
    parser.add_argument('--sudo', action='store_true', help='Run wg and wg-quick through sudo')
    parser.add_argument('--show-private', action='store_true', help='Show private keys')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    subparsers.add_parser('tui', help='Launch interactive TUI')
    subparsers.add_parser('status', help='List interfaces')

    show_parser = subparsers.add_parser('show', help='Show an interface and its peers')
    show_parser.add_argument('name', help='Interface name')

    up_parser = subparsers.add_parser('up', help='Bring an interface up')
    up_parser.add_argument('name', help='Interface name')

    down_parser = subparsers.add_parser('down', help='Bring an interface down')
    down_parser.add_argument('name', help='Interface name')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except WgTuiError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        return 1

    if args.config_dir:
        config.config_dir = args.config_dir
    if args.sudo:
        config.use_sudo = True
    if args.show_private:
        config.show_private_keys = True
    if args.verbose:
        config.log_level = 'DEBUG'

    setup_logging(config)

    registry = build_registry(config)
    command = COMMANDS[args.command or 'tui']

    try:
        return command(args, registry)
    except WgTuiError as e:
        logger.error(str(e))
        console.print(f"Error: {e}", style="red", markup=False)
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130


if __name__ == '__main__':
    sys.exit(main())
