"""Rich-based TUI for viewing and toggling WireGuard interfaces"""

import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from .errors import WgTuiError
from .registry import InterfaceRegistry

logger = logging.getLogger(__name__)


class WgTui:
    """Rich-based terminal UI for wg-tui"""

    def __init__(self, registry: InterfaceRegistry, console: Optional[Console] = None):
        self.registry = registry
        self.console = console or Console()

    def refresh(self):
        """Refresh the registry; a failure ends the session"""
        try:
            self.registry.refresh()
        except WgTuiError as e:
            self.console.print(f"Error: {e}", style="red", markup=False)
            raise SystemExit(1)

    def show_header(self):
        """Display application header"""
        self.console.print("\n[bold cyan]wg-tui[/bold cyan] - WireGuard Interfaces", justify="center")
        current = self.registry.current_interface or "none"
        self.console.print(f"Selected: [yellow]{current}[/yellow]\n", justify="center")

    def show_menu(self):
        """Display main menu"""
        keys = "shown" if self.registry.show_private else "hidden"

        menu = Table(show_header=False, box=box.SIMPLE)
        menu.add_column("Option", style="cyan", no_wrap=True)
        menu.add_column("Description")

        menu.add_row("1", "List interfaces")
        menu.add_row("2", "Show interface details")
        menu.add_row("3", f"Toggle private keys (currently {keys})")
        menu.add_row("4", "Activate / deactivate interface")
        menu.add_row("5", "Refresh")
        menu.add_row("q", "Quit")

        self.console.print(menu)
        self.console.print()

    def list_interfaces(self):
        """Display all known interfaces"""
        interfaces = self.registry.interfaces

        if not interfaces:
            self.console.print("[yellow]No WireGuard interfaces found[/yellow]")
            return

        table = Table(title="WireGuard Interfaces", box=box.ROUNDED)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("State", justify="center", style="bold")
        table.add_column("Listen Port", justify="right")
        table.add_column("Peers", justify="right")
        table.add_column("Public Key", style="dim")

        for i, interface in enumerate(interfaces.values(), 1):
            if interface.enabled:
                state = Text("up", style="green")
                port = str(interface.listen_port)
                peers = str(len(interface.peers))
                pub_key = interface.public_key[:20] + "..." if len(interface.public_key) > 20 else interface.public_key
            else:
                state = Text("down", style="red")
                port = peers = pub_key = "-"

            table.add_row(str(i), interface.name, state, port, peers, pub_key)

        self.console.print(table)

        up = sum(1 for i in interfaces.values() if i.enabled)
        self.console.print(f"\n[dim]Total: {len(interfaces)} | Up: {up} | Down: {len(interfaces) - up}[/dim]\n")

    def choose_interface(self) -> Optional[str]:
        """Prompt for an interface and make it the current one"""
        names = self.registry.names()

        if not names:
            self.console.print("[yellow]No WireGuard interfaces found[/yellow]")
            return None

        for i, name in enumerate(names, 1):
            self.console.print(f"  {i}. [cyan]{name}[/cyan]")

        current = self.registry.current_interface
        default = str(names.index(current) + 1) if current in names else "1"

        choice = Prompt.ask("\nSelect interface", choices=[str(i) for i in range(1, len(names) + 1)], default=default)
        name = names[int(choice) - 1]
        self.registry.select(name)
        return name

    def show_details(self):
        """Display the selected interface and its peers"""
        name = self.choose_interface()
        if not name:
            return

        self.console.print(Panel(Text(self.registry.render(name)), title=name, border_style="cyan"))

    def toggle_private_keys(self):
        shown = self.registry.toggle_secret_visibility()
        if shown:
            self.console.print("[yellow]Private keys are now shown[/yellow]")
        else:
            self.console.print("[green]Private keys are now hidden[/green]")

    def change_state(self):
        """Bring the selected interface up or down"""
        name = self.choose_interface()
        if not name:
            return

        interface = self.registry.get(name)
        action = "disable" if interface.enabled else "enable"

        if not Confirm.ask(f"{action.capitalize()} interface '[cyan]{name}[/cyan]'?", default=False):
            self.console.print("Cancelled")
            return

        result = self.registry.activate(name)
        style = "green" if result.success else "red"
        output = result.output or "(no output)"
        self.console.print(Panel(Text(output), title=f"Command output for {name}", border_style=style))

        self.refresh()

    def run(self):
        """Main TUI loop"""
        self.refresh()

        while True:
            self.show_header()
            self.show_menu()

            choice = Prompt.ask("Select an option", choices=["1", "2", "3", "4", "5", "q"])

            if choice == "1":
                self.list_interfaces()
                input("\nPress Enter to continue...")
            elif choice == "2":
                self.show_details()
                input("\nPress Enter to continue...")
            elif choice == "3":
                self.toggle_private_keys()
            elif choice == "4":
                self.change_state()
                input("\nPress Enter to continue...")
            elif choice == "5":
                self.refresh()
                self.console.print("[green]✓ Refreshed[/green]")
            elif choice == "q":
                self.console.print("\n[cyan]Goodbye![/cyan]\n")
                break

            self.console.clear()
