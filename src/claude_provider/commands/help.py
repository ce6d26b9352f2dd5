# claude_provider/commands/help.py
"""
Help listing for the interactive shell.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from claude_provider.interactive.registry import InteractiveCommandRegistry


def help_action(command_name: Optional[str] = None, *, console: Console | None = None) -> None:
    """
    Print help for *all* commands, or a specific command if `command_name`
    is supplied.
    """
    console = console or Console()

    # ── detailed help for one command ────────────────────────────────
    if command_name:
        cmd = InteractiveCommandRegistry.get_command(command_name)
        if not cmd:
            console.print(f"[red]Unknown command:[/red] {command_name}")
            return

        md = Markdown(f"## `{cmd.name}`\n\n{cmd.help or '_No description provided._'}")
        console.print(Panel(md, title="Command Help", border_style="cyan"))
        if cmd.aliases:
            console.print(f"[dim]Aliases:[/dim] {', '.join(cmd.aliases)}")
        return

    # ── full list ────────────────────────────────────────────────────
    table = Table(title="Available Commands")
    table.add_column("Command", style="green")
    table.add_column("Aliases", style="cyan")
    table.add_column("Description")

    for name, cmd in sorted(InteractiveCommandRegistry.get_all_commands().items()):
        desc = (cmd.help or "").split("\n", 1)[0]
        alias_str = ", ".join(cmd.aliases) if cmd.aliases else "-"
        table.add_row(name, alias_str, desc or "-")

    console.print(table)
    console.print("[dim]Type 'help <command>' for detailed info on a specific command.[/dim]")
