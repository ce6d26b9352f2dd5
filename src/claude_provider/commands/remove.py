# claude_provider/commands/remove.py
"""
Shared "remove a provider" logic for both CLI and interactive modes.
"""
from __future__ import annotations

from typing import List, Optional

from prompt_toolkit import prompt
from rich.console import Console
from rich.table import Table

from claude_provider.context import ProviderContext


def choose_provider(
    names: List[str],
    *,
    title: str = "Remove Provider",
    console: Console | None = None,
) -> Optional[str]:
    """Numbered picker; blank input or an out-of-range answer picks nothing."""
    console = console or Console()

    table = Table(title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Provider", style="green")
    for idx, name in enumerate(names, start=1):
        table.add_row(str(idx), name)
    console.print(table)

    answer = prompt("  Select a provider (Enter to cancel): ").strip()
    if not answer.isdigit():
        return None
    idx = int(answer)
    return names[idx - 1] if 1 <= idx <= len(names) else None


def remove_action(
    ctx: ProviderContext,
    name: Optional[str] = None,
    *,
    console: Console | None = None,
) -> bool:
    """
    Delete a provider profile and its shell wrappers.

    With no *name* the user picks one.  Returns False if nothing was removed.
    """
    console = console or Console()

    if name is None:
        names = ctx.store.list()
        if not names:
            console.print("[yellow]No providers configured.[/yellow]")
            return False
        name = choose_provider(names, console=console)
        if name is None:
            console.print("[dim]Cancelled.[/dim]")
            return False

    ctx.store.delete(name)
    ctx.shell.unregister(name)
    console.print(f"[green]Provider '{name}' removed.[/green]")
    return True
