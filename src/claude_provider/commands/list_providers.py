# claude_provider/commands/list_providers.py
"""
Shared provider-listing logic for both interactive and CLI interfaces.
"""
from __future__ import annotations

import logging

from rich.console import Console
from rich.table import Table

from claude_provider.context import ProviderContext
from claude_provider.errors import ProviderError

logger = logging.getLogger(__name__)


def list_action(ctx: ProviderContext, *, console: Console | None = None) -> None:
    """Render configured providers as a table."""
    console = console or Console()
    names = ctx.store.list()

    if not names:
        console.print("[yellow]No providers configured.[/yellow]")
        return

    table = Table(title="Configured Providers")
    table.add_column("Provider", style="green")
    table.add_column("Base URL", style="yellow")
    table.add_column("Model", style="cyan")
    table.add_column("Shell function")

    for name in names:
        try:
            env = ctx.store.load(name).env
            base_url = env.anthropic_base_url or "-"
            model = env.anthropic_model or "-"
        except ProviderError as exc:
            # one broken file shouldn't hide the rest
            logger.debug("Skipping details for %s: %s", name, exc)
            base_url, model = "[red]unreadable[/red]", "-"
        wrapper = (
            f"[green]type '{name}' to launch[/green]"
            if ctx.shell.is_registered(name)
            else "[dim]missing[/dim]"
        )
        table.add_row(name, base_url, model, wrapper)

    console.print(table)
