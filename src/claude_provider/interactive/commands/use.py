# claude_provider/interactive/commands/use.py
"""
Interactive "use" command - run claude with a provider swapped in.
"""
from __future__ import annotations

from typing import Any, List

from rich import print

from claude_provider.commands.use import use_action
from claude_provider.context import ProviderContext
from claude_provider.ui.ui_helpers import restore_terminal
from .base import InteractiveCommand


class UseCommand(InteractiveCommand):
    def __init__(self) -> None:
        super().__init__(
            name="use",
            help_text=(
                "Run claude with a provider's settings.\n\n"
                "  use <provider> [args...]   Extra args are passed to claude\n"
            ),
            aliases=["run"],
        )

    async def execute(self, args: List[str], ctx: ProviderContext, **_: Any) -> None:
        if not args:
            print("[red]Usage:[/red] use <provider> \\[args...]")
            return

        provider, *rest = args
        try:
            use_action(ctx, provider, rest)
        finally:
            restore_terminal()
        print(f"[green]✓ Settings restored after '{provider}' session.[/green]")
