# claude_provider/interactive/commands/list_providers.py
"""
Interactive "list" command - show configured providers.
"""
from __future__ import annotations

from typing import Any, List

from claude_provider.commands.list_providers import list_action
from claude_provider.context import ProviderContext
from .base import InteractiveCommand


class ListCommand(InteractiveCommand):
    """List configured providers and whether their shell function exists."""

    def __init__(self) -> None:
        super().__init__(
            name="list",
            help_text="List configured providers.",
            aliases=["ls"],
        )

    async def execute(self, args: List[str], ctx: ProviderContext, **_: Any) -> None:
        list_action(ctx)
