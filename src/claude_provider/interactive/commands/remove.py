# claude_provider/interactive/commands/remove.py
"""
Interactive "remove" command - deletes a provider and its shell functions.
"""
from __future__ import annotations

import asyncio
from typing import Any, List

from claude_provider.commands.remove import remove_action
from claude_provider.context import ProviderContext
from .base import InteractiveCommand


class RemoveCommand(InteractiveCommand):
    def __init__(self) -> None:
        super().__init__(
            name="remove",
            help_text=(
                "Remove a provider.\n\n"
                "  remove           Pick from a numbered list\n"
                "  remove <name>    Remove the named provider\n"
            ),
            aliases=["rm", "delete"],
        )

    async def execute(self, args: List[str], ctx: ProviderContext, **_: Any) -> None:
        if args:
            remove_action(ctx, args[0])
        else:
            # the picker prompts, so keep it off the loop
            await asyncio.to_thread(remove_action, ctx)
