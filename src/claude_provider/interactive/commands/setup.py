# claude_provider/interactive/commands/setup.py
"""
Interactive "setup" command - prompts for a new provider and saves it.
"""
from __future__ import annotations

import asyncio
from typing import Any, List

from claude_provider.commands.setup import collect_answers, setup_action
from claude_provider.context import ProviderContext
from .base import InteractiveCommand


class SetupCommand(InteractiveCommand):
    """Configure a new provider (or overwrite an existing one)."""

    def __init__(self) -> None:
        super().__init__(
            name="setup",
            help_text=(
                "Configure a new provider.\n\n"
                "  setup            Prompt for every value\n"
                "  setup <name>     Prompt for everything but the name\n"
            ),
            aliases=["add", "new"],
        )

    async def execute(self, args: List[str], ctx: ProviderContext, **_: Any) -> None:
        name = args[0] if args else None
        # prompt_toolkit's blocking prompt can't run on the shell's loop
        answers = await asyncio.to_thread(collect_answers, name)
        setup_action(ctx, answers)
