# claude_provider/interactive/commands/exit.py
from typing import Any, List

from .base import InteractiveCommand
from claude_provider.commands.exit import exit_action


class ExitCommand(InteractiveCommand):
    """Command to exit interactive mode."""

    def __init__(self):
        super().__init__(
            name="exit",
            help_text="Exit the interactive mode.",
            aliases=["quit", "q"],
        )

    async def execute(self, args: List[str], ctx: Any = None, **kwargs: Any) -> bool:
        return exit_action()
