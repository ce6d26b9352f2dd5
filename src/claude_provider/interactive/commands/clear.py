from typing import Any, List

from .base import InteractiveCommand
from claude_provider.commands.clear import clear_action
from claude_provider.context import ProviderContext


class ClearCommand(InteractiveCommand):
    """Clear the screen and redraw the banner."""

    def __init__(self):
        super().__init__(
            name="clear",
            help_text="Clear the terminal screen.",
            aliases=["cls"],
        )

    async def execute(self, args: List[str], ctx: ProviderContext = None, **kwargs: Any) -> None:
        clear_action(str(ctx.paths.config_dir) if ctx else None)
