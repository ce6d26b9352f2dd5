# claude_provider/interactive/commands/detect.py
from typing import Any, List

from .base import InteractiveCommand
from claude_provider.commands.detect import detect_action


class DetectCommand(InteractiveCommand):
    """Show the detected login shell."""

    def __init__(self):
        super().__init__(name="detect", help_text="Show the detected shell (bash or zsh).")

    async def execute(self, args: List[str], ctx: Any = None, **kwargs: Any) -> None:
        detect_action()
