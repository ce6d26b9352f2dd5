# claude_provider/interactive/commands/base.py
"""Base class for interactive commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from claude_provider.context import ProviderContext


class InteractiveCommand(ABC):
    """Base class for interactive mode commands."""

    name: str
    help: str
    aliases: List[str]

    def __init__(self, name: str, help_text: str = "", aliases: Optional[List[str]] = None):
        self.name = name
        self.help = help_text
        self.aliases = aliases or []

    @abstractmethod
    async def execute(self, args: List[str], ctx: ProviderContext, **kwargs) -> Any:
        """Execute the command with the given arguments."""
