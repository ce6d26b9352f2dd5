# claude_provider/ui/ui_helpers.py
"""
Shared Rich helpers for the claude-provider UIs.
"""
from __future__ import annotations

import logging
import os
import sys

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# generic helpers                                                             #
# --------------------------------------------------------------------------- #
_console = Console()


def clear_screen() -> None:
    """Clear the terminal (cross-platform)."""
    _console.clear()


def restore_terminal() -> None:
    """Put the terminal back in a sane state after a child process."""
    if os.name == "posix" and sys.stdin.isatty():
        os.system("stty sane")
    else:
        logger.debug("Not a tty; skipping terminal restore")


# --------------------------------------------------------------------------- #
# banners / fatal errors                                                      #
# --------------------------------------------------------------------------- #
def display_welcome_banner(config_dir: str) -> None:
    """Print the banner shown when entering interactive mode."""
    _console.print(
        Panel(
            Markdown(
                "# Claude Provider Manager\n\n"
                f"**Config directory:** `{config_dir}`\n\n"
                "Type **`help`** to see available commands.\n"
                "Type **`exit`** or **`quit`** to exit.\n"
                "Type **`/`** to bring up the slash-menu."
            ),
            title="Interactive Mode",
            border_style="yellow",
            expand=True,
        )
    )


def display_restore_failure(message: str, *, console: Console | None = None) -> None:
    """Loud panel for the one failure that needs manual cleanup."""
    (console or _console).print(
        Panel(message, title="Manual intervention required", style="bold red")
    )
