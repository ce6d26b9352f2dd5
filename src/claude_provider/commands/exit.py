# claude_provider/commands/exit.py
"""
Exit helper for the interactive shell.
"""
from __future__ import annotations

from rich import print


def exit_action() -> bool:
    """
    Say goodbye.

    Returns
    -------
    bool
        Always ``True`` so the interactive loop knows to stop.
    """
    print("[yellow]Exiting interactive mode… Goodbye![/yellow]")
    return True
