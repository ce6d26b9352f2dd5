# claude_provider/commands/clear.py
"""
Wipe the interactive screen and put the banner back.
"""
from __future__ import annotations

from typing import Optional

from claude_provider.ui.ui_helpers import clear_screen, display_welcome_banner


def clear_action(config_dir: Optional[str] = None) -> None:
    """Clear the terminal; redraw the banner when *config_dir* is known."""
    clear_screen()
    if config_dir is not None:
        display_welcome_banner(config_dir)
