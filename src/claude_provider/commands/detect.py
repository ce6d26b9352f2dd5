# claude_provider/commands/detect.py
"""
Report which shell the wrappers are most likely to be used from.
"""
from __future__ import annotations

from typing import Mapping, Optional

from rich.console import Console

from claude_provider.shell_integration import ShellDialect, detect_shell


def detect_action(
    environ: Optional[Mapping[str, str]] = None,
    *,
    console: Console | None = None,
) -> ShellDialect:
    console = console or Console()
    dialect = detect_shell(environ)
    console.print(f"[cyan]Detected shell:[/cyan] {dialect.value}")
    return dialect
