# claude_provider/interactive/shell.py
"""Interactive shell for claude-provider with slash-menu autocompletion."""
from __future__ import annotations

import asyncio
import logging
import shlex
from typing import List

from rich import print

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion

from claude_provider.context import ProviderContext
from claude_provider.errors import ProviderError, SettingsRestoreError
from claude_provider.interactive.commands import register_all_commands
from claude_provider.interactive.registry import InteractiveCommandRegistry
from claude_provider.ui.ui_helpers import display_restore_failure, display_welcome_banner

logger = logging.getLogger(__name__)


class SlashCompleter(Completer):
    """Provides completions for slash commands based on registered commands."""

    def __init__(self, command_names: List[str]):
        self.command_names = command_names

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()
        if not text.startswith("/"):
            return
        token = text[1:]
        for name in self.command_names:
            if name.startswith(token):
                yield Completion(f"/{name}", start_position=-len(text))


async def dispatch(line: str, ctx: ProviderContext) -> bool:
    """
    Run one input line.  Returns True when the shell should stop.
    """
    cmd_line = line[1:] if line.startswith("/") else line
    if not cmd_line:
        cmd_line = "help"

    try:
        parts = shlex.split(cmd_line)
    except ValueError:
        parts = cmd_line.split()

    cmd_name, args = parts[0].lower(), parts[1:]
    cmd = InteractiveCommandRegistry.get_command(cmd_name)
    if not cmd:
        print(f"[red]Unknown command: {cmd_name}[/red]")
        print("[dim]Type 'help' to see available commands.[/dim]")
        return False

    try:
        return await cmd.execute(args, ctx) is True
    except SettingsRestoreError as exc:
        display_restore_failure(str(exc))
    except ProviderError as exc:
        print(f"[red]Error:[/red] {exc}")
    return False


async def interactive_mode(ctx: ProviderContext) -> bool:
    """
    Launch the interactive shell.
    """
    register_all_commands()
    cmd_names = list(InteractiveCommandRegistry.get_all_commands().keys())

    display_welcome_banner(str(ctx.paths.config_dir))
    await dispatch("help", ctx)

    session = PromptSession(
        completer=SlashCompleter(cmd_names),
        complete_while_typing=True,
    )

    while True:
        try:
            raw = await asyncio.to_thread(session.prompt, "> ")
            line = raw.strip()
            if not line:
                continue
            if await dispatch(line, ctx):
                return True

        except KeyboardInterrupt:
            print("\n[yellow]Interrupted. Type 'exit' to quit.[/yellow]")
        except EOFError:
            print("\n[yellow]EOF detected. Exiting.[/yellow]")
            return True
        except Exception as e:
            logger.exception("Error in interactive mode")
            print(f"[red]Error: {e}[/red]")
