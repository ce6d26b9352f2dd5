# src/claude_provider/main.py
"""Entry-point for the claude-provider CLI."""
from __future__ import annotations

import asyncio
import logging
import sys
from typing import Callable, List, Optional, TypeVar

import typer
from rich.console import Console

# ──────────────────────────────────────────────────────────────────────────────
# local imports
# ──────────────────────────────────────────────────────────────────────────────
from claude_provider import __version__
from claude_provider.commands.detect import detect_action
from claude_provider.commands.list_providers import list_action
from claude_provider.commands.remove import remove_action
from claude_provider.commands.setup import collect_answers, setup_action
from claude_provider.commands.use import use_action
from claude_provider.context import ProviderContext
from claude_provider.errors import ProviderError, RunFailedError, SettingsRestoreError
from claude_provider.ui.ui_helpers import display_restore_failure, restore_terminal

# ──────────────────────────────────────────────────────────────────────────────
# logging
# ──────────────────────────────────────────────────────────────────────────────
logging.basicConfig(
    format="%(asctime)s  %(levelname)-8s  %(message)s",
    stream=sys.stderr,
)

T = TypeVar("T")

_err_console = Console(stderr=True)


# ──────────────────────────────────────────────────────────────────────────────
# helper: error boundary
# ──────────────────────────────────────────────────────────────────────────────
def _guard(func: Callable[[], T]) -> T:
    """Run *func*, turning ProviderError into a message + non-zero exit."""
    try:
        return func()
    except SettingsRestoreError as exc:
        display_restore_failure(str(exc), console=_err_console)
        raise typer.Exit(code=1)
    except RunFailedError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=exc.exit_code)
    except ProviderError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)


def _context(ctx: typer.Context) -> ProviderContext:
    return ctx.obj


# ──────────────────────────────────────────────────────────────────────────────
# Typer root app + global flags
# ──────────────────────────────────────────────────────────────────────────────
app = typer.Typer(
    add_completion=False,
    help="Manage Claude Code providers and run with custom configs.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"claude-provider {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(  # noqa: D401
    ctx: typer.Context,
    config_dir: Optional[str] = typer.Option(
        None,
        "--config-dir",
        help="Claude config directory (default: $CLAUDE_CONFIG_DIR or ~/.claude)",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet", help="Only log warnings and errors", show_default=False
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log debug output", show_default=False
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Common pre-command setup (logging level, paths)."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.WARNING)

    ctx.obj = ProviderContext.from_environment(config_dir)


# ──────────────────────────────────────────────────────────────────────────────
# provider management
# ──────────────────────────────────────────────────────────────────────────────
@app.command("setup", help="Configure a new provider.")
def _setup_command(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", help="Provider name"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API base URL"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="API key"),
    default_model: Optional[str] = typer.Option(
        None, "--default-model", help="Model for sonnet/opus/small-fast"
    ),
    haiku_model: Optional[str] = typer.Option(None, "--haiku-model", help="Haiku model"),
) -> None:
    pctx = _context(ctx)
    _guard(
        lambda: setup_action(
            pctx,
            collect_answers(name, base_url, api_key, default_model, haiku_model),
        )
    )


@app.command("remove", help="Remove a provider.")
def _remove_command(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Provider to remove (pick if omitted)"),
) -> None:
    pctx = _context(ctx)
    _guard(lambda: remove_action(pctx, name))


@app.command("list", help="List configured providers.")
def _list_command(ctx: typer.Context) -> None:
    pctx = _context(ctx)
    _guard(lambda: list_action(pctx))


@app.command("detect", help="Show the detected shell.")
def _detect_command() -> None:
    detect_action()


# ──────────────────────────────────────────────────────────────────────────────
# use
# ──────────────────────────────────────────────────────────────────────────────
@app.command(
    "use",
    help="Run claude with a provider's settings; extra args go to claude.",
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
def _use_command(
    ctx: typer.Context,
    provider: str = typer.Argument(..., help="Provider name"),
    args: Optional[List[str]] = typer.Argument(None, help="Arguments passed to claude"),
) -> None:
    pctx = _context(ctx)
    try:
        _guard(lambda: use_action(pctx, provider, args or []))
    finally:
        restore_terminal()


# ──────────────────────────────────────────────────────────────────────────────
# interactive
# ──────────────────────────────────────────────────────────────────────────────
@app.command("interactive", help="Start interactive command mode.")
def _interactive_command(ctx: typer.Context) -> None:
    from claude_provider.interactive.shell import interactive_mode

    success = asyncio.run(interactive_mode(_context(ctx)))
    raise typer.Exit(code=0 if success else 1)


# ──────────────────────────────────────────────────────────────────────────────
# main
# ──────────────────────────────────────────────────────────────────────────────
def cli() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    cli()
