# claude_provider/commands/setup.py
"""
Shared "setup a provider" logic for both CLI and interactive modes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from prompt_toolkit import prompt
from rich.console import Console

from claude_provider.context import ProviderContext
from claude_provider.errors import ProviderError
from claude_provider.models import ProviderProfile, validate_profile_name


@dataclass
class SetupAnswers:
    name: str
    base_url: str
    api_key: str
    default_model: str = ""
    haiku_model: str = ""


def _ask(message: str, value: Optional[str], *, secret: bool = False) -> str:
    if value is not None:
        return value.strip()
    return prompt(message, is_password=secret).strip()


def collect_answers(
    name: Optional[str] = None,
    base_url: Optional[str] = None,
    api_key: Optional[str] = None,
    default_model: Optional[str] = None,
    haiku_model: Optional[str] = None,
) -> SetupAnswers:
    """
    Fill in whatever the caller didn't pass by prompting the user.

    Name, base URL and API key are required; the two models may be blank.
    """
    name = _ask("  Enter provider name (e.g., minimax, zai): ", name)
    if not name:
        raise ProviderError("Provider name cannot be empty")
    validate_profile_name(name)

    base_url = _ask("  Enter API base URL: ", base_url)
    if not base_url:
        raise ProviderError("Base URL cannot be empty")

    api_key = _ask("  Enter API key: ", api_key, secret=True)
    if not api_key:
        raise ProviderError("API key cannot be empty")

    default_model = _ask(
        "  Enter default model (for sonnet/opus/small_fast): ", default_model
    )
    haiku_model = _ask(
        "  Enter haiku model (optional, press Enter to skip): ", haiku_model
    )
    return SetupAnswers(name, base_url, api_key, default_model, haiku_model)


def setup_action(
    ctx: ProviderContext,
    answers: SetupAnswers,
    *,
    console: Console | None = None,
) -> ProviderProfile:
    """Save the profile and install its shell wrappers."""
    console = console or Console()

    profile = ProviderProfile.create(
        name=answers.name,
        base_url=answers.base_url,
        auth_token=answers.api_key,
        default_model=answers.default_model,
        haiku_model=answers.haiku_model,
    )
    replaced = ctx.store.exists(profile.name)
    path = ctx.store.save(profile)
    touched_rc = ctx.shell.register(profile.name)

    verb = "updated" if replaced else "saved"
    console.print(f"[green]✓ Provider '{profile.name}' {verb} to {path}[/green]")
    for rc in touched_rc:
        console.print(f"[green]✓ Added source line to {rc}[/green]")
    console.print(
        f"[green]✓ Shell functions created for bash and zsh: '{profile.name}'[/green]"
    )
    if touched_rc:
        console.print("[dim]Open a new terminal (or source your rc file) to use it.[/dim]")
    return profile
