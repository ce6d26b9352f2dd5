# commands/test_small_actions.py
import pytest
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from claude_provider.commands.clear import clear_action
from claude_provider.commands.detect import detect_action
from claude_provider.commands.exit import exit_action
from claude_provider.commands.help import help_action
from claude_provider.commands.use import use_action
from claude_provider.errors import ProfileNotFoundError
from claude_provider.interactive.registry import InteractiveCommandRegistry
from claude_provider.models import ProviderProfile
from claude_provider.shell_integration import ShellDialect


class DummyCmd:
    def __init__(self, name, help_text, aliases=None):
        self.name = name
        self.help = help_text
        self.aliases = aliases or []


@pytest.fixture
def printed(monkeypatch):
    out = []
    monkeypatch.setattr(Console, "print", lambda self, obj="", **kw: out.append(obj))
    return out


@pytest.fixture
def clean_registry():
    InteractiveCommandRegistry._commands.clear()
    InteractiveCommandRegistry._aliases.clear()
    yield InteractiveCommandRegistry
    InteractiveCommandRegistry._commands.clear()
    InteractiveCommandRegistry._aliases.clear()


def test_detect_action(printed):
    assert detect_action({"SHELL": "/bin/bash"}) is ShellDialect.BASH
    assert any("bash" in str(o) for o in printed)


def test_use_action_runs_transaction(provider_ctx, settings_file, runner):
    provider_ctx.store.save(ProviderProfile.create("acme", "https://a", "k"))
    before = settings_file.read_bytes()

    assert use_action(provider_ctx, "acme", ["-p", "hello"]) == 0

    assert runner.calls == [["claude", "-p", "hello"]]
    assert settings_file.read_bytes() == before


def test_use_action_unknown_provider(provider_ctx, settings_file):
    with pytest.raises(ProfileNotFoundError):
        use_action(provider_ctx, "ghost")


def test_help_lists_commands(clean_registry, printed):
    clean_registry._commands["use"] = DummyCmd("use", "Run it\n\nmore", ["run"])
    clean_registry._commands["list"] = DummyCmd("list", "List them")

    help_action()

    table = next(o for o in printed if isinstance(o, Table))
    assert [c.header for c in table.columns] == ["Command", "Aliases", "Description"]
    assert list(table.columns[0].cells) == ["list", "use"]
    assert list(table.columns[2].cells) == ["List them", "Run it"]


def test_help_single_command(clean_registry, printed):
    clean_registry.register(DummyCmd("use", "Run it", ["run"]))

    help_action("run")

    assert any(isinstance(o, Panel) for o in printed)
    assert any("Aliases" in str(o) and "run" in str(o) for o in printed)


def test_help_unknown_command(clean_registry, printed):
    help_action("nope")
    assert any("Unknown command" in str(o) for o in printed)


def test_exit_action(printed):
    assert exit_action() is True
    assert any("Goodbye" in str(o) for o in printed)


def test_clear_action(monkeypatch):
    calls = []
    monkeypatch.setattr("claude_provider.commands.clear.clear_screen", lambda: calls.append(1))
    clear_action()
    assert calls == [1]


def test_clear_action_redraws_banner(monkeypatch):
    banners = []
    monkeypatch.setattr("claude_provider.commands.clear.clear_screen", lambda: None)
    monkeypatch.setattr(
        "claude_provider.commands.clear.display_welcome_banner", banners.append
    )
    clear_action("/tmp/cfg")
    assert banners == ["/tmp/cfg"]
