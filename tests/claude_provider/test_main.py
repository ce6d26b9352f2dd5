# tests/claude_provider/test_main.py
import json

import pytest
from typer.testing import CliRunner

import claude_provider.swap as swap_module
from claude_provider import __version__
from claude_provider.main import app


@pytest.fixture
def cli(paths):
    runner = CliRunner()
    env = {
        "CLAUDE_CONFIG_DIR": str(paths.config_dir),
        "CLAUDE_PROVIDER_HOME": str(paths.home),
        "CLAUDE_PROVIDER_BINARY": "claude",
    }

    def invoke(*args):
        return runner.invoke(app, list(args), env=env)

    return invoke


@pytest.fixture
def child(monkeypatch, paths):
    """Replace the real process launch; records argv and the settings it saw."""
    seen = {"calls": [], "settings": None, "returncode": 0}

    def fake_run_child(argv):
        seen["calls"].append(argv)
        seen["settings"] = json.loads(paths.settings_path.read_text())
        return seen["returncode"]

    monkeypatch.setattr(swap_module, "run_child", fake_run_child)
    return seen


def test_version(cli):
    result = cli("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_when_empty(cli):
    result = cli("list")
    assert result.exit_code == 0
    assert "No providers configured" in result.output


def test_setup_then_list(cli, paths):
    result = cli(
        "setup",
        "--name", "acme",
        "--base-url", "https://api.acme.test",
        "--api-key", "tok",
        "--default-model", "acme-large",
        "--haiku-model", "",
    )
    assert result.exit_code == 0, result.output
    assert (paths.providers_dir / "acme.json").exists()
    assert "source" in (paths.home / ".zshrc").read_text()

    result = cli("list")
    assert "acme" in result.output


def test_setup_rejects_bad_name(cli, paths):
    result = cli(
        "setup", "--name", "a b", "--base-url", "u", "--api-key", "k",
        "--default-model", "", "--haiku-model", "",
    )
    assert result.exit_code == 1
    assert not paths.providers_dir.exists()


def test_use_passes_args_and_restores(cli, paths, settings_file, child):
    cli("setup", "--name", "acme", "--base-url", "https://a", "--api-key", "k",
        "--default-model", "m", "--haiku-model", "")
    before = settings_file.read_bytes()

    result = cli("use", "acme", "--resume", "-p", "hi")

    assert result.exit_code == 0, result.output
    assert child["calls"] == [["claude", "--resume", "-p", "hi"]]
    assert child["settings"]["env"]["ANTHROPIC_BASE_URL"] == "https://a"
    assert child["settings"]["permissions"] == {"allow": ["Bash(ls:*)"]}
    assert settings_file.read_bytes() == before


def test_use_propagates_child_exit_code(cli, settings_file, child):
    cli("setup", "--name", "acme", "--base-url", "https://a", "--api-key", "k",
        "--default-model", "", "--haiku-model", "")
    child["returncode"] = 2
    before = settings_file.read_bytes()

    result = cli("use", "acme")

    assert result.exit_code == 2
    assert settings_file.read_bytes() == before


def test_use_unknown_provider(cli, settings_file, child):
    result = cli("use", "ghost")
    assert result.exit_code == 1
    assert child["calls"] == []


def test_remove(cli, paths):
    cli("setup", "--name", "acme", "--base-url", "https://a", "--api-key", "k",
        "--default-model", "", "--haiku-model", "")
    result = cli("remove", "acme")
    assert result.exit_code == 0
    assert not (paths.providers_dir / "acme.json").exists()
    assert not (paths.config_dir / "provider-functions.bash").exists()


def test_config_dir_option(cli, tmp_path):
    other = tmp_path / "other"
    result = cli(
        "--config-dir", str(other),
        "setup", "--name", "acme", "--base-url", "https://a", "--api-key", "k",
        "--default-model", "", "--haiku-model", "",
    )
    assert result.exit_code == 0, result.output
    assert (other / "providers" / "acme.json").exists()
