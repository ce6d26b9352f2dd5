# tests/claude_provider/conftest.py
import json

import pytest

from claude_provider.config import ProviderPaths
from claude_provider.context import ProviderContext

SETTINGS = {
    "model": "opus",
    "env": {"ANTHROPIC_BASE_URL": "https://api.anthropic.com"},
    "permissions": {"allow": ["Bash(ls:*)"]},
    "enabledPlugins": {},
}


class FakeRunner:
    """Stands in for the assistant process; records what it saw."""

    def __init__(self, settings_path, returncode=0, exc=None):
        self.settings_path = settings_path
        self.returncode = returncode
        self.exc = exc
        self.calls = []
        self.seen_settings = None

    def __call__(self, argv):
        self.calls.append(argv)
        self.seen_settings = json.loads(self.settings_path.read_text())
        if self.exc is not None:
            raise self.exc
        return self.returncode


@pytest.fixture
def paths(tmp_path):
    config_dir = tmp_path / "claude"
    home = tmp_path / "home"
    config_dir.mkdir()
    home.mkdir()
    return ProviderPaths(config_dir=config_dir, home=home)


@pytest.fixture
def settings_file(paths):
    # deliberately not json.dumps(indent=2) so a re-serialisation would differ
    raw = json.dumps(SETTINGS, separators=(",", ":")) + "\n"
    paths.settings_path.write_text(raw)
    return paths.settings_path


@pytest.fixture
def runner(paths):
    return FakeRunner(paths.settings_path)


@pytest.fixture
def provider_ctx(paths, runner):
    return ProviderContext.from_paths(paths, binary="claude", runner=runner)
