"""
Location and environment configuration for claude-provider.

Resolution order for every setting
----------------------------------
1. explicit argument (e.g. ``--config-dir`` on the CLI)
2. environment variable (a ``.env`` file is loaded by the package root)
3. baked-in default

Variables
~~~~~~~~~
* ``CLAUDE_CONFIG_DIR``       – directory holding ``settings.json``,
  ``providers/`` and the shell function files (default ``~/.claude``).
* ``CLAUDE_PROVIDER_BINARY``  – assistant executable (default ``claude``).
* ``CLAUDE_PROVIDER_HOME``    – home directory whose rc files are edited
  (default: the user's home).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

# ---------------------------------------------------------------------------
# defaults
# ---------------------------------------------------------------------------
DEFAULT_CONFIG_DIR = Path("~/.claude")
PROVIDERS_DIR = "providers"
PROFILE_EXT = ".json"
SETTINGS_FILE = "settings.json"

DEFAULT_BINARY = "claude"
COMMAND_NAME = "claude-provider"

DEFAULT_TIMEOUT_MS = "3000000"
DEFAULT_DISABLE_NONESSENTIAL_TRAFFIC = 1

ENV_CONFIG_DIR = "CLAUDE_CONFIG_DIR"
ENV_BINARY = "CLAUDE_PROVIDER_BINARY"
ENV_HOME = "CLAUDE_PROVIDER_HOME"


@dataclass(frozen=True)
class ProviderPaths:
    """Every filesystem location the tool touches."""

    config_dir: Path
    home: Path

    @property
    def providers_dir(self) -> Path:
        return self.config_dir / PROVIDERS_DIR

    @property
    def settings_path(self) -> Path:
        return self.config_dir / SETTINGS_FILE


def load_paths(
    config_dir: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProviderPaths:
    """Resolve :class:`ProviderPaths` from an override, the environment or defaults."""
    env = os.environ if environ is None else environ

    raw_dir = config_dir or env.get(ENV_CONFIG_DIR) or str(DEFAULT_CONFIG_DIR)
    raw_home = env.get(ENV_HOME)
    home = Path(os.path.expanduser(raw_home)) if raw_home else Path.home()

    return ProviderPaths(
        config_dir=Path(os.path.expanduser(raw_dir)),
        home=home,
    )


def get_binary(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return env.get(ENV_BINARY) or DEFAULT_BINARY
