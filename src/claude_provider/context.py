# claude_provider/context.py
"""Shared collaborators handed to every command (CLI and interactive)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from claude_provider.config import ProviderPaths, get_binary, load_paths
from claude_provider.profile_store import ProfileStore
from claude_provider.shell_integration import ShellIntegrationManager
from claude_provider.swap import Runner, SwapTransaction


@dataclass
class ProviderContext:
    paths: ProviderPaths
    store: ProfileStore
    shell: ShellIntegrationManager
    binary: str
    runner: Optional[Runner] = None

    @classmethod
    def from_paths(
        cls,
        paths: ProviderPaths,
        binary: Optional[str] = None,
        runner: Optional[Runner] = None,
    ) -> "ProviderContext":
        return cls(
            paths=paths,
            store=ProfileStore(paths.providers_dir),
            shell=ShellIntegrationManager(paths.config_dir, paths.home),
            binary=binary or get_binary(),
            runner=runner,
        )

    @classmethod
    def from_environment(
        cls,
        config_dir: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ProviderContext":
        return cls.from_paths(
            load_paths(config_dir, environ), binary=get_binary(environ)
        )

    def new_transaction(self) -> SwapTransaction:
        return SwapTransaction(
            self.store,
            self.paths.settings_path,
            binary=self.binary,
            runner=self.runner,
        )
