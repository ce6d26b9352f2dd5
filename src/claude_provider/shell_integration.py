# claude_provider/shell_integration.py
"""
Per-provider shell wrapper functions.

For every supported shell a function file in the config directory holds one
block per provider (``acme() { claude-provider use acme "$@"; }``), and the
shell's rc file in the home directory sources that function file once.
"""
from __future__ import annotations

import logging
import os
import shlex
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional

from claude_provider.config import COMMAND_NAME
from claude_provider.errors import ProviderIOError
from claude_provider.text_block import TextBlockEditor

logger = logging.getLogger(__name__)

BLOCK_START = "# Provider function for"
BLOCK_END = "# End provider function for"


class ShellDialect(str, Enum):
    BASH = "bash"
    ZSH = "zsh"

    @property
    def func_file_name(self) -> str:
        return f"provider-functions.{self.value}"

    @property
    def rc_file_name(self) -> str:
        return f".{self.value}rc"

    def source_line(self, func_path: Path) -> str:
        return f"source {shlex.quote(str(func_path))}"

    def is_source_line(self, text: str, func_path: Path) -> bool:
        """True for our line, quoted or in the older unquoted spelling."""
        return text.strip() in (
            self.source_line(func_path),
            f"source {func_path}",
            f"source \"{func_path}\"",
        )


def detect_shell(environ: Optional[Mapping[str, str]] = None) -> ShellDialect:
    """Guess the user's shell from ``$SHELL``; zsh when it can't tell."""
    env = os.environ if environ is None else environ
    shell = env.get("SHELL", "")
    if "zsh" in shell:
        return ShellDialect.ZSH
    if "bash" in shell:
        return ShellDialect.BASH
    return ShellDialect.ZSH


def wrapper_function(profile_name: str, command_name: str = COMMAND_NAME) -> str:
    return (
        f"{profile_name}() {{\n"
        f'    {command_name} use {profile_name} "$@"\n'
        f"}}"
    )


class ShellIntegrationManager:
    """Register / unregister provider wrapper functions for bash and zsh."""

    dialects = (ShellDialect.BASH, ShellDialect.ZSH)

    def __init__(
        self,
        config_dir: Path,
        home: Path,
        command_name: str = COMMAND_NAME,
    ) -> None:
        self.config_dir = Path(config_dir)
        self.home = Path(home)
        self.command_name = command_name
        self.editor = TextBlockEditor(BLOCK_START, BLOCK_END)

    # ------------------------------------------------------------------
    # paths
    # ------------------------------------------------------------------
    def func_path(self, dialect: ShellDialect) -> Path:
        return self.config_dir / dialect.func_file_name

    def rc_path(self, dialect: ShellDialect) -> Path:
        return self.home / dialect.rc_file_name

    # ------------------------------------------------------------------
    # rc file
    # ------------------------------------------------------------------
    def _ensure_sourced(self, dialect: ShellDialect) -> bool:
        """Make the rc file source the function file exactly once."""
        rc_path = self.rc_path(dialect)
        func_path = self.func_path(dialect)
        line = dialect.source_line(func_path)
        try:
            if not rc_path.exists():
                rc_path.write_text(f"{line}\n", encoding="utf-8")
                logger.debug("Created %s with source line", rc_path)
                return True

            content = rc_path.read_text(encoding="utf-8")
            lines = content.splitlines()
            if any(dialect.is_source_line(existing, func_path) for existing in lines):
                return False
            rc_path.write_text(f"{content.strip()}\n{line}\n", encoding="utf-8")
        except OSError as exc:
            raise ProviderIOError(f"Cannot update {rc_path}: {exc}", rc_path) from exc

        logger.debug("Added source line to %s", rc_path)
        return True

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def register(self, profile_name: str) -> List[Path]:
        """
        Write the wrapper for *profile_name* into every function file.

        Returns the rc files that had to be created or extended.
        """
        body = wrapper_function(profile_name, self.command_name)
        touched_rc: List[Path] = []
        for dialect in self.dialects:
            self.editor.upsert(self.func_path(dialect), profile_name, body)
            if self._ensure_sourced(dialect):
                touched_rc.append(self.rc_path(dialect))
        return touched_rc

    def unregister(self, profile_name: str) -> None:
        # the rc source line stays; sourcing a missing file is harmless
        for dialect in self.dialects:
            self.editor.remove(self.func_path(dialect), profile_name)

    def is_registered(self, profile_name: str) -> bool:
        return all(
            profile_name in self.editor.blocks(self.func_path(d)) for d in self.dialects
        )
