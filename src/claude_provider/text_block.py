# claude_provider/text_block.py
"""
Idempotent insert / remove of named blocks inside a text file.

A block looks like::

    # Provider function for acme
    acme() {
        claude-provider use acme "$@"
    }
    # End provider function for acme

The start line identifies the block.  Files written before end markers
existed close their blocks with a bare ``}`` line instead; those are still
recognised (the block then ends at the first ``}`` line, but never runs past
the next block's start line).
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from claude_provider.errors import ProviderIOError

logger = logging.getLogger(__name__)


class TextBlockEditor:
    """Maintain at most one block per name in a file."""

    def __init__(self, start_prefix: str, end_prefix: str) -> None:
        self.start_prefix = start_prefix
        self.end_prefix = end_prefix

    # ------------------------------------------------------------------
    # markers
    # ------------------------------------------------------------------
    def start_marker(self, name: str) -> str:
        return f"{self.start_prefix} {name}"

    def end_marker(self, name: str) -> str:
        return f"{self.end_prefix} {name}"

    def render(self, name: str, body: str) -> str:
        body = body.strip("\n")
        return f"{self.start_marker(name)}\n{body}\n{self.end_marker(name)}\n"

    # ------------------------------------------------------------------
    # scanning
    # ------------------------------------------------------------------
    def _is_any_start(self, line: str) -> bool:
        return line.startswith(self.start_prefix + " ")

    def _block_end(self, lines: List[str], start: int, name: str) -> int:
        """Index of the last line belonging to the block opened at *start*."""
        end_marker = self.end_marker(name)
        limit = len(lines)
        for idx in range(start + 1, len(lines)):
            text = lines[idx].rstrip()
            if text == end_marker:
                return idx
            if self._is_any_start(text):
                limit = idx
                break

        # legacy block: closing brace, bounded by the next block
        for idx in range(start + 1, limit):
            if lines[idx].strip() == "}":
                return idx
        return limit - 1

    def _drop_block(self, lines: List[str], name: str) -> Tuple[List[str], bool]:
        start_marker = self.start_marker(name)
        kept: List[str] = []
        found = False
        idx = 0
        while idx < len(lines):
            if lines[idx].rstrip() == start_marker:
                found = True
                # take the separating blank line with it
                if kept and not kept[-1].strip():
                    kept.pop()
                idx = self._block_end(lines, idx, name) + 1
                continue
            kept.append(lines[idx])
            idx += 1
        return kept, found

    # ------------------------------------------------------------------
    # file I/O
    # ------------------------------------------------------------------
    @staticmethod
    def _read(path: Path) -> str:
        if not path.exists():
            return ""
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ProviderIOError(f"Cannot read {path}: {exc}", path) from exc

    @staticmethod
    def _write(path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ProviderIOError(f"Cannot write {path}: {exc}", path) from exc

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def blocks(self, path: Path) -> List[str]:
        """Names of the blocks present in *path*, in file order."""
        names = []
        for line in self._read(path).splitlines():
            text = line.rstrip()
            if self._is_any_start(text):
                names.append(text[len(self.start_prefix) + 1:])
        return names

    def upsert(self, path: Path, name: str, body: str) -> bool:
        """Insert or replace the block *name*; returns True if the file changed."""
        existing = self._read(path)
        kept, _ = self._drop_block(existing.splitlines(), name)
        remainder = "\n".join(kept).strip()

        block = self.render(name, body)
        content = f"{remainder}\n\n{block}" if remainder else block
        if content == existing:
            return False

        self._write(path, content)
        logger.debug("Wrote block '%s' to %s", name, path)
        return True

    def remove(self, path: Path, name: str) -> bool:
        """
        Drop the block *name*.  A missing file is a no-op; a file left with
        nothing but whitespace is deleted.
        """
        if not path.exists():
            return False

        existing = self._read(path)
        kept, found = self._drop_block(existing.splitlines(), name)
        remainder = "\n".join(kept).strip()

        if not remainder:
            try:
                path.unlink()
            except OSError as exc:
                raise ProviderIOError(f"Cannot delete {path}: {exc}", path) from exc
            logger.debug("Removed block '%s'; deleted empty %s", name, path)
            return True

        if not found:
            return False

        self._write(path, remainder + "\n")
        logger.debug("Removed block '%s' from %s", name, path)
        return True
