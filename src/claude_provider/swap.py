# claude_provider/swap.py
"""
Provider-swap transaction.

    load profile → snapshot settings.json → write merged settings
    → run claude → write the snapshot back (always) → report

The snapshot is the raw byte content of ``settings.json``, so restoration is
byte-identical no matter how the merged document was serialised.

Precondition: only one transaction runs against a given settings file at a
time.  Nothing here locks the file.
"""
from __future__ import annotations

import json
import logging
import signal
import subprocess
import threading
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from claude_provider.config import DEFAULT_BINARY
from claude_provider.errors import (
    MalformedDocumentError,
    ProviderIOError,
    RunFailedError,
    SettingsNotFoundError,
    SettingsRestoreError,
)
from claude_provider.profile_store import ProfileStore
from claude_provider.settings_merger import build_env_block, merge_settings, render_settings

logger = logging.getLogger(__name__)

Runner = Callable[[List[str]], int]


class SwapState(str, Enum):
    IDLE = "idle"
    SETTINGS_SWAPPED = "settings_swapped"
    RESTORED = "restored"
    RESTORED_AFTER_FAILURE = "restored_after_failure"
    ABORTED = "aborted"


def run_child(argv: List[str]) -> int:
    """
    Run *argv* with inherited stdio and return its exit status.

    Ctrl-C belongs to the child while it runs (the assistant uses it to
    cancel), so the parent ignores SIGINT until the child exits.  The
    handler is swapped only after the child has started, otherwise the
    child would inherit the ignored disposition.
    """
    proc = subprocess.Popen(argv)
    if threading.current_thread() is not threading.main_thread():
        return proc.wait()

    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        return proc.wait()
    finally:
        signal.signal(signal.SIGINT, previous)


class SwapTransaction:
    """One ``use <provider>`` invocation."""

    def __init__(
        self,
        store: ProfileStore,
        settings_path: Path,
        binary: str = DEFAULT_BINARY,
        runner: Optional[Runner] = None,
    ) -> None:
        self.store = store
        self.settings_path = Path(settings_path)
        self.binary = binary
        self.runner = runner or run_child
        self.state = SwapState.IDLE

    # ------------------------------------------------------------------
    # steps
    # ------------------------------------------------------------------
    def _read_snapshot(self) -> bytes:
        if not self.settings_path.is_file():
            raise SettingsNotFoundError(self.settings_path)
        try:
            return self.settings_path.read_bytes()
        except OSError as exc:
            raise ProviderIOError(
                f"Cannot read {self.settings_path}: {exc}", self.settings_path
            ) from exc

    def _parse(self, snapshot: bytes) -> dict:
        try:
            document = json.loads(snapshot.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise MalformedDocumentError(self.settings_path, f"invalid JSON ({exc})") from exc
        if not isinstance(document, dict):
            raise MalformedDocumentError(self.settings_path, "top level is not an object")
        return document

    def _launch(self, args: Sequence[str]) -> int:
        argv = [self.binary, *args]
        logger.debug("Launching %s", argv)
        try:
            return self.runner(argv)
        except OSError as exc:
            raise RunFailedError(f"Failed to execute {self.binary}: {exc}") from exc

    def _restore(self, snapshot: bytes) -> None:
        try:
            self.settings_path.write_bytes(snapshot)
        except OSError as exc:
            logger.error("Restoring %s failed: %s", self.settings_path, exc)
            raise SettingsRestoreError(self.settings_path, exc) from exc
        logger.debug("Restored %s", self.settings_path)

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def run(self, provider_name: str, args: Sequence[str] = ()) -> int:
        """
        Run the assistant with *provider_name*'s settings.

        Returns the child's exit status (0).  Raises :class:`RunFailedError`
        for launch failures and non-zero exits; settings are restored first.
        """
        if self.state is not SwapState.IDLE:
            raise RuntimeError(f"transaction already used (state={self.state.value})")

        try:
            profile = self.store.load(provider_name)
            snapshot = self._read_snapshot()
            document = self._parse(snapshot)
        except Exception:
            self.state = SwapState.ABORTED
            raise

        merged = merge_settings(document, build_env_block(profile))
        try:
            self.settings_path.write_text(render_settings(merged), encoding="utf-8")
        except OSError as exc:
            # a failed write may have truncated the file
            self.state = SwapState.SETTINGS_SWAPPED
            self._restore(snapshot)
            self.state = SwapState.ABORTED
            raise ProviderIOError(
                f"Cannot write {self.settings_path}: {exc}", self.settings_path
            ) from exc

        self.state = SwapState.SETTINGS_SWAPPED
        logger.debug("Swapped env of %s to provider '%s'", self.settings_path, provider_name)

        returncode: Optional[int] = None
        try:
            returncode = self._launch(args)
        finally:
            self._restore(snapshot)
            self.state = (
                SwapState.RESTORED if returncode == 0 else SwapState.RESTORED_AFTER_FAILURE
            )

        if returncode != 0:
            raise RunFailedError(
                f"{self.binary} exited with non-zero status {returncode}", returncode
            )
        return returncode
