# claude_provider/errors.py
"""
Exception hierarchy for claude-provider.

Everything raised on purpose derives from :class:`ProviderError` so the CLI
boundary can catch one type and turn it into a readable message plus a
non-zero exit code.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ProviderError(Exception):
    """Base class for all claude-provider errors."""


class InvalidProfileNameError(ProviderError):
    """Profile name is empty or not usable as a file / shell function name."""

    def __init__(self, name: str, reason: Optional[str] = None):
        reason = reason or "use letters, digits, '_' or '-'"
        super().__init__(f"Invalid provider name '{name}': {reason}.")
        self.name = name


class ProfileNotFoundError(ProviderError):
    """No profile file exists for the requested name."""

    def __init__(self, name: str, path: Optional[Path] = None):
        super().__init__(
            f"Provider '{name}' not found. Run 'claude-provider setup' first."
        )
        self.name = name
        self.path = path


class MalformedDocumentError(ProviderError):
    """A JSON document could not be parsed into the expected shape."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Malformed document {path}: {reason}")
        self.path = path
        self.reason = reason


class SettingsNotFoundError(MalformedDocumentError):
    """The live settings file is missing, so there is nothing to swap."""

    def __init__(self, path: Path):
        super().__init__(path, "settings file does not exist")


class ProviderIOError(ProviderError):
    """Filesystem read / write / create failure."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class SettingsRestoreError(ProviderIOError):
    """
    The original settings could not be written back.

    This is the one failure that may leave the live settings swapped, so the
    message tells the user what to fix by hand.
    """

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(
            f"Could not restore {path} after running claude ({cause}). "
            f"The file may still contain the provider's env block; restore it "
            f"manually.",
            path,
        )
        self.cause = cause


class RunFailedError(ProviderError):
    """The assistant could not be launched or exited with non-zero status."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode

    @property
    def exit_code(self) -> int:
        """Exit code to propagate; 1 when the child never ran."""
        if self.returncode is None or self.returncode == 0:
            return 1
        # negative return codes mean "killed by signal"
        return self.returncode if self.returncode > 0 else 128 - self.returncode
