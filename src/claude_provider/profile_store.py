# claude_provider/profile_store.py
"""
CRUD over the provider profile directory.

One JSON document per profile at ``<dir>/<name>.json``.  Writes replace the
whole file; the directory is created lazily on the first save.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from claude_provider.config import PROFILE_EXT
from claude_provider.errors import (
    InvalidProfileNameError,
    MalformedDocumentError,
    ProfileNotFoundError,
    ProviderIOError,
)
from claude_provider.models import ProviderProfile, is_profile_stem

logger = logging.getLogger(__name__)


class ProfileStore:
    """Load / save / delete provider profiles in *directory*."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def path_for(self, name: str) -> Path:
        if not is_profile_stem(name):
            raise InvalidProfileNameError(name)
        return self.directory / f"{name}{PROFILE_EXT}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def list(self) -> List[str]:
        """
        Sorted profile names; a missing directory simply has none.

        Files whose stem is not a usable name (e.g. ``my provider.json``) are
        skipped; every listed name can be passed to :meth:`delete`.
        """
        if not self.directory.is_dir():
            return []
        try:
            names = [
                p.stem
                for p in self.directory.iterdir()
                if p.suffix == PROFILE_EXT and p.is_file()
            ]
        except OSError as exc:
            raise ProviderIOError(f"Cannot read {self.directory}: {exc}", self.directory) from exc
        valid = []
        for name in names:
            if is_profile_stem(name):
                valid.append(name)
            else:
                logger.debug("Ignoring %s%s: not a valid provider name", name, PROFILE_EXT)
        return sorted(valid)

    def load(self, name: str) -> ProviderProfile:
        path = self.path_for(name)
        if not path.is_file():
            raise ProfileNotFoundError(name, path)

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ProviderIOError(f"Cannot read {path}: {exc}", path) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(path, f"invalid JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise MalformedDocumentError(path, "top level is not an object")

        try:
            return ProviderProfile.model_validate({**data, "name": name})
        except ValidationError as exc:
            raise MalformedDocumentError(path, str(exc)) from exc

    def save(self, profile: ProviderProfile) -> Path:
        path = self.path_for(profile.name)
        content = json.dumps(profile.to_document(), indent=2, ensure_ascii=False)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(content + "\n", encoding="utf-8")
        except OSError as exc:
            raise ProviderIOError(f"Cannot write {path}: {exc}", path) from exc
        logger.debug("Saved provider '%s' to %s", profile.name, path)
        return path

    def delete(self, name: str) -> None:
        path = self.path_for(name)
        if not path.is_file():
            raise ProfileNotFoundError(name, path)
        try:
            path.unlink()
        except OSError as exc:
            raise ProviderIOError(f"Cannot delete {path}: {exc}", path) from exc
        logger.debug("Deleted provider '%s' (%s)", name, path)
