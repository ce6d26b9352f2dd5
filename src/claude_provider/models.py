# claude_provider/models.py
"""Data models for provider profiles."""
from __future__ import annotations

import re
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from claude_provider.config import (
    DEFAULT_DISABLE_NONESSENTIAL_TRAFFIC,
    DEFAULT_TIMEOUT_MS,
)
from claude_provider.errors import InvalidProfileNameError

# Profile names become file names *and* shell function names.
_NAME_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_-]*$")

# a wrapper function with one of these names would shadow it in the user's shell
RESERVED_NAMES = frozenset(
    {
        "alias", "bg", "builtin", "cd", "claude", "claude-provider", "command",
        "echo", "eval", "exec", "exit", "export", "fg", "jobs", "kill", "ls",
        "pwd", "read", "set", "source", "test", "type", "unalias", "unset",
    }
)


def is_profile_stem(name: str) -> bool:
    """True if *name* is safe to use as a profile file stem."""
    return bool(name) and _NAME_RE.match(name) is not None


def validate_profile_name(name: str) -> str:
    if not is_profile_stem(name):
        raise InvalidProfileNameError(name)
    if name in RESERVED_NAMES:
        raise InvalidProfileNameError(name, "it would shadow a shell command")
    return name


def _env_field(name: str) -> Any:
    # accept both the snake-case file spelling and the env-var spelling
    return Field(
        default=None,
        validation_alias=AliasChoices(name, name.upper()),
    )


# ──────────────────────────────────────────────────────────────────────────────
# env block as stored in a profile file
# ──────────────────────────────────────────────────────────────────────────────
class ProviderEnv(BaseModel):
    """The ``env`` object of a profile file. Unknown keys are kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    anthropic_base_url: Optional[str] = _env_field("anthropic_base_url")
    anthropic_auth_token: Optional[str] = _env_field("anthropic_auth_token")
    api_timeout_ms: Optional[str] = _env_field("api_timeout_ms")
    claude_code_disable_nonessential_traffic: Optional[int] = _env_field(
        "claude_code_disable_nonessential_traffic"
    )
    anthropic_model: Optional[str] = _env_field("anthropic_model")
    anthropic_small_fast_model: Optional[str] = _env_field("anthropic_small_fast_model")
    anthropic_default_sonnet_model: Optional[str] = _env_field(
        "anthropic_default_sonnet_model"
    )
    anthropic_default_opus_model: Optional[str] = _env_field(
        "anthropic_default_opus_model"
    )
    anthropic_default_haiku_model: Optional[str] = _env_field(
        "anthropic_default_haiku_model"
    )

    @field_validator("api_timeout_ms", mode="before")
    @classmethod
    def _timeout_as_str(cls, value: Any) -> Any:
        # hand-edited files often carry the timeout as a bare number
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value


# ──────────────────────────────────────────────────────────────────────────────
# profile document
# ──────────────────────────────────────────────────────────────────────────────
class ProviderProfile(BaseModel):
    """
    One provider profile.

    ``name`` comes from the file name and is never written into the
    document.  Every other top-level key is passed through untouched.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(exclude=True)
    env: ProviderEnv = Field(default_factory=ProviderEnv)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_profile_name(value)

    @classmethod
    def create(
        cls,
        name: str,
        base_url: str,
        auth_token: str,
        default_model: str = "",
        haiku_model: str = "",
        timeout_ms: str = DEFAULT_TIMEOUT_MS,
        disable_nonessential_traffic: int = DEFAULT_DISABLE_NONESSENTIAL_TRAFFIC,
    ) -> "ProviderProfile":
        """
        Build a profile the way ``setup`` does.

        The default model fills the model, small-fast, sonnet and opus slots;
        an empty default model leaves all four unset.  The haiku model is
        independent.
        """
        default_model = default_model.strip()
        haiku_model = haiku_model.strip()
        fan_out = default_model or None

        env = ProviderEnv(
            anthropic_base_url=base_url,
            anthropic_auth_token=auth_token,
            api_timeout_ms=timeout_ms,
            claude_code_disable_nonessential_traffic=disable_nonessential_traffic,
            anthropic_model=fan_out,
            anthropic_small_fast_model=fan_out,
            anthropic_default_sonnet_model=fan_out,
            anthropic_default_opus_model=fan_out,
            anthropic_default_haiku_model=haiku_model or None,
        )
        return cls(name=name, env=env)

    def to_document(self) -> Dict[str, Any]:
        """Serialisable dict; unset env fields are written as ``null``."""
        return self.model_dump(mode="json")
