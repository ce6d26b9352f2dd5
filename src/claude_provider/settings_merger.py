# claude_provider/settings_merger.py
"""
Map a provider profile onto the assistant's ``settings.json`` shape.

All functions here are pure: they never touch the filesystem.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple, Union

from claude_provider.models import ProviderProfile

EnvBlock = Dict[str, Union[str, int]]

# (profile field, settings variable) in output order
ENV_VARIABLES: List[Tuple[str, str]] = [
    ("anthropic_base_url", "ANTHROPIC_BASE_URL"),
    ("anthropic_auth_token", "ANTHROPIC_AUTH_TOKEN"),
    ("api_timeout_ms", "API_TIMEOUT_MS"),
    ("claude_code_disable_nonessential_traffic", "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC"),
    ("anthropic_model", "ANTHROPIC_MODEL"),
    ("anthropic_small_fast_model", "ANTHROPIC_SMALL_FAST_MODEL"),
    ("anthropic_default_sonnet_model", "ANTHROPIC_DEFAULT_SONNET_MODEL"),
    ("anthropic_default_opus_model", "ANTHROPIC_DEFAULT_OPUS_MODEL"),
    ("anthropic_default_haiku_model", "ANTHROPIC_DEFAULT_HAIKU_MODEL"),
]


def build_env_block(profile: ProviderProfile) -> EnvBlock:
    """
    Return the environment block for *profile*.

    Absent fields and empty strings are left out rather than written as
    ``null`` / ``""``.
    """
    block: EnvBlock = {}
    for field, variable in ENV_VARIABLES:
        value = getattr(profile.env, field)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        block[variable] = value
    return block


def merge_settings(document: Dict[str, Any], env_block: EnvBlock) -> Dict[str, Any]:
    """Copy of *document* with its ``env`` key replaced; key order is kept."""
    merged = dict(document)
    merged["env"] = dict(env_block)
    return merged


def render_settings(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
