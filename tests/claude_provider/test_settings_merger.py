# tests/claude_provider/test_settings_merger.py
import json

from claude_provider.models import ProviderEnv, ProviderProfile
from claude_provider.settings_merger import build_env_block, merge_settings, render_settings


def test_acme_scenario():
    profile = ProviderProfile.create(
        "acme",
        "https://api.acme.test",
        "tok-123",
        default_model="acme-large",
        haiku_model="",
    )
    assert build_env_block(profile) == {
        "ANTHROPIC_BASE_URL": "https://api.acme.test",
        "ANTHROPIC_AUTH_TOKEN": "tok-123",
        "API_TIMEOUT_MS": "3000000",
        "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC": 1,
        "ANTHROPIC_MODEL": "acme-large",
        "ANTHROPIC_SMALL_FAST_MODEL": "acme-large",
        "ANTHROPIC_DEFAULT_SONNET_MODEL": "acme-large",
        "ANTHROPIC_DEFAULT_OPUS_MODEL": "acme-large",
    }


def test_empty_default_model_keeps_only_haiku():
    profile = ProviderProfile.create(
        "acme", "https://api.acme.test", "tok", default_model="", haiku_model="tiny"
    )
    block = build_env_block(profile)
    assert block["ANTHROPIC_DEFAULT_HAIKU_MODEL"] == "tiny"
    for key in (
        "ANTHROPIC_MODEL",
        "ANTHROPIC_SMALL_FAST_MODEL",
        "ANTHROPIC_DEFAULT_SONNET_MODEL",
        "ANTHROPIC_DEFAULT_OPUS_MODEL",
    ):
        assert key not in block


def test_hand_edited_profile_without_defaults():
    # timeout and traffic flag absent: nothing is invented
    profile = ProviderProfile(
        name="bare",
        env=ProviderEnv(anthropic_base_url="https://b.test", anthropic_model=""),
    )
    assert build_env_block(profile) == {"ANTHROPIC_BASE_URL": "https://b.test"}


def test_traffic_flag_zero_is_kept():
    profile = ProviderProfile(
        name="p", env=ProviderEnv(claude_code_disable_nonessential_traffic=0)
    )
    assert build_env_block(profile) == {"CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC": 0}


def test_merge_replaces_env_and_keeps_key_order():
    doc = {"model": "opus", "env": {"OLD": "1"}, "permissions": {}}
    merged = merge_settings(doc, {"NEW": "2"})

    assert list(merged) == ["model", "env", "permissions"]
    assert merged["env"] == {"NEW": "2"}
    # input untouched
    assert doc["env"] == {"OLD": "1"}


def test_merge_adds_env_when_missing():
    merged = merge_settings({"model": "opus"}, {"A": "b"})
    assert merged == {"model": "opus", "env": {"A": "b"}}


def test_render_is_pretty_json_with_newline():
    text = render_settings({"env": {"K": "ü"}})
    assert text.endswith("\n")
    assert "ü" in text
    assert json.loads(text) == {"env": {"K": "ü"}}
    assert '\n  "env"' in text
