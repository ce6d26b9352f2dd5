# commands/test_list_action.py
import pytest
from rich.console import Console
from rich.table import Table

from claude_provider.commands.list_providers import list_action
from claude_provider.models import ProviderProfile


@pytest.fixture
def printed(monkeypatch):
    out = []
    monkeypatch.setattr(Console, "print", lambda self, obj="", **kw: out.append(obj))
    return out


def test_list_empty(provider_ctx, printed):
    list_action(provider_ctx)
    assert any("No providers configured" in str(o) for o in printed)


def test_list_table(provider_ctx, printed):
    provider_ctx.store.save(
        ProviderProfile.create("acme", "https://api.acme.test", "k", default_model="big")
    )
    provider_ctx.shell.register("acme")
    provider_ctx.store.save(ProviderProfile.create("bare", "https://bare.test", "k"))

    list_action(provider_ctx)

    tables = [o for o in printed if isinstance(o, Table)]
    assert len(tables) == 1
    table = tables[0]
    assert [c.header for c in table.columns] == ["Provider", "Base URL", "Model", "Shell function"]
    assert table.row_count == 2
    assert list(table.columns[0].cells) == ["acme", "bare"]
    assert list(table.columns[2].cells) == ["big", "-"]
    assert "missing" in list(table.columns[3].cells)[1]


def test_list_marks_unreadable_profile(provider_ctx, paths, printed):
    paths.providers_dir.mkdir(parents=True)
    (paths.providers_dir / "broken.json").write_text("{ nope")

    list_action(provider_ctx)

    table = next(o for o in printed if isinstance(o, Table))
    assert "unreadable" in list(table.columns[1].cells)[0]
