# claude_provider/commands/use.py
"""
Run the assistant with one provider's settings swapped in.
"""
from __future__ import annotations

import logging
from typing import Sequence

from claude_provider.context import ProviderContext

logger = logging.getLogger(__name__)


def use_action(ctx: ProviderContext, provider: str, args: Sequence[str] = ()) -> int:
    """
    Swap *provider* into settings.json, run the assistant, restore.

    Errors propagate as :class:`~claude_provider.errors.ProviderError`;
    settings.json has been restored by the time they reach the caller
    (except for ``SettingsRestoreError``).
    """
    logger.debug("use %s %s", provider, list(args))
    return ctx.new_transaction().run(provider, list(args))
