# claude_provider/__init__.py
"""
claude-provider package root.

Early-loads environment variables from a .env file so that
``CLAUDE_CONFIG_DIR`` / ``CLAUDE_PROVIDER_BINARY`` / ``CLAUDE_PROVIDER_HOME``
can be set per project without exporting them in the shell.

Nothing else should be imported from here to keep side-effects minimal.
"""
from __future__ import annotations

import logging

from dotenv import load_dotenv

__version__ = "0.1.0"

if load_dotenv():  # returns True if a .env file was found
    logging.getLogger(__name__).debug(".env loaded successfully")
