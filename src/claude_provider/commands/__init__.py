# claude_provider/commands/__init__.py
"""Actions shared by the Typer CLI and the interactive shell."""
