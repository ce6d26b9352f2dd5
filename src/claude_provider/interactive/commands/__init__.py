# claude_provider/interactive/commands/__init__.py
"""Interactive commands package."""


def register_all_commands() -> None:
    """
    Register every interactive command in the central registry.
    """
    # Delay imports to avoid circular dependencies
    from claude_provider.interactive.registry import InteractiveCommandRegistry
    from claude_provider.interactive.commands.help import HelpCommand
    from claude_provider.interactive.commands.exit import ExitCommand
    from claude_provider.interactive.commands.clear import ClearCommand
    from claude_provider.interactive.commands.setup import SetupCommand
    from claude_provider.interactive.commands.remove import RemoveCommand
    from claude_provider.interactive.commands.list_providers import ListCommand
    from claude_provider.interactive.commands.detect import DetectCommand
    from claude_provider.interactive.commands.use import UseCommand

    reg = InteractiveCommandRegistry
    reg.register(HelpCommand())
    reg.register(ExitCommand())
    reg.register(ClearCommand())
    reg.register(SetupCommand())
    reg.register(RemoveCommand())
    reg.register(ListCommand())
    reg.register(DetectCommand())
    reg.register(UseCommand())
