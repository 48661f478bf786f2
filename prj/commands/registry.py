"""Command registry for auto-discovery."""

import pkgutil
import importlib
import inspect
import logging
from typing import Dict, Type, List
from .base import Command

logger = logging.getLogger('prj')


class CommandRegistry:
    """Registry for discovering and looking up commands.

    The table is built once, on first import, from the modules of the
    prj.commands package.
    """

    def __init__(self):
        """Initialize the registry."""
        self._commands: Dict[str, Type[Command]] = {}
        self._aliases: Dict[str, str] = {}
        self._discover_commands()

    def _discover_commands(self) -> None:
        """Discover all command classes in the commands package."""
        import prj.commands as commands_package

        for _, module_name, _ in pkgutil.iter_modules(commands_package.__path__):
            # Skip base and registry modules
            if module_name in ('base', 'registry'):
                continue

            module = importlib.import_module(f'prj.commands.{module_name}')

            for _, obj in inspect.getmembers(module, inspect.isclass):
                if (issubclass(obj, Command) and
                        obj is not Command and
                        obj.name != 'base'):
                    self._commands[obj.name] = obj
                    for alias in obj.aliases:
                        self._aliases[alias] = obj.name
                    logger.debug(f"Registered command: {obj.name} ({obj.description})")

    def get(self, name: str) -> Type[Command]:
        """Get a command class by name or alias.

        Args:
            name: Command name or alias

        Returns:
            Command class

        Raises:
            KeyError: If command not found
        """
        name = self._aliases.get(name, name)
        if name not in self._commands:
            raise KeyError(f"Unknown command: {name}")
        return self._commands[name]

    def list_commands(self) -> List[str]:
        """Get list of available command names.

        Returns:
            List of command names
        """
        return sorted(self._commands.keys())

    def get_all_commands(self) -> Dict[str, Type[Command]]:
        """Get all registered commands.

        Returns:
            Dictionary mapping command names to classes
        """
        return self._commands.copy()


# Global registry instance
registry = CommandRegistry()
