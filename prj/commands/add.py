"""Add command: register a repository identifier."""

import argparse
import logging

from colorama import Fore, Style

from .base import Command
from ..core.errors import ParseError
from ..core.identifier import parse
from ..core.layout import is_installed, repo_location
from ..core.registry import Registry

logger = logging.getLogger('prj')


class AddCommand(Command):
    """Append a repository identifier to the registry."""

    name = "add"
    description = "Add a repository to the registry"
    aliases = ("a",)

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            'identifier',
            help='Repository identifier, e.g. git@github.com:user/repo.git'
        )

    def run(self, args: argparse.Namespace) -> int:
        raw = args.identifier.strip()
        try:
            identifier = parse(raw)
        except ParseError as e:
            logger.error(f"Invalid repository identifier: {e}")
            logger.error("Expected format: git@github.com:username/repo.git")
            return 1

        registry = Registry(self.config.registry_path)
        if registry.contains(raw):
            logger.error(f"Repository {identifier.display_name} is already in the registry")
            return 1

        registry.append(raw)
        print(f"{Fore.GREEN}Added {identifier.display_name} to registry{Style.RESET_ALL}")

        location = repo_location(self.config.checkout_root, identifier)
        if is_installed(location):
            print(f"{identifier.display_name} already present at {location}")
        else:
            print(f"{Fore.YELLOW}{identifier.display_name} is not installed "
                  f"(expected at {location}){Style.RESET_ALL}")
        return 0
