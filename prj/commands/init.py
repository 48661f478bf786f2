"""Init command: create the checkout root and registry file."""

import os
import argparse
import logging

from colorama import Fore, Style

from .base import Command
from ..core.registry import Registry

logger = logging.getLogger('prj')


class InitCommand(Command):
    """Create the checkout root directory and a registry template."""

    name = "init"
    description = "Initialize the projects directory and registry file"

    def run(self, args: argparse.Namespace) -> int:
        root = self.config.checkout_root
        if os.path.isdir(root):
            print(f"{root} already exists")
        else:
            os.makedirs(root, exist_ok=True)
            print(f"{Fore.GREEN}Created {root}{Style.RESET_ALL}")

        registry = Registry(self.config.registry_path)
        if registry.create():
            print(f"{Fore.GREEN}Created {registry.path}{Style.RESET_ALL}")
        else:
            print(f"{registry.path} already exists")

        print(f"\nAdd repositories to {registry.path}, one per line, or run 'prj add <repo>'.")
        return 0
