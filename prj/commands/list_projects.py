"""List command: numbered registry entries without git status."""

import argparse
import logging

from .base import Command
from ..core.errors import ParseError
from ..core.identifier import parse
from ..core.registry import Registry

logger = logging.getLogger('prj')


class ListCommand(Command):
    """Print registered repositories without querying git."""

    name = "list"
    description = "List all projects without git status"
    aliases = ("l",)

    def run(self, args: argparse.Namespace) -> int:
        count = 0
        for raw in Registry(self.config.registry_path).read():
            try:
                identifier = parse(raw)
            except ParseError as e:
                logger.error(f"Skipping invalid identifier {raw!r}: {e.kind.value}")
                continue
            count += 1
            print(f"{count:3d} {identifier.display_name}")
        return 0
