"""Status command: aggregated sync status for every registered repository."""

import sys
import argparse
import logging

from colorama import Fore, Style

from .base import Command
from ..core.errors import ParseError
from ..core.identifier import parse
from ..core.inspector import FetchPolicy, Inspector
from ..core.layout import find_unexpected_directories
from ..core.registry import Registry
from ..core.scheduler import StatusReporter
from ..utils.progress import Spinner

logger = logging.getLogger('prj')


class StatusCommand(Command):
    """Report branch, divergence and working-tree state of every checkout."""

    name = "status"
    description = "Show git status for all projects"
    aliases = ("s",)

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            '--no-fetch',
            action='store_true',
            help='Compare against the last fetched state instead of fetching'
        )
        parser.add_argument(
            '--on-fetch-error',
            choices=[p.value for p in FetchPolicy],
            dest='fetch_policy',
            help='Drop (omit) or badge (mark) repositories whose fetch fails (default: omit)'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )

    def run(self, args: argparse.Namespace) -> int:
        identifiers = Registry(self.config.registry_path).read()
        if not identifiers:
            print(f"{Fore.YELLOW}No repositories configured. "
                  f"Run 'prj add <repo>' to add one.{Style.RESET_ALL}")
            return 0

        color = not getattr(args, 'no_color', False) and sys.stdout.isatty()
        inspector = Inspector(
            self.vcs,
            fetch=self.config.fetch,
            fetch_timeout=self.config.fetch_timeout,
            fetch_policy=self.config.fetch_policy
        )
        reporter = StatusReporter(
            checkout_root=self.config.checkout_root,
            inspector=inspector,
            vcs=self.vcs,
            max_workers=self.config.max_workers,
            color=color
        )

        with Spinner("Checking projects..."):
            lines = reporter.report(identifiers)

        for count, line in enumerate(lines, start=1):
            print(f"{count:3d} {line}")

        self._print_unexpected(identifiers, color)
        return 0

    def _print_unexpected(self, identifiers, color: bool) -> None:
        """List checkout directories that are not in the registry."""
        parsed = []
        for raw in identifiers:
            try:
                parsed.append(parse(raw))
            except ParseError:
                continue

        unexpected = find_unexpected_directories(self.config.checkout_root, parsed)
        if not unexpected:
            return

        header = "Unexpected directories (not in registry):"
        print()
        print(f"{Fore.YELLOW}{header}{Style.RESET_ALL}" if color else header)
        for path in unexpected:
            print(f"  {path}")
