"""Remove command: unregister a repository and delete its checkout."""

import shutil
import argparse
import logging
from typing import List

from colorama import Fore, Style

from .base import Command
from ..core.errors import ParseError
from ..core.identifier import parse
from ..core.layout import is_installed, is_within, repo_location
from ..core.registry import Registry
from ..vcs.base import VcsError

logger = logging.getLogger('prj')


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


class RemoveCommand(Command):
    """Remove a repository from the registry and delete its checkout."""

    name = "rm"
    description = "Remove a project by index (as numbered by 'prj list')"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            'index',
            type=int,
            help='1-based project index'
        )
        parser.add_argument(
            '--yes', '-y',
            action='store_true',
            help='Skip confirmation prompt'
        )

    def unsaved_work(self, location: str) -> List[str]:
        """Describe work in a checkout that deleting it would lose.

        Args:
            location: Checkout path

        Returns:
            Human-readable issues (empty if nothing would be lost)
        """
        issues = []
        try:
            changed = self.vcs.changed_files(location)
            if changed:
                issues.append(_plural(changed, "uncommitted change", "uncommitted changes"))

            upstream = self.vcs.tracking_ref(location)
            if upstream:
                ahead = self.vcs.count_commits(location, upstream, "HEAD")
                if ahead:
                    issues.append(_plural(ahead, "unpushed commit", "unpushed commits"))

            stashes = self.vcs.stash_count(location)
            if stashes:
                issues.append(_plural(stashes, "stash", "stashes"))
        except VcsError as e:
            issues.append(f"could not inspect checkout ({e})")
        return issues

    def run(self, args: argparse.Namespace) -> int:
        registry = Registry(self.config.registry_path)
        entries = []
        for raw in registry.read():
            try:
                entries.append((raw, parse(raw)))
            except ParseError:
                continue

        if args.index < 1 or args.index > len(entries):
            logger.error(f"Index out of range. You have {len(entries)} projects.")
            return 1

        raw, identifier = entries[args.index - 1]
        location = repo_location(self.config.checkout_root, identifier)
        if not is_within(self.config.checkout_root, location):
            logger.error(f"Refusing to remove {location}: outside {self.config.checkout_root}")
            return 1
        installed = is_installed(location)

        issues = self.unsaved_work(location) if installed else []
        if issues:
            print(f"{Fore.YELLOW}Warning: {identifier.display_name} has unsaved work:{Style.RESET_ALL}")
            for issue in issues:
                print(f"  - {issue}")

        if not args.yes:
            try:
                answer = input(f"Remove {identifier.display_name}? [y/N]: ").strip().lower()
            except EOFError:
                answer = ""
            if answer not in ("y", "yes"):
                print("Cancelled.")
                return 0

        registry.remove(raw)
        if installed:
            shutil.rmtree(location)
            logger.info(f"Deleted {location}")

        print(f"Removed {identifier.display_name}")
        return 0
