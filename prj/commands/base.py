"""Base class for prj commands."""

import argparse
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..config import Config
from ..vcs.base import VcsClient
from ..vcs.git import GitClient


class Command(ABC):
    """Abstract base class for CLI commands."""

    # Class attributes to be overridden by subclasses
    name: str = "base"
    description: str = "Base command"
    aliases: Tuple[str, ...] = ()

    def __init__(self, config: Config, vcs: Optional[VcsClient] = None):
        """Initialize command.

        Args:
            config: Resolved configuration
            vcs: Version-control client (default: GitClient)
        """
        self.config = config
        self.vcs = vcs or GitClient()

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add command-specific arguments to the subcommand parser.

        Args:
            parser: Parser for this subcommand
        """
        pass

    @abstractmethod
    def run(self, args: argparse.Namespace) -> int:
        """Execute the command.

        Args:
            args: Parsed command line arguments

        Returns:
            Process exit code
        """
        pass
