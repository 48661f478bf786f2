"""Main entry point for the prj CLI."""

from dotenv import load_dotenv
load_dotenv()

import os
import sys
import argparse
from typing import List, Optional

from colorama import just_fix_windows_console

from .config import Config
from .core.errors import RegistryUnavailable
from .core.logger import setup_logging
from .commands.registry import registry


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='prj',
        description='Keep a registry of git projects and report their sync status',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create ~/Projects and the registry file
  prj init

  # Register a repository (checked out at ~/Projects/user/repo)
  prj add git@github.com:user/repo.git

  # Show branch, ahead/behind and working-tree state of every project
  prj status

  # Same, without contacting remotes
  prj status --no-fetch

  # List projects without git status
  prj list
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Command to run',
        required=False
    )

    for command_name, command_class in registry.get_all_commands().items():
        command_parser = subparsers.add_parser(
            command_name,
            aliases=list(command_class.aliases),
            help=command_class.description
        )
        _add_common_args(command_parser)
        command_class.add_arguments(command_parser)

    return parser


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser.

    Args:
        parser: Parser to add arguments to
    """
    config_group = parser.add_argument_group('configuration')
    config_group.add_argument(
        '--root',
        help='Checkout root directory (default: ~/Projects, overrides PRJ_ROOT)'
    )
    config_group.add_argument(
        '--registry',
        help='Registry file (default: <root>/.current-projects, overrides PRJ_REGISTRY)'
    )
    config_group.add_argument(
        '--log-dir',
        help='Write a timestamped log file to this directory (overrides PRJ_LOG_DIR)'
    )
    config_group.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show informational log messages'
    )

    exec_group = parser.add_argument_group('execution control')
    exec_group.add_argument(
        '--workers',
        type=int,
        metavar='N',
        help='Maximum concurrent repository checks (default: one per repository)'
    )
    exec_group.add_argument(
        '--fetch-timeout',
        type=float,
        metavar='SECONDS',
        help='Per-repository fetch timeout, 0 for none (default: 30, overrides PRJ_FETCH_TIMEOUT)'
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    command_class = registry.get(args.command)
    logger = setup_logging(
        command=command_class.name,
        log_dir=args.log_dir or os.getenv('PRJ_LOG_DIR'),
        verbose=args.verbose
    )
    just_fix_windows_console()

    try:
        config = Config.from_env_and_args(
            root=args.root,
            registry=args.registry,
            max_workers=args.workers,
            fetch=not getattr(args, 'no_fetch', False),
            fetch_timeout=args.fetch_timeout,
            fetch_policy=getattr(args, 'fetch_policy', None),
            log_dir=args.log_dir
        )

        logger.info("Configuration loaded")
        logger.info(f"  Checkout root: {config.checkout_root}")
        logger.info(f"  Registry: {config.registry_path}")

        command = command_class(config)
        return command.run(args)

    except RegistryUnavailable as e:
        logger.error(f"{e}. Please run 'prj init' first")
        return 1
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("\nOperation cancelled by user")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
