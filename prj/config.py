"""Configuration management for prj."""

import os
from typing import Optional
from dataclasses import dataclass

from .core.inspector import FetchPolicy

DEFAULT_ROOT = os.path.join("~", "Projects")
REGISTRY_FILENAME = ".current-projects"
DEFAULT_FETCH_TIMEOUT = 30.0


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if number < 1:
        raise ValueError(f"{name} must be positive, got {number}")
    return number


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass
class Config:
    """Configuration for prj.

    Merges environment variables with CLI arguments.
    CLI arguments take precedence over environment variables.
    """

    registry_path: str
    checkout_root: str
    max_workers: Optional[int] = None
    fetch: bool = True
    fetch_timeout: Optional[float] = DEFAULT_FETCH_TIMEOUT
    fetch_policy: FetchPolicy = FetchPolicy.OMIT
    log_dir: Optional[str] = None

    @classmethod
    def from_env_and_args(
        cls,
        root: Optional[str] = None,
        registry: Optional[str] = None,
        max_workers: Optional[int] = None,
        fetch: bool = True,
        fetch_timeout: Optional[float] = None,
        fetch_policy: Optional[str] = None,
        log_dir: Optional[str] = None
    ) -> 'Config':
        """Create config from environment variables and CLI arguments.

        CLI arguments override environment variables.

        Args:
            root: Checkout root (overrides PRJ_ROOT)
            registry: Registry file path (overrides PRJ_REGISTRY)
            max_workers: Maximum concurrent inspections (overrides PRJ_WORKERS)
            fetch: Whether status fetches from remotes
            fetch_timeout: Seconds per fetch (overrides PRJ_FETCH_TIMEOUT)
            fetch_policy: 'omit' or 'mark'
            log_dir: Directory for log files (overrides PRJ_LOG_DIR)

        Returns:
            Config instance

        Raises:
            ValueError: If a value is invalid
        """
        final_root = root or os.getenv('PRJ_ROOT') or DEFAULT_ROOT
        final_root = os.path.abspath(os.path.expanduser(final_root))

        final_registry = registry or os.getenv('PRJ_REGISTRY')
        if final_registry:
            final_registry = os.path.abspath(os.path.expanduser(final_registry))
        else:
            final_registry = os.path.join(final_root, REGISTRY_FILENAME)

        if max_workers is not None and max_workers < 1:
            raise ValueError(f"Worker count must be positive, got {max_workers}")
        final_workers = max_workers or _env_int('PRJ_WORKERS')

        final_timeout = fetch_timeout if fetch_timeout is not None else _env_float('PRJ_FETCH_TIMEOUT')
        if final_timeout is None:
            final_timeout = DEFAULT_FETCH_TIMEOUT
        if final_timeout <= 0:
            # Non-positive timeout disables the limit
            final_timeout = None

        try:
            final_policy = FetchPolicy(fetch_policy) if fetch_policy else FetchPolicy.OMIT
        except ValueError:
            choices = ', '.join(p.value for p in FetchPolicy)
            raise ValueError(f"Unknown fetch policy {fetch_policy!r} (choose from {choices})")

        final_log_dir = log_dir or os.getenv('PRJ_LOG_DIR')
        if final_log_dir:
            final_log_dir = os.path.abspath(os.path.expanduser(final_log_dir))

        return cls(
            registry_path=final_registry,
            checkout_root=final_root,
            max_workers=final_workers,
            fetch=fetch,
            fetch_timeout=final_timeout,
            fetch_policy=final_policy,
            log_dir=final_log_dir
        )
