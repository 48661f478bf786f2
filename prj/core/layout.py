"""On-disk checkout layout: root/owner/name."""

import os
import logging
from typing import Iterable, List

from .types import RepoIdentifier

logger = logging.getLogger('prj')


def repo_location(root: str, identifier: RepoIdentifier) -> str:
    """Get the checkout path for a repository.

    Args:
        root: Checkout root directory
        identifier: Parsed repository identifier

    Returns:
        Path of the form root/owner/name
    """
    return os.path.join(root, identifier.owner, identifier.name)


def is_installed(location: str) -> bool:
    """Check if a checkout exists at the given location."""
    return os.path.isdir(location)


def find_unexpected_directories(root: str, identifiers: Iterable[RepoIdentifier]) -> List[str]:
    """Find owner/name directories under root that are not registered.

    Args:
        root: Checkout root directory
        identifiers: Registered repository identifiers

    Returns:
        Sorted list of unexpected paths relative to root (owner/name)
    """
    expected = {(i.owner, i.name) for i in identifiers}
    unexpected = []

    try:
        owners = sorted(os.listdir(root))
    except OSError as e:
        logger.warning(f"Could not scan {root}: {e}")
        return []

    for owner in owners:
        owner_dir = os.path.join(root, owner)
        # Skip hidden entries such as the registry file or log directories
        if owner.startswith('.') or not os.path.isdir(owner_dir):
            continue
        try:
            names = sorted(os.listdir(owner_dir))
        except OSError as e:
            logger.warning(f"Could not scan {owner_dir}: {e}")
            continue
        for name in names:
            if not os.path.isdir(os.path.join(owner_dir, name)):
                continue
            if (owner, name) not in expected:
                unexpected.append(f"{owner}/{name}")

    return unexpected


def is_within(root: str, location: str) -> bool:
    """Check if location resolves to a path strictly below root."""
    real_root = os.path.realpath(root)
    real_location = os.path.realpath(location)
    return os.path.commonpath([real_root, real_location]) == real_root and real_location != real_root
