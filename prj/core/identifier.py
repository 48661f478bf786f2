"""Repository identifier parsing."""

import os

from .errors import ParseError, ParseErrorKind
from .types import RepoIdentifier

GIT_SUFFIX = ".git"


def parse(raw: str) -> RepoIdentifier:
    """Parse a raw identifier of the form ``transport:owner/name[.git]``.

    Args:
        raw: Identifier as written in the registry file

    Returns:
        RepoIdentifier with lowercased owner and name

    Raises:
        ParseError: If the transport or path part is malformed
    """
    parts = raw.strip().split(":")
    if len(parts) != 2:
        raise ParseError(ParseErrorKind.MALFORMED_TRANSPORT, raw)

    path = parts[1]
    if path.endswith(GIT_SUFFIX):
        path = path[:-len(GIT_SUFFIX)]

    path_parts = path.split("/")
    if len(path_parts) != 2 or not all(path_parts):
        raise ParseError(ParseErrorKind.MALFORMED_PATH, raw)

    if any(part in (".", "..") or os.sep in part or "\\" in part for part in path_parts):
        raise ParseError(ParseErrorKind.MALFORMED_PATH, raw)

    owner, name = path_parts
    return RepoIdentifier(owner=owner.lower(), name=name.lower(), raw=raw)


def normalize(raw: str) -> str:
    """Get a comparison key for duplicate detection.

    Args:
        raw: Identifier as written in the registry file

    Returns:
        Lowercased identifier without a trailing .git suffix
    """
    key = raw.strip().lower()
    if key.endswith(GIT_SUFFIX):
        key = key[:-len(GIT_SUFFIX)]
    return key
