"""Repository inspector: branch, upstream divergence and working-tree state."""

import logging
from enum import Enum
from typing import Optional, Tuple

from .errors import InspectionError, InspectionErrorKind
from .layout import is_installed
from .types import InspectionResult, RepoIdentifier, UpstreamKind
from ..vcs.base import VcsClient, VcsError

logger = logging.getLogger('prj')

DEFAULT_BRANCHES = ("main", "master")


class FetchPolicy(Enum):
    """What to do with a checkout whose fetch failed."""
    OMIT = "omit"  # log and drop the row
    MARK = "mark"  # keep the row with a fetch-failed badge


class Inspector:
    """Inspects local checkouts through a VcsClient."""

    def __init__(
        self,
        vcs: VcsClient,
        fetch: bool = True,
        fetch_timeout: Optional[float] = 30,
        fetch_policy: FetchPolicy = FetchPolicy.OMIT
    ):
        """Initialize inspector.

        Args:
            vcs: Version-control client used for every query
            fetch: Whether to fetch from the remote before counting
            fetch_timeout: Seconds before a fetch is abandoned (None = no limit)
            fetch_policy: How a failed fetch is reported
        """
        self.vcs = vcs
        self.fetch = fetch
        self.fetch_timeout = fetch_timeout
        self.fetch_policy = fetch_policy

    def inspect(self, identifier: RepoIdentifier, location: str) -> InspectionResult:
        """Inspect the checkout of one repository.

        Args:
            identifier: Parsed repository identifier
            location: Checkout path for the repository

        Returns:
            InspectionResult; installed=False if the checkout does not exist

        Raises:
            InspectionError: If the branch cannot be resolved, or the fetch
                fails under the omit policy
        """
        if not is_installed(location):
            return InspectionResult(
                owner=identifier.owner,
                name=identifier.name,
                installed=False
            )

        try:
            branch = self.vcs.current_branch(location)
        except VcsError as e:
            raise InspectionError(
                InspectionErrorKind.BRANCH_RESOLUTION_FAILED, location, str(e)
            ) from e

        if self.fetch:
            try:
                self.vcs.fetch(location, timeout=self.fetch_timeout)
            except VcsError as e:
                if self.fetch_policy == FetchPolicy.OMIT:
                    raise InspectionError(
                        InspectionErrorKind.FETCH_FAILED, location, str(e)
                    ) from e
                logger.warning(f"Fetch failed for {identifier.display_name}: {e}")
                return InspectionResult(
                    owner=identifier.owner,
                    name=identifier.name,
                    installed=True,
                    branch=branch,
                    changed_files=self._changed_files(location),
                    fetch_failed=True
                )

        upstream_kind, compare_ref, behind, ahead = self._divergence(location)

        return InspectionResult(
            owner=identifier.owner,
            name=identifier.name,
            installed=True,
            branch=branch,
            upstream_kind=upstream_kind,
            behind=behind,
            ahead=ahead,
            changed_files=self._changed_files(location),
            compare_ref=compare_ref
        )

    def _divergence(self, location: str) -> Tuple[UpstreamKind, Optional[str], int, int]:
        """Compute (kind, compare_ref, behind, ahead) for a checkout."""
        upstream = self.vcs.tracking_ref(location)
        if upstream:
            behind = self._count(location, "HEAD", upstream)
            ahead = self._count(location, upstream, "HEAD")
            return UpstreamKind.TRACKED, upstream, behind, ahead

        default_branch = self._default_branch(location)
        if default_branch is None:
            return UpstreamKind.NONE, None, 0, 0

        ahead = self._count(location, default_branch, "HEAD")
        return UpstreamKind.NONE, default_branch, 0, ahead

    def _default_branch(self, location: str) -> Optional[str]:
        for candidate in DEFAULT_BRANCHES:
            if self.vcs.ref_exists(location, candidate):
                return candidate
        return None

    def _count(self, location: str, base: str, head: str) -> int:
        try:
            return self.vcs.count_commits(location, base, head)
        except VcsError as e:
            logger.warning(f"Failed to count commits {base}..{head} in {location}: {e}")
            return 0

    def _changed_files(self, location: str) -> int:
        try:
            return self.vcs.changed_files(location)
        except VcsError as e:
            logger.warning(f"Failed to list changes in {location}: {e}")
            return 0
