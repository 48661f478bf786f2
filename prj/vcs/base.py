"""Base class for version-control clients."""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.errors import PrjError


class VcsError(PrjError):
    """A version-control query failed."""


class VcsClient(ABC):
    """Queries the inspector needs from a checkout.

    Implementations raise VcsError when a query fails. An absent tracking
    reference is not a failure: tracking_ref() returns None.
    """

    @abstractmethod
    def current_branch(self, repo_path: str) -> str:
        """Get the branch checked out at repo_path ('HEAD' when detached)."""
        pass

    @abstractmethod
    def fetch(self, repo_path: str, timeout: Optional[float] = None) -> None:
        """Refresh remote-tracking refs from the configured remote."""
        pass

    @abstractmethod
    def tracking_ref(self, repo_path: str) -> Optional[str]:
        """Get the upstream of the current branch, or None if unset."""
        pass

    @abstractmethod
    def ref_exists(self, repo_path: str, ref: str) -> bool:
        """Check if a ref resolves in the checkout."""
        pass

    @abstractmethod
    def count_commits(self, repo_path: str, base: str, head: str) -> int:
        """Count commits reachable from head but not from base."""
        pass

    @abstractmethod
    def changed_files(self, repo_path: str) -> int:
        """Count modified, added, deleted and untracked paths."""
        pass

    @abstractmethod
    def stash_count(self, repo_path: str) -> int:
        """Count stash entries."""
        pass
