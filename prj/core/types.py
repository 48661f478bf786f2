"""Core types for the status-aggregation engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UpstreamKind(Enum):
    """How divergence was measured for a checkout."""
    NONE = "none"
    TRACKED = "tracked"


@dataclass(frozen=True)
class RepoIdentifier:
    """Parsed repository identifier (owner and name are lowercased)."""
    owner: str
    name: str
    raw: str = ""

    @property
    def display_name(self) -> str:
        """Get the owner/name form used in reports."""
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class InspectionResult:
    """Outcome of inspecting one checkout.

    Produced once per inspection, consumed once by the formatter.
    """
    owner: str
    name: str
    installed: bool
    branch: str = ""
    upstream_kind: UpstreamKind = UpstreamKind.NONE
    behind: int = 0
    ahead: int = 0
    changed_files: int = 0
    # Ref the divergence counts were computed against, if any
    compare_ref: Optional[str] = None
    fetch_failed: bool = False

    @property
    def display_name(self) -> str:
        """Get the owner/name form used in reports."""
        return f"{self.owner}/{self.name}"

    @property
    def is_clean(self) -> bool:
        """Check if the checkout has nothing to pull, push or commit.

        Without a tracking upstream there is no notion of "behind", so only
        the ahead count and working-tree changes are considered.
        """
        if not self.installed or self.fetch_failed:
            return False
        if self.upstream_kind == UpstreamKind.TRACKED:
            return self.behind == 0 and self.ahead == 0 and self.changed_files == 0
        return self.ahead == 0 and self.changed_files == 0


@dataclass(frozen=True)
class BatchWidths:
    """Column widths shared by every line of one report."""
    max_display_name_width: int = 0
    max_branch_width: int = 0
