"""Aggregation scheduler: concurrent inspection with ordered, aligned output."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from .errors import InspectionError, ParseError
from .formatter import format_status
from .identifier import parse
from .inspector import Inspector
from .layout import is_installed, repo_location
from .types import BatchWidths, InspectionResult, RepoIdentifier
from ..vcs.base import VcsClient, VcsError

logger = logging.getLogger('prj')

# (identifier, checkout location) for a parsed entry, None for a malformed one
Entry = Optional[Tuple[RepoIdentifier, str]]


class StatusReporter:
    """Builds the status report for a batch of registered repositories.

    The report is produced in three phases:

    1. Widths pass: parse every identifier and resolve the current branch
       of every installed checkout to size the name and branch columns.
    2. Inspection: one concurrent unit per entry, each writing exactly one
       pre-allocated slot keyed by the entry's original index.
    3. Render: after all units have finished, format the filled slots in
       index order.
    """

    def __init__(
        self,
        checkout_root: str,
        inspector: Inspector,
        vcs: VcsClient,
        max_workers: Optional[int] = None,
        color: bool = True
    ):
        """Initialize status reporter.

        Args:
            checkout_root: Root directory holding owner/name checkouts
            inspector: Inspector used for each repository
            vcs: Client used for the branch probe in the widths pass
            max_workers: Maximum concurrent inspections (None = one per entry)
            color: Whether rendered lines carry ANSI color codes
        """
        self.checkout_root = checkout_root
        self.inspector = inspector
        self.vcs = vcs
        self.max_workers = max_workers
        self.color = color

    def resolve(self, identifiers: Sequence[str]) -> List[Entry]:
        """Parse identifiers and map them to checkout locations.

        Malformed identifiers are logged and yield None at their index.
        """
        entries: List[Entry] = []
        for raw in identifiers:
            try:
                identifier = parse(raw)
            except ParseError as e:
                logger.error(f"Skipping invalid identifier {raw!r}: {e.kind.value}")
                entries.append(None)
                continue
            entries.append((identifier, repo_location(self.checkout_root, identifier)))
        return entries

    def compute_widths(self, entries: Sequence[Entry]) -> BatchWidths:
        """Compute column widths across the batch.

        Only the local branch query is issued; entries whose branch cannot
        be resolved are left out of the branch width.
        """
        max_name = 0
        max_branch = 0
        for entry in entries:
            if entry is None:
                continue
            identifier, location = entry
            max_name = max(max_name, len(identifier.display_name))

            if not is_installed(location):
                continue
            try:
                branch = self.vcs.current_branch(location)
            except VcsError as e:
                logger.debug(f"No branch for {identifier.display_name} in widths pass: {e}")
                continue
            max_branch = max(max_branch, len(branch))

        return BatchWidths(max_display_name_width=max_name, max_branch_width=max_branch)

    def inspect_all(self, entries: Sequence[Entry]) -> List[Optional[InspectionResult]]:
        """Inspect every parsed entry concurrently.

        Returns:
            One slot per entry in original order; None where the entry was
            malformed or its inspection failed
        """
        slots: List[Optional[InspectionResult]] = [None] * len(entries)
        indexed = [(i, entry) for i, entry in enumerate(entries) if entry is not None]
        if not indexed:
            return slots

        workers = self.max_workers or len(indexed)
        logger.info(f"Inspecting {len(indexed)} repositories with {workers} workers")

        # Leaving the with-block waits for every unit to finish
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for index, (identifier, location) in indexed:
                executor.submit(self._inspect_into, slots, index, identifier, location)

        return slots

    def _inspect_into(
        self,
        slots: List[Optional[InspectionResult]],
        index: int,
        identifier: RepoIdentifier,
        location: str
    ) -> None:
        """Inspect one repository and store the result in its own slot."""
        try:
            slots[index] = self.inspector.inspect(identifier, location)
        except InspectionError as e:
            logger.error(f"Error checking status for {identifier.raw}: {e}")
        except Exception as e:
            logger.error(f"Unexpected error checking {identifier.raw}: {e}", exc_info=True)

    def render(self, slots: Sequence[Optional[InspectionResult]], widths: BatchWidths) -> List[str]:
        """Format filled slots in index order."""
        return [
            format_status(result, widths, color=self.color)
            for result in slots
            if result is not None
        ]

    def report(self, identifiers: Sequence[str]) -> List[str]:
        """Build the status report.

        Args:
            identifiers: Raw identifiers in registry order

        Returns:
            Rendered lines, one per resolvable entry, in registry order
        """
        entries = self.resolve(identifiers)
        widths = self.compute_widths(entries)
        slots = self.inspect_all(entries)
        return self.render(slots, widths)
