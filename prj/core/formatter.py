"""Status line rendering."""

from typing import List

from colorama import Fore, Style

from .types import BatchWidths, InspectionResult

BEHIND_GLYPH = "↓"
AHEAD_GLYPH = "↑"
CLEAN_MARKER = "✓ clean"
FETCH_FAILED_MARKER = "fetch failed"


def _paint(text: str, color: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def badges(result: InspectionResult, color: bool = True) -> List[str]:
    """Build the bracketed badges for an installed checkout, in display order.

    Args:
        result: Inspection result of an installed checkout
        color: Whether to wrap badges in ANSI color codes

    Returns:
        Badges for behind, ahead, changed files and fetch failure, or a
        single clean badge when none of those apply
    """
    parts = []
    if result.behind > 0:
        parts.append(_paint(f"[{result.behind}{BEHIND_GLYPH}]", Fore.BLUE, color))
    if result.ahead > 0:
        parts.append(_paint(f"[{result.ahead}{AHEAD_GLYPH}]", Fore.YELLOW, color))
    if result.changed_files > 0:
        parts.append(_paint(f"[{result.changed_files} changes]", Fore.RED, color))
    if result.fetch_failed:
        parts.append(_paint(f"[{FETCH_FAILED_MARKER}]", Fore.MAGENTA, color))
    if not parts:
        parts.append(_paint(f"[{CLEAN_MARKER}]", Fore.GREEN, color))
    return parts


def format_status(result: InspectionResult, widths: BatchWidths, color: bool = True) -> str:
    """Render one inspection result as an aligned report line.

    Args:
        result: Inspection result
        widths: Column widths computed for the whole batch
        color: Whether to emit ANSI color codes

    Returns:
        Rendered line (without numbering)
    """
    if not result.installed:
        return f"{result.display_name}: Not installed"

    name = result.display_name.ljust(widths.max_display_name_width)
    # Pad outside the color codes so escape sequences don't count toward width
    padding = " " * max(widths.max_branch_width - len(result.branch), 0)
    branch = f"git:({_paint(result.branch, Fore.BLUE, color)}){padding}"

    return " ".join([name, branch, *badges(result, color)])
