"""Markdown table helpers shared by the report renderers."""

from collections.abc import Sequence

from ..models.constants import EMPTY_CELL
from ..utils.dates import format_seconds


def table_row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def separator_row(headers: Sequence[str]) -> str:
    """Dash row whose column widths follow the header titles."""
    return "|" + "|".join("-" * (len(header) + 2) for header in headers) + "|"


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    lines = [table_row(headers), separator_row(headers)]
    lines.extend(table_row(row) for row in rows)
    return "\n".join(lines)


def truncate(text: str | None, limit: int) -> str:
    return (text or "")[:limit]


def or_empty(text: str | None) -> str:
    """Return the text, or the empty-cell marker when there is none."""
    return text or EMPTY_CELL


def seconds_or_empty(seconds: int) -> str:
    """Format a positive duration; zero renders as the empty-cell marker."""
    return format_seconds(seconds) if seconds > 0 else EMPTY_CELL


def percent(part: int, whole: int) -> int:
    """Whole-number percentage with halves rounded up; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return int(part * 100 / whole + 0.5)
