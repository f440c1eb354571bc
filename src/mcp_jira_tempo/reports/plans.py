"""Plan (resource allocation) listing."""

from ..models.constants import EMPTY_CELL
from ..models.tempo import TempoPlan
from ..utils.dates import DateRange, format_seconds
from .markdown import or_empty, render_table, seconds_or_empty, truncate

DESCRIPTION_LIMIT = 60


def sort_plans(plans: list[TempoPlan]) -> list[TempoPlan]:
    """Order by start date, then plan item ID."""
    return sorted(plans, key=lambda p: (p.start_date, p.plan_item.id))


def plan_range(plan: TempoPlan) -> str:
    if plan.start_date == plan.end_date:
        return plan.start_date
    return f"{plan.start_date} → {plan.end_date}"


def render_plans(
    title: str,
    display_name: str,
    plans: list[TempoPlan],
    labels: dict[str, str],
    date_range: DateRange,
) -> str:
    """
    Render a user's plans as a table with the total planned time.

    Args:
        title: Heading, e.g. "Plans for week 2026-02-09 → 2026-02-13"
        display_name: Name of the plans' assignee
        plans: Plans to list
        labels: Plan item labels keyed by ``PlanReference.cache_key``
        date_range: Queried period, used by the empty message

    Returns:
        Markdown text
    """
    if not plans:
        return (
            f"No plans found for this period "
            f"({date_range.from_str} → {date_range.to_str})."
        )

    ordered = sort_plans(plans)
    rows = []
    for plan in ordered:
        total = plan.effective_planned_seconds
        rows.append(
            [
                labels.get(plan.plan_item.cache_key, plan.plan_item.id),
                plan_range(plan),
                seconds_or_empty(plan.planned_seconds_per_day),
                format_seconds(total) if total > 0 else EMPTY_CELL,
                or_empty(truncate(plan.description, DESCRIPTION_LIMIT)),
            ]
        )

    parts = [
        f"### {title} — {display_name}\n",
        render_table(
            [
                "Issue / Project",
                "Date Range",
                "Planned/Day",
                "Total Planned",
                "Description",
            ],
            rows,
        ),
        f"\n**Total planned: {format_seconds(sum(p.effective_planned_seconds for p in ordered))}**",
    ]
    return "\n".join(parts)
