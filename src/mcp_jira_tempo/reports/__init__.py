"""Report and aggregation engine for the time tracking tools."""

from .fanout import (
    Outcome,
    WorkerData,
    apply_issue_keys,
    attempt,
    fetch_member_worklogs,
    gather_worker_data,
    lookup_display_name,
    resolve_display_names,
    resolve_issue_keys,
    resolve_plan_labels,
)
from .plans import render_plans
from .timesheet import render_timesheet
from .workers import resolve_workers
from .worklogs import period_title, render_team, render_time_summary

__all__ = [
    "Outcome",
    "WorkerData",
    "apply_issue_keys",
    "attempt",
    "fetch_member_worklogs",
    "gather_worker_data",
    "lookup_display_name",
    "period_title",
    "render_plans",
    "render_team",
    "render_time_summary",
    "render_timesheet",
    "resolve_display_names",
    "resolve_issue_keys",
    "resolve_plan_labels",
    "resolve_workers",
]
