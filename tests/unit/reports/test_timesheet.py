"""Tests for the timesheet report."""

from datetime import date

import pytest

from mcp_jira_tempo.reports.fanout import WorkerData, gather_worker_data
from mcp_jira_tempo.reports.timesheet import (
    daily_rows,
    issue_breakdown,
    render_timesheet,
    worker_totals,
)
from mcp_jira_tempo.utils.dates import DateRange
from tests.fixtures.tempo_mocks import make_schedule, make_worklog

ADA_WORKLOGS = [
    make_worklog("2026-02-09", 7200, "PROJ-1", billable=3600, description="Dev"),
    make_worklog("2026-02-10", 1800, "PROJ-2"),
]
ADA_SCHEDULE = make_schedule(("2026-02-09", 28800), ("2026-02-10", 28800))


@pytest.fixture
def ada():
    return WorkerData(
        account_id="acc-ada",
        display_name="Ada Lovelace",
        worklogs=list(ADA_WORKLOGS),
        schedule=list(ADA_SCHEDULE),
    )


def test_worker_totals():
    totals = worker_totals(ADA_WORKLOGS, ADA_SCHEDULE)

    assert totals.logged_seconds == 9000
    assert totals.billable_seconds == 3600
    assert totals.non_billable_seconds == 5400
    assert totals.required_seconds == 57600
    assert totals.difference_seconds == -48600
    assert totals.billable_percent == 40


def test_daily_rows_sum_to_logged(week):
    worklogs = ADA_WORKLOGS + [make_worklog("2026-02-12", 900, "PROJ-1")]
    rows = daily_rows(worklogs, ADA_SCHEDULE, week.days())

    assert [row.day for row in rows] == ["2026-02-09", "2026-02-10", "2026-02-12"]
    assert sum(row.logged_seconds for row in rows) == worker_totals(
        worklogs, ADA_SCHEDULE
    ).logged_seconds


def test_daily_rows_keep_days_with_only_required_time(week):
    rows = daily_rows([], make_schedule(("2026-02-11", 28800)), week.days())

    assert len(rows) == 1
    assert rows[0].day == "2026-02-11"
    assert rows[0].difference_seconds == -28800


def test_issue_breakdown_orders_by_time():
    worklogs = [
        make_worklog("2026-02-09", 600, "PROJ-1"),
        make_worklog("2026-02-09", 3600, "PROJ-2"),
        make_worklog("2026-02-10", 600, "PROJ-1"),
        make_worklog("2026-02-10", 300),
    ]

    assert issue_breakdown(worklogs) == [
        ("PROJ-2", 3600),
        ("PROJ-1", 1200),
        ("(no issue)", 300),
    ]


def test_render_by_worker(ada, week):
    report = render_timesheet(week, [ada], "worker", include_details=True)

    assert report.startswith("## Timesheet Report: 2026-02-09 → 2026-02-13\n")
    assert (
        "### Ada Lovelace\n"
        "**Logged:** 2h 30m | **Required:** 16h | **Difference:** -13h 30m\n"
        "**Billable:** 1h (40%) | **Non-billable:** 1h 30m (60%)\n"
    ) in report
    assert (
        "| Date | Logged | Billable | Required | Diff |\n"
        "|------|--------|----------|----------|------|\n"
        "| 2026-02-09 | 2h | 1h | 8h | -6h |\n"
        "| 2026-02-10 | 30m | — | 8h | -7h 30m |\n"
    ) in report
    assert "**Breakdown by issue:**" in report
    assert "| PROJ-1 | 2h |\n| PROJ-2 | 30m |" in report
    assert "**Breakdown by activity:**" in report
    assert "| Dev | 2h | 1h | 80% |" in report
    assert "| (no description) | 30m | — | 20% |" in report
    assert "---\n### Grand Total (1 workers)\n**Logged:** 2h 30m" in report


def test_render_by_worker_without_details(ada, week):
    report = render_timesheet(week, [ada], "worker", include_details=False)

    assert "Breakdown by issue" not in report
    assert "Breakdown by activity" not in report
    assert "| 2026-02-09 | 2h | 1h | 8h | -6h |" in report


def test_grid_only_for_multi_day_ranges_up_to_a_month(ada, single_day):
    assert "| Date | Logged |" not in render_timesheet(single_day, [ada])

    month = DateRange(date(2026, 2, 1), date(2026, 2, 28))
    assert "| Date | Logged |" in render_timesheet(month, [ada])

    quarter = DateRange(date(2026, 1, 1), date(2026, 3, 31))
    assert "| Date | Logged |" not in render_timesheet(quarter, [ada])


def test_grand_total_sums_workers(ada, week):
    bob = WorkerData(
        account_id="acc-bob",
        display_name="Bob Stone",
        worklogs=[make_worklog("2026-02-11", 3600, "PROJ-3", billable=3600, author="acc-bob")],
        schedule=make_schedule(("2026-02-11", 28800)),
    )

    report = render_timesheet(week, [ada, bob], "worker")

    assert (
        "### Grand Total (2 workers)\n"
        "**Logged:** 3h 30m | **Required:** 24h | **Difference:** -20h 30m\n"
        "**Billable:** 2h (57%) | **Non-billable:** 1h 30m (43%)\n"
    ) in report


@pytest.mark.asyncio
async def test_schedule_failure_degrades_required_time(mock_jira, mock_tempo, week):
    mock_tempo.get_worklogs.return_value = list(ADA_WORKLOGS)
    mock_tempo.get_user_schedule.side_effect = RuntimeError("schedule unavailable")

    workers = await gather_worker_data(mock_jira, mock_tempo, ["acc-ada"], week)
    report = render_timesheet(week, list(workers.values()), "worker")

    assert (
        "**Logged:** 2h 30m | **Required:** 0m | **Difference:** +2h 30m" in report
    )


def test_render_by_issue(week):
    ada = WorkerData(
        account_id="acc-ada",
        display_name="Ada Lovelace",
        worklogs=[
            make_worklog("2026-02-09", 7200, "PROJ-1", billable=7200),
            make_worklog("2026-02-10", 600),
        ],
    )
    bob = WorkerData(
        account_id="acc-bob",
        display_name="Bob Stone",
        worklogs=[
            make_worklog("2026-02-09", 10800, "PROJ-2", author="acc-bob"),
            make_worklog("2026-02-10", 1800, "PROJ-1", author="acc-bob"),
        ],
    )

    report = render_timesheet(week, [ada, bob], "issue")

    assert (
        "| Issue | Worker | Time |\n"
        "|-------|--------|------|\n"
        "| **PROJ-2** | | **3h** |\n"
        "| | Bob Stone | 3h |\n"
        "| **PROJ-1** | | **2h 30m** |\n"
        "| | Ada Lovelace | 2h |\n"
        "| | Bob Stone | 30m |\n"
        "| **(no issue)** | | **10m** |\n"
        "| | Ada Lovelace | 10m |"
    ) in report
    assert report.endswith("\n**Grand total: 5h 40m**")
    assert "Billable" not in report
