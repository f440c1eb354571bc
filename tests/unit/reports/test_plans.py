"""Tests for the plan listing."""

from mcp_jira_tempo.models.tempo import PlanReference, TempoPlan
from mcp_jira_tempo.reports.plans import render_plans
from mcp_jira_tempo.reports.worklogs import period_title
from tests.fixtures.tempo_mocks import MOCK_PLANS_RESPONSE

PLANS = [TempoPlan.from_api_response(item) for item in MOCK_PLANS_RESPONSE["results"]]
LABELS = {
    "ISSUE:10001": "PROJ-123 — Fix login redirect",
    "PROJECT:10000": "PROJ — Project",
}


def test_render_plans_empty(week):
    assert render_plans("Plans", "Ada Lovelace", [], {}, week) == (
        "No plans found for this period (2026-02-09 → 2026-02-13)."
    )


def test_render_plans(week):
    text = render_plans(
        period_title("Plans", week), "Ada Lovelace", list(reversed(PLANS)), LABELS, week
    )

    assert text == (
        "### Plans for week 2026-02-09 → 2026-02-13 — Ada Lovelace\n"
        "\n"
        "| Issue / Project | Date Range | Planned/Day | Total Planned | Description |\n"
        "|-----------------|------------|-------------|---------------|-------------|\n"
        "| PROJ-123 — Fix login redirect | 2026-02-09 → 2026-02-13 | 4h | 16h | Sprint work |\n"
        "| PROJ — Project | 2026-02-10 | 1h | 1h | — |\n"
        "\n**Total planned: 17h**"
    )


def test_render_plans_unlabelled_item(single_day):
    plan = TempoPlan(
        start_date="2026-02-09",
        end_date="2026-02-09",
        plan_item=PlanReference(id="42", type="ISSUE"),
    )

    text = render_plans("Plans for 2026-02-09", "acc-ada", [plan], {}, single_day)

    assert "| 42 | 2026-02-09 | — | — | — |" in text
    assert text.endswith("**Total planned: 0m**")
