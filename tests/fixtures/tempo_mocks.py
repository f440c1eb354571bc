"""Canned Jira and Tempo API payloads shared by the unit tests."""

from mcp_jira_tempo.models.tempo import TempoWorklog, UserScheduleDay

MOCK_JIRA_ISSUE_RESPONSE = {
    "id": "10001",
    "key": "PROJ-123",
    "self": "https://example.atlassian.net/rest/api/3/issue/10001",
    "fields": {
        "summary": "Fix login redirect",
        "status": {"name": "In Progress"},
        "issuetype": {"name": "Task"},
        "project": {"id": "10000", "key": "PROJ", "name": "Project"},
        "assignee": {"displayName": "Ada Lovelace", "accountId": "acc-ada"},
    },
}

MOCK_JIRA_SEARCH_RESPONSE = {
    "issues": [
        MOCK_JIRA_ISSUE_RESPONSE,
        {
            "id": "10002",
            "key": "PROJ-124",
            "fields": {
                "summary": "Add audit log",
                "status": {"name": "To Do"},
                "issuetype": {"name": "Story"},
                "project": {"id": "10000", "key": "PROJ"},
            },
        },
    ],
}

MOCK_JIRA_USER_RESPONSE = {
    "accountId": "acc-ada",
    "displayName": "Ada Lovelace",
    "emailAddress": "ada@example.com",
    "active": True,
}

MOCK_JIRA_PROJECT_RESPONSE = {"id": "10000", "key": "PROJ", "name": "Project"}

MOCK_WORKLOG_RESPONSE = {
    "tempoWorklogId": 555,
    "issue": {"id": 10001},
    "timeSpentSeconds": 7200,
    "billableSeconds": 7200,
    "startDate": "2026-02-09",
    "startTime": "09:00:00",
    "description": "Code review",
    "author": {"accountId": "acc-ada"},
}

MOCK_WORKLOGS_PAGE = {
    "metadata": {"count": 2, "offset": 0, "limit": 1000},
    "results": [
        MOCK_WORKLOG_RESPONSE,
        {
            "tempoWorklogId": 556,
            "issue": {"id": 10002, "key": "PROJ-124"},
            "timeSpentSeconds": 1800,
            "billableSeconds": 0,
            "startDate": "2026-02-10",
            "startTime": "14:00:00",
            "description": "",
            "author": {"accountId": "acc-ada"},
        },
    ],
}

MOCK_ACCOUNT_LINKS_RESPONSE = {
    "metadata": {"count": 2},
    "results": [
        {
            "id": 1,
            "account": {"id": 7, "key": "ACME-INT"},
            "default": False,
        },
        {
            "id": 2,
            "account": {"self": "https://api.tempo.io/4/accounts/8"},
            "default": True,
        },
    ],
}

MOCK_TEAMS_RESPONSE = {
    "metadata": {"count": 2},
    "results": [
        {"id": 1, "name": "Platform", "lead": {"accountId": "acc-lead"}},
        {"id": 2, "name": "Mobile", "lead": {"accountId": "acc-other"}},
    ],
}

MOCK_TEAM_MEMBERS_RESPONSE = {
    "metadata": {"count": 2},
    "results": [
        {"member": {"accountId": "acc-ada"}, "role": {"id": 1}},
        {"member": {"accountId": "acc-bob"}, "role": {"id": 2}},
    ],
}

MOCK_USER_SCHEDULE_RESPONSE = {
    "metadata": {"count": 3},
    "results": [
        {"date": "2026-02-09", "requiredSeconds": 28800, "type": "WORKING_DAY"},
        {"date": "2026-02-10", "requiredSeconds": 28800, "type": "WORKING_DAY"},
        {"date": "2026-02-14", "requiredSeconds": 0, "type": "NON_WORKING_DAY"},
    ],
}

MOCK_PLANS_RESPONSE = {
    "metadata": {"count": 2},
    "results": [
        {
            "id": 900,
            "startDate": "2026-02-09",
            "endDate": "2026-02-13",
            "plannedSecondsPerDay": 14400,
            "totalPlannedSeconds": 72000,
            "totalPlannedSecondsInScope": 57600,
            "description": "Sprint work",
            "assignee": {"id": "acc-ada", "type": "USER"},
            "planItem": {"id": "10001", "type": "ISSUE"},
        },
        {
            "id": 901,
            "startDate": "2026-02-10",
            "endDate": "2026-02-10",
            "plannedSecondsPerDay": 3600,
            "totalPlannedSeconds": 3600,
            "assignee": {"id": "acc-ada", "type": "USER"},
            "planItem": {"id": "10000", "type": "PROJECT"},
        },
    ],
}


def make_worklog(
    start_date: str,
    seconds: int,
    issue_key: str = "",
    billable: int = 0,
    description: str = "",
    author: str = "acc-ada",
    issue_id: int = 0,
) -> TempoWorklog:
    """Build a worklog model directly, bypassing the API payload shape."""
    return TempoWorklog(
        issue_key=issue_key,
        issue_id=issue_id,
        author_account_id=author,
        start_date=start_date,
        time_spent_seconds=seconds,
        billable_seconds=billable,
        description=description,
    )


def make_schedule(*days: tuple[str, int]) -> list[UserScheduleDay]:
    """Build schedule entries from (date, required seconds) pairs."""
    return [UserScheduleDay(date=day, required_seconds=seconds) for day, seconds in days]
