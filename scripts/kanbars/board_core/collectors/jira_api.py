"""JIRA Cloud REST collector (fail-soft)."""

from __future__ import annotations

import requests

from board_core.collectors import failed, first_line, log
from board_core.config import JiraSettings
from board_core.logging import sanitize_for_log
from board_core.models import FetchResult
from board_core.parsing import ticket_from_record

SOURCE = "api"
SEARCH_PATH = "/rest/api/3/search/jql"
FIELDS = "key,summary,status,issuetype,assignee,priority"


def search_url(base_url: str) -> str:
    return base_url.rstrip("/") + SEARCH_PATH


def _missing_setting(settings: JiraSettings) -> str | None:
    if not settings.url:
        return "JIRA URL not configured. Set JIRA_URL or JIRA_SITE environment variable"
    if not settings.email:
        return "JIRA email not configured. Set JIRA_USER or JIRA_EMAIL environment variable"
    if not settings.api_token:
        return "JIRA API token not configured. Set JIRA_API_TOKEN environment variable"
    return None


def collect(settings: JiraSettings, jql: str, limit: int = 100, timeout: float = 15.0) -> FetchResult:
    missing = _missing_setting(settings)
    if missing:
        return failed(SOURCE, missing)

    try:
        response = requests.get(
            search_url(settings.url),
            auth=(settings.email, settings.api_token),
            headers={"Accept": "application/json"},
            params={"jql": jql, "maxResults": str(limit), "fields": FIELDS},
            timeout=timeout,
        )
    except requests.Timeout:
        return failed(SOURCE, "JIRA API request timed out")
    except requests.RequestException as exc:
        return failed(SOURCE, sanitize_for_log(f"JIRA API request failed: {exc}"))

    if not response.ok:
        body = first_line(response.text, "no response body")
        return failed(SOURCE, f"JIRA API request failed with status {response.status_code}: {body}")

    try:
        payload = response.json()
    except ValueError:
        return failed(SOURCE, "invalid JSON from JIRA API")

    issues = payload.get("issues") if isinstance(payload, dict) else None
    if not isinstance(issues, list):
        return failed(SOURCE, "JIRA API response has no issues list")

    tickets = []
    rejected = 0
    for issue in issues:
        ticket = ticket_from_record(issue)
        if ticket is None:
            rejected += 1
            continue
        tickets.append(ticket)

    log.info("JIRA API returned %d tickets (%d records skipped)", len(tickets), rejected)
    return FetchResult(
        source=SOURCE,
        status="ok",
        tickets=tickets,
        meta={"tickets": len(tickets), "skipped_records": rejected},
        errors=[],
    )
