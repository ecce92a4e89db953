from __future__ import annotations

import subprocess
import unittest
from pathlib import Path
from unittest import mock
import sys

import requests

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from board_core.collectors import acli, jira_api  # noqa: E402
from board_core.config import JiraSettings  # noqa: E402
from board_core.logging import sanitize_for_log  # noqa: E402
from board_core.models import TicketType  # noqa: E402

SETTINGS = JiraSettings(url="https://acme.atlassian.net/", email="me@acme", api_token="secret")

ACLI_OUTPUT = "\n".join(
    [
        "Type                Key                 Assignee                     Priority            Status             Summary",
        "Bug                 ABC-123             J Doe                                High                In Progress        Fix the login bug",
        "Story".ljust(20) + "ABC-124".ljust(20) + "Ann".ljust(29) + "Low".ljust(20) + "Done".ljust(19) + "Ship it",
        "",
    ]
)


def fake_response(status_code: int = 200, payload=None, text: str = ""):
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


class JiraApiCollectorTests(unittest.TestCase):
    def test_missing_settings(self):
        cases = [
            (JiraSettings(), "JIRA_URL"),
            (JiraSettings(url="https://x"), "JIRA_USER"),
            (JiraSettings(url="https://x", email="a"), "JIRA_API_TOKEN"),
        ]
        for settings, hint in cases:
            with self.subTest(hint=hint), mock.patch.object(jira_api.requests, "get") as get:
                result = jira_api.collect(settings, "project = A")
                get.assert_not_called()
                self.assertEqual(result.status, "error")
                self.assertIn(hint, result.errors[0])

    def test_success(self):
        payload = {
            "issues": [
                {
                    "key": "ABC-1",
                    "fields": {
                        "summary": "First",
                        "status": {"name": "In Progress"},
                        "issuetype": {"name": "Bug"},
                        "assignee": {"displayName": "Jo"},
                    },
                },
                {"fields": {"summary": "no key"}},
                {"key": "ABC-2", "fields": {"summary": "Second", "status": {"name": "Done"}}},
            ]
        }
        with mock.patch.object(jira_api.requests, "get", return_value=fake_response(payload=payload)) as get:
            result = jira_api.collect(SETTINGS, "project = ABC")

        self.assertTrue(result.ok)
        self.assertEqual([t.key for t in result.tickets], ["ABC-1", "ABC-2"])
        self.assertEqual(result.tickets[0].ticket_type, TicketType.BUG)
        self.assertEqual(result.meta, {"tickets": 2, "skipped_records": 1})

        args, kwargs = get.call_args
        self.assertEqual(args[0], "https://acme.atlassian.net/rest/api/3/search/jql")
        self.assertEqual(kwargs["auth"], ("me@acme", "secret"))
        self.assertEqual(kwargs["params"]["jql"], "project = ABC")
        self.assertEqual(kwargs["params"]["maxResults"], "100")
        self.assertIn("timeout", kwargs)

    def test_http_error(self):
        response = fake_response(401, text="Unauthorized\nmore detail")
        with mock.patch.object(jira_api.requests, "get", return_value=response):
            result = jira_api.collect(SETTINGS, "x")
        self.assertEqual(result.status, "error")
        self.assertEqual(result.errors, ["JIRA API request failed with status 401: Unauthorized"])

    def test_timeout(self):
        with mock.patch.object(jira_api.requests, "get", side_effect=requests.Timeout("slow")):
            result = jira_api.collect(SETTINGS, "x")
        self.assertEqual(result.errors, ["JIRA API request timed out"])

    def test_connection_error(self):
        with mock.patch.object(jira_api.requests, "get", side_effect=requests.ConnectionError("refused")):
            result = jira_api.collect(SETTINGS, "x")
        self.assertEqual(result.status, "error")
        self.assertIn("refused", result.errors[0])

    def test_invalid_json(self):
        with mock.patch.object(jira_api.requests, "get", return_value=fake_response(payload=ValueError("bad"))):
            result = jira_api.collect(SETTINGS, "x")
        self.assertEqual(result.errors, ["invalid JSON from JIRA API"])

    def test_missing_issues_list(self):
        with mock.patch.object(jira_api.requests, "get", return_value=fake_response(payload={"errors": []})):
            result = jira_api.collect(SETTINGS, "x")
        self.assertEqual(result.status, "error")


class AcliCollectorTests(unittest.TestCase):
    def test_parses_table_output(self):
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout=ACLI_OUTPUT, stderr="")
        with mock.patch.object(acli.subprocess, "run", return_value=completed) as run:
            result = acli.collect("project = ABC", limit=50)

        self.assertTrue(result.ok)
        self.assertEqual([t.key for t in result.tickets], ["ABC-123", "ABC-124"])
        self.assertEqual(result.tickets[0].status, "In Progress")
        self.assertEqual(result.meta, {"tickets": 2, "skipped_lines": 1})
        cmd = run.call_args[0][0]
        self.assertEqual(cmd[:4], ["acli", "jira", "workitem", "search"])
        self.assertIn("project = ABC", cmd)
        self.assertEqual(cmd[-1], "50")

    def test_not_installed(self):
        with mock.patch.object(acli.subprocess, "run", side_effect=FileNotFoundError()):
            result = acli.collect("x")
        self.assertEqual(result.errors, ["acli not installed"])

    def test_timeout(self):
        with mock.patch.object(acli.subprocess, "run", side_effect=subprocess.TimeoutExpired("acli", 30)):
            result = acli.collect("x")
        self.assertEqual(result.errors, ["acli search timed out"])

    def test_non_zero_exit(self):
        completed = subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="not logged in\nrun acli auth")
        with mock.patch.object(acli.subprocess, "run", return_value=completed):
            result = acli.collect("x")
        self.assertEqual(result.status, "error")
        self.assertEqual(result.errors, ["not logged in"])


class SanitizeTests(unittest.TestCase):
    def test_masks_credentials(self):
        text = sanitize_for_log("Authorization: Basic bWU6c2VjcmV0 url?token=abc&x=1")
        self.assertNotIn("bWU6c2VjcmV0", text)
        self.assertNotIn("abc", text)
        self.assertIn("Basic [REDACTED]", text)


if __name__ == "__main__":
    unittest.main()
