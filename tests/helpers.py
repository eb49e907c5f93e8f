from typing import Any, Dict, List, Optional

import gspread

from core.errors import UpstreamFetchError


def sample_issue(number: int, title: str = "", state: str = "open", pr: bool = False, **extra) -> Dict[str, Any]:
    data = {
        "number": number,
        "state": state,
        "title": title or f"Issue {number}",
        "html_url": f"https://github.com/acme/widgets/issues/{number}",
        "node_id": f"I_{number}",
        "labels": [],
        "assignees": [],
        "milestone": None,
    }
    if pr:
        data["pull_request"] = {}
    data.update(extra)
    return data


def project_response(status: Optional[str] = None, points=None, linked: bool = True) -> Dict[str, Any]:
    if not linked:
        return {"node": {"id": "x", "projectItems": {"nodes": []}}}
    item = {
        "status": {"color": "GREEN", "name": status} if status is not None else None,
        "storyPoints": {"number": points} if points is not None else None,
    }
    return {"node": {"id": "x", "projectItems": {"nodes": [item]}}}


class FakeGitHubClient:
    """Serves fixed issue pages and per-node project responses."""

    def __init__(self, pages: List[List[Dict[str, Any]]], responses=None, fail_on: Optional[str] = None):
        self.pages = pages
        self.responses = responses or {}
        self.fail_on = fail_on
        self.page_calls: List[int] = []
        self.graphql_calls: List[str] = []

    def list_issues(self, owner, repo, page, state="all"):
        assert state == "all"
        self.page_calls.append(page)
        if page - 1 < len(self.pages):
            return self.pages[page - 1]
        return []

    def graphql(self, query, variables=None):
        node_id = variables["id"]
        self.graphql_calls.append(node_id)
        if node_id == self.fail_on:
            raise UpstreamFetchError(f"GraphQL error for {node_id}")
        return self.responses.get(node_id, project_response(linked=False))


class FakeSpreadsheet:
    """In-memory stand-in for a gspread Spreadsheet with Sheets append semantics."""

    def __init__(
        self,
        tabs: Optional[Dict[str, List[List[Any]]]] = None,
        fail_on: Optional[str] = None,
        exc: Optional[Exception] = None,
    ):
        self.id = "doc-123"
        self.tabs = {k: [list(r) for r in v] for k, v in (tabs or {}).items()}
        self.fail_on = fail_on
        self.exc = exc
        self.calls: List[tuple] = []

    @staticmethod
    def _tab(rng: str) -> str:
        return rng.split("!")[0].strip("'")

    def _maybe_fail(self, op: str):
        if op == self.fail_on:
            raise self.exc or gspread.exceptions.GSpreadException(f"{op} failed")

    def worksheet(self, title):
        if title not in self.tabs:
            raise gspread.WorksheetNotFound(title)
        return title

    def add_worksheet(self, title, rows, cols):
        self.calls.append(("add_worksheet", title))
        self.tabs[title] = []
        return title

    def values_clear(self, rng):
        self.calls.append(("clear", rng))
        self._maybe_fail("clear")
        self.tabs[self._tab(rng)] = []

    def values_append(self, rng, params=None, body=None):
        self.calls.append(("append", rng, params, body))
        self._maybe_fail("append")
        # rows go after the last row of the existing table
        self.tabs[self._tab(rng)].extend(list(r) for r in body["values"])
        return {"updates": {"updatedRows": len(body["values"])}}




class FakeSheetsClient:
    """Stands in for an authorized gspread client."""

    def __init__(self, spreadsheet=None, exc: Optional[Exception] = None):
        self.spreadsheet = spreadsheet
        self.exc = exc
        self.opened: List[str] = []

    def open_by_key(self, key):
        self.opened.append(key)
        if self.exc:
            raise self.exc
        return self.spreadsheet
