from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

import requests

import config

from .errors import UpstreamFetchError
from .logging_utils import bullet, debug, info


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Milestone:
    title: str
    state: str = ""
    due_on: Optional[str] = None


@dataclass(frozen=True)
class Issue:
    """Snapshot of one entry of the repository issue listing."""

    number: int
    state: str
    title: str
    url: str
    node_id: str
    labels: Tuple[str, ...] = ()
    assignees: Tuple[str, ...] = ()
    milestone: Optional[Milestone] = None
    is_pull_request: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Issue":
        ms = data.get("milestone")
        milestone = None
        if ms:
            milestone = Milestone(
                title=ms.get("title") or "",
                state=ms.get("state") or "",
                due_on=ms.get("due_on"),
            )
        return cls(
            number=data.get("number"),
            state=data.get("state") or "",
            title=data.get("title") or "",
            url=data.get("html_url") or "",
            node_id=data.get("node_id") or "",
            labels=tuple(_label_name(lb) for lb in data.get("labels") or []),
            assignees=tuple((a or {}).get("login", "") for a in data.get("assignees") or []),
            milestone=milestone,
            # the listing endpoint returns pull requests too, tagged with this key
            is_pull_request=data.get("pull_request") is not None,
        )


def _label_name(label: Any) -> str:
    # labels may come back as plain strings from some API versions
    if isinstance(label, str):
        return label
    return (label or {}).get("name", "")


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class GitHubClient:
    """Minimal REST + GraphQL client over a single requests session."""

    def __init__(
        self,
        token: str,
        api_url: str = config.GITHUB_API_URL,
        graphql_url: str = "",
        timeout: float = config.REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.graphql_url = graphql_url or f"{self.api_url}/graphql"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "User-Agent": config.USER_AGENT,
                "X-GitHub-Api-Version": config.GITHUB_API_VERSION,
            }
        )

    @classmethod
    def from_context(cls, ctx) -> "GitHubClient":
        return cls(ctx.token, api_url=ctx.api_url, graphql_url=ctx.graphql_url)

    def _send(self, method: str, url: str, **kwargs) -> Any:
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise UpstreamFetchError(f"GitHub request failed: {e}", url=url) from e
        if r.status_code >= 400:
            raise UpstreamFetchError(
                f"GitHub HTTP {r.status_code} for {url}: {r.text[:200]}",
                status=r.status_code,
                url=url,
            )
        try:
            return r.json()
        except ValueError as e:
            raise UpstreamFetchError(f"GitHub returned invalid JSON for {url}", status=r.status_code, url=url) from e

    def list_issues(self, owner: str, repo: str, page: int, state: str = "all") -> List[Dict[str, Any]]:
        url = f"{self.api_url}/repos/{owner}/{repo}/issues"
        data = self._send("GET", url, params={"state": state, "page": page})
        if not isinstance(data, list):
            raise UpstreamFetchError(f"Unexpected issues payload for page {page}", url=url)
        return data

    def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload = self._send("POST", self.graphql_url, json={"query": query, "variables": variables or {}})
        if not isinstance(payload, dict):
            raise UpstreamFetchError("Unexpected GraphQL payload", url=self.graphql_url)
        if payload.get("errors"):
            messages = "; ".join(str(e.get("message", e)) for e in payload["errors"])
            raise UpstreamFetchError(f"GraphQL error: {messages}", url=self.graphql_url)
        data = payload.get("data")
        if data is None:
            raise UpstreamFetchError("GraphQL response has no data", url=self.graphql_url)
        return data


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


def fetch_all_issues(client: GitHubClient, owner: str, repo: str) -> List[Issue]:
    """Page through every issue (open and closed) until an empty page.

    Items keep the order the API returns them in.
    """

    issues: List[Issue] = []
    page = 1
    while True:
        info(f"Fetching data from Issues page {page}...")
        items = client.list_issues(owner, repo, page=page, state="all")
        info(f"There are {len(items)} Issues...")
        if not items:
            break
        issues.extend(Issue.from_api(it) for it in items)
        debug("Next page...")
        page += 1

    info("All pages processed:")
    for issue in issues:
        bullet(issue.title)
    return issues
