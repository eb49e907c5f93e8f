"""Export every repository issue, with its project-board fields, to Google Sheets.

One run reads all issues of the current repository (open and closed), skips
pull requests, looks up the ``Status`` and ``Story Points`` project fields of
each remaining issue and replaces the contents of the configured sheet tab
with a header row followed by one row per issue.

Inputs come from the action inputs (``INPUT_*``) or a local ``.env``; see
:mod:`config`.
"""

from __future__ import annotations

import sys
from typing import Mapping, Optional

from core import sheets
from core.github_issues import GitHubClient, fetch_all_issues
from core.inputs import resolve_inputs, resolve_repository
from core.issue_rows import HEADER, filter_and_transform
from core.logging_utils import error, group, info, ok
from core.project_fields import enrich

import config  # noqa: F401  loads .env before inputs are resolved


def sync(env: Optional[Mapping[str, str]] = None, client=None, spreadsheet=None) -> int:
    """Run the whole sync. Returns the number of issue rows written."""

    with group("🚦 Checking Inputs and Initializing..."):
        inputs = resolve_inputs(env)
        ctx = resolve_repository(env)
        info("Auth with GitHub Token...")
        client = client or GitHubClient.from_context(ctx)
        ok("GitHub client ready")

    with group(f"📑 Fetching all Issues in {ctx.full_name}..."):
        issues = fetch_all_issues(client, ctx.owner, ctx.repo)

    with group("🔨 Form Issues data for Sheets format..."):
        rows = filter_and_transform(issues, lambda issue: enrich(client, issue))

    with group("🔓 Authenticating via Google API Service Account..."):
        ss = spreadsheet or sheets.open_spreadsheet(inputs.credentials_json, inputs.document_id)
        ok("Spreadsheet opened")

    with group(f"📝 Adding Issues data to Sheet ({inputs.sheet_name})..."):
        sheets.write_sheet(ss, inputs.sheet_name, HEADER, rows)
        info(f"Wrote {len(rows)} rows.")

    return len(rows)


def main(env: Optional[Mapping[str, str]] = None) -> int:
    try:
        sync(env)
    except Exception as e:
        error(f"{type(e).__name__}: {e}")
        return 1
    info("☑️ Done!")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover - manual execution
    run()
