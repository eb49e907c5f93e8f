from __future__ import annotations

import json
from typing import Any, Callable, Iterable, List

from .github_issues import Issue
from .logging_utils import bullet, info
from .project_fields import ProjectMetadata

ISSUE_TYPE = "Issue"

HEADER = [
    "#",
    "Issue Status",
    "Type",
    "Title",
    "URI",
    "Labels",
    "Assignees",
    "Milestone",
    "Task Status",
    "Story Points",
    "Deadline",
]

Row = List[Any]


def build_row(issue: Issue, meta: ProjectMetadata) -> Row:
    milestone = issue.milestone
    return [
        issue.number,
        issue.state,
        ISSUE_TYPE,
        issue.title,
        issue.url,
        ", ".join(issue.labels),
        ", ".join(issue.assignees),
        milestone.title if milestone else "",
        meta.status if meta.status is not None else "",
        meta.story_points if meta.story_points is not None else "",
        (milestone.due_on or "") if milestone else "",
    ]


def filter_and_transform(issues: Iterable[Issue], enrich_fn: Callable[[Issue], ProjectMetadata]) -> List[Row]:
    """Drop pull requests, enrich what is left in order and build the rows.

    ``enrich_fn`` is called once per remaining issue; whatever it raises
    is left to propagate.
    """

    rows: List[Row] = []
    for issue in issues:
        if issue.is_pull_request:
            info(f"Ignoring {json.dumps(issue.title)} as it is a pull request...")
            continue
        info(f"Processing {json.dumps(issue.title)}...")
        rows.append(build_row(issue, enrich_fn(issue)))

    for row in rows:
        bullet(json.dumps(row))
    return rows
