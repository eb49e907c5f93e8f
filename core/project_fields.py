"""Projects (v2) metadata for a single issue.

Each issue is looked up by its node id; only the first linked project item
is considered. Its ``Status`` single-select and ``Story Points`` number
fields become the task status and estimate columns of the sheet.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import config

from .errors import UpstreamFetchError
from .logging_utils import debug

Number = Union[int, float]

PROJECT_FIELDS_QUERY = """
query getStoryPointsByIssueId($id: ID!, $first: Int!, $statusField: String!, $pointsField: String!) {
  node(id: $id) {
    ... on Issue {
      id
      projectItems(first: $first) {
        nodes {
          status: fieldValueByName(name: $statusField) {
            ... on ProjectV2ItemFieldSingleSelectValue {
              color
              name
            }
          }
          storyPoints: fieldValueByName(name: $pointsField) {
            ... on ProjectV2ItemFieldNumberValue {
              number
            }
          }
        }
      }
    }
  }
}
"""


@dataclass(frozen=True)
class ProjectMetadata:
    status: Optional[str] = None
    story_points: Optional[Number] = None

    @classmethod
    def empty(cls) -> "ProjectMetadata":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.status is None and self.story_points is None


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _points(value: Any) -> Optional[Number]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value) if float(value).is_integer() else value
    return None


def parse_project_metadata(data: Mapping[str, Any]) -> ProjectMetadata:
    """Read the first project item out of a GraphQL ``data`` object."""

    if "node" not in data or data["node"] is None:
        raise UpstreamFetchError("Project metadata query returned no issue node")

    items = _mapping(_mapping(data["node"]).get("projectItems")).get("nodes") or []
    if not items:
        return ProjectMetadata.empty()

    first = _mapping(items[0])
    status = _mapping(first.get("status")).get("name")
    points = _points(_mapping(first.get("storyPoints")).get("number"))
    return ProjectMetadata(status=status or None, story_points=points)


def enrich(client, issue) -> ProjectMetadata:
    """One metadata query for ``issue``. Errors propagate to the caller."""
    data = client.graphql(
        PROJECT_FIELDS_QUERY,
        {
            "id": issue.node_id,
            "first": config.PROJECT_ITEMS_LIMIT,
            "statusField": config.STATUS_FIELD,
            "pointsField": config.STORY_POINTS_FIELD,
        },
    )
    debug(f"Response: {json.dumps(data)}")
    return parse_project_metadata(data)
