import pytest

from tests.helpers import FakeGitHubClient, project_response, sample_issue
from core.errors import UpstreamFetchError
from core.github_issues import Issue
from core.project_fields import ProjectMetadata, enrich, parse_project_metadata


def test_first_project_item_wins():
    data = project_response("In Progress", 5)
    data["node"]["projectItems"]["nodes"].append(
        {"status": {"name": "Done"}, "storyPoints": {"number": 8}}
    )
    meta = parse_project_metadata(data)
    assert meta == ProjectMetadata(status="In Progress", story_points=5)


def test_no_linked_item_is_empty():
    meta = parse_project_metadata(project_response(linked=False))
    assert meta.is_empty
    assert meta == ProjectMetadata.empty()


def test_missing_project_items_is_empty():
    assert parse_project_metadata({"node": {"id": "x"}}).is_empty
    assert parse_project_metadata({"node": {"id": "x", "projectItems": None}}).is_empty


def test_item_without_fields():
    meta = parse_project_metadata(project_response())
    assert meta.status is None
    assert meta.story_points is None


def test_story_points_normalized():
    assert parse_project_metadata(project_response(points=3.0)).story_points == 3
    assert parse_project_metadata(project_response(points=0.5)).story_points == 0.5
    assert parse_project_metadata(project_response(points=0)).story_points == 0


def test_null_node_is_an_error():
    with pytest.raises(UpstreamFetchError):
        parse_project_metadata({"node": None})


def test_enrich_queries_by_node_id():
    client = FakeGitHubClient([], responses={"I_4": project_response("Todo", 2)})
    meta = enrich(client, Issue.from_api(sample_issue(4)))
    assert client.graphql_calls == ["I_4"]
    assert meta.status == "Todo"
    assert meta.story_points == 2


def test_enrich_propagates_errors():
    client = FakeGitHubClient([], fail_on="I_4")
    with pytest.raises(UpstreamFetchError):
        enrich(client, Issue.from_api(sample_issue(4)))
