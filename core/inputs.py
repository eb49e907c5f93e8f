from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

import config

from .errors import MissingInputError


@dataclass(frozen=True)
class SyncInputs:
    credentials_json: str = field(repr=False)
    document_id: str
    sheet_name: str


@dataclass(frozen=True)
class RepositoryContext:
    owner: str
    repo: str
    token: str = field(repr=False)
    api_url: str = config.GITHUB_API_URL
    graphql_url: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def input_env_name(name: str) -> str:
    """Environment variable a GitHub Action runner sets for input ``name``."""
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, env: Optional[Mapping[str, str]] = None, fallback: str = "") -> str:
    env = os.environ if env is None else env
    value = env.get(input_env_name(name)) or ""
    if not value.strip() and fallback:
        value = env.get(fallback) or ""
    return value.strip()


def resolve_inputs(env: Optional[Mapping[str, str]] = None) -> SyncInputs:
    values = {}
    missing: List[str] = []
    for name, fallback in config.REQUIRED_INPUTS.items():
        values[name] = get_input(name, env, fallback)
        if not values[name]:
            missing.append(name)
    if missing:
        raise MissingInputError(
            f"Some inputs are missing ({', '.join(missing)}). Please check the project README.",
            missing=missing,
        )
    return SyncInputs(
        credentials_json=values[config.INPUT_SERVICE_ACCOUNT_JSON],
        document_id=values[config.INPUT_DOCUMENT_ID],
        sheet_name=values[config.INPUT_SHEET_NAME],
    )


def resolve_repository(env: Optional[Mapping[str, str]] = None) -> RepositoryContext:
    """Repository coordinates and token from the workflow run environment."""
    env = os.environ if env is None else env

    token = get_input(config.INPUT_GITHUB_TOKEN, env, "GITHUB_TOKEN")
    if not token:
        raise MissingInputError(
            "No GitHub token found (set GITHUB_TOKEN or the github-token input).",
            missing=["GITHUB_TOKEN"],
        )

    full_name = (env.get("GITHUB_REPOSITORY") or "").strip()
    owner, _, repo = full_name.partition("/")
    if not owner or not repo or "/" in repo:
        raise MissingInputError(
            f"GITHUB_REPOSITORY must look like 'owner/name', got {full_name!r}.",
            missing=["GITHUB_REPOSITORY"],
        )

    api_url = (env.get("GITHUB_API_URL") or config.GITHUB_API_URL).rstrip("/")
    graphql_url = (env.get("GITHUB_GRAPHQL_URL") or config.GITHUB_GRAPHQL_URL or f"{api_url}/graphql")
    return RepositoryContext(
        owner=owner,
        repo=repo,
        token=token,
        api_url=api_url,
        graphql_url=graphql_url.rstrip("/"),
    )
