"""Sprints of the Jira Agile API."""

from __future__ import annotations

from typing import Any, Mapping

import requests

from .client import Client


class SprintService:
    """Moves issues into sprints and reads the issues of a sprint."""

    def __init__(self, client: Client):
        self.client = client

    def move_issues_to_sprint(self, sprint_id: int, issue_ids: list[str]) -> requests.Response:
        """Move issues to an open or active sprint; at most 50 in one call."""
        return self.client.request(
            "POST",
            f"rest/agile/1.0/sprint/{sprint_id}/issue",
            json={"issues": list(issue_ids)},
        )

    def get_issues_for_sprint(self, sprint_id: int) -> list[dict[str, Any]]:
        """Return the issues of a sprint that the user may view, ordered by rank."""
        data = self.client.get_json(f"rest/agile/1.0/sprint/{sprint_id}/issue")
        return list((data or {}).get("issues") or [])

    def get_issue(
        self, issue_id: str, options: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Return the full issue for an id or key; options go into the query string."""
        params = None
        if options:
            params = {name: value for name, value in options.items() if value is not None}
        return self.client.get_json(f"rest/agile/1.0/issue/{issue_id}", params=params)