"""Project release versions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from .client import Client, decode_json

_FIELDS = (
    ("self", "self"),
    ("id", "id"),
    ("name", "name"),
    ("description", "description"),
    ("archived", "archived"),
    ("released", "released"),
    ("release_date", "releaseDate"),
    ("user_release_date", "userReleaseDate"),
    ("project_id", "projectId"),
    ("start_date", "startDate"),
)


@dataclass
class Version:
    """A single release version of a project."""

    self: str = ""
    id: str = ""
    name: str = ""
    description: str = ""
    archived: bool | None = None
    released: bool | None = None
    release_date: str = ""
    user_release_date: str = ""
    project_id: int = 0
    start_date: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Version":
        data = data or {}
        return cls(**{attr: data[key] for attr, key in _FIELDS if key in data})

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields."""
        result = {}
        for attr, key in _FIELDS:
            value = getattr(self, attr)
            if value is None or value == "" or (attr == "project_id" and value == 0):
                continue
            result[key] = value
        return result


class VersionService:
    """Reads and writes project versions."""

    def __init__(self, client: Client):
        self.client = client

    def get(self, version_id: int) -> Version:
        """Return the version with the given id."""
        return Version.from_dict(self.client.get_json(f"rest/api/2/version/{version_id}"))

    def create(self, version: Version) -> Version:
        """Create a version and return it as Jira stored it."""
        response = self.client.request("POST", "rest/api/2/version", json=version.to_dict())
        return Version.from_dict(decode_json(response))

    def update(self, version: Version) -> Version:
        """Update a version; return a copy of what was sent."""
        self.client.request("PUT", f"rest/api/2/version/{version.id}", json=version.to_dict())
        return dataclasses.replace(version)