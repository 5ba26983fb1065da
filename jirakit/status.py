"""Workflow statuses of a Jira instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .client import Client
from .statuscategory import StatusCategory


@dataclass
class Status:
    """The current status of an issue, such as "Open" or "Closed"."""

    self: str = ""
    description: str = ""
    icon_url: str = ""
    name: str = ""
    id: str = ""
    status_category: StatusCategory = field(default_factory=StatusCategory)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Status":
        data = data or {}
        return cls(
            self=data.get("self", ""),
            description=data.get("description", ""),
            icon_url=data.get("iconUrl", ""),
            name=data.get("name", ""),
            id=data.get("id", ""),
            status_category=StatusCategory.from_dict(data.get("statusCategory")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "self": self.self,
            "description": self.description,
            "iconUrl": self.icon_url,
            "name": self.name,
            "id": self.id,
            "statusCategory": self.status_category.to_dict(),
        }


class StatusService:
    """Reads workflow statuses."""

    def __init__(self, client: Client):
        self.client = client

    def get_all_statuses(self) -> list[Status]:
        """Return every status associated with a workflow."""
        data = self.client.get_json("rest/api/2/status")
        return [Status.from_dict(item) for item in data or []]