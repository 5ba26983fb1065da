"""Status categories of a Jira instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .client import Client

# Keys of the default Jira status categories.
STATUS_CATEGORY_COMPLETE = "done"
STATUS_CATEGORY_IN_PROGRESS = "indeterminate"
STATUS_CATEGORY_TO_DO = "new"
STATUS_CATEGORY_UNDEFINED = "undefined"


@dataclass
class StatusCategory:
    """The category a status belongs to."""

    self: str = ""
    id: int = 0
    name: str = ""
    key: str = ""
    color_name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "StatusCategory":
        data = data or {}
        return cls(
            self=data.get("self", ""),
            id=data.get("id", 0),
            name=data.get("name", ""),
            key=data.get("key", ""),
            color_name=data.get("colorName", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "self": self.self,
            "id": self.id,
            "name": self.name,
            "key": self.key,
            "colorName": self.color_name,
        }


class StatusCategoryService:
    """Reads status categories."""

    def __init__(self, client: Client):
        self.client = client

    def get_list(self) -> list[StatusCategory]:
        """Return all status categories."""
        data = self.client.get_json("rest/api/2/statuscategory")
        return [StatusCategory.from_dict(item) for item in data or []]