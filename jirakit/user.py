"""Jira users and their groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import requests

from .client import Client, decode_json

SearchParam = tuple[str, str]
SearchTweak = Callable[[list[SearchParam]], list[SearchParam]]

_USER_FIELDS = (
    ("self", "self"),
    ("account_id", "accountId"),
    ("account_type", "accountType"),
    ("name", "name"),
    ("key", "key"),
    ("email_address", "emailAddress"),
    ("avatar_urls", "avatarUrls"),
    ("display_name", "displayName"),
    ("active", "active"),
    ("time_zone", "timeZone"),
    ("locale", "locale"),
    ("application_keys", "applicationKeys"),
)


@dataclass
class User:
    """A Jira user. The password is only kept locally and never serialised."""

    self: str = ""
    account_id: str = ""
    account_type: str = ""
    name: str = ""
    key: str = ""
    password: str = field(default="", repr=False)
    email_address: str = ""
    avatar_urls: dict[str, str] = field(default_factory=dict)
    display_name: str = ""
    active: bool = False
    time_zone: str = ""
    locale: str = ""
    application_keys: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "User":
        data = data or {}
        values = {attr: data[key] for attr, key in _USER_FIELDS if data.get(key) is not None}
        if "avatar_urls" in values:
            values["avatar_urls"] = dict(values["avatar_urls"])
        if "application_keys" in values:
            values["application_keys"] = list(values["application_keys"])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields and the password."""
        result = {}
        for attr, key in _USER_FIELDS:
            value = getattr(self, attr)
            if value in ("", False, None) or value == [] or value == {}:
                continue
            result[key] = value
        return result


@dataclass
class UserGroup:
    """A group a user belongs to."""

    self: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "UserGroup":
        data = data or {}
        return cls(self=data.get("self", ""), name=data.get("name", ""))


def _tweak(name: str, value: str) -> SearchTweak:
    def apply(search: list[SearchParam]) -> list[SearchParam]:
        return [*search, (name, value)]

    return apply


def with_max_results(max_results: int) -> SearchTweak:
    """Limit the number of users returned."""
    return _tweak("maxResults", str(max_results))


def with_start_at(start_at: int) -> SearchTweak:
    """Set the index of the first user returned."""
    return _tweak("startAt", str(start_at))


def with_active(active: bool) -> SearchTweak:
    """Include or exclude active users."""
    return _tweak("includeActive", "true" if active else "false")


def with_inactive(inactive: bool) -> SearchTweak:
    """Include or exclude inactive users."""
    return _tweak("includeInactive", "true" if inactive else "false")


def with_username(username: str) -> SearchTweak:
    """Search by user name."""
    return _tweak("username", username)


def with_account_id(account_id: str) -> SearchTweak:
    """Search by account id."""
    return _tweak("accountId", account_id)


def with_property(property: str) -> SearchTweak:
    """Search by a user property, given by its key path."""
    return _tweak("property", property)


class UserService:
    """Reads, creates, deletes and searches users."""

    def __init__(self, client: Client):
        self.client = client

    def get(self, account_id: str) -> User:
        """Return the user with the given account id."""
        return User.from_dict(self.client.get_json(f"rest/api/2/user?accountId={account_id}"))

    def get_by_account_id(self, account_id: str) -> User:
        """Return the user with the given account id."""
        return self.get(account_id)

    def create(self, user: User) -> User:
        """Create a user and return it as Jira stored it."""
        response = self.client.request("POST", "rest/api/2/user", json=user.to_dict())
        return User.from_dict(decode_json(response))

    def delete(self, account_id: str) -> requests.Response:
        """Delete the user with the given account id; Jira answers 204 on success."""
        return self.client.request("DELETE", f"rest/api/2/user?accountId={account_id}")

    def get_groups(self, account_id: str) -> list[UserGroup]:
        """Return the groups the user belongs to."""
        data = self.client.get_json(f"rest/api/2/user/groups?accountId={account_id}")
        return [UserGroup.from_dict(item) for item in data or []]

    def get_self(self) -> User:
        """Return the user who is logged in."""
        return User.from_dict(self.client.get_json("rest/api/2/myself"))

    def find(self, property: str, *args: SearchTweak) -> list[User]:
        """Search users by e-mail or display name, refined by search tweaks."""
        search: list[SearchParam] = [("query", property)]
        for tweak in args:
            search = tweak(search)
        query = "&".join(f"{name}={value}" for name, value in search)
        data = self.client.get_json(f"rest/api/2/user/search?{query}")
        return [User.from_dict(item) for item in data or []]