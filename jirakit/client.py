"""HTTP plumbing shared by the Jira services."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlsplit

import requests


class JiraError(Exception):
    """Raised when a Jira request fails or its answer cannot be understood."""

    def __init__(self, message: str, response: requests.Response | None = None):
        super().__init__(message)
        self.message = message
        self.response = response

    @property
    def status_code(self) -> int | None:
        return None if self.response is None else self.response.status_code

    @classmethod
    def from_response(cls, response: requests.Response) -> "JiraError":
        """Build an error from an unsuccessful response, using Jira's error body."""
        details = _error_details(response)
        if not details:
            details = response.text.strip() or response.reason or "request failed"
        return cls(f"HTTP {response.status_code}: {details}", response)


def _error_details(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return ""
    if not isinstance(body, dict):
        return ""
    parts = [str(message) for message in body.get("errorMessages") or []]
    errors = body.get("errors") or {}
    if isinstance(errors, dict):
        parts.extend(f"{field}: {message}" for field, message in errors.items())
    return "; ".join(parts)


class Client:
    """Sends requests to a Jira instance rooted at ``base_url``."""

    def __init__(self, base_url: str, session: requests.Session | None = None):
        parts = urlsplit(base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"invalid Jira base URL: {base_url!r}")
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.session = session if session is not None else requests.Session()

    def _url(self, endpoint: str) -> str:
        return self.base_url + endpoint.lstrip("/")

    def request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> requests.Response:
        """Send a request and return the response; raise JiraError unless it is 2xx."""
        try:
            response = self.session.request(
                method,
                self._url(endpoint),
                json=json,
                params=params,
                headers=dict(headers) if headers else None,
            )
        except requests.RequestException as exc:
            raise JiraError(str(exc)) from exc
        if not 200 <= response.status_code < 300:
            raise JiraError.from_response(response)
        return response

    def get_json(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """GET an endpoint and return its decoded JSON body."""
        response = self.request("GET", endpoint, params=params, headers=headers)
        return decode_json(response)


def decode_json(response: requests.Response) -> Any:
    """Decode a response body, raising JiraError when it is not JSON."""
    try:
        return response.json()
    except ValueError as exc:
        raise JiraError("could not unmarshall the data into struct", response) from exc