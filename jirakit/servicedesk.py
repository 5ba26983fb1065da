"""Service desk organizations and customers."""

from __future__ import annotations

from typing import Any, Mapping

import requests

from .client import Client, decode_json


def _desk_path(service_desk_id: Any, resource: str) -> str:
    return f"rest/servicedeskapi/servicedesk/{service_desk_id}/{resource}"


class ServiceDeskService:
    """Manages the organizations and customers of a service desk."""

    def __init__(self, client: Client):
        self.client = client

    def get_organizations(
        self, service_desk_id: Any, start: int, limit: int, account_id: str = ""
    ) -> dict[str, Any]:
        """Return one page of the organizations associated with a service desk."""
        endpoint = f"{_desk_path(service_desk_id, 'organization')}?start={start}&limit={limit}"
        if account_id:
            endpoint += f"&accountId={account_id}"
        return self.client.get_json(endpoint, headers={"Accept": "application/json"})

    def add_organization(
        self, service_desk_id: Any, organization_id: int
    ) -> requests.Response:
        """Associate an organization with a service desk; a repeat is a no-op."""
        return self.client.request(
            "POST",
            _desk_path(service_desk_id, "organization"),
            json=_organization_payload(organization_id),
        )

    def remove_organization(
        self, service_desk_id: Any, organization_id: int
    ) -> requests.Response:
        """Detach an organization from a service desk; an unknown id is a no-op."""
        return self.client.request(
            "DELETE",
            _desk_path(service_desk_id, "organization"),
            json=_organization_payload(organization_id),
        )

    def add_customers(self, service_desk_id: Any, *args: str) -> requests.Response:
        """Add customers, given by account id, to a service desk."""
        return self.client.request(
            "POST",
            _desk_path(service_desk_id, "customer"),
            json={"accountIds": list(args)},
        )

    def remove_customers(self, service_desk_id: Any, *args: str) -> requests.Response:
        """Remove customers, given by account id, from a service desk."""
        return self.client.request(
            "DELETE",
            _desk_path(service_desk_id, "customer"),
            json={"accountIDs": list(args)},
        )

    def list_customers(
        self, service_desk_id: Any, options: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Return one page of the customers of a service desk.

        The endpoint is experimental; options such as ``query``, ``start`` and
        ``limit`` go into the query string.
        """
        params = None
        if options:
            params = {name: value for name, value in options.items() if value is not None}
        response = self.client.request(
            "GET",
            _desk_path(service_desk_id, "customer"),
            params=params,
            headers={"X-ExperimentalApi": "opt-in"},
        )
        return decode_json(response)


def _organization_payload(organization_id: int) -> dict[str, int]:
    return {"organizationId": organization_id} if organization_id else {}