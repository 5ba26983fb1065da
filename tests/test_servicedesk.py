import json
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from jirakit.client import Client, JiraError
from jirakit.servicedesk import ServiceDeskService

BASE = "https://jira.example.com/"

ACCOUNT_IDS = [
    "qm:00000000-0000-0000-0000-000000000000:example-customer-1",
    "qm:00000000-0000-0000-0000-000000000000:example-customer-2",
]

ORGANIZATIONS_BODY = {
    "_expands": [],
    "size": 3,
    "start": 3,
    "limit": 3,
    "isLastPage": False,
    "_links": {"base": "https://jira.example.com/rest/servicedeskapi", "context": "context"},
    "values": [
        {"id": "1", "name": "Charlie Cakes Franchises"},
        {"id": "2", "name": "Atlas Coffee Co"},
        {"id": "3", "name": "The Adjustment Bureau"},
    ],
}

CUSTOMERS_BODY = {
    "_expands": [],
    "size": 1,
    "start": 1,
    "limit": 1,
    "isLastPage": False,
    "values": [
        {
            "accountId": ACCOUNT_IDS[1],
            "name": ACCOUNT_IDS[1],
            "key": ACCOUNT_IDS[1],
            "emailAddress": "fred@example.com",
            "displayName": "Fred F. User",
            "active": True,
            "timeZone": "Australia/Sydney",
        }
    ],
}


@pytest.fixture
def mock():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return ServiceDeskService(Client(BASE))


@pytest.mark.parametrize("desk_id", [10001, "TEST"])
def test_get_organizations(mock, service, desk_id):
    url = f"{BASE}rest/servicedeskapi/servicedesk/{desk_id}/organization"
    mock.add(responses.GET, url, json=ORGANIZATIONS_BODY, status=200)

    orgs = service.get_organizations(desk_id, 3, 3, "")

    assert orgs["size"] == 3
    request = mock.calls[0].request
    parts = urlsplit(request.url)
    assert parts.path == f"/rest/servicedeskapi/servicedesk/{desk_id}/organization"
    assert parse_qs(parts.query) == {"start": ["3"], "limit": ["3"]}
    assert request.headers["Accept"] == "application/json"


def test_get_organizations_with_account_id(mock, service):
    url = f"{BASE}rest/servicedeskapi/servicedesk/10001/organization"
    mock.add(responses.GET, url, json=ORGANIZATIONS_BODY, status=200)

    orgs = service.get_organizations(10001, 0, 50, "abc")

    assert orgs["size"] == 3
    assert [value["name"] for value in orgs["values"]] == [
        "Charlie Cakes Franchises",
        "Atlas Coffee Co",
        "The Adjustment Bureau",
    ]
    query = parse_qs(urlsplit(mock.calls[0].request.url).query)
    assert query == {"start": ["0"], "limit": ["50"], "accountId": ["abc"]}


@pytest.mark.parametrize("desk_id", [10001, "TEST"])
def test_add_organization(mock, service, desk_id):
    url = f"{BASE}rest/servicedeskapi/servicedesk/{desk_id}/organization"
    mock.add(responses.POST, url, status=204)

    response = service.add_organization(desk_id, 1)

    assert response.status_code == 204
    assert json.loads(mock.calls[0].request.body) == {"organizationId": 1}


@pytest.mark.parametrize("desk_id", [10001, "TEST"])
def test_remove_organization(mock, service, desk_id):
    url = f"{BASE}rest/servicedeskapi/servicedesk/{desk_id}/organization"
    mock.add(responses.DELETE, url, status=204)

    response = service.remove_organization(desk_id, 1)

    assert response.status_code == 204
    assert mock.calls[0].request.method == "DELETE"
    assert json.loads(mock.calls[0].request.body) == {"organizationId": 1}


@pytest.mark.parametrize("desk_id", ["10000", 10000])
def test_add_customers(mock, service, desk_id):
    url = f"{BASE}rest/servicedeskapi/servicedesk/{desk_id}/customer"
    mock.add(responses.POST, url, status=204)

    service.add_customers(desk_id, *ACCOUNT_IDS)

    payload = json.loads(mock.calls[0].request.body)
    assert sorted(payload["accountIds"]) == sorted(ACCOUNT_IDS)


@pytest.mark.parametrize("desk_id", ["10000", 10000])
def test_remove_customers(mock, service, desk_id):
    url = f"{BASE}rest/servicedeskapi/servicedesk/{desk_id}/customer"
    mock.add(responses.DELETE, url, status=204)

    service.remove_customers(desk_id, *ACCOUNT_IDS)

    payload = json.loads(mock.calls[0].request.body)
    by_lower_key = {key.lower(): value for key, value in payload.items()}
    assert sorted(by_lower_key["accountids"]) == sorted(ACCOUNT_IDS)
    assert mock.calls[0].request.method == "DELETE"


@pytest.mark.parametrize("desk_id", ["10000", 10000])
def test_list_customers(mock, service, desk_id):
    url = f"{BASE}rest/servicedeskapi/servicedesk/{desk_id}/customer"
    mock.add(responses.GET, url, json=CUSTOMERS_BODY, status=200)
    email = "fred@example.com"

    customers = service.list_customers(desk_id, {"query": email, "start": 1, "limit": 10})

    request = mock.calls[0].request
    query = parse_qs(urlsplit(request.url).query)
    assert query == {"query": [email], "start": ["1"], "limit": ["10"]}
    assert request.headers["X-ExperimentalApi"] == "opt-in"
    assert len(customers["values"]) == 1
    assert customers["values"][0]["emailAddress"] == email


def test_list_customers_bad_body_raises(mock, service):
    url = f"{BASE}rest/servicedeskapi/servicedesk/1/customer"
    mock.add(responses.GET, url, body="not json", status=200)

    with pytest.raises(JiraError, match="could not unmarshall the data into struct"):
        service.list_customers(1)


def test_failed_request_raises_with_status(mock, service):
    url = f"{BASE}rest/servicedeskapi/servicedesk/1/organization"
    mock.add(responses.POST, url, json={"errorMessages": ["nope"]}, status=404)

    with pytest.raises(JiraError) as info:
        service.add_organization(1, 7)
    assert info.value.status_code == 404