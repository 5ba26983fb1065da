# jirakit

A small Python client for parts of the Jira REST APIs: status categories,
statuses, project versions, users, agile sprints and service desks.

## Installation

```
pip install jirakit
```

## Getting started

Every service works through a `jirakit.client.Client`, which holds the base
URL of your Jira instance and a `requests.Session` (a new session is made
when you pass none). Put authentication on the session. A base URL that is
not an `http` or `https` URL with a host raises `ValueError`.

```python
import requests

from jirakit.api import Jira

session = requests.Session()
session.auth = ("someone@example.com", "token")

jira = Jira("https://jira.example.com/", session)
```

`Jira` has one attribute per service, all sharing one client:
`service_desk`, `sprint`, `status`, `status_category`, `user` and
`version`. You can also build a service yourself:

```python
from jirakit.client import Client
from jirakit.status import StatusService

client = Client("https://jira.example.com/", session)
statuses = StatusService(client).get_all_statuses()
```

## Services

- `StatusCategoryService.get_list()`: all status categories, as
  `StatusCategory` objects. The keys of the default categories are in
  `STATUS_CATEGORY_COMPLETE`, `STATUS_CATEGORY_IN_PROGRESS`,
  `STATUS_CATEGORY_TO_DO` and `STATUS_CATEGORY_UNDEFINED`.
- `StatusService.get_all_statuses()`: all statuses that workflows use, as
  `Status` objects.
- `VersionService.get(version_id)`, `create(version)` and
  `update(version)`: project versions, as `Version` objects. `create`
  returns the version as the server stored it; `update` returns a copy of
  the version that was sent.
- `UserService.get(account_id)`, `get_by_account_id(account_id)`,
  `create(user)`, `get_groups(account_id)`, `get_self()` and
  `find(query, *options)` return `User` and `UserGroup` objects.
  `delete(account_id)` returns the `requests.Response` (Jira answers 204).
- `SprintService.move_issues_to_sprint(sprint_id, issue_ids)` returns the
  response; `get_issues_for_sprint(sprint_id)` returns a list of issues and
  `get_issue(issue_id, options)` one issue, both as decoded JSON
  dictionaries. `options` is a mapping put into the query string.
- `ServiceDeskService.get_organizations(service_desk_id, start, limit,
  account_id)` and `list_customers(service_desk_id, options)` return one
  page as a decoded JSON dictionary. `add_organization`,
  `remove_organization`, `add_customers` and `remove_customers` return the
  response. A service desk id may be a number or a string.

The dataclasses `StatusCategory`, `Status`, `Version` and `User` have
`from_dict` and `to_dict` for the JSON form. `Version.to_dict` and
`User.to_dict` leave out empty fields; a user's `password` is never
serialised.

### Searching users

`UserService.find` takes a query and any number of search options:

```python
from jirakit.user import with_max_results, with_start_at

users = jira.user.find("fred@example.com", with_start_at(100), with_max_results(1000))
```

Other options are `with_active`, `with_inactive`, `with_username`,
`with_account_id` and `with_property`. They are added to the query string
in the order given.

### Versions

```python
from jirakit.version import Version

created = jira.version.create(
    Version(name="New Version 1", project_id=10000, released=True, archived=False)
)
```

## Errors

When a request fails, cannot be sent, or its body is not the JSON that was
expected, the services raise `jirakit.client.JiraError`. Its `response`
holds the HTTP response when there is one, and `status_code` its status.
For error answers the message includes Jira's `errorMessages` and `errors`.

## What it does not do

This is a library only: there is no command-line tool. It has no helpers
for authentication beyond what you set on the session, it does not follow
pages for you, and issues, organization pages and customer pages come back
as plain dictionaries rather than typed objects.

## Running the tests

```
pip install -e ".[test]"
pytest
```