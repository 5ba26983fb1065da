"""Entry point bundling every Jira service behind one client."""

from __future__ import annotations

import requests

from .client import Client
from .servicedesk import ServiceDeskService
from .sprint import SprintService
from .status import StatusService
from .statuscategory import StatusCategoryService
from .user import UserService
from .version import VersionService


class Jira:
    """A Jira instance with one attribute per service, all sharing a client."""

    def __init__(self, base_url: str, session: requests.Session | None = None):
        self.client = Client(base_url, session)
        self.service_desk = ServiceDeskService(self.client)
        self.sprint = SprintService(self.client)
        self.status = StatusService(self.client)
        self.status_category = StatusCategoryService(self.client)
        self.user = UserService(self.client)
        self.version = VersionService(self.client)