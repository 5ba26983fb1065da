"""Client for the Jira REST APIs: statuses, versions, users, sprints and service desks."""

__version__ = "0.1.0"

__all__ = ["api", "client", "servicedesk", "sprint", "status", "statuscategory", "user", "version"]