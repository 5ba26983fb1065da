[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jirakit"
version = "0.1.0"
description = "A small client for the Jira REST APIs: statuses, versions, users, sprints and service desks."
requires-python = ">=3.10"
keywords = ["jira", "rest", "api", "client", "agile", "service desk"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests>=2.25",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["jirakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
