"""Application environment types.

Used by Settings to pick environment-specific behaviour such as the log
renderer, schema bootstrap on startup and demo seed data.

Environments:
- DEVELOPMENT: Local development, console logs, tables created on startup
- TESTING: Automated test runs, JSON logs
- CI: Continuous integration runs, JSON logs
- PRODUCTION: Deployed service, configuration from the secrets backend
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
