"""Deployment environment names.

Read from the ENVIRONMENT variable by Settings. The container uses it to pick
the log renderer: console output in development, JSON everywhere else.
"""

from enum import Enum


class Environment(str, Enum):
    """Where the process runs."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
