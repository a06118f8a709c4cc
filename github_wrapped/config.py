"""
Configuration management for github-wrapped.

Loads settings from environment variables and validates request parameters
before they reach the GitHub API.
"""

import logging
import os
import re
from datetime import datetime, timezone

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

# Optional server-side token; without it only public data is available
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN") or None
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
USER_AGENT = "GitHubWrapped/1.0"

# GitHub accounts exist from 2008 onwards
FIRST_YEAR = 2008

# Alphanumerics and single hyphens, no leading/trailing hyphen, max 39 chars
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9]|-(?=[a-zA-Z0-9])){0,38}$")


def get_current_year() -> int:
    """Return the current UTC year."""
    return datetime.now(timezone.utc).year


def is_valid_github_username(username: str) -> bool:
    return bool(username) and USERNAME_PATTERN.match(username) is not None


def is_valid_year(year: int) -> bool:
    return FIRST_YEAR <= year <= get_current_year()


def validate_username(username: str) -> None:
    """Validate a GitHub username, raising ValueError if it is malformed."""
    if not username:
        raise ValueError("Username is required")

    if not is_valid_github_username(username):
        raise ValueError(
            f"Invalid GitHub username format: '{username}'. "
            "Usernames may contain letters, digits and single hyphens, "
            "cannot start with a hyphen and are at most 39 characters."
        )


def validate_year(year: int) -> None:
    """Validate the requested year, raising ValueError if out of range."""
    if not is_valid_year(year):
        raise ValueError(
            f"Invalid year: {year}. Must be between {FIRST_YEAR} and current year."
        )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the app and CLI entry points."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
