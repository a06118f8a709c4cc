"""
GitHub API client for fetching a year of user contributions.
"""

import logging

import requests

from github_wrapped import config
from github_wrapped.errors import (
    AuthenticationError,
    GitHubClientError,
    GitHubConnectionError,
    InvalidResponseError,
    RateLimitError,
    UserNotFoundError,
    raise_for_status,
)
from github_wrapped.queries import USER_CONTRIBUTIONS_QUERY, build_date_range
from github_wrapped.rest_client import RestContributionsClient

logger = logging.getLogger(__name__)

AUTH_ERROR_MARKERS = ("401", "bad credentials", "authentication")


class GitHubClient:
    """Client for the authenticated GitHub GraphQL API."""

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the GitHub client.

        Args:
            token: GitHub personal access token
            base_url: API root, defaults to GITHUB_API_URL
            timeout: Request timeout in seconds, defaults to REQUEST_TIMEOUT
        """
        self.token = token
        self.base_url = (base_url or config.GITHUB_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "User-Agent": config.USER_AGENT,
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    def fetch_contributions(self, username: str, year: int) -> dict:
        """
        Fetch a year of contributions for a user.

        Args:
            username: GitHub username
            year: Calendar year to fetch

        Returns:
            GraphQL data dict with a top-level "user" key

        Raises:
            UserNotFoundError: If the user does not exist
            InvalidResponseError: If the response lacks contribution data
            AuthenticationError: If the token is rejected
            RateLimitError: If the rate limit is exhausted
            GitHubConnectionError: If GitHub cannot be reached
            GitHubClientError: For any other API error
        """
        date_from, date_to = build_date_range(year)
        try:
            response = self.session.post(
                f"{self.base_url}/graphql",
                json={
                    "query": USER_CONTRIBUTIONS_QUERY,
                    "variables": {"username": username, "from": date_from, "to": date_to},
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise GitHubConnectionError(f"Request to GitHub failed: {e}") from e
        raise_for_status(response, username)

        body = response.json()
        errors = body.get("errors")
        if errors:
            self._raise_graphql_errors(errors, username)

        data = body.get("data") or {}
        if not data.get("user"):
            raise UserNotFoundError(f"User '{username}' not found on GitHub.")

        if not data["user"].get("contributionsCollection"):
            raise InvalidResponseError(
                "Invalid response structure: missing contributionsCollection"
            )

        logger.debug("GraphQL response validated for %s", username)
        return data

    @staticmethod
    def _raise_graphql_errors(errors: list[dict], username: str) -> None:
        """Raise the most specific error for a GraphQL error list."""
        types = {error.get("type") for error in errors}
        messages = [error.get("message", "") for error in errors]

        if "NOT_FOUND" in types:
            raise UserNotFoundError(f"User '{username}' not found on GitHub.")
        if "RATE_LIMITED" in types:
            raise RateLimitError("API rate limit exceeded.")
        if any(marker in message.lower() for message in messages for marker in AUTH_ERROR_MARKERS):
            raise AuthenticationError(", ".join(messages))

        raise GitHubClientError(", ".join(messages))


def fetch_user_contributions(
    username: str,
    year: int,
    token: str | None = None,
) -> dict:
    """
    Fetch a year of contributions, choosing the best available strategy.

    Without a token the unauthenticated REST API is used (public data only,
    sampled commit breakdown). With a token the GraphQL API is used, falling
    back to REST when the token is rejected.

    Args:
        username: GitHub username
        year: Calendar year to fetch
        token: Optional personal access token

    Returns:
        GraphQL-shaped dict with a top-level "user" key
    """
    if not token:
        return RestContributionsClient().fetch_contributions(username, year)

    try:
        return GitHubClient(token).fetch_contributions(username, year)
    except AuthenticationError:
        logger.warning("GraphQL auth failed, falling back to REST API for public data")
        return RestContributionsClient().fetch_contributions(username, year)
