"""
Exceptions raised by github-wrapped.

The metrics pipeline itself never fails on well-formed input; these errors
describe a missing or malformed upstream record and failures of the GitHub
retrieval layer.
"""


class WrappedError(Exception):
    """Base exception for github-wrapped errors."""

    pass


class UserNotFoundError(WrappedError):
    """Raised when the upstream record has no user."""

    pass


class InvalidResponseError(WrappedError):
    """Raised when the upstream record is present but structurally incomplete."""

    pass


class GitHubClientError(WrappedError):
    """Base exception for GitHub client errors."""

    pass


class AuthenticationError(GitHubClientError):
    """Raised when GitHub rejects the provided token."""

    pass


class RateLimitError(GitHubClientError):
    """Raised when the GitHub API rate limit is exhausted."""

    pass


class GitHubConnectionError(GitHubClientError):
    """Raised when a request to GitHub cannot be completed (network, timeout)."""

    pass


def raise_for_status(response, username: str) -> None:
    """
    Translate an unsuccessful GitHub response into a GitHubClientError.

    Args:
        response: requests.Response from the GitHub API
        username: User the request was about (for error messages)

    Raises:
        AuthenticationError: On 401
        UserNotFoundError: On 404
        RateLimitError: On 429, or 403 with no requests remaining
        GitHubClientError: On any other unsuccessful status
    """
    if response.ok:
        return

    if response.status_code == 401:
        raise AuthenticationError(
            "Authentication failed. Check your GitHub token is valid."
        )
    elif response.status_code == 404:
        raise UserNotFoundError(f"User '{username}' not found on GitHub.")
    elif response.status_code in (403, 429):
        remaining = response.headers.get("X-RateLimit-Remaining", "unknown")
        if response.status_code == 429 or remaining == "0":
            raise RateLimitError(
                f"API rate limit exceeded. Remaining requests: {remaining}"
            )
        raise GitHubClientError(f"Access forbidden: {response.text}")
    else:
        raise GitHubClientError(
            f"GitHub API error: {response.status_code} - {response.text}"
        )
