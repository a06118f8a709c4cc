"""
Tests for the GitHub client and configuration.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
import requests

from factories import raw_response
from github_wrapped.config import (
    get_current_year,
    is_valid_github_username,
    validate_username,
    validate_year,
)
from github_wrapped.errors import (
    AuthenticationError,
    GitHubClientError,
    GitHubConnectionError,
    InvalidResponseError,
    RateLimitError,
    UserNotFoundError,
    raise_for_status,
)
from github_wrapped.github_client import GitHubClient, fetch_user_contributions
from github_wrapped.queries import build_date_range


def _response(status_code=200, body=None, headers=None, text=""):
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.headers = headers or {}
    response.text = text
    response.json.return_value = body
    return response


class TestConfig:
    """Tests for request validation."""

    def test_valid_usernames(self):
        assert is_valid_github_username("octocat")
        assert is_valid_github_username("octo-cat")
        assert is_valid_github_username("a" * 39)

    def test_invalid_usernames(self):
        assert not is_valid_github_username("")
        assert not is_valid_github_username("-octocat")
        assert not is_valid_github_username("octocat-")
        assert not is_valid_github_username("octo--cat")
        assert not is_valid_github_username("octo_cat")
        assert not is_valid_github_username("a" * 40)

    def test_validate_username_missing(self):
        with pytest.raises(ValueError, match="Username is required"):
            validate_username("")

    def test_validate_username_malformed(self):
        with pytest.raises(ValueError, match="Invalid GitHub username format"):
            validate_username("bad name")

    def test_validate_year_range(self):
        validate_year(2008)
        validate_year(get_current_year())

        with pytest.raises(ValueError, match="Invalid year: 2007"):
            validate_year(2007)
        with pytest.raises(ValueError, match="Must be between 2008"):
            validate_year(get_current_year() + 1)

    def test_current_year_is_utc(self):
        assert get_current_year() == datetime.now(timezone.utc).year


class TestRaiseForStatus:
    """Tests for mapping HTTP failures to errors."""

    def test_ok_response_passes(self):
        raise_for_status(_response(200), "octocat")

    def test_401_is_authentication_error(self):
        with pytest.raises(AuthenticationError):
            raise_for_status(_response(401), "octocat")

    def test_404_is_user_not_found(self):
        with pytest.raises(UserNotFoundError, match="octocat"):
            raise_for_status(_response(404), "octocat")

    def test_403_with_exhausted_limit_is_rate_limit(self):
        response = _response(403, headers={"X-RateLimit-Remaining": "0"})

        with pytest.raises(RateLimitError):
            raise_for_status(response, "octocat")

    def test_429_is_rate_limit(self):
        with pytest.raises(RateLimitError):
            raise_for_status(_response(429), "octocat")

    def test_other_403_is_forbidden(self):
        response = _response(403, headers={"X-RateLimit-Remaining": "42"}, text="nope")

        with pytest.raises(GitHubClientError, match="Access forbidden") as exc_info:
            raise_for_status(response, "octocat")
        assert not isinstance(exc_info.value, RateLimitError)

    def test_server_error(self):
        with pytest.raises(GitHubClientError, match="502"):
            raise_for_status(_response(502, text="Bad Gateway"), "octocat")


class TestGitHubClient:
    """Tests for the GraphQL client."""

    def test_client_headers(self):
        """Client should authenticate and identify itself."""
        client = GitHubClient("test_token")

        assert client.session.headers["Authorization"] == "Bearer test_token"
        assert client.session.headers["User-Agent"] == "GitHubWrapped/1.0"
        assert "X-GitHub-Api-Version" in client.session.headers

    def test_base_url_override(self):
        client = GitHubClient("test_token", base_url="https://ghe.example.com/api/")

        assert client.base_url == "https://ghe.example.com/api"

    def test_build_date_range(self):
        assert build_date_range(2024) == ("2024-01-01T00:00:00Z", "2024-12-31T23:59:59Z")

    @patch("requests.Session.post")
    def test_fetch_contributions_success(self, mock_post):
        """Should post the query for the whole year and return the data."""
        mock_post.return_value = _response(body={"data": raw_response()})

        client = GitHubClient("test_token", base_url="https://api.github.com")
        data = client.fetch_contributions("octocat", 2024)

        assert data["user"]["login"] == "octocat"
        args, kwargs = mock_post.call_args
        assert args[0] == "https://api.github.com/graphql"
        assert kwargs["json"]["variables"] == {
            "username": "octocat",
            "from": "2024-01-01T00:00:00Z",
            "to": "2024-12-31T23:59:59Z",
        }
        assert "contributionsCollection" in kwargs["json"]["query"]

    @patch("requests.Session.post")
    def test_fetch_contributions_http_auth_failure(self, mock_post):
        mock_post.return_value = _response(401)

        with pytest.raises(AuthenticationError):
            GitHubClient("bad_token").fetch_contributions("octocat", 2024)

    @patch("requests.Session.post")
    def test_graphql_not_found(self, mock_post):
        mock_post.return_value = _response(
            body={"data": {"user": None}, "errors": [{"type": "NOT_FOUND", "message": "Could not resolve"}]}
        )

        with pytest.raises(UserNotFoundError):
            GitHubClient("test_token").fetch_contributions("ghost", 2024)

    @patch("requests.Session.post")
    def test_graphql_rate_limited(self, mock_post):
        mock_post.return_value = _response(
            body={"errors": [{"type": "RATE_LIMITED", "message": "API rate limit exceeded"}]}
        )

        with pytest.raises(RateLimitError):
            GitHubClient("test_token").fetch_contributions("octocat", 2024)

    @patch("requests.Session.post")
    def test_graphql_bad_credentials(self, mock_post):
        mock_post.return_value = _response(body={"errors": [{"message": "Bad credentials"}]})

        with pytest.raises(AuthenticationError):
            GitHubClient("test_token").fetch_contributions("octocat", 2024)

    @patch("requests.Session.post")
    def test_graphql_other_errors_are_joined(self, mock_post):
        mock_post.return_value = _response(
            body={"errors": [{"message": "first"}, {"message": "second"}]}
        )

        with pytest.raises(GitHubClientError, match="first, second"):
            GitHubClient("test_token").fetch_contributions("octocat", 2024)

    @patch("requests.Session.post")
    def test_null_user_is_not_found(self, mock_post):
        mock_post.return_value = _response(body={"data": {"user": None}})

        with pytest.raises(UserNotFoundError):
            GitHubClient("test_token").fetch_contributions("ghost", 2024)

    @patch("requests.Session.post")
    def test_missing_collection_is_invalid(self, mock_post):
        body = {"data": raw_response()}
        del body["data"]["user"]["contributionsCollection"]
        mock_post.return_value = _response(body=body)

        with pytest.raises(InvalidResponseError):
            GitHubClient("test_token").fetch_contributions("octocat", 2024)

    @patch("requests.Session.post")
    def test_connection_error_is_client_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("offline")

        with pytest.raises(GitHubConnectionError, match="Request to GitHub failed"):
            GitHubClient("test_token").fetch_contributions("octocat", 2024)


class TestFetchUserContributions:
    """Tests for strategy selection."""

    @patch("github_wrapped.github_client.GitHubClient")
    @patch("github_wrapped.github_client.RestContributionsClient")
    def test_without_token_uses_rest(self, mock_rest, mock_graphql):
        mock_rest.return_value.fetch_contributions.return_value = {"user": {"login": "octocat"}}

        result = fetch_user_contributions("octocat", 2024)

        assert result == {"user": {"login": "octocat"}}
        mock_rest.return_value.fetch_contributions.assert_called_once_with("octocat", 2024)
        mock_graphql.assert_not_called()

    @patch("github_wrapped.github_client.GitHubClient")
    @patch("github_wrapped.github_client.RestContributionsClient")
    def test_with_token_uses_graphql(self, mock_rest, mock_graphql):
        mock_graphql.return_value.fetch_contributions.return_value = {"user": {"login": "octocat"}}

        fetch_user_contributions("octocat", 2024, token="test_token")

        mock_graphql.assert_called_once_with("test_token")
        mock_rest.assert_not_called()

    @patch("github_wrapped.github_client.GitHubClient")
    @patch("github_wrapped.github_client.RestContributionsClient")
    def test_rejected_token_falls_back_to_rest(self, mock_rest, mock_graphql):
        mock_graphql.return_value.fetch_contributions.side_effect = AuthenticationError("bad")
        mock_rest.return_value.fetch_contributions.return_value = {"user": {"login": "octocat"}}

        result = fetch_user_contributions("octocat", 2024, token="expired")

        assert result["user"]["login"] == "octocat"
        mock_rest.return_value.fetch_contributions.assert_called_once_with("octocat", 2024)

    @patch("github_wrapped.github_client.GitHubClient")
    @patch("github_wrapped.github_client.RestContributionsClient")
    def test_rate_limit_is_not_swallowed(self, mock_rest, mock_graphql):
        mock_graphql.return_value.fetch_contributions.side_effect = RateLimitError("slow down")

        with pytest.raises(RateLimitError):
            fetch_user_contributions("octocat", 2024, token="test_token")
        mock_rest.assert_not_called()
