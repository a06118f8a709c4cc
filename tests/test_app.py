"""
Tests for the FastAPI web application.
"""

from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from factories import raw_repo, raw_response, raw_weeks
from github_wrapped.app import app
from github_wrapped.errors import (
    AuthenticationError,
    GitHubClientError,
    InvalidResponseError,
    RateLimitError,
    UserNotFoundError,
)


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def github_response():
    """A small year of contributions."""
    return raw_response(
        weeks=raw_weeks("2024-01-01", [3, 0, 12, 5]),
        contributions=[(raw_repo("hello", language="Python", stars=4), 20)],
        repositories=[raw_repo("hello", language="Python", stars=4)],
        totalCommitContributions=20,
        totalPullRequestContributions=2,
        totalPullRequestReviewContributions=3,
    )


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_returns_ok(self, client):
        """Health endpoint should return status ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "GitHub Wrapped API"}


class TestContributionsEndpoint:
    """Tests for POST /api/github/contributions."""

    @patch("github_wrapped.app.fetch_user_contributions")
    def test_returns_camel_case_summary(self, mock_fetch, client, github_response):
        """Summary should use camelCase field names."""
        mock_fetch.return_value = github_response

        response = client.post(
            "/api/github/contributions", json={"username": "octocat", "year": 2024}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["username"] == "octocat"
        assert data["year"] == 2024
        assert data["stats"]["totalCommits"] == 20
        assert data["stats"]["totalPRs"] == 2
        assert data["reviewStats"]["reviewsPerPR"] == 1.5
        assert data["languages"]["primary"] == "Python"
        assert data["calendar"][2] == {
            "date": "2024-01-03",
            "contributionCount": 12,
            "weekday": 3,
        }
        assert "generatedAt" in data

    @patch("github_wrapped.app.fetch_user_contributions")
    def test_passes_token_through(self, mock_fetch, client, github_response):
        mock_fetch.return_value = github_response

        client.post(
            "/api/github/contributions",
            json={"username": "octocat", "year": 2024, "token": "ghp_secret"},
        )

        mock_fetch.assert_called_once_with("octocat", 2024, token="ghp_secret")

    @patch("github_wrapped.app.get_current_year", return_value=2024)
    @patch("github_wrapped.app.fetch_user_contributions")
    def test_year_defaults_to_current(self, mock_fetch, mock_year, client, github_response):
        mock_fetch.return_value = github_response

        response = client.post("/api/github/contributions", json={"username": "octocat"})

        assert response.status_code == 200
        assert response.json()["year"] == 2024

    @patch("github_wrapped.app.fetch_user_contributions")
    def test_invalid_username(self, mock_fetch, client):
        response = client.post(
            "/api/github/contributions", json={"username": "-octocat", "year": 2024}
        )

        assert response.status_code == 400
        assert "Invalid GitHub username format" in response.json()["detail"]
        mock_fetch.assert_not_called()

    @patch("github_wrapped.app.fetch_user_contributions")
    def test_invalid_year(self, mock_fetch, client):
        response = client.post(
            "/api/github/contributions", json={"username": "octocat", "year": 2007}
        )

        assert response.status_code == 400
        assert "Invalid year" in response.json()["detail"]

    def test_missing_username(self, client):
        response = client.post("/api/github/contributions", json={"year": 2024})

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (UserNotFoundError("gone"), 404),
            (RateLimitError("slow down"), 429),
            (AuthenticationError("bad token"), 401),
            (InvalidResponseError("broken"), 502),
            (GitHubClientError("GitHub API error: 500"), 502),
        ],
    )
    @patch("github_wrapped.app.fetch_user_contributions")
    def test_error_mapping(self, mock_fetch, error, status_code, client):
        mock_fetch.side_effect = error

        response = client.post(
            "/api/github/contributions", json={"username": "octocat", "year": 2024}
        )

        assert response.status_code == status_code

    @patch("github_wrapped.app.fetch_user_contributions")
    def test_not_found_message(self, mock_fetch, client):
        mock_fetch.side_effect = UserNotFoundError("gone")

        response = client.post(
            "/api/github/contributions", json={"username": "ghost", "year": 2024}
        )

        assert response.json()["detail"] == 'GitHub user "ghost" was not found.'

    @patch("requests.Session.get")
    def test_unreachable_github(self, mock_get, client):
        """Network failures become a 502, not an unhandled error."""
        mock_get.side_effect = requests.ConnectionError("offline")

        response = client.post(
            "/api/github/contributions", json={"username": "octocat", "year": 2024}
        )

        assert response.status_code == 502
        assert "Request to GitHub failed" in response.json()["detail"]

    @patch("github_wrapped.app.fetch_user_contributions")
    def test_malformed_upstream_record(self, mock_fetch, client):
        weeks = raw_weeks("2024-01-01", [1])
        del weeks[0]["contributionDays"][0]["date"]
        mock_fetch.return_value = raw_response(weeks=weeks)

        response = client.post(
            "/api/github/contributions", json={"username": "octocat", "year": 2024}
        )

        assert response.status_code == 502
        assert "Invalid response structure" in response.json()["detail"]


class TestPersonalitiesEndpoint:
    """Tests for GET /api/personalities."""

    def test_lists_all_labels(self, client):
        response = client.get("/api/personalities")

        assert response.status_code == 200
        labels = response.json()
        assert len(labels) == 15
        assert {"id", "label", "emoji", "description", "color"} <= set(labels[0])


class TestWrappedPage:
    """Tests for the HTML recap page."""

    @patch("github_wrapped.app.fetch_user_contributions")
    def test_renders_recap(self, mock_fetch, client, github_response):
        mock_fetch.return_value = github_response

        response = client.get("/wrapped/octocat?year=2024")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "The Octocat" in response.text
        assert "octocat/hello" in response.text
        assert "level-4" in response.text

    @patch("github_wrapped.app.fetch_user_contributions")
    def test_unknown_user(self, mock_fetch, client):
        mock_fetch.side_effect = UserNotFoundError("gone")

        response = client.get("/wrapped/ghost?year=2024")

        assert response.status_code == 404
