"""
FastAPI web application for github-wrapped.

Provides the REST endpoint that fetches a user's year from GitHub and returns
the computed Wrapped summary, plus a simple HTML recap page.
"""

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from github_wrapped import config
from github_wrapped.config import get_current_year, validate_username, validate_year
from github_wrapped.contribution_calendar import contribution_level
from github_wrapped.errors import (
    AuthenticationError,
    GitHubClientError,
    InvalidResponseError,
    RateLimitError,
    UserNotFoundError,
)
from github_wrapped.github_client import fetch_user_contributions
from github_wrapped.models import PersonalityLabel, WrappedSummary
from github_wrapped.personality import get_all_personality_labels
from github_wrapped.utils import format_number
from github_wrapped.wrapped import calculate_wrapped

logger = logging.getLogger(__name__)

config.configure_logging()

app = FastAPI(
    title="github-wrapped",
    description="Your year on GitHub, wrapped",
    version="0.1.0",
)

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")
templates.env.globals["contribution_level"] = contribution_level
templates.env.filters["format_number"] = format_number


class ContributionsRequest(BaseModel):
    """Request model for fetching a Wrapped summary."""

    username: str = Field(..., min_length=1, description="GitHub username")
    year: int | None = Field(None, description="Year to summarize, defaults to the current year")
    token: str | None = Field(None, description="Optional personal access token")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok", "message": "GitHub Wrapped API"}


def _build_summary(username: str, year: int | None, token: str | None) -> WrappedSummary:
    """
    Validate the request, fetch contributions and calculate the summary.

    Raises:
        HTTPException: on invalid input or GitHub API errors
    """
    if year is None:
        year = get_current_year()

    try:
        validate_username(username)
        validate_year(year)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # The token is used for the request but never logged
    logger.info(
        "Fetching contributions for %s, year %d, token provided: %s",
        username,
        year,
        bool(token),
    )

    try:
        response = fetch_user_contributions(username, year, token=token)
        return calculate_wrapped(response, year)
    except UserNotFoundError:
        raise HTTPException(
            status_code=404, detail=f'GitHub user "{username}" was not found.'
        )
    except RateLimitError:
        raise HTTPException(
            status_code=429,
            detail="GitHub API rate limit exceeded. Please try again later "
            "or provide a personal access token.",
        )
    except AuthenticationError:
        raise HTTPException(
            status_code=401,
            detail="Invalid personal access token. Please check your token "
            "or try without one for public data only.",
        )
    except (InvalidResponseError, GitHubClientError) as e:
        logger.error("Failed to fetch contributions for %s: %s", username, e)
        raise HTTPException(status_code=502, detail=str(e))


@app.post("/api/github/contributions", response_model=WrappedSummary)
def get_contributions(request: ContributionsRequest):
    """
    Fetch a user's year and return the Wrapped summary.

    Args:
        request: ContributionsRequest with username, optional year and token

    Returns:
        JSON Wrapped summary (camelCase field names)
    """
    return _build_summary(request.username, request.year, request.token)


@app.get("/api/personalities", response_model=list[PersonalityLabel])
def get_personalities():
    """
    Get every personality label that can be awarded.

    Returns:
        JSON list of personality labels
    """
    return get_all_personality_labels()


@app.get("/wrapped/{username}", response_class=HTMLResponse)
def wrapped_page(request: Request, username: str, year: int | None = None):
    """Render the Wrapped recap page for a user."""
    summary = _build_summary(username, year, config.GITHUB_TOKEN)
    return templates.TemplateResponse(request, "wrapped.html", {"wrapped": summary})
