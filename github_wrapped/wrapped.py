"""
Build a GitHub Wrapped summary from a contributions response.

The pipeline is pure: each call recomputes everything from the given record,
and the resulting summary is immutable.
"""

import logging
from datetime import datetime, timezone

from github_wrapped.contribution_calendar import flatten_calendar
from github_wrapped.highlights_calculator import calculate_highlights
from github_wrapped.language_aggregator import calculate_languages
from github_wrapped.models import WrappedSummary, WrappedUser
from github_wrapped.payload_parser import parse_contributions_response
from github_wrapped.personality import calculate_personality
from github_wrapped.repository_ranker import rank_repositories
from github_wrapped.review_stats import calculate_review_stats
from github_wrapped.stats_calculator import calculate_stats

logger = logging.getLogger(__name__)


def calculate_wrapped(
    response: dict,
    year: int,
    now: datetime | None = None,
) -> WrappedSummary:
    """
    Calculate the full Wrapped summary for one user and year.

    Totals coming from the REST fallback may be samples or estimates (the
    search API caps results). They are aggregated as given.

    Args:
        response: GraphQL-shaped contributions response ({"user": {...}})
        year: The year the response covers
        now: Override the current time for testing (UTC). Sets both "today"
            for the current streak and generated_at.

    Returns:
        WrappedSummary

    Raises:
        UserNotFoundError: If the response has no user
        InvalidResponseError: If the response lacks contribution data
    """
    if now is None:
        now = datetime.now(timezone.utc)

    payload = parse_contributions_response(response)
    contributions = payload.contributions

    calendar = flatten_calendar(contributions.weeks)
    stats = calculate_stats(payload, calendar, today=now.date())
    highlights = calculate_highlights(calendar)
    repositories = rank_repositories(contributions.commit_contributions)
    languages = calculate_languages(
        contributions.commit_contributions, payload.owned_repositories
    )
    personality = calculate_personality(stats, highlights, languages, repositories)
    review_stats = calculate_review_stats(contributions)

    logger.debug(
        "Calculated wrapped data for %s (%d): %d commits, %d PRs, %d issues",
        payload.user.login,
        year,
        stats.total_commits,
        stats.total_prs,
        stats.total_issues,
    )

    return WrappedSummary(
        user=WrappedUser(
            username=payload.user.login,
            name=payload.user.name,
            avatar_url=payload.user.avatar_url,
            member_since=_member_since(payload.user.created_at),
            bio=payload.user.bio,
        ),
        year=year,
        stats=stats,
        highlights=highlights,
        repositories=repositories,
        languages=languages,
        personality=personality,
        calendar=calendar,
        review_stats=review_stats,
        generated_at=now.isoformat(),
    )


def _member_since(created_at: str | None) -> str | None:
    """Return the year an account was created, e.g. "2014"."""
    if not created_at:
        return None
    return created_at[:4]
