"""
Parse contribution responses from the GitHub API.

Both retrieval strategies (GraphQL and the REST fallback) produce the same
GraphQL-shaped record: {"user": {..., "contributionsCollection": {...},
"repositories": {...}}}. This module validates the required top-level fields
and converts the record into typed models before any aggregation runs.
"""

from datetime import date

from github_wrapped.errors import InvalidResponseError, UserNotFoundError
from github_wrapped.models import (
    ActivityDay,
    CommitContribution,
    ContributionsCollection,
    ContributionsPayload,
    LanguageInfo,
    LanguageSize,
    RepositoryRef,
    UserProfile,
)

UNKNOWN_OWNER = "unknown"


def parse_contributions_response(response: dict | None) -> ContributionsPayload:
    """
    Parse a GitHub contributions response into a ContributionsPayload.

    Args:
        response: GraphQL-shaped dict with a top-level "user" key

    Returns:
        ContributionsPayload with user, contributions and owned repositories

    Raises:
        UserNotFoundError: If the response has no user
        InvalidResponseError: If the contribution collection or its calendar
            is missing, or a day or repository in it is malformed
    """
    user = (response or {}).get("user")
    if not user:
        raise UserNotFoundError("User not found in GitHub response")

    collection = user.get("contributionsCollection")
    if not collection:
        raise InvalidResponseError(
            "Invalid response structure: missing contributionsCollection"
        )

    calendar = collection.get("contributionCalendar")
    if not calendar:
        raise InvalidResponseError(
            "Invalid response structure: missing contributionCalendar"
        )

    try:
        return _build_payload(user, collection, calendar)
    except (KeyError, TypeError, ValueError) as e:
        # pydantic.ValidationError is a ValueError
        raise InvalidResponseError(f"Invalid response structure: {e}") from e


def _build_payload(user: dict, collection: dict, calendar: dict) -> ContributionsPayload:
    repositories = user.get("repositories") or {}
    owned_nodes = repositories.get("nodes") or []

    return ContributionsPayload(
        user=UserProfile(
            login=user.get("login") or "",
            name=user.get("name"),
            avatar_url=user.get("avatarUrl") or "",
            bio=user.get("bio"),
            created_at=user.get("createdAt"),
            followers=_total_count(user.get("followers")),
            following=_total_count(user.get("following")),
        ),
        contributions=ContributionsCollection(
            total_commit_contributions=collection.get("totalCommitContributions") or 0,
            total_pull_request_contributions=collection.get("totalPullRequestContributions") or 0,
            total_issue_contributions=collection.get("totalIssueContributions") or 0,
            total_pull_request_review_contributions=collection.get(
                "totalPullRequestReviewContributions"
            ) or 0,
            total_repositories_with_contributed_commits=collection.get(
                "totalRepositoriesWithContributedCommits"
            ) or 0,
            restricted_contributions_count=collection.get("restrictedContributionsCount") or 0,
            weeks=tuple(
                tuple(_parse_day(day) for day in week.get("contributionDays") or [])
                for week in calendar.get("weeks") or []
            ),
            commit_contributions=tuple(
                CommitContribution(
                    repository=parse_repository(contrib.get("repository") or {}),
                    commit_count=_total_count(contrib.get("contributions")),
                )
                for contrib in collection.get("commitContributionsByRepository") or []
            ),
        ),
        owned_repositories=tuple(parse_repository(node) for node in owned_nodes),
        owned_repository_count=repositories.get("totalCount") or 0,
    )


def parse_repository(repo: dict) -> RepositoryRef:
    """
    Parse a repository node.

    Missing owners are recorded as "unknown" and missing star counts as 0.
    """
    owner = (repo.get("owner") or {}).get("login") or UNKNOWN_OWNER

    language = repo.get("primaryLanguage")
    primary_language = (
        LanguageInfo(name=language["name"], color=language.get("color"))
        if language and language.get("name")
        else None
    )

    edges = (repo.get("languages") or {}).get("edges") or []
    languages = tuple(
        LanguageSize(name=edge["node"]["name"], size=edge.get("size") or 0)
        for edge in edges
        if (edge.get("node") or {}).get("name")
    )

    return RepositoryRef(
        owner=owner,
        name=repo.get("name") or "",
        primary_language=primary_language,
        star_count=repo.get("stargazerCount") or 0,
        is_private=bool(repo.get("isPrivate")),
        languages=languages,
    )


def _parse_day(day: dict) -> ActivityDay:
    return ActivityDay(
        date=date.fromisoformat(day["date"][:10]),
        contribution_count=day.get("contributionCount") or 0,
        weekday=day.get("weekday") or 0,
    )


def _total_count(connection: dict | None) -> int:
    return (connection or {}).get("totalCount") or 0
