"""
Tests for yearly statistics.
"""

from datetime import date

from factories import raw_repo, raw_response, raw_weeks
from github_wrapped.contribution_calendar import flatten_calendar
from github_wrapped.payload_parser import parse_contributions_response
from github_wrapped.stats_calculator import calculate_stats


def _stats(response, today=date(2025, 1, 10)):
    payload = parse_contributions_response(response)
    calendar = flatten_calendar(payload.contributions.weeks)
    return calculate_stats(payload, calendar, today=today)


class TestCalculateStats:
    """Tests for calculate_stats."""

    def test_active_and_idle_days(self):
        response = raw_response(weeks=raw_weeks("2025-01-01", [1, 0, 3, 0, 0, 2, 5, 1, 0, 4]))

        stats = _stats(response)

        assert stats.active_days == 6
        assert stats.idle_days == 4

    def test_streaks(self):
        """Jan 6 to Jan 8 is the longest run; Jan 10 is today."""
        response = raw_response(weeks=raw_weeks("2025-01-01", [1, 0, 3, 0, 0, 2, 5, 1, 0, 4]))

        stats = _stats(response)

        assert stats.longest_streak == 3
        assert stats.current_streak == 1

    def test_public_and_private_commits(self):
        response = raw_response(totalCommitContributions=80, restrictedContributionsCount=20)

        stats = _stats(response)

        assert stats.public_commits == 80
        assert stats.private_commits == 20
        assert stats.total_commits == 100

    def test_activity_totals(self):
        response = raw_response(
            totalPullRequestContributions=12,
            totalIssueContributions=4,
            totalPullRequestReviewContributions=9,
            totalRepositoriesWithContributedCommits=6,
        )

        stats = _stats(response)

        assert stats.total_prs == 12
        assert stats.total_issues == 4
        assert stats.total_reviews == 9
        assert stats.total_repos_contributed == 6

    def test_social_counts(self):
        stats = _stats(raw_response())

        assert stats.followers == 42
        assert stats.following == 7

    def test_owned_repositories_and_stars(self):
        response = raw_response(
            contributions=[(raw_repo("core", owner="acme", stars=30), 10)],
            repositories=[raw_repo("site", stars=2), raw_repo("secret", private=True)],
            repository_count=5,
        )

        stats = _stats(response)

        assert stats.total_repos_owned == 5
        assert stats.public_repos_owned == 1
        assert stats.private_repos_owned == 4
        assert stats.total_stars == 32
        assert stats.average_stars_per_repo == 10.7
        assert stats.most_starred_repo.name == "core"
        assert stats.most_starred_repo.owner == "acme"

    def test_empty_year(self):
        stats = _stats(raw_response())

        assert stats.total_commits == 0
        assert stats.active_days == 0
        assert stats.idle_days == 0
        assert stats.longest_streak == 0
        assert stats.current_streak == 0
        assert stats.most_starred_repo is None

    def test_serializes_prs_as_total_prs(self):
        stats = _stats(raw_response(totalPullRequestContributions=3))

        data = stats.model_dump(by_alias=True)

        assert data["totalPRs"] == 3
        assert data["activeDays"] == 0
        assert "totalPrs" not in data
