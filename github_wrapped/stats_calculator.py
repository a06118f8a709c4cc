"""
Compose the yearly statistics record.
"""

from datetime import date

from github_wrapped.models import ActivityDay, ContributionsPayload, WrappedStatistics
from github_wrapped.repository_ranker import calculate_star_stats, count_owned_repositories
from github_wrapped.streak_calculator import calculate_streaks


def calculate_stats(
    payload: ContributionsPayload,
    calendar: list[ActivityDay],
    today: date | None = None,
) -> WrappedStatistics:
    """
    Calculate activity, social, repository and star statistics.

    Private commits are the source's restricted contributions count, the only
    signal available for commits in repositories the API cannot show. The
    number of contributed repositories is taken from the source as reported.

    Args:
        payload: Parsed contributions payload
        calendar: Flattened contribution calendar
        today: Override today's date for testing (used for the current streak)

    Returns:
        WrappedStatistics for the year
    """
    contributions = payload.contributions

    active_days = sum(1 for day in calendar if day.contribution_count > 0)
    idle_days = len(calendar) - active_days

    streaks = calculate_streaks(calendar, today=today)

    public_commits = contributions.total_commit_contributions
    private_commits = contributions.restricted_contributions_count

    owned = count_owned_repositories(
        payload.owned_repositories, payload.owned_repository_count
    )
    stars = calculate_star_stats(
        contributions.commit_contributions, payload.owned_repositories
    )

    return WrappedStatistics(
        total_commits=public_commits + private_commits,
        public_commits=public_commits,
        private_commits=private_commits,
        total_prs=contributions.total_pull_request_contributions,
        total_issues=contributions.total_issue_contributions,
        total_reviews=contributions.total_pull_request_review_contributions,
        active_days=active_days,
        idle_days=idle_days,
        longest_streak=streaks.longest_streak,
        current_streak=streaks.current_streak,
        total_repos_contributed=contributions.total_repositories_with_contributed_commits,
        followers=payload.user.followers,
        following=payload.user.following,
        total_repos_owned=owned.total_repos_owned,
        public_repos_owned=owned.public_repos_owned,
        private_repos_owned=owned.private_repos_owned,
        total_stars=stars.total_stars,
        average_stars_per_repo=stars.average_stars_per_repo,
        most_starred_repo=stars.most_starred_repo,
    )
