"""
Calculate code review statistics.
"""

from github_wrapped.models import ContributionsCollection, ReviewStats
from github_wrapped.utils import round_half_up


def calculate_review_stats(contributions: ContributionsCollection) -> ReviewStats:
    """
    Calculate review totals and the review-to-PR ratio.

    The source has no per-repository review counts, so most_reviewed_repo is
    an approximation: it reports the repository with the most commit
    contributions. It is not derived from review data.

    Args:
        contributions: Parsed contribution collection

    Returns:
        ReviewStats with:
        - total_reviews: Pull request reviews in the year
        - reviews_per_pr: Reviews per opened PR, one decimal (0 without PRs)
        - most_reviewed_repo: "owner/name" of the busiest repository, or None
    """
    total_reviews = contributions.total_pull_request_review_contributions
    total_prs = contributions.total_pull_request_contributions
    reviews_per_pr = round_half_up(total_reviews / total_prs, 1) if total_prs > 0 else 0

    commits_by_repo: dict[str, int] = {}
    for contrib in contributions.commit_contributions:
        name = contrib.repository.full_name
        commits_by_repo[name] = commits_by_repo.get(name, 0) + contrib.commit_count

    most_reviewed_repo = None
    max_count = 0
    for name, count in commits_by_repo.items():
        if count > max_count:
            max_count = count
            most_reviewed_repo = name

    return ReviewStats(
        total_reviews=total_reviews,
        reviews_per_pr=reviews_per_pr,
        most_reviewed_repo=most_reviewed_repo,
    )
