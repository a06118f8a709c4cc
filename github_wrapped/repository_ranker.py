"""
Rank repositories and compute repository-level statistics.

Two base sets are used on purpose: the top repositories come from commit
contributions only, while star statistics use the union of contributed and
owned repositories, because commit-only entries may lack metadata that the
owned list supplies.
"""

from github_wrapped.models import (
    CommitContribution,
    MostStarredRepo,
    OwnedRepoCounts,
    RepositoryRef,
    StarStats,
    TopRepository,
    WrappedRepositories,
)
from github_wrapped.utils import round_half_up

TOP_REPOSITORY_COUNT = 5


def rank_repositories(
    commit_contributions: list[CommitContribution],
    limit: int = TOP_REPOSITORY_COUNT,
) -> WrappedRepositories:
    """
    Rank contributed repositories by commit count.

    Args:
        commit_contributions: Per-repository commit contributions
        limit: Number of repositories to keep

    Returns:
        WrappedRepositories with the top repositories (most commits first,
        source order kept for ties) and the number of contributed repositories
    """
    top = [
        TopRepository(
            name=contrib.repository.name,
            owner=contrib.repository.owner,
            full_name=contrib.repository.full_name,
            commits=contrib.commit_count,
            language=_language_name(contrib.repository),
            language_color=_language_color(contrib.repository),
            stars=contrib.repository.star_count,
            is_private=contrib.repository.is_private,
        )
        for contrib in commit_contributions
    ]
    top.sort(key=lambda repo: repo.commits, reverse=True)

    return WrappedRepositories(
        top=top[:limit],
        total_contributed=len(commit_contributions),
    )


def count_owned_repositories(
    owned_repositories: list[RepositoryRef], total_count: int
) -> OwnedRepoCounts:
    """
    Split owned repositories into public and private counts.

    The total comes from the source, which may report more repositories than
    the (capped) list of nodes; every repository beyond the list is counted
    as private.
    """
    public = sum(1 for repo in owned_repositories if not repo.is_private)
    return OwnedRepoCounts(
        total_repos_owned=total_count,
        public_repos_owned=public,
        private_repos_owned=total_count - public,
    )


def calculate_star_stats(
    commit_contributions: list[CommitContribution],
    owned_repositories: list[RepositoryRef],
) -> StarStats:
    """
    Calculate star totals over every known repository.

    Repositories are deduplicated by full name; the first occurrence wins.

    Args:
        commit_contributions: Per-repository commit contributions
        owned_repositories: Repositories owned by the user

    Returns:
        StarStats with total stars, average stars per repository (one
        decimal) and the most starred repository (None when no repository
        has stars)
    """
    unique_repos: dict[str, RepositoryRef] = {}
    all_repos = [contrib.repository for contrib in commit_contributions]
    all_repos.extend(owned_repositories)
    for repo in all_repos:
        unique_repos.setdefault(repo.full_name, repo)

    repos = list(unique_repos.values())
    total_stars = sum(repo.star_count for repo in repos)
    average = round_half_up(total_stars / len(repos), 1) if repos else 0

    most_starred = None
    max_stars = 0
    for repo in repos:
        if repo.star_count > max_stars:
            max_stars = repo.star_count
            most_starred = MostStarredRepo(
                name=repo.name, owner=repo.owner, stars=repo.star_count
            )

    return StarStats(
        total_stars=total_stars,
        average_stars_per_repo=average,
        most_starred_repo=most_starred,
    )


def _language_name(repo: RepositoryRef) -> str | None:
    return repo.primary_language.name if repo.primary_language else None


def _language_color(repo: RepositoryRef) -> str | None:
    return repo.primary_language.color if repo.primary_language else None
