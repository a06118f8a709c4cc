"""
Unauthenticated GitHub REST fallback.

Assembles the same GraphQL-shaped contributions record from public REST
endpoints. Fidelity is lower than the GraphQL path:

- the commit search returns a sample of at most 100 commits, so the daily
  calendar and per-repository counts are built from that sample while the
  total commit count is the exact search total;
- review and restricted (private) contribution counts are unavailable and
  reported as 0;
- private repositories are only visible with a token.
"""

import logging
from datetime import date, timedelta

import requests

from github_wrapped import config
from github_wrapped.errors import GitHubConnectionError, raise_for_status

logger = logging.getLogger(__name__)

PER_PAGE = 100
MAX_REPOSITORIES = 100


def parse_push_events(events: list[dict], year: int) -> list[dict]:
    """
    Parse push events of a given year from the public events feed.

    Args:
        events: List of GitHub API event dictionaries
        year: Only events created in this year are kept

    Returns:
        List of dicts with:
        - date: event date (YYYY-MM-DD format)
        - repo: repository full name
        - commit_count: number of commits in the push
    """
    pushes = []

    for event in events:
        if event.get("type") != "PushEvent":
            continue

        created_at = event.get("created_at") or ""
        if not created_at.startswith(f"{year}-"):
            continue

        payload = event.get("payload") or {}
        commits = payload.get("commits") or []
        # Use size if explicitly provided, otherwise count commits
        if "size" in payload:
            commit_count = payload["size"]
        else:
            commit_count = len(commits)

        pushes.append({
            "date": created_at[:10],
            "repo": (event.get("repo") or {}).get("name", "unknown"),
            "commit_count": commit_count,
        })

    return pushes


def build_contribution_calendar(commits_by_date: dict[str, int], year: int) -> list[dict]:
    """
    Build a full-year daily calendar from per-date commit counts.

    Args:
        commits_by_date: Mapping of YYYY-MM-DD to commit count
        year: Calendar year

    Returns:
        One day dict (date, contributionCount, weekday) per day of the year,
        weekday being 0 for Sunday
    """
    days = []
    current = date(year, 1, 1)
    while current.year == year:
        date_str = current.isoformat()
        days.append({
            "date": date_str,
            "contributionCount": commits_by_date.get(date_str, 0),
            "weekday": (current.weekday() + 1) % 7,
        })
        current += timedelta(days=1)
    return days


def group_into_weeks(days: list[dict]) -> list[dict]:
    """
    Group calendar days into weeks.

    A week closes after a Saturday or once it holds 7 days.
    """
    weeks = []
    current_week = []

    for day in days:
        current_week.append(day)
        if day["weekday"] == 6 or len(current_week) == 7:
            weeks.append({"contributionDays": current_week})
            current_week = []

    if current_week:
        weeks.append({"contributionDays": current_week})

    return weeks


class RestContributionsClient:
    """Client assembling contributions from the public GitHub REST API."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the REST client.

        Args:
            token: Optional personal access token (enables private repos)
            base_url: API root, defaults to GITHUB_API_URL
            timeout: Request timeout in seconds, defaults to REQUEST_TIMEOUT
        """
        self.token = token
        self.base_url = (base_url or config.GITHUB_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "User-Agent": config.USER_AGENT,
            }
        )
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _get(self, path: str, params: dict | None = None) -> requests.Response:
        try:
            return self.session.get(
                f"{self.base_url}{path}", params=params, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise GitHubConnectionError(f"Request to GitHub failed: {e}") from e

    def get_user(self, username: str) -> dict:
        """
        Fetch a user's public profile.

        Raises:
            UserNotFoundError: If the user does not exist
            GitHubClientError: If the API request fails
        """
        response = self._get(f"/users/{username}")
        raise_for_status(response, username)
        return response.json()

    def get_user_repos(self, username: str) -> list[dict]:
        """
        Fetch every repository owned by a user, most recently pushed first.

        Raises:
            GitHubClientError: If the API request fails
        """
        repos = []
        page = 1

        while True:
            response = self._get(
                f"/users/{username}/repos",
                params={
                    "per_page": PER_PAGE,
                    "page": page,
                    "sort": "pushed",
                    "direction": "desc",
                },
            )
            raise_for_status(response, username)

            page_repos = response.json()
            if not page_repos:
                break

            repos.extend(page_repos)
            if len(page_repos) < PER_PAGE:
                break
            page += 1

        return repos

    def _search_total(self, path: str, query: str) -> dict | None:
        """Run a search query, returning the JSON body or None on failure."""
        response = self._get(path, params={"q": query, "per_page": PER_PAGE})
        if not response.ok:
            logger.warning(
                "Search %s failed with status %s", path, response.status_code
            )
            return None
        return response.json()

    def get_activity(self, username: str, year: int) -> dict:
        """
        Collect commit, PR and issue activity for a year.

        Uses the search API. A search that answers with an error status leaves
        its total at 0. If a search request cannot be made at all, every
        search result gathered so far is discarded and the activity comes
        from the public events feed alone, which only covers recent activity.
        Search samples and event counts are never mixed.

        Returns:
            Dict with commits_by_date, commits_by_repo, total_commits,
            total_prs and total_issues
        """
        activity = {
            "commits_by_date": {},
            "commits_by_repo": {},
            "total_commits": 0,
            "total_prs": 0,
            "total_issues": 0,
        }
        date_range = f"{year}-01-01..{year}-12-31"

        try:
            commits = self._search_total(
                "/search/commits", f"author:{username} author-date:{date_range}"
            )
            if commits is not None:
                activity["total_commits"] = commits.get("total_count", 0)
                items = commits.get("items") or []
                for item in items:
                    day = item["commit"]["author"]["date"][:10]
                    repo = item["repository"]["full_name"]
                    _increment(activity["commits_by_date"], day, 1)
                    _increment(activity["commits_by_repo"], repo, 1)

                if activity["total_commits"] > len(items):
                    logger.info(
                        "User has %d commits in %d, calendar built from a sample of %d",
                        activity["total_commits"],
                        year,
                        len(items),
                    )

            prs = self._search_total(
                "/search/issues", f"author:{username} type:pr created:{date_range}"
            )
            if prs is not None:
                activity["total_prs"] = prs.get("total_count", 0)

            issues = self._search_total(
                "/search/issues", f"author:{username} type:issue created:{date_range}"
            )
            if issues is not None:
                activity["total_issues"] = issues.get("total_count", 0)

        except GitHubConnectionError as e:
            logger.warning("GitHub search API failed, using events feed: %s", e)
            activity = self._get_activity_from_events(username, year)

        return activity

    def _get_activity_from_events(self, username: str, year: int) -> dict:
        """Collect activity from the events feed; zero activity if it fails too."""
        activity = {
            "commits_by_date": {},
            "commits_by_repo": {},
            "total_commits": 0,
            "total_prs": 0,
            "total_issues": 0,
        }

        try:
            response = self._get(
                f"/users/{username}/events/public", params={"per_page": PER_PAGE}
            )
        except GitHubConnectionError as e:
            logger.warning("Events feed also failed: %s", e)
            return activity

        if not response.ok:
            logger.warning("Events feed failed with status %s", response.status_code)
            return activity

        events = response.json()

        for push in parse_push_events(events, year):
            activity["total_commits"] += push["commit_count"]
            _increment(activity["commits_by_date"], push["date"], push["commit_count"])
            _increment(activity["commits_by_repo"], push["repo"], push["commit_count"])

        for event in events:
            if not (event.get("created_at") or "").startswith(f"{year}-"):
                continue
            if event.get("type") == "PullRequestEvent":
                activity["total_prs"] += 1
            elif event.get("type") == "IssuesEvent":
                activity["total_issues"] += 1

        return activity

    def fetch_contributions(self, username: str, year: int) -> dict:
        """
        Fetch a year of contributions as a GraphQL-shaped record.

        Args:
            username: GitHub username
            year: Calendar year to fetch

        Returns:
            Dict with a top-level "user" key, matching the GraphQL response

        Raises:
            UserNotFoundError: If the user does not exist
            GitHubClientError: If the profile or repository requests fail
        """
        user = self.get_user(username)
        activity = self.get_activity(username, year)
        repos = self.get_user_repos(username)
        if not self.token:
            repos = [repo for repo in repos if not repo.get("private")]

        repos_by_name = {repo["full_name"]: repo for repo in repos}

        repo_contributions = []
        for full_name, commit_count in activity["commits_by_repo"].items():
            repo = repos_by_name.get(full_name)
            if repo and commit_count > 0:
                repo_contributions.append({
                    "repository": _repository_node(repo),
                    "contributions": {"totalCount": commit_count},
                })
        repo_contributions.sort(
            key=lambda contrib: contrib["contributions"]["totalCount"], reverse=True
        )

        calendar = build_contribution_calendar(activity["commits_by_date"], year)

        return {
            "user": {
                "login": user.get("login"),
                "name": user.get("name"),
                "avatarUrl": user.get("avatar_url"),
                "bio": user.get("bio"),
                "createdAt": user.get("created_at"),
                "followers": {"totalCount": user.get("followers", 0)},
                "following": {"totalCount": user.get("following", 0)},
                "contributionsCollection": {
                    "totalCommitContributions": activity["total_commits"],
                    "totalPullRequestContributions": activity["total_prs"],
                    "totalIssueContributions": activity["total_issues"],
                    "totalPullRequestReviewContributions": 0,
                    "totalRepositoriesWithContributedCommits": len(repo_contributions),
                    "restrictedContributionsCount": 0,
                    "contributionCalendar": {
                        "totalContributions": activity["total_commits"],
                        "weeks": group_into_weeks(calendar),
                    },
                    "commitContributionsByRepository": repo_contributions[:MAX_REPOSITORIES],
                },
                "repositories": {
                    "totalCount": len(repos),
                    "nodes": [
                        dict(_repository_node(repo), languages={"edges": []})
                        for repo in repos[:MAX_REPOSITORIES]
                    ],
                },
            }
        }


def _repository_node(repo: dict) -> dict:
    """Convert a REST repository into the GraphQL repository shape."""
    language = repo.get("language")
    return {
        "name": repo.get("name"),
        "owner": {"login": (repo.get("owner") or {}).get("login")},
        "primaryLanguage": {"name": language, "color": None} if language else None,
        "stargazerCount": repo.get("stargazers_count", 0),
        "isPrivate": bool(repo.get("private")),
    }


def _increment(counts: dict[str, int], key: str, amount: int) -> None:
    counts[key] = counts.get(key, 0) + amount
