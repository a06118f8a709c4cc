"""
GraphQL queries for the GitHub API.
"""

USER_CONTRIBUTIONS_QUERY = """
query GetUserContributions($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    login
    name
    avatarUrl
    bio
    createdAt
    followers {
      totalCount
    }
    following {
      totalCount
    }

    contributionsCollection(from: $from, to: $to) {
      totalCommitContributions
      totalPullRequestContributions
      totalIssueContributions
      totalPullRequestReviewContributions
      totalRepositoriesWithContributedCommits
      restrictedContributionsCount

      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            weekday
          }
        }
      }

      commitContributionsByRepository(maxRepositories: 100) {
        repository {
          name
          owner {
            login
          }
          primaryLanguage {
            name
            color
          }
          stargazerCount
          isPrivate
        }
        contributions {
          totalCount
        }
      }
    }

    repositories(first: 100, ownerAffiliations: OWNER, orderBy: {field: PUSHED_AT, direction: DESC}) {
      totalCount
      nodes {
        name
        owner {
          login
        }
        primaryLanguage {
          name
          color
        }
        stargazerCount
        isPrivate
        languages(first: 10, orderBy: {field: SIZE, direction: DESC}) {
          edges {
            size
            node {
              name
              color
            }
          }
        }
      }
    }
  }
}
"""


def build_date_range(year: int) -> tuple[str, str]:
    """
    Build the UTC bounds of a calendar year.

    Args:
        year: Calendar year

    Returns:
        (from, to) ISO-8601 timestamps covering the whole year
    """
    return f"{year}-01-01T00:00:00Z", f"{year}-12-31T23:59:59Z"
