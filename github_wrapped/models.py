"""
Data model for github-wrapped.

Every record is a frozen pydantic model. Attributes are snake_case in Python
and serialize with the camelCase field names the presentation layer reads
(contributionCount, totalPRs, averageStarsPerRepo, ...).
"""

import datetime
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class WrappedModel(BaseModel):
    """Base model: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Input records


class ActivityDay(WrappedModel):
    """One calendar date of the contribution calendar."""

    date: datetime.date
    contribution_count: int = Field(ge=0)
    weekday: int = Field(ge=0, le=6)  # 0 = Sunday


class LanguageInfo(WrappedModel):
    name: str
    color: str | None = None


class LanguageSize(WrappedModel):
    """One language-breakdown edge of a repository (bytes of code)."""

    name: str
    size: int = 0


class RepositoryRef(WrappedModel):
    """A repository touched or owned by the user."""

    owner: str
    name: str
    primary_language: LanguageInfo | None = None
    star_count: int = 0
    is_private: bool = False
    languages: tuple[LanguageSize, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


class CommitContribution(WrappedModel):
    """Commits by the user into one repository within the year."""

    repository: RepositoryRef
    commit_count: int = 0


class UserProfile(WrappedModel):
    login: str
    name: str | None = None
    avatar_url: str = ""
    bio: str | None = None
    created_at: str | None = None
    followers: int = 0
    following: int = 0


class ContributionsCollection(WrappedModel):
    """Year-bounded contribution totals, calendar and per-repo commits."""

    total_commit_contributions: int = 0
    total_pull_request_contributions: int = 0
    total_issue_contributions: int = 0
    total_pull_request_review_contributions: int = 0
    total_repositories_with_contributed_commits: int = 0
    restricted_contributions_count: int = 0
    weeks: tuple[tuple[ActivityDay, ...], ...] = ()
    commit_contributions: tuple[CommitContribution, ...] = ()


class ContributionsPayload(WrappedModel):
    """A fully parsed upstream record, ready for aggregation."""

    user: UserProfile
    contributions: ContributionsCollection
    owned_repositories: tuple[RepositoryRef, ...] = ()
    owned_repository_count: int = 0


@dataclass
class LanguageSignal:
    """Running totals for one language while aggregating."""

    commit_weight: int
    color: str
    code_size_bytes: int = 0


# Derived records


class Streaks(WrappedModel):
    longest_streak: int = 0
    current_streak: int = 0


class MostStarredRepo(WrappedModel):
    name: str
    owner: str
    stars: int


class StarStats(WrappedModel):
    total_stars: int = 0
    average_stars_per_repo: float = 0
    most_starred_repo: MostStarredRepo | None = None


class OwnedRepoCounts(WrappedModel):
    total_repos_owned: int = 0
    public_repos_owned: int = 0
    private_repos_owned: int = 0


class WrappedStatistics(WrappedModel):
    total_commits: int
    public_commits: int
    private_commits: int
    total_prs: int = Field(alias="totalPRs")
    total_issues: int
    total_reviews: int
    active_days: int
    idle_days: int
    longest_streak: int
    current_streak: int
    total_repos_contributed: int
    followers: int
    following: int
    total_repos_owned: int
    public_repos_owned: int
    private_repos_owned: int
    total_stars: int
    average_stars_per_repo: float
    most_starred_repo: MostStarredRepo | None = None


class MonthlyHighlight(WrappedModel):
    month: str
    month_index: int
    commits: int


class WrappedHighlights(WrappedModel):
    most_productive_month: MonthlyHighlight
    most_productive_day: str
    average_commits_per_active_day: float
    commits_by_day_of_week: Mapping[str, int]  # read-only, Sunday first

    @field_validator("commits_by_day_of_week", mode="after")
    @classmethod
    def _freeze_day_counts(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(value))

    @field_serializer("commits_by_day_of_week")
    def _serialize_day_counts(self, value: Mapping[str, int]) -> dict[str, int]:
        return dict(value)


class TopRepository(WrappedModel):
    name: str
    owner: str
    full_name: str
    commits: int
    language: str | None = None
    language_color: str | None = None
    stars: int = 0
    is_private: bool = False


class WrappedRepositories(WrappedModel):
    top: tuple[TopRepository, ...] = ()
    total_contributed: int = 0


class LanguageStat(WrappedModel):
    name: str
    percentage: int
    color: str
    commits: int
    code_size: int | None = None  # bytes


class WrappedLanguages(WrappedModel):
    top: tuple[LanguageStat, ...] = ()
    total: int = 0
    primary: str = "Unknown"


class PersonalityLabel(WrappedModel):
    id: str
    label: str
    emoji: str
    description: str
    color: str


class WrappedPersonality(WrappedModel):
    primary: PersonalityLabel
    badges: tuple[PersonalityLabel, ...] = ()


class ReviewStats(WrappedModel):
    total_reviews: int = 0
    reviews_per_pr: float = Field(0, alias="reviewsPerPR")
    most_reviewed_repo: str | None = None


class WrappedUser(WrappedModel):
    username: str
    name: str | None = None
    avatar_url: str = ""
    member_since: str | None = None
    bio: str | None = None


class WrappedSummary(WrappedModel):
    """The final recap for one user and year."""

    user: WrappedUser
    year: int
    stats: WrappedStatistics
    highlights: WrappedHighlights
    repositories: WrappedRepositories
    languages: WrappedLanguages
    personality: WrappedPersonality
    calendar: tuple[ActivityDay, ...]
    review_stats: ReviewStats
    generated_at: str
