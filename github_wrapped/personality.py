"""
Personality badges for github-wrapped.

Each badge is awarded when its rule holds for the year's statistics. One badge
becomes the primary personality; the rest are shown as secondary badges.
"""

from types import MappingProxyType
from typing import Callable

from github_wrapped.models import (
    PersonalityLabel,
    WrappedHighlights,
    WrappedLanguages,
    WrappedPersonality,
    WrappedRepositories,
    WrappedStatistics,
)

# All possible personality labels, keyed by id
PERSONALITY_LABELS = MappingProxyType(
    {
        label.id: label
        for label in [
            PersonalityLabel(
                id="nightOwl",
                label="Night Owl",
                emoji="🦉",
                description="You do your best work when the world sleeps",
                color="#6366f1",
            ),
            PersonalityLabel(
                id="earlyBird",
                label="Early Bird",
                emoji="🐦",
                description="You catch the worm with pre-dawn commits",
                color="#f59e0b",
            ),
            PersonalityLabel(
                id="weekendWarrior",
                label="Weekend Warrior",
                emoji="⚔️",
                description="Weekends are for coding, not resting",
                color="#ef4444",
            ),
            PersonalityLabel(
                id="streakMaster",
                label="Streak Master",
                emoji="🔥",
                description="Consistency is your superpower",
                color="#f97316",
            ),
            PersonalityLabel(
                id="polyglot",
                label="Polyglot",
                emoji="🌍",
                description="You speak many programming languages fluently",
                color="#10b981",
            ),
            PersonalityLabel(
                id="openSourceHero",
                label="Open Source Hero",
                emoji="🦸",
                description="Contributing to the community, one commit at a time",
                color="#8b5cf6",
            ),
            PersonalityLabel(
                id="issueHunter",
                label="Issue Hunter",
                emoji="🎯",
                description="Finding and fixing bugs is your calling",
                color="#ec4899",
            ),
            PersonalityLabel(
                id="prMachine",
                label="PR Machine",
                emoji="🤖",
                description="Pull requests flow through your keyboard",
                color="#06b6d4",
            ),
            PersonalityLabel(
                id="codeReviewer",
                label="Code Reviewer",
                emoji="👀",
                description="Your keen eye makes every PR better",
                color="#84cc16",
            ),
            PersonalityLabel(
                id="consistentCoder",
                label="Consistent Coder",
                emoji="📅",
                description="You show up day after day, commit after commit",
                color="#3b82f6",
            ),
            PersonalityLabel(
                id="prolificPusher",
                label="Prolific Pusher",
                emoji="🚀",
                description="Your commit count is legendary",
                color="#a855f7",
            ),
            PersonalityLabel(
                id="mondayMotivator",
                label="Monday Motivator",
                emoji="💪",
                description="You start the week strong",
                color="#14b8a6",
            ),
            PersonalityLabel(
                id="fridayFinisher",
                label="Friday Finisher",
                emoji="🎉",
                description="You wrap up the week with a bang",
                color="#f43f5e",
            ),
            PersonalityLabel(
                id="soloArtist",
                label="Solo Artist",
                emoji="🎸",
                description="Your repos are your masterpieces",
                color="#6366f1",
            ),
            PersonalityLabel(
                id="collaborator",
                label="Team Player",
                emoji="🤝",
                description="You thrive when working with others",
                color="#22c55e",
            ),
        ]
    }
)

BadgeRule = Callable[
    [WrappedStatistics, WrappedHighlights, WrappedLanguages, WrappedRepositories], bool
]

MAX_SECONDARY_BADGES = 4


def _day_share(highlights: WrappedHighlights, *days: str) -> float:
    """Share of all weekday-bucket contributions made on the given days."""
    total = sum(highlights.commits_by_day_of_week.values())
    if total == 0:
        return 0.0
    return sum(highlights.commits_by_day_of_week.get(day, 0) for day in days) / total


# Evaluation order also sets the order of secondary badges
BADGE_RULES: tuple[tuple[str, BadgeRule], ...] = (
    ("weekendWarrior", lambda s, h, langs, r: _day_share(h, "Saturday", "Sunday") > 0.3),
    ("streakMaster", lambda s, h, langs, r: s.longest_streak > 14),
    ("polyglot", lambda s, h, langs, r: langs.total >= 5),
    ("prMachine", lambda s, h, langs, r: s.total_prs >= 30),
    ("codeReviewer", lambda s, h, langs, r: s.total_reviews >= 20),
    ("issueHunter", lambda s, h, langs, r: s.total_issues >= 20),
    ("consistentCoder", lambda s, h, langs, r: s.active_days >= 150),
    ("prolificPusher", lambda s, h, langs, r: s.total_commits >= 500),
    ("openSourceHero", lambda s, h, langs, r: s.total_repos_contributed >= 10),
    (
        "mondayMotivator",
        lambda s, h, langs, r: _day_share(h, "Monday") > 0.2
        and h.most_productive_day == "Monday",
    ),
    (
        "fridayFinisher",
        lambda s, h, langs, r: _day_share(h, "Friday") > 0.2
        and h.most_productive_day == "Friday",
    ),
)

# Priority order for the primary personality
PRIMARY_PRIORITY = (
    "weekendWarrior",
    "streakMaster",
    "prolificPusher",
    "polyglot",
    "prMachine",
    "openSourceHero",
    "codeReviewer",
    "consistentCoder",
    "issueHunter",
    "mondayMotivator",
    "fridayFinisher",
)


def calculate_personality(
    stats: WrappedStatistics,
    highlights: WrappedHighlights,
    languages: WrappedLanguages,
    repos: WrappedRepositories,
) -> WrappedPersonality:
    """
    Classify the year into a primary personality and secondary badges.

    Args:
        stats: Yearly statistics
        highlights: Yearly highlights
        languages: Language ranking
        repos: Repository ranking

    Returns:
        WrappedPersonality with the primary label and up to 4 other badges,
        in rule evaluation order
    """
    badges = [
        PERSONALITY_LABELS[badge_id]
        for badge_id, rule in BADGE_RULES
        if rule(stats, highlights, languages, repos)
    ]

    if not badges:
        primary = _default_personality(stats)
    else:
        badge_ids = {badge.id for badge in badges}
        primary_id = next((pid for pid in PRIMARY_PRIORITY if pid in badge_ids), None)
        primary = PERSONALITY_LABELS[primary_id] if primary_id else badges[0]

    secondary = [badge for badge in badges if badge.id != primary.id]

    return WrappedPersonality(
        primary=primary,
        badges=secondary[:MAX_SECONDARY_BADGES],
    )


def _default_personality(stats: WrappedStatistics) -> PersonalityLabel:
    """Pick a persona for a year that earned no badges."""
    if stats.total_commits >= 100:
        return PERSONALITY_LABELS["consistentCoder"]
    elif stats.total_prs >= 10:
        return PERSONALITY_LABELS["collaborator"]
    else:
        return PERSONALITY_LABELS["soloArtist"]


def get_personality_label(label_id: str) -> PersonalityLabel | None:
    """Look up a personality label by id."""
    return PERSONALITY_LABELS.get(label_id)


def get_all_personality_labels() -> list[PersonalityLabel]:
    """Return every personality label in catalog order."""
    return list(PERSONALITY_LABELS.values())
