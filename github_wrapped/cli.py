"""
CLI display functions for github-wrapped.
"""

from github_wrapped.models import (
    WrappedHighlights,
    WrappedLanguages,
    WrappedPersonality,
    WrappedRepositories,
    WrappedStatistics,
    WrappedSummary,
)
from github_wrapped.utils import format_number

BAR_WIDTH = 30

# Longest-streak milestones, highest first
STREAK_MILESTONES = (
    (365, "A full year without a break!"),
    (100, "Triple digits - legendary!"),
    (60, "Two months unstoppable!"),
    (30, "One month champion!"),
    (14, "Two weeks of consistency!"),
    (7, "One week strong!"),
)


def get_milestone_message(streak_days: int) -> str | None:
    """
    Get the message for the highest milestone a streak has reached.

    Args:
        streak_days: Longest streak in days

    Returns:
        Milestone message, or None for streaks shorter than a week
    """
    for threshold, message in STREAK_MILESTONES:
        if streak_days >= threshold:
            return message
    return None


def display_header(summary: WrappedSummary) -> None:
    """Display the recap title."""
    name = summary.user.name or summary.user.username
    print(f"🎁 {name}'s GitHub Wrapped {summary.year}")
    if summary.user.member_since:
        print(f"   @{summary.user.username} - member since {summary.user.member_since}")
    print("-" * 50)
    print()


def display_stats(stats: WrappedStatistics) -> None:
    """
    Display yearly statistics to the console.

    Args:
        stats: WrappedStatistics from calculate_stats()
    """
    print("📊 Your Year in Numbers:")
    print(
        f"   Commits:       {format_number(stats.total_commits)} "
        f"({format_number(stats.public_commits)} public, "
        f"{format_number(stats.private_commits)} private)"
    )
    print(f"   Pull requests: {format_number(stats.total_prs)}")
    print(f"   Reviews:       {format_number(stats.total_reviews)}")
    print(f"   Issues:        {format_number(stats.total_issues)}")
    print(f"   Active days:   {stats.active_days} ({stats.idle_days} idle)")
    print(f"   Repositories:  {stats.total_repos_contributed} contributed to")
    print(f"   Stars:         {format_number(stats.total_stars)}")
    print()


def display_streak(stats: WrappedStatistics) -> None:
    """
    Display streak information with milestone messages.

    Args:
        stats: WrappedStatistics from calculate_stats()
    """
    longest = stats.longest_streak
    current = stats.current_streak

    if longest == 0:
        status = "No streaks this year"
    else:
        day_word = "day" if longest == 1 else "days"
        status = f"Longest Streak: {longest} {day_word}"

        milestone = get_milestone_message(longest)
        if milestone:
            status = f"{status} - {milestone}"

    print(f"🔥 {status}")
    if current:
        day_word = "day" if current == 1 else "days"
        print(f"   Current streak: {current} {day_word}")
    print()


def display_highlights(highlights: WrappedHighlights) -> None:
    """Display the busiest month, busiest weekday and daily average."""
    month = highlights.most_productive_month
    print("📅 Highlights:")
    print(f"   Busiest month:  {month.month} ({month.commits} contributions)")
    print(f"   Favourite day:  {highlights.most_productive_day}")
    print(f"   Per active day: {highlights.average_commits_per_active_day}")
    print()


def format_language_bar(percentage: int, width: int = BAR_WIDTH) -> str:
    """Render a percentage as a fixed-width text bar."""
    filled = round(width * percentage / 100)
    return "█" * filled + "░" * (width - filled)


def display_languages(languages: WrappedLanguages) -> None:
    """Display the top languages with percentage bars."""
    print(f"💻 Languages ({languages.total} used):")
    if not languages.top:
        print("   No language data")
    for lang in languages.top:
        print(f"   {lang.name:<12} {format_language_bar(lang.percentage)} {lang.percentage:>3}%")
    print()


def display_repositories(repos: WrappedRepositories) -> None:
    """Display the top repositories by commits."""
    print("📦 Top Repositories:")
    if not repos.top:
        print("   No repository contributions")
    for repo in repos.top:
        plural = "commit" if repo.commits == 1 else "commits"
        print(f"   {repo.full_name:<35} {repo.commits} {plural}")
    print()


def display_personality(personality: WrappedPersonality) -> None:
    """Display the primary personality and secondary badges."""
    primary = personality.primary
    print(f"{primary.emoji} You are a {primary.label}!")
    print(f"   {primary.description}")
    if personality.badges:
        badges = ", ".join(f"{badge.emoji} {badge.label}" for badge in personality.badges)
        print(f"   Also: {badges}")
    print()


def display_summary(summary: WrappedSummary) -> None:
    """Display the full Wrapped recap."""
    display_header(summary)
    display_stats(summary.stats)
    display_streak(summary.stats)
    display_highlights(summary.highlights)
    display_languages(summary.languages)
    display_repositories(summary.repositories)
    display_personality(summary.personality)
