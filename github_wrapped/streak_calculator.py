"""
Calculate coding streaks from the contribution calendar.
"""

from datetime import date, datetime, timezone

from github_wrapped.models import ActivityDay, Streaks


def calculate_streaks(calendar: list[ActivityDay], today: date | None = None) -> Streaks:
    """
    Calculate longest and current streaks of active days.

    Args:
        calendar: Flattened contribution calendar
        today: Override today's date for testing. Defaults to the current
            UTC date.

    Returns:
        Streaks with:
        - longest_streak: Longest run of consecutive active days
        - current_streak: Run of active days ending today (or yesterday,
          when nothing has been committed yet today)
    """
    if not calendar:
        return Streaks(longest_streak=0, current_streak=0)

    if today is None:
        today = datetime.now(timezone.utc).date()

    # Sort by date to ensure correct order
    days = sorted(calendar, key=lambda day: day.date)

    return Streaks(
        longest_streak=_calculate_longest_streak(days),
        current_streak=_calculate_current_streak(days, today),
    )


def _calculate_longest_streak(days: list[ActivityDay]) -> int:
    """
    Calculate the longest streak in the calendar.

    Args:
        days: Calendar sorted by date (ascending)

    Returns:
        Longest streak count
    """
    longest = 0
    running = 0

    for day in days:
        if day.contribution_count > 0:
            running += 1
            longest = max(longest, running)
        else:
            running = 0

    return longest


def _calculate_current_streak(days: list[ActivityDay], today: date) -> int:
    """
    Calculate the current streak, counting backwards from today.

    Future dates are ignored. An empty today does not break the streak,
    since the user may simply not have committed yet.

    Args:
        days: Calendar sorted by date (ascending)
        today: Today's date

    Returns:
        Current streak count
    """
    streak = 0

    for day in reversed(days):
        if day.date > today:
            continue

        if day.contribution_count > 0:
            streak += 1
        elif day.date == today:
            continue
        else:
            break

    return streak
