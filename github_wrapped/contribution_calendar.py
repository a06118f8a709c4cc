"""
Contribution calendar helpers.

Flattens GitHub's week-grouped contribution calendar into a date-ordered list
of days and maps daily counts to heatmap intensity levels.
"""

from bisect import bisect_left

from github_wrapped.models import ActivityDay


def flatten_calendar(weeks) -> list[ActivityDay]:
    """
    Flatten a week-grouped calendar into a date-ascending list of days.

    Missing days are never synthesized: a year still in progress yields a
    sequence shorter than 365 days, and callers must accept that.

    Args:
        weeks: Iterable of weeks, each an iterable of ActivityDay

    Returns:
        List of ActivityDay sorted by date
    """
    days = [day for week in weeks for day in week]
    return sorted(days, key=lambda day: day.date)


# Upper bounds of heatmap levels 0-3; anything above the last is level 4
LEVEL_UPPER_BOUNDS = (0, 3, 6, 9)


def contribution_level(count: int) -> int:
    """
    Map a daily contribution count to a heatmap level from 0 to 4.

    0 for no contributions, then 1-3, 4-6, 7-9 and 10 or more.
    """
    return bisect_left(LEVEL_UPPER_BOUNDS, count)
