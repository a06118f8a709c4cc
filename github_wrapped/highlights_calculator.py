"""
Calculate yearly highlights: busiest month, busiest weekday and the average
number of contributions per active day.
"""

from github_wrapped.models import ActivityDay, MonthlyHighlight, WrappedHighlights
from github_wrapped.utils import DAYS, MONTHS, day_name, round_half_up

DEFAULT_PRODUCTIVE_DAY = "Monday"


def calculate_highlights(calendar: list[ActivityDay]) -> WrappedHighlights:
    """
    Calculate highlights from the contribution calendar.

    Ties go to the earliest month and to the first weekday in Sunday..Saturday
    order, since a later bucket must be strictly greater to win.

    Args:
        calendar: Flattened contribution calendar

    Returns:
        WrappedHighlights with:
        - most_productive_month: Month with the most contributions
          (January with 0 commits when there is no activity)
        - most_productive_day: Weekday name with the most contributions
          ("Monday" when there is no activity)
        - average_commits_per_active_day: Rounded to one decimal
        - commits_by_day_of_week: Contributions per weekday, Sunday first
    """
    commits_by_month = [0] * 12
    commits_by_day = {name: 0 for name in DAYS}

    for day in calendar:
        commits_by_month[day.date.month - 1] += day.contribution_count
        commits_by_day[day_name(day.date)] += day.contribution_count

    # Find most productive month
    best_month = 0
    for month_index, commits in enumerate(commits_by_month):
        if commits > commits_by_month[best_month]:
            best_month = month_index

    # Find most productive day of week
    most_productive_day = DEFAULT_PRODUCTIVE_DAY
    max_day_commits = 0
    for name in DAYS:
        if commits_by_day[name] > max_day_commits:
            max_day_commits = commits_by_day[name]
            most_productive_day = name

    active_days = sum(1 for day in calendar if day.contribution_count > 0)
    total_commits = sum(day.contribution_count for day in calendar)
    average = round_half_up(total_commits / active_days, 1) if active_days > 0 else 0

    return WrappedHighlights(
        most_productive_month=MonthlyHighlight(
            month=MONTHS[best_month],
            month_index=best_month,
            commits=commits_by_month[best_month],
        ),
        most_productive_day=most_productive_day,
        average_commits_per_active_day=average,
        commits_by_day_of_week=commits_by_day,
    )
