"""
Aggregate language usage across contributed and owned repositories.

Languages are weighted by the commits made to repositories whose primary
language they are. Percentages are rounded independently, and the rounding
remainder is folded into the top language so the displayed set sums to 100.
"""

from github_wrapped.models import (
    CommitContribution,
    LanguageSignal,
    LanguageStat,
    RepositoryRef,
    WrappedLanguages,
)
from github_wrapped.utils import round_half_up

TOP_LANGUAGE_COUNT = 6
UNKNOWN_LANGUAGE = "Unknown"
FALLBACK_COLOR = "#8b949e"

# Weight for a language seen only on owned repositories without commits this year
OWNED_ONLY_WEIGHT = 1

# Linguist colors for common languages, used when the source omits a color
DEFAULT_LANGUAGE_COLORS = {
    "TypeScript": "#3178c6",
    "JavaScript": "#f1e05a",
    "Python": "#3572A5",
    "Java": "#b07219",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "Ruby": "#701516",
    "PHP": "#4F5D95",
    "C++": "#f34b7d",
    "C": "#555555",
    "C#": "#178600",
    "Swift": "#ffac45",
    "Kotlin": "#A97BFF",
    "Scala": "#c22d40",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "SCSS": "#c6538c",
    "Shell": "#89e051",
    "Vim": "#199f4b",
    "Lua": "#000080",
    "Dart": "#00B4AB",
    "Elixir": "#6e4a7e",
    "Haskell": "#5e5086",
    "Clojure": "#db5855",
    "Vue": "#41b883",
    "Svelte": "#ff3e00",
}


def get_language_color(language: str, color: str | None = None) -> str:
    """Return the source color, a known default, or neutral grey."""
    if color:
        return color
    return DEFAULT_LANGUAGE_COLORS.get(language, FALLBACK_COLOR)


def calculate_languages(
    commit_contributions: list[CommitContribution],
    owned_repositories: list[RepositoryRef],
    limit: int = TOP_LANGUAGE_COUNT,
) -> WrappedLanguages:
    """
    Rank languages by commit weight.

    Args:
        commit_contributions: Per-repository commit contributions; each
            credits its full commit count to the repository's primary language
        owned_repositories: Owned repositories; languages first seen here get
            a weight of 1, and the byte size of each repository's primary
            language is added to that language's code size
        limit: Number of languages to keep (the rest are dropped)

    Returns:
        WrappedLanguages with:
        - top: Up to `limit` languages, heaviest first, percentages summing
          to exactly 100
        - total: Number of distinct languages before the cut
        - primary: Name of the top language, or "Unknown"
    """
    signals = _collect_signals(commit_contributions, owned_repositories)

    total_weight = sum(signal.commit_weight for signal in signals.values())

    ranked = sorted(signals.items(), key=lambda item: item[1].commit_weight, reverse=True)
    top = [
        {
            "name": name,
            "percentage": (
                round_half_up(signal.commit_weight / total_weight * 100)
                if total_weight > 0
                else 0
            ),
            "color": signal.color,
            "commits": signal.commit_weight,
            "code_size": signal.code_size_bytes or None,
        }
        for name, signal in ranked[:limit]
    ]

    # Fold the rounding remainder into the top language
    if top:
        top[0]["percentage"] += 100 - sum(lang["percentage"] for lang in top)

    return WrappedLanguages(
        top=[LanguageStat(**lang) for lang in top],
        total=len(signals),
        primary=top[0]["name"] if top else UNKNOWN_LANGUAGE,
    )


def _collect_signals(
    commit_contributions: list[CommitContribution],
    owned_repositories: list[RepositoryRef],
) -> dict[str, LanguageSignal]:
    signals: dict[str, LanguageSignal] = {}

    for contrib in commit_contributions:
        language = contrib.repository.primary_language
        if language is None:
            continue
        if language.name not in signals:
            signals[language.name] = LanguageSignal(
                commit_weight=0,
                color=get_language_color(language.name, language.color),
            )
        signals[language.name].commit_weight += contrib.commit_count

    for repo in owned_repositories:
        language = repo.primary_language
        if language is None:
            continue
        if language.name not in signals:
            signals[language.name] = LanguageSignal(
                commit_weight=OWNED_ONLY_WEIGHT,
                color=get_language_color(language.name, language.color),
            )

        # Only the primary language's share of the repository counts
        for edge in repo.languages:
            if edge.name == language.name:
                signals[language.name].code_size_bytes += edge.size

    return signals
