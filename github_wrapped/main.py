"""
github-wrapped: your year on GitHub, wrapped

Command-line entry point.
"""

import argparse
import json

from github_wrapped import config
from github_wrapped.cli import display_summary
from github_wrapped.config import get_current_year, validate_username, validate_year
from github_wrapped.errors import WrappedError
from github_wrapped.github_client import fetch_user_contributions
from github_wrapped.wrapped import calculate_wrapped


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-wrapped",
        description="Summarize a year of GitHub activity.",
    )
    parser.add_argument("username", help="GitHub username")
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="year to summarize (default: current year)",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="personal access token (default: GITHUB_TOKEN from the environment)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the summary as JSON instead of a text recap",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging("WARNING" if not args.json else "ERROR")

    year = args.year if args.year is not None else get_current_year()
    token = args.token or config.GITHUB_TOKEN

    try:
        validate_username(args.username)
        validate_year(year)
    except ValueError as e:
        print(f"\nInvalid input:\n{e}")
        return 1

    try:
        if not args.json:
            print(f"\nFetching {year} activity for {args.username}...\n")
        response = fetch_user_contributions(args.username, year, token=token)
        summary = calculate_wrapped(response, year)
    except WrappedError as e:
        print(f"\nError: {e}")
        return 1

    if args.json:
        print(json.dumps(summary.model_dump(mode="json", by_alias=True), indent=2))
    else:
        display_summary(summary)

    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
