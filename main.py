#!/usr/bin/env python
"""CLI for the search coach."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import httpx
from pydantic import BaseModel, field_validator

from search_coach.config import SearchCoachConfig, get_default_config_path, load_config
from search_coach.config.factory import create_leaderboard_service, create_search_service
from search_coach.errors import SearchCoachError
from search_coach.leaderboard import load_display_names, load_response_records

logger = logging.getLogger(__name__)


class SearchArgs(BaseModel):
    """Validated arguments for the ``search`` command."""

    config: Path
    text: str
    country: str = "nf"
    freshness: str = "1"
    domains: str = ""
    dry_run: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


class LeaderboardArgs(BaseModel):
    """Validated arguments for the ``leaderboard`` command."""

    config: Path
    team_id: str
    group_id: str
    responses: Path
    names: Path | None = None

    @field_validator("config", "responses", "names")
    @classmethod
    def file_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"File not found: {v}")
        return v


async def run_search(args: SearchArgs, config: SearchCoachConfig) -> None:
    """Run a web search and print the results."""
    service = create_search_service(config)

    if args.dry_run:
        uri, _key = service.prepare(args.text, args.country, args.freshness, args.domains)
        print(uri)
        return

    logger.info(f"Searching for: {args.text}")
    results = await service.search(args.text, args.country, args.freshness, args.domains)

    print(f"\nFound {len(results)} web pages:\n")
    for i, page in enumerate(results, 1):
        logger.info(f"{i}. {page.title}")
        logger.info(f"   URL: {page.url}")
        if page.snippet:
            logger.info(f"   {page.snippet}")


async def run_leaderboard(args: LeaderboardArgs, config: SearchCoachConfig) -> None:
    """Aggregate exported responses and print the leaderboard as JSON."""
    store = load_response_records(args.responses)
    resolver = load_display_names(args.names) if args.names else None
    service = create_leaderboard_service(config, store, resolver=resolver)

    rows = await service.get_leaderboard(args.team_id, args.group_id)
    print(json.dumps([row.as_json() for row in rows], indent=2))


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search coach tools.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Run a filtered Bing web search")
    search.add_argument("text", help="Search text")
    search.add_argument("--country", default="nf", help="Market code, or 'nf' for no filter")
    search.add_argument(
        "--freshness",
        default="1",
        help="Freshness: 1/any, 2/day, 3/week, 4/month (default: 1)",
    )
    search.add_argument(
        "--domains",
        default="",
        help="Semicolon-separated domain suffixes, e.g. '.edu;.gov'",
    )
    search.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Print the request URI instead of calling the API",
    )

    board = subparsers.add_parser("leaderboard", help="Build a quiz leaderboard")
    board.add_argument("team_id", help="Team id")
    board.add_argument("group_id", help="Group id")
    board.add_argument(
        "--responses",
        type=Path,
        required=True,
        help="JSON file with exported response records",
    )
    board.add_argument(
        "--names",
        type=Path,
        default=None,
        help="JSON file mapping user id to display name (default: Microsoft Graph)",
    )

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        config = load_config(config_path)
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(f"Could not load config {config_path}: {e}")
        sys.exit(1)

    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    try:
        if ns.command == "search":
            search_args = SearchArgs(
                config=config_path,
                text=ns.text,
                country=ns.country,
                freshness=ns.freshness,
                domains=ns.domains,
                dry_run=ns.dry_run,
            )
            coro = run_search(search_args, config)
        else:
            board_args = LeaderboardArgs(
                config=config_path,
                team_id=ns.team_id,
                group_id=ns.group_id,
                responses=ns.responses,
                names=ns.names,
            )
            coro = run_leaderboard(board_args, config)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(coro)
    except (SearchCoachError, ValueError, httpx.HTTPError) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
