#!/usr/bin/env python3
"""
Command-line interface for the News Aggregator.

Usage:
    news-aggregator all                          # Every category, newest first
    news-aggregator all --json
    news-aggregator top technology --limit 5     # Top 5 technology articles
    news-aggregator categories                   # List configured categories
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .core.config import get_settings
from .core.models import Article
from .core.types import InvalidCategoryError

logger = logging.getLogger("news_aggregator.cli")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _format_article(article: Article) -> str:
    title = article.title or "(untitled)"
    line = f"  [{article.published_at or '?'}] {title} ({article.source})"
    if article.url:
        line += f"\n      {article.url}"
    return line


def get_aggregator():
    """Build an aggregator from the current settings."""
    from .services import NewsAggregator

    return NewsAggregator()


async def cmd_all_async(args: argparse.Namespace) -> int:
    async with get_aggregator() as aggregator:
        news = await aggregator.fetch_all()

    if args.json:
        payload = {
            category: [a.model_dump(by_alias=True) for a in articles]
            for category, articles in news.items()
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    for category, articles in news.items():
        print(f"\n{category.upper()} ({len(articles)})")
        for article in articles:
            print(_format_article(article))
    return 0


def cmd_all(args: argparse.Namespace) -> int:
    return asyncio.run(cmd_all_async(args))


async def cmd_top_async(args: argparse.Namespace) -> int:
    async with get_aggregator() as aggregator:
        try:
            articles = await aggregator.get_top_news_by_category(args.category, args.limit)
        except InvalidCategoryError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    if args.json:
        print(json.dumps([a.model_dump(by_alias=True) for a in articles], indent=2, ensure_ascii=False))
        return 0

    print(f"Top {args.limit} {args.category} news ({len(articles)} found)")
    for article in articles:
        print(_format_article(article))
    return 0


def cmd_top(args: argparse.Namespace) -> int:
    return asyncio.run(cmd_top_async(args))


def cmd_categories(args: argparse.Namespace) -> int:
    for category in get_settings().categories:
        print(category)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="News Aggregator CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # all command
    all_parser = subparsers.add_parser("all", help="Fetch every category from every provider")
    all_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    # top command
    top_parser = subparsers.add_parser("top", help="Show the most recent articles for one category")
    top_parser.add_argument("category", help="Category to fetch")
    top_parser.add_argument(
        "--limit",
        type=int,
        default=get_settings().default_top_limit,
        help="Maximum articles to show (default: %(default)s)",
    )
    top_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    # categories command
    subparsers.add_parser("categories", help="List configured categories")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    commands = {
        "all": cmd_all,
        "top": cmd_top,
        "categories": cmd_categories,
    }

    cmd_func = commands[args.command]
    try:
        return cmd_func(args)
    except Exception:
        logger.exception(f"Command '{args.command}' failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
