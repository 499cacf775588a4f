"""Terminal client that reuses the in-process search pipeline."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Iterable

from news_search.config import Settings
from news_search.errors import ConfigError, PageParseError, UpstreamError
from news_search.news import NewsClient
from news_search.search import SearchPage, search_news

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


def perform_query(client: NewsClient, query: str, page: str | None = None) -> SearchPage:
    return asyncio.run(search_news(client, query, page))


def pretty_print_page(result: SearchPage) -> None:
    color = GREEN if result.total_results else RED
    print(
        f"Query: {result.query} | results: {color}{result.total_results}{RESET} | "
        f"page {result.current_page} of {result.total_pages}"
    )
    for idx, article in enumerate(result.articles, start=1):
        source = article.source.name if article.source and article.source.name else "-"
        print(f"  {idx:02d}. {article.formatted_published_date() or '-'} | {source} | {article.title}")
        if article.url:
            print(f"      {article.url}")
    if result.has_previous_page:
        print(f"  previous: --page {result.previous_page}")
    if not result.is_last_page:
        print(f"  next: --page {result.next_page}")


def interactive_shell(client: NewsClient, page: str | None = None) -> None:
    print("Interactive news search. Type 'exit' to quit.")
    while True:
        try:
            query = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not query:
            continue
        if query.lower() in {"exit", "quit"}:
            return
        try:
            pretty_print_page(perform_query(client, query, page))
        except UpstreamError as exc:
            print(f"{RED}error:{RESET} {exc}")


def batch_mode(client: NewsClient, file_path: Path, page: str | None = None) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            query = line.strip()
            if not query:
                continue
            pretty_print_page(perform_query(client, query, page))


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI client for the news search service")
    parser.add_argument("query", nargs="?", help="Query string. If omitted, starts REPL mode.")
    parser.add_argument("--page", help="Page number, starting at 1; applies to every query")
    parser.add_argument("--batch", type=Path, help="File with queries to execute line by line")
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        print(f"{RED}error:{RESET} {exc}", file=sys.stderr)
        return 1

    client = NewsClient(settings)
    try:
        if args.batch:
            batch_mode(client, args.batch, args.page)
        elif args.query:
            pretty_print_page(perform_query(client, args.query, args.page))
        else:
            interactive_shell(client, args.page)
    except PageParseError as exc:
        print(f"{RED}error:{RESET} {exc}", file=sys.stderr)
        return 2
    except UpstreamError as exc:
        print(f"{RED}error:{RESET} {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
