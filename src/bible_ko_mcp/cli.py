#!/usr/bin/env python3
"""
CLI for Bible Korean MCP - runs the stdio server or reads the Bible directly.

Usage:
    bible-ko-mcp                               # Run the MCP server on stdio
    bible-ko-mcp chapter 요한복음 3              # Print a chapter
    bible-ko-mcp verses john 3 16 --end 17     # Print a verse range
    bible-ko-mcp search 사랑 -v NIR             # Keyword search (limited)
    bible-ko-mcp books --testament NT          # List books
    bible-ko-mcp compare john 3 16 -v GAE NIR  # Compare translations
"""

import argparse
import json
import logging
import os
import sys

from . import scraper, tools
from .books import DEFAULT_VERSION, VERSION_CODES, find_book_code


# =============================================================================
# Configuration
# =============================================================================

LOG_LEVEL_ENV = "BIBLE_KO_MCP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger("bible_ko_mcp")


def configure_logging(level: str):
    """Log to stderr; stdout belongs to the MCP protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_serve(args) -> int:
    from .server import run_server

    try:
        run_server()
    except KeyboardInterrupt:
        return 0
    except Exception:
        logger.exception("Fatal error")
        return 1
    return 0


def cmd_chapter(args) -> int:
    if args.json:
        book_code = find_book_code(args.book)
        if not book_code:
            print(f"❌ Unknown book: {args.book}")
            return 1
        try:
            chapter = scraper.fetch_chapter(book_code, args.chapter, args.version)
        except scraper.NetworkError as e:
            print(f"❌ Error: {e}")
            return 1
        print(chapter.to_json())
        return 0

    print(tools.call_tool("get-chapter", {
        "book": args.book, "chapter": args.chapter, "version": args.version,
    }))
    return 0


def cmd_verses(args) -> int:
    print(tools.call_tool("get-verses", {
        "book": args.book,
        "chapter": args.chapter,
        "verseStart": args.start,
        "verseEnd": args.end,
        "version": args.version,
    }))
    return 0


def cmd_search(args) -> int:
    if args.json:
        hits = scraper.search_verses(args.query, args.version)
        print(json.dumps([hit.to_dict() for hit in hits], indent=2, ensure_ascii=False))
        return 0

    print(tools.call_tool("search-bible", {"query": args.query, "version": args.version}))
    return 0


def cmd_books(args) -> int:
    print(tools.call_tool("list-books", {"testament": args.testament}))
    return 0


def cmd_compare(args) -> int:
    print(tools.call_tool("compare-translations", {
        "book": args.book,
        "chapter": args.chapter,
        "verse": args.verse,
        "versions": args.versions,
    }))
    return 0


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bible-ko-mcp",
        description="Korean Bible text from bskorea.or.kr, as an MCP server or on the command line."
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"Logging level for stderr (default: {DEFAULT_LOG_LEVEL}, env: {LOG_LEVEL_ENV})"
    )
    parser.set_defaults(func=cmd_serve)
    commands = parser.add_subparsers(dest="command")

    serve = commands.add_parser("serve", help="Run the MCP server on stdio (default)")
    serve.set_defaults(func=cmd_serve)

    def add_version(sub):
        sub.add_argument(
            "--version-code", "-v",
            dest="version",
            choices=VERSION_CODES,
            default=DEFAULT_VERSION,
            help=f"Translation (default: {DEFAULT_VERSION})"
        )

    chapter = commands.add_parser("chapter", help="Print every verse of a chapter")
    chapter.add_argument("book", help="Book name (English or Korean) or code")
    chapter.add_argument("chapter", type=int)
    chapter.add_argument("--json", action="store_true", help="Print the chapter as JSON")
    add_version(chapter)
    chapter.set_defaults(func=cmd_chapter)

    verses = commands.add_parser("verses", help="Print a range of verses")
    verses.add_argument("book")
    verses.add_argument("chapter", type=int)
    verses.add_argument("start", type=int)
    verses.add_argument("--end", type=int, help="Last verse (default: start)")
    add_version(verses)
    verses.set_defaults(func=cmd_verses)

    search = commands.add_parser("search", help="Search the first chapters of the first books")
    search.add_argument("query")
    search.add_argument("--json", action="store_true", help="Print hits as JSON")
    add_version(search)
    search.set_defaults(func=cmd_search)

    books = commands.add_parser("books", help="List books")
    books.add_argument("--testament", "-t", choices=["OT", "NT"])
    books.set_defaults(func=cmd_books)

    compare = commands.add_parser("compare", help="Compare one verse across translations")
    compare.add_argument("book")
    compare.add_argument("chapter", type=int)
    compare.add_argument("verse", type=int)
    compare.add_argument(
        "--versions", "-v",
        nargs="+",
        choices=VERSION_CODES,
        help="Translations to compare (default: all)"
    )
    compare.set_defaults(func=cmd_compare)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
