"""Tool definitions and handlers that render Bible text for MCP clients."""

import logging
from typing import Any, Optional

from mcp.types import Tool

from . import scraper
from .books import DEFAULT_VERSION, TRANSLATIONS, VERSION_CODES, books_by_testament, find_book_code, version_name
from .models import Chapter, Verse

logger = logging.getLogger(__name__)


# =============================================================================
# Tool Definitions
# =============================================================================

_VERSION_SCHEMA = {
    "type": "string",
    "description": f"Bible translation version (default: {DEFAULT_VERSION})",
    "enum": VERSION_CODES,
    "default": DEFAULT_VERSION,
}

TOOLS = [
    Tool(
        name="get-chapter",
        description="Get all verses from a specific chapter of the Korean Bible",
        inputSchema={
            "type": "object",
            "properties": {
                "book": {
                    "type": "string",
                    "description": "Book name (English or Korean) or code (e.g., 'Genesis', '창세기', 'gen')",
                },
                "chapter": {"type": "integer", "minimum": 1, "description": "Chapter number"},
                "version": _VERSION_SCHEMA,
            },
            "required": ["book", "chapter"],
        },
    ),
    Tool(
        name="get-verses",
        description="Get specific verse(s) from a chapter",
        inputSchema={
            "type": "object",
            "properties": {
                "book": {"type": "string", "description": "Book name (English or Korean) or code"},
                "chapter": {"type": "integer", "minimum": 1, "description": "Chapter number"},
                "verseStart": {"type": "integer", "minimum": 1, "description": "Starting verse number"},
                "verseEnd": {
                    "type": "integer",
                    "minimum": 1,
                    "description": "Ending verse number (optional, defaults to verseStart)",
                },
                "version": _VERSION_SCHEMA,
            },
            "required": ["book", "chapter", "verseStart"],
        },
    ),
    Tool(
        name="search-bible",
        description="Search for verses containing specific keywords (searches limited books for demo)",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query (Korean or English)"},
                "version": _VERSION_SCHEMA,
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="list-books",
        description="List all available books in the Bible",
        inputSchema={
            "type": "object",
            "properties": {
                "testament": {
                    "type": "string",
                    "description": "Filter by testament (OT/NT, optional)",
                    "enum": ["OT", "NT"],
                },
            },
        },
    ),
    Tool(
        name="compare-translations",
        description="Compare a verse across different Korean translations",
        inputSchema={
            "type": "object",
            "properties": {
                "book": {"type": "string", "description": "Book name (English or Korean) or code"},
                "chapter": {"type": "integer", "minimum": 1, "description": "Chapter number"},
                "verse": {"type": "integer", "minimum": 1, "description": "Verse number"},
                "versions": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Array of version codes to compare (default: all versions)",
                },
            },
            "required": ["book", "chapter", "verse"],
        },
    ),
]


# =============================================================================
# Formatting
# =============================================================================

NO_VERSES = "No verses found.\n"


def format_verses(verses: list[Verse]) -> str:
    if not verses:
        return NO_VERSES
    return "".join(f"**{verse.number}.** {verse.text}\n\n" for verse in verses)


def format_chapter(chapter: Chapter) -> str:
    result = f"# {chapter.book} ({chapter.book_korean}) {chapter.chapter}\n"
    result += f"**Translation:** {chapter.version_name}\n\n"
    return result + format_verses(chapter.verses)


# =============================================================================
# Handlers
# =============================================================================

def get_chapter(book: str, chapter: int, version: str = DEFAULT_VERSION) -> str:
    """
    Render every verse of a chapter.

    Args:
        book: Book name (English or Korean) or code
        chapter: Chapter number
        version: Translation code

    Returns:
        Heading plus numbered verses, or a "not found" message
    """
    book_code = find_book_code(book)
    if not book_code:
        return f"Error: Book '{book}' not found. Use list-books to see available books."

    return format_chapter(scraper.fetch_chapter(book_code, chapter, version))


def get_verses(
    book: str,
    chapter: int,
    verse_start: int,
    verse_end: Optional[int] = None,
    version: str = DEFAULT_VERSION,
) -> str:
    """
    Render the verses from verse_start to verse_end, inclusive.

    Args:
        book: Book name (English or Korean) or code
        chapter: Chapter number
        verse_start: First verse
        verse_end: Last verse, verse_start if not given
        version: Translation code

    Returns:
        Heading plus the selected verses, or a "not found" message
    """
    book_code = find_book_code(book)
    if not book_code:
        return f"Error: Book '{book}' not found."

    chapter_data = scraper.fetch_chapter(book_code, chapter, version)
    end = verse_end or verse_start
    selected = [v for v in chapter_data.verses if verse_start <= v.number <= end]

    result = f"# {chapter_data.book} {chapter_data.chapter}:{verse_start}"
    if end != verse_start:
        result += f"-{end}"
    result += f"\n**Translation:** {chapter_data.version_name}\n\n"
    return result + format_verses(selected)


def search_bible(query: str, version: str = DEFAULT_VERSION) -> str:
    """Render search hits from the first chapters of Genesis and Exodus."""
    hits = scraper.search_verses(query, version)
    if not hits:
        return f'No results found for "{query}" (searched limited books for demo)'

    result = f'# Search Results for "{query}"\n'
    result += f"Found {len(hits)} verses:\n\n"
    for hit in hits:
        result += f"**{hit.book} {hit.chapter}:{hit.verse}**\n"
        result += f"{hit.text}\n\n"
    return result


def list_books(testament: Optional[str] = None) -> str:
    """Render the book table, grouped by testament."""
    books = books_by_testament(testament)

    result = "# Bible Books\n\n"
    result += "## Old Testament\n"
    for book in books:
        if book.testament == "OT":
            result += f"- **{book.english_name}** ({book.korean_name}) - code: `{book.code}`\n"

    result += "\n## New Testament\n"
    for book in books:
        if book.testament == "NT":
            result += f"- **{book.english_name}** ({book.korean_name}) - code: `{book.code}`\n"
    return result


def compare_translations(
    book: str,
    chapter: int,
    verse: int,
    versions: Optional[list[str]] = None,
) -> str:
    """
    Render one verse from several translations.

    Args:
        book: Book name (English or Korean) or code
        chapter: Chapter number
        verse: Verse number
        versions: Translation codes, all known ones if None

    Returns:
        One section per translation; a failed fetch shows a placeholder
    """
    book_code = find_book_code(book)
    if not book_code:
        return f"Error: Book '{book}' not found."

    result = f"# {book} {chapter}:{verse} - Translation Comparison\n\n"

    for version in versions if versions is not None else list(TRANSLATIONS):
        try:
            found = scraper.fetch_chapter(book_code, chapter, version).get_verse(verse)
        except Exception as e:
            logger.warning("Could not load %s %d:%d in %s: %s", book, chapter, verse, version, e)
            result += f"## {version_name(version)}\n"
            result += "(Error loading this version)\n\n"
            continue

        # Translations missing the verse are left out.
        if found:
            result += f"## {version_name(version)}\n"
            result += f"{found.text}\n\n"

    return result


# =============================================================================
# Dispatch
# =============================================================================

def _required(args: dict[str, Any], key: str) -> Any:
    if args.get(key) is None:
        raise ValueError(f"Missing required argument: {key}")
    return args[key]


def _run(name: str, args: dict[str, Any]) -> str:
    version = args.get("version") or DEFAULT_VERSION

    if name == "get-chapter":
        return get_chapter(_required(args, "book"), int(_required(args, "chapter")), version)

    elif name == "get-verses":
        verse_end = args.get("verseEnd")
        return get_verses(
            _required(args, "book"),
            int(_required(args, "chapter")),
            int(_required(args, "verseStart")),
            int(verse_end) if verse_end is not None else None,
            version,
        )

    elif name == "search-bible":
        return search_bible(_required(args, "query"), version)

    elif name == "list-books":
        return list_books(args.get("testament"))

    elif name == "compare-translations":
        return compare_translations(
            _required(args, "book"),
            int(_required(args, "chapter")),
            int(_required(args, "verse")),
            args.get("versions"),
        )

    return f"Unknown tool: {name}"


def call_tool(name: str, arguments: Optional[dict[str, Any]] = None) -> str:
    """
    Run a tool by name and return its text.

    Never raises: failures are returned as "Error: <message>".
    """
    try:
        return _run(name, arguments or {})
    except Exception as e:
        logger.exception("Tool %s failed", name)
        return f"Error: {e}"
