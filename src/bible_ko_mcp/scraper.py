"""Core scraping functionality for the Korean Bible Society reading pages."""

import logging
import re
from typing import Callable, Optional

import requests
from bs4 import BeautifulSoup

from .books import BOOKS_BY_NAME, BIBLE_BOOKS, DEFAULT_VERSION, get_book_info, version_name
from .models import Chapter, SearchHit, Verse

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

CHAPTER_URL_TEMPLATE = (
    "https://www.bskorea.or.kr/bible/korbibReadpage.php"
    "?version={version}&book={book}&chap={chapter}"
)

SEARCH_BOOK_LIMIT = 2
SEARCH_CHAPTER_LIMIT = 3

VERSE_RE = re.compile(r"^([0-9]+)\s+(.+)$", re.DOTALL)
FOOTNOTE_RE = re.compile(r"[0-9]+\)")


class NetworkError(Exception):
    """The chapter page could not be retrieved."""


# =============================================================================
# Extraction Functions
# =============================================================================

def parse_verse_text(text: str) -> Optional[Verse]:
    """
    Parse the rendered text of one element into a verse.

    The text must start with a verse number (1 or more, ASCII digits)
    followed by whitespace.
    Footnote markers such as "1)" are removed and anything after the
    first line break (alternate readings) is dropped.
    """
    match = VERSE_RE.match(text.strip())
    if not match:
        return None

    number = int(match.group(1))
    if number < 1:
        return None

    verse_text = FOOTNOTE_RE.sub("", match.group(2)).strip()
    verse_text = verse_text.split("\n")[0].strip()
    if not verse_text:
        return None

    return Verse(number=number, text=verse_text)


def extract_verses(html: str) -> list[Verse]:
    """
    Extract verses from a chapter page.

    Every span is considered, not only the ones marked up as verses, since
    the page repeats verse text across several spans. The first span seen
    for a verse number wins.
    """
    soup = BeautifulSoup(html, "html.parser")
    verses = []
    seen = set()

    for span in soup.find_all("span"):
        verse = parse_verse_text(span.get_text())
        if verse is None or verse.number in seen:
            continue
        seen.add(verse.number)
        verses.append(verse)

    return verses


def build_chapter_url(book_code: str, chapter: int, version: str = DEFAULT_VERSION) -> str:
    return CHAPTER_URL_TEMPLATE.format(version=version, book=book_code, chapter=chapter)


# =============================================================================
# Public API
# =============================================================================

def fetch_chapter(book_code: str, chapter: int, version: str = DEFAULT_VERSION) -> Chapter:
    """
    Fetch and parse one chapter.

    Args:
        book_code: Book code (e.g., 'gen', '1co')
        chapter: Chapter number
        version: Translation code (e.g., 'GAE')

    Returns:
        Chapter with the verses found on the page, possibly none

    Raises:
        NetworkError: if the request itself fails
    """
    url = build_chapter_url(book_code, chapter, version)
    logger.debug("Fetching %s", url)
    try:
        response = requests.get(url)
    except requests.RequestException as err:
        raise NetworkError(str(err)) from err

    verses = extract_verses(response.text)
    logger.debug("Extracted %d verses from %s", len(verses), url)

    book = get_book_info(book_code)
    return Chapter(
        book=book.english_name if book else book_code,
        book_korean=book.korean_name if book else "",
        chapter=chapter,
        version=version,
        version_name=version_name(version),
        verses=verses,
    )


def search_verses(
    query: str,
    version: str = DEFAULT_VERSION,
    books: Optional[list[str]] = None,
    fetch: Optional[Callable[..., Chapter]] = None,
) -> list[SearchHit]:
    """
    Search for verses containing a keyword.

    Only the first two books (of `books`, or of the whole Bible) and their
    first three chapters are scanned. A failed fetch ends the scan of that
    book but not of the search.

    Args:
        query: Text to look for (case-insensitive)
        version: Translation code
        books: English book names to search, in order
        fetch: Chapter fetcher, fetch_chapter if not given

    Returns:
        List of SearchHit in scan order
    """
    fetch = fetch or fetch_chapter
    results = []
    needle = query.lower()
    book_names = books if books is not None else [book.english_name for book in BIBLE_BOOKS]

    for book_name in book_names[:SEARCH_BOOK_LIMIT]:
        book = BOOKS_BY_NAME.get(book_name)
        if not book:
            continue

        for chapter in range(1, SEARCH_CHAPTER_LIMIT + 1):
            try:
                chapter_data = fetch(book.code, chapter, version)
            except Exception as e:
                logger.warning("Stopping search of %s at chapter %d: %s", book_name, chapter, e)
                break

            for verse in chapter_data.verses:
                if needle in verse.text.lower():
                    results.append(SearchHit(
                        book=chapter_data.book,
                        chapter=chapter_data.chapter,
                        verse=verse.number,
                        text=verse.text,
                    ))

    return results
