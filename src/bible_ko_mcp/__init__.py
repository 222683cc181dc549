"""
Bible Korean MCP - Korean Bible text from bskorea.or.kr as MCP tools.
"""

from .models import BookEntry, TranslationEntry, Verse, Chapter, SearchHit
from .books import BIBLE_BOOKS, TRANSLATIONS, DEFAULT_VERSION, find_book_code, get_book_info
from .scraper import NetworkError, extract_verses, fetch_chapter, search_verses

__all__ = [
    "BookEntry",
    "TranslationEntry",
    "Verse",
    "Chapter",
    "SearchHit",
    "BIBLE_BOOKS",
    "TRANSLATIONS",
    "DEFAULT_VERSION",
    "find_book_code",
    "get_book_info",
    "NetworkError",
    "extract_verses",
    "fetch_chapter",
    "search_verses",
]

__version__ = "1.0.0"
