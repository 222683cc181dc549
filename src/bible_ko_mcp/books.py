"""Static book and translation tables, and book name resolution."""

from typing import Optional

from .models import BookEntry, TranslationEntry


# =============================================================================
# Constants
# =============================================================================

DEFAULT_VERSION = "GAE"

TESTAMENTS = ("OT", "NT")

BIBLE_BOOKS = tuple(
    BookEntry(english_name=name, code=code, korean_name=korean, testament=testament)
    for name, code, korean, testament in [
        # Old Testament
        ("Genesis", "gen", "창세기", "OT"),
        ("Exodus", "exo", "출애굽기", "OT"),
        ("Leviticus", "lev", "레위기", "OT"),
        ("Numbers", "num", "민수기", "OT"),
        ("Deuteronomy", "deu", "신명기", "OT"),
        ("Joshua", "jos", "여호수아", "OT"),
        ("Judges", "jdg", "사사기", "OT"),
        ("Ruth", "rut", "룻기", "OT"),
        ("1 Samuel", "1sa", "사무엘상", "OT"),
        ("2 Samuel", "2sa", "사무엘하", "OT"),
        ("1 Kings", "1ki", "열왕기상", "OT"),
        ("2 Kings", "2ki", "열왕기하", "OT"),
        ("1 Chronicles", "1ch", "역대상", "OT"),
        ("2 Chronicles", "2ch", "역대하", "OT"),
        ("Ezra", "ezr", "에스라", "OT"),
        ("Nehemiah", "neh", "느헤미야", "OT"),
        ("Esther", "est", "에스더", "OT"),
        ("Job", "job", "욥기", "OT"),
        ("Psalms", "psa", "시편", "OT"),
        ("Proverbs", "pro", "잠언", "OT"),
        ("Ecclesiastes", "ecc", "전도서", "OT"),
        ("Song of Solomon", "sng", "아가", "OT"),
        ("Isaiah", "isa", "이사야", "OT"),
        ("Jeremiah", "jer", "예레미야", "OT"),
        ("Lamentations", "lam", "예레미야애가", "OT"),
        ("Ezekiel", "ezk", "에스겔", "OT"),
        ("Daniel", "dan", "다니엘", "OT"),
        ("Hosea", "hos", "호세아", "OT"),
        ("Joel", "jol", "요엘", "OT"),
        ("Amos", "amo", "아모스", "OT"),
        ("Obadiah", "oba", "오바댜", "OT"),
        ("Jonah", "jon", "요나", "OT"),
        ("Micah", "mic", "미가", "OT"),
        ("Nahum", "nam", "나훔", "OT"),
        ("Habakkuk", "hab", "하박국", "OT"),
        ("Zephaniah", "zep", "스바냐", "OT"),
        ("Haggai", "hag", "학개", "OT"),
        ("Zechariah", "zec", "스가랴", "OT"),
        ("Malachi", "mal", "말라기", "OT"),
        # New Testament
        ("Matthew", "mat", "마태복음", "NT"),
        ("Mark", "mrk", "마가복음", "NT"),
        ("Luke", "luk", "누가복음", "NT"),
        ("John", "jhn", "요한복음", "NT"),
        ("Acts", "act", "사도행전", "NT"),
        ("Romans", "rom", "로마서", "NT"),
        ("1 Corinthians", "1co", "고린도전서", "NT"),
        ("2 Corinthians", "2co", "고린도후서", "NT"),
        ("Galatians", "gal", "갈라디아서", "NT"),
        ("Ephesians", "eph", "에베소서", "NT"),
        ("Philippians", "php", "빌립보서", "NT"),
        ("Colossians", "col", "골로새서", "NT"),
        ("1 Thessalonians", "1th", "데살로니가전서", "NT"),
        ("2 Thessalonians", "2th", "데살로니가후서", "NT"),
        ("1 Timothy", "1ti", "디모데전서", "NT"),
        ("2 Timothy", "2ti", "디모데후서", "NT"),
        ("Titus", "tit", "디도서", "NT"),
        ("Philemon", "phm", "빌레몬서", "NT"),
        ("Hebrews", "heb", "히브리서", "NT"),
        ("James", "jas", "야고보서", "NT"),
        ("1 Peter", "1pe", "베드로전서", "NT"),
        ("2 Peter", "2pe", "베드로후서", "NT"),
        ("1 John", "1jn", "요한일서", "NT"),
        ("2 John", "2jn", "요한이서", "NT"),
        ("3 John", "3jn", "요한삼서", "NT"),
        ("Jude", "jud", "유다서", "NT"),
        ("Revelation", "rev", "요한계시록", "NT"),
    ]
)

BOOKS_BY_NAME = {book.english_name: book for book in BIBLE_BOOKS}

TRANSLATIONS = {
    entry.code: entry
    for entry in (
        TranslationEntry("GAE", "개역개정 (Revised Korean)"),
        TranslationEntry("GAE1", "개역한글 (Korean Revised Version)"),
        TranslationEntry("NIR", "새번역성경 (New Korean Revised Version)"),
        TranslationEntry("KOR", "공동번역 (Common Translation)"),
        TranslationEntry("CEV", "CEV (Contemporary English Version)"),
    )
}

VERSION_CODES = list(TRANSLATIONS)


# =============================================================================
# Lookups
# =============================================================================

def find_book_code(book_name: str) -> Optional[str]:
    """
    Resolve a book name to its code.

    Accepts an English name or code (case-insensitive) or a Korean name.
    Exact matches win over partial ones; ties go to the first book in
    canonical order. An empty name therefore resolves to Genesis.

    Returns:
        The book code, or None if nothing matches
    """
    normalized = book_name.strip().lower()

    for book in BIBLE_BOOKS:
        if (book.english_name.lower() == normalized
                or book.korean_name == book_name
                or book.code == normalized):
            return book.code

    for book in BIBLE_BOOKS:
        if normalized in book.english_name.lower() or book_name in book.korean_name:
            return book.code

    return None


def get_book_info(code: str) -> Optional[BookEntry]:
    """Look up a book by its code."""
    for book in BIBLE_BOOKS:
        if book.code == code:
            return book
    return None


def books_by_testament(testament: Optional[str] = None) -> list[BookEntry]:
    """All books in canonical order, optionally limited to "OT" or "NT"."""
    return [
        book for book in BIBLE_BOOKS
        if not testament or book.testament == testament
    ]


def version_name(version: str) -> str:
    """Display name for a translation code, falling back to the code itself."""
    entry = TRANSLATIONS.get(version)
    return entry.display_name if entry else version
