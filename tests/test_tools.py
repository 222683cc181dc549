import pytest

from bible_ko_mcp import tools

from conftest import GENESIS_1_HTML, chapter_html

JOHN_3_16 = {
    "GAE": "하나님이 세상을 이처럼 사랑하사",
    "GAE1": "하나님이 세상을 이처럼 사랑하사 독생자를 주셨으니",
    "NIR": "하나님께서는 세상을 무척 사랑하셔서",
    "KOR": "하느님께서는 세상을 극진히 사랑하셔서",
    "CEV": "God loved the people of this world so much",
}


@pytest.fixture
def bible(site):
    site.add("gen", 1, GENESIS_1_HTML)
    for version, text in JOHN_3_16.items():
        site.add("jhn", 3, chapter_html([(15, "영생을 얻게"), (16, text)]), version=version)
    return site


def test_tool_definitions():
    names = [tool.name for tool in tools.TOOLS]
    assert names == ["get-chapter", "get-verses", "search-bible", "list-books", "compare-translations"]
    get_verses = tools.TOOLS[1]
    assert get_verses.inputSchema["required"] == ["book", "chapter", "verseStart"]
    assert get_verses.inputSchema["properties"]["version"]["enum"] == ["GAE", "GAE1", "NIR", "KOR", "CEV"]


def test_get_chapter(bible):
    text = tools.call_tool("get-chapter", {"book": "창세기", "chapter": 1})

    assert text.startswith(
        "# Genesis (창세기) 1\n"
        "**Translation:** 개역개정 (Revised Korean)\n\n"
        "**1.** 태초에 하나님이 천지를 창조하시니라\n\n"
        "**2.** 땅이 혼돈하고 공허하며 흑암이 깊음 위에 있고\n\n"
    )
    assert text.endswith("**31.** Genesis verse 31\n\n")


def test_get_chapter_with_version(bible):
    text = tools.call_tool("get-chapter", {"book": "john", "chapter": 3, "version": "CEV"})
    assert "**Translation:** CEV (Contemporary English Version)" in text
    assert "**16.** God loved the people of this world so much" in text
    assert bible.requested == [("CEV", "jhn", 3)]


def test_get_chapter_without_verses(bible):
    text = tools.call_tool("get-chapter", {"book": "Exodus", "chapter": 99})
    assert text.endswith("**Translation:** 개역개정 (Revised Korean)\n\nNo verses found.\n")


def test_get_verses_range(bible):
    text = tools.call_tool("get-verses", {"book": "Genesis", "chapter": 1, "verseStart": 1, "verseEnd": 2})

    assert text == (
        "# Genesis 1:1-2\n"
        "**Translation:** 개역개정 (Revised Korean)\n\n"
        "**1.** 태초에 하나님이 천지를 창조하시니라\n\n"
        "**2.** 땅이 혼돈하고 공허하며 흑암이 깊음 위에 있고\n\n"
    )


def test_get_single_verse(bible):
    text = tools.call_tool("get-verses", {"book": "gen", "chapter": 1, "verseStart": 5})
    assert text.startswith("# Genesis 1:5\n")
    assert "**5.** Genesis verse 5" in text
    assert "**6.**" not in text


def test_get_verses_outside_chapter(bible):
    text = tools.call_tool("get-verses", {"book": "gen", "chapter": 1, "verseStart": 40, "verseEnd": 45})
    assert text.endswith("No verses found.\n")


@pytest.mark.parametrize("tool,args,message", [
    ("get-chapter", {"chapter": 1},
     "Error: Book 'InvalidBookXYZ' not found. Use list-books to see available books."),
    ("get-verses", {"chapter": 1, "verseStart": 1}, "Error: Book 'InvalidBookXYZ' not found."),
    ("compare-translations", {"chapter": 1, "verse": 1}, "Error: Book 'InvalidBookXYZ' not found."),
])
def test_unknown_book(site, tool, args, message):
    assert tools.call_tool(tool, {"book": "InvalidBookXYZ", **args}) == message
    assert site.urls == []


def test_search_bible(bible):
    text = tools.call_tool("search-bible", {"query": "하나님"})

    assert text == (
        '# Search Results for "하나님"\n'
        "Found 1 verses:\n\n"
        "**Genesis 1:1**\n"
        "태초에 하나님이 천지를 창조하시니라\n\n"
    )
    assert len(bible.urls) == 6


def test_search_bible_no_results(bible):
    text = tools.call_tool("search-bible", {"query": "zzz"})
    assert text == 'No results found for "zzz" (searched limited books for demo)'


def test_list_books():
    text = tools.call_tool("list-books", {})
    assert text.startswith("# Bible Books\n\n## Old Testament\n- **Genesis** (창세기) - code: `gen`\n")
    assert "\n## New Testament\n- **Matthew** (마태복음) - code: `mat`\n" in text
    assert text.count("\n- **") == 66


def test_list_books_by_testament():
    text = tools.call_tool("list-books", {"testament": "NT"})
    assert "## Old Testament\n\n## New Testament\n" in text
    assert "Genesis" not in text
    assert text.count("\n- **") == 27


def test_compare_translations(bible):
    text = tools.call_tool("compare-translations", {"book": "요한복음", "chapter": 3, "verse": 16})

    assert text.startswith("# 요한복음 3:16 - Translation Comparison\n\n## 개역개정 (Revised Korean)\n")
    for verse_text in JOHN_3_16.values():
        assert verse_text + "\n\n" in text
    assert [v for v, _, _ in bible.requested] == ["GAE", "GAE1", "NIR", "KOR", "CEV"]


def test_compare_translations_with_failures(bible):
    bible.fail("jhn", 3, version="NIR")

    text = tools.call_tool("compare-translations", {
        "book": "John", "chapter": 3, "verse": 16, "versions": ["GAE", "NIR", "XYZ"],
    })

    assert text == (
        "# John 3:16 - Translation Comparison\n\n"
        "## 개역개정 (Revised Korean)\n하나님이 세상을 이처럼 사랑하사\n\n"
        "## 새번역성경 (New Korean Revised Version)\n(Error loading this version)\n\n"
    )


def test_compare_translations_with_no_versions(bible):
    text = tools.call_tool("compare-translations", {
        "book": "John", "chapter": 3, "verse": 16, "versions": [],
    })

    assert text == "# John 3:16 - Translation Comparison\n\n"
    assert bible.urls == []


def test_network_error_becomes_text(bible):
    bible.fail("gen", 1)
    text = tools.call_tool("get-chapter", {"book": "Genesis", "chapter": 1})
    assert text.startswith("Error: connection refused")


def test_missing_argument():
    assert tools.call_tool("get-chapter", {"chapter": 1}) == "Error: Missing required argument: book"
    assert tools.call_tool("search-bible") == "Error: Missing required argument: query"


def test_unknown_tool():
    assert tools.call_tool("delete-bible", {}) == "Unknown tool: delete-bible"
