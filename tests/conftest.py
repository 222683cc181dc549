from urllib.parse import parse_qs, urlparse

import pytest
import requests

from bible_ko_mcp import scraper


def chapter_html(verses):
    """Render (number, text) pairs the way the reading page lays them out."""
    spans = "".join(
        f'<span class="number">{number}&nbsp;&nbsp;&nbsp;</span>'
        f'<span>{number}   {text}</span>'
        for number, text in verses
    )
    return f"<html><body><div id='tdBible1'>{spans}</div></body></html>"


GENESIS_1_HTML = chapter_html(
    [(1, "태초에 하나님이 천지를 창조하시니라")]
    + [(2, "땅이 1)혼돈하고 공허하며 흑암이 깊음 위에 있고\n1) 또는 형태가 없고")]
    + [(n, f"Genesis verse {n}") for n in range(3, 32)]
)


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code


class FakeSite:
    """Stands in for requests.get, serving pages keyed by (version, book, chapter)."""

    def __init__(self):
        self.pages = {}
        self.failing = set()
        self.default = ""
        self.urls = []

    def add(self, book, chapter, html, version="GAE"):
        self.pages[(version, book, chapter)] = html

    def fail(self, book, chapter, version="GAE"):
        self.failing.add((version, book, chapter))

    @property
    def requested(self):
        keys = []
        for url in self.urls:
            query = parse_qs(urlparse(url).query)
            keys.append((query["version"][0], query["book"][0], int(query["chap"][0])))
        return keys

    def get(self, url, **kwargs):
        self.urls.append(url)
        key = self.requested[-1]
        if key in self.failing:
            raise requests.ConnectionError(f"connection refused: {url}")
        return FakeResponse(self.pages.get(key, self.default))


@pytest.fixture
def site(monkeypatch):
    fake = FakeSite()
    monkeypatch.setattr(scraper.requests, "get", fake.get)
    return fake
