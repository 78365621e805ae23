"""
Shared fixtures: synthetic salatomatic-like index and detail pages, and a fake fetcher.
"""
from datetime import date
from typing import Dict, List, Optional, Sequence

import pytest

from mosque_directory.scraper.selectors import DEFAULT_SELECTORS

BASE_URL = "https://www.salatomatic.com"
INDEX_URL = f"{BASE_URL}/sub/United-States/Alabama/Birmingham/AvcK8i3L3C"


def build_index_page(hrefs: Sequence[Optional[str]]) -> str:
    blocks = []
    for href in hrefs:
        anchor = f'<a href="{href}">Mosque</a>' if href is not None else "<a>Mosque</a>"
        blocks.append(f'<div class="titleBS">\n\t{anchor}\n</div>')
    # links outside title blocks must be ignored
    return (
        "<html><body>"
        '<a href="/about">About</a>'
        + "".join(blocks)
        + '<div class="footer"><a href="/contact">Contact</a></div>'
        "</body></html>"
    )


def build_detail_page(
    body_texts: Sequence[str] = ("\n\t123 Main St,  Birmingham\n", "A community masjid"),
    quick_facts: Sequence[str] = ("Friday Prayer", "Women's Area"),
    governance: Sequence[str] = ("Sunni",),
    times: Sequence[str] = (
        "05:10 (CST)",
        "06:30 (CST)",
        "12:15 (CST)",
        "15:45 (CST)",
        "18:05 (CST)",
        "19:20 (CST)",
    ),
    tbody_count: int = 216,
    explicit_tbody: bool = False,
) -> str:
    """Detail page laid out with tables. Without explicit_tbody the markup has bare
    <table><tr> rows and the parser supplies the tbody, as on the live site."""
    bodies: List[str] = []
    for i in range(tbody_count):
        if i == DEFAULT_SELECTORS.quick_facts_index:
            cell = "".join(f"<div>\n\t{fact}\n</div>" for fact in quick_facts)
        elif i == DEFAULT_SELECTORS.governance_index:
            cell = "".join(f"<div>{tag}</div>" for tag in governance)
        else:
            cell = "filler"
        rows = f"<tr><td>{cell}</td></tr>"
        if explicit_tbody:
            rows = f"<tbody>{rows}</tbody>"
        bodies.append(f"<table>{rows}</table>")
    body_html = "".join(f'<div class="bodyLink">{t}</div>' for t in body_texts)
    time_html = "".join(f'<span class="microLink">\n{t}\n</span>' for t in times)
    return f"<html><body>{body_html}{''.join(bodies)}{time_html}</body></html>"


class FakeFetcher:
    """Serves pages from a dict; missing URLs behave like a failed fetch."""

    def __init__(self, pages: Dict[str, str], errors: Sequence[str] = ()):
        self.pages = pages
        self.errors = set(errors)
        self.requested: List[str] = []

    def fetch(self, url: str) -> Optional[str]:
        self.requested.append(url)
        if url in self.errors:
            raise RuntimeError(f"boom: {url}")
        return self.pages.get(url)


@pytest.fixture
def reference_date():
    return date(2024, 3, 10)


@pytest.fixture
def index_page():
    return build_index_page


@pytest.fixture
def detail_page():
    return build_detail_page


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
