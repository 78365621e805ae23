from mosque_directory.scraper.document import PageDocument
from mosque_directory.scraper.links import discover_links
from mosque_directory.scraper.selectors import DEFAULT_SELECTORS

from conftest import BASE_URL


def test_one_url_per_title_block_in_order(index_page):
    hrefs = ["/view/1/Masjid-A", "/view/2/Masjid-B", "/view/3/Masjid-C"]
    document = PageDocument.parse(index_page(hrefs))

    urls = discover_links(document, BASE_URL)

    assert urls == [BASE_URL + href for href in hrefs]


def test_multiple_anchors_in_one_block():
    html = '<div class="titleBS"><a href="/a">A</a><span><a href="/b">B</a></span></div>'
    assert discover_links(PageDocument.parse(html), BASE_URL) == [BASE_URL + "/a", BASE_URL + "/b"]


def test_duplicates_kept_by_default(index_page):
    document = PageDocument.parse(index_page(["/view/1", "/view/1"]))
    assert discover_links(document, BASE_URL) == [BASE_URL + "/view/1"] * 2


def test_duplicates_removed_when_asked(index_page):
    document = PageDocument.parse(index_page(["/view/1", "/view/2", "/view/1"]))
    urls = discover_links(document, BASE_URL, deduplicate=True)
    assert urls == [BASE_URL + "/view/1", BASE_URL + "/view/2"]


def test_anchor_without_href_is_skipped(index_page):
    document = PageDocument.parse(index_page(["/view/1", None]))
    assert discover_links(document, BASE_URL) == [BASE_URL + "/view/1"]


def test_no_title_blocks():
    document = PageDocument.parse("<html><body><a href='/x'>x</a></body></html>")
    assert discover_links(document, BASE_URL) == []


def test_custom_title_block_class():
    html = '<li class="listing"><a href="/v/9">nine</a></li>'
    selectors = DEFAULT_SELECTORS._replace(title_block_class="listing")
    assert discover_links(PageDocument.parse(html), BASE_URL, selectors) == [BASE_URL + "/v/9"]
