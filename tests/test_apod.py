import io
import urllib.error
from unittest import mock

import pytest

from puzzlebox.nasacollage.apod import (
    IMAGE_URL_PATTERN,
    PAGE_URL_PATTERN,
    ScrapeError,
    find_links,
    scrape_image_urls,
)

BASE = "http://example.com/apod"
INDEX = f"{BASE}/archivepix.html"


class _Response(io.BytesIO):
    def __init__(self, body, status=200, reason="OK"):
        super().__init__(body)
        self.status = status
        self.reason = reason


def _site(pages):
    def fake_urlopen(url, *args, **kwargs):
        status, body = pages[url]
        return _Response(body, status, "Not Found" if status == 404 else "OK")

    return fake_urlopen


def test_find_links_takes_first_group_per_line():
    lines = [
        '<a href="ap240101.html">one</a>',
        "no link here",
        '<A HREF="AP240102.HTML">two</A>',
    ]
    assert find_links(lines, PAGE_URL_PATTERN) == ["ap240101.html", "AP240102.HTML"]


def test_find_links_only_first_match_on_a_line():
    assert find_links(["ap111111.html ap222222.html"], PAGE_URL_PATTERN) == ["ap111111.html"]


def test_find_links_images():
    lines = ['<IMG SRC="image/2401/moon.jpg" alt="x">', '<img src="other/sun.jpg">']
    assert find_links(lines, IMAGE_URL_PATTERN) == ["image/2401/moon.jpg"]


def test_scrape_yields_image_urls():
    pages = {
        INDEX: (200, b'<a href="ap240101.html">a</a>\n<a href="ap240102.html">b</a>\n'),
        f"{BASE}/ap240101.html": (200, b'<img src="image/2401/moon.jpg">\n'),
        f"{BASE}/ap240102.html": (200, b"<p>video only</p>\n"),
    }
    with mock.patch("urllib.request.urlopen", side_effect=_site(pages)):
        urls = list(scrape_image_urls(INDEX))
    assert urls == [f"{BASE}/image/2401/moon.jpg"]


def test_bad_status_on_index_raises():
    pages = {INDEX: (404, b"")}
    with mock.patch("urllib.request.urlopen", side_effect=_site(pages)):
        with pytest.raises(ScrapeError, match="404"):
            list(scrape_image_urls(INDEX))


def test_bad_page_error_names_the_page():
    pages = {
        INDEX: (200, b'<a href="ap240101.html">a</a>\n'),
        f"{BASE}/ap240101.html": (500, b""),
    }
    with mock.patch("urllib.request.urlopen", side_effect=_site(pages)):
        with pytest.raises(ScrapeError, match=r"^ap240101\.html: 500"):
            list(scrape_image_urls(INDEX))


def test_http_error_becomes_scrape_error():
    error = urllib.error.HTTPError(INDEX, 404, "Not Found", None, None)
    with mock.patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(ScrapeError, match="404"):
            list(scrape_image_urls(INDEX))


def test_url_without_slash_is_rejected():
    with pytest.raises(ValueError):
        list(scrape_image_urls("archivepix.html"))