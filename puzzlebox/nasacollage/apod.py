"""Collect image URLs from an astronomy picture archive."""

from __future__ import annotations

import re
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator

PAGE_URL_PATTERN = re.compile(r"(ap\d{6}.html)", re.IGNORECASE)
IMAGE_URL_PATTERN = re.compile(r'src="(image/[^"]*)"', re.IGNORECASE)

_TIMEOUT = 30


class ScrapeError(Exception):
    """A page could not be fetched."""


def find_links(lines: Iterable[str], pattern: re.Pattern[str]) -> list[str]:
    """Return the first group of the first match of ``pattern`` on each line."""
    links = []
    for line in lines:
        match = pattern.search(line)
        if match is not None:
            links.append(match.group(1))
    return links


def _fetch_links(url: str, pattern: re.Pattern[str]) -> list[str]:
    try:
        with urllib.request.urlopen(url, timeout=_TIMEOUT) as response:
            if response.status != 200:
                raise ScrapeError(f"{response.status} {response.reason}")
            lines = (raw.decode("utf-8", errors="replace") for raw in response)
            return find_links(lines, pattern)
    except urllib.error.HTTPError as exc:
        raise ScrapeError(f"{exc.code} {exc.reason}") from exc
    except urllib.error.URLError as exc:
        raise ScrapeError(str(exc.reason)) from exc


def scrape_image_urls(main_url: str) -> Iterator[str]:
    """Yield the URL of every image linked from the pages of an archive index.

    Raises ScrapeError when a page cannot be fetched; the error names the
    page it came from.
    """
    last_slash = main_url.rfind("/")
    if last_slash == -1:
        raise ValueError(f"not a URL with a path: {main_url!r}")
    base_url = main_url[:last_slash]

    for page in _fetch_links(main_url, PAGE_URL_PATTERN):
        try:
            images = _fetch_links(f"{base_url}/{page}", IMAGE_URL_PATTERN)
        except ScrapeError as exc:
            raise ScrapeError(f"{page}: {exc}") from exc
        for image in images:
            yield f"{base_url}/{image}"