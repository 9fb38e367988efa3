"""Command line for scraping archive images and building collages."""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Sequence

from puzzlebox.nasacollage.apod import ScrapeError, scrape_image_urls
from puzzlebox.nasacollage.imgres import list_dir
from puzzlebox.nasacollage.solve import Solver

_log = logging.getLogger(__name__)

_PROG = "nasacollage"

_USAGE = """\

USAGE
    {prog} scrape <archive index url>
    {prog} solve <dir> <ground row size>

DESCRIPTION
    1. Collect image URLs into a text file

        $ {prog} scrape <archive index url> > urls.txt

    2. Download the images into a directory of their own

    3. Remove logos and files that are not images

    4. Generate collages (the search takes practically forever,
       interrupt it at some point)

        $ mkdir collages; cd collages
        $ {prog} solve ../images 1
        $ {prog} solve ../images 2
        $ {prog} solve ../images 3
        $ {prog} solve ../images 4"""


def usage() -> str:
    """Print how the command is used and return that text."""
    text = _USAGE.format(prog=_PROG)
    sys.stdout.write(text + "\n")
    return text


def _report_progress(current: int, maximum: int) -> None:
    _log.info(
        "10^%.4f: 10^%.4f (%.8f %%)",
        math.log10(maximum),
        math.log10(current),
        current * 100 / maximum,
    )


def _scrape(args: list[str]) -> int:
    if len(args) != 1:
        usage()
        return 0
    try:
        for url in scrape_image_urls(args[0]):
            print(url)
    except (ScrapeError, ValueError) as exc:
        print(f"{_PROG}: {exc}", file=sys.stderr)
        return 1
    return 0


def _solve(args: list[str]) -> int:
    if len(args) != 2:
        usage()
        return 0
    directory, size_text = args
    try:
        images = list_dir(directory)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        usage()
        return 0
    try:
        ground_row_size = int(size_text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        usage()
        return 0
    try:
        Solver(images, _report_progress).solve(ground_row_size)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        usage()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    if not args:
        usage()
        return 0
    command, rest = args[0], args[1:]
    if command == "scrape":
        return _scrape(rest)
    if command == "solve":
        return _solve(rest)
    usage()
    return 0


if __name__ == "__main__":
    sys.exit(main())