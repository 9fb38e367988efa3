"""Search for rectangular collages built from a set of images."""

from __future__ import annotations

import logging
import time
from bisect import bisect_right
from collections.abc import Callable, Iterator, Sequence

from puzzlebox.nasacollage.bargraph import Bar, BarGraph, new_bar_graph
from puzzlebox.nasacollage.comb import num_variations, permutations, variations
from puzzlebox.nasacollage.imgres import ImageRes
from puzzlebox.nasacollage.progress import Progress
from puzzlebox.nasacollage.util import disjoint
from puzzlebox.nasacollage.write import write_collage_png

_log = logging.getLogger(__name__)

# The search gives up on a branch once more images than this are placed.
MAX_PLACED = 11
# A rectangle counts as a collage only with more images than this.
MIN_COLLAGE = 10


def _log_progress(current: int, maximum: int) -> None:
    _log.debug("progress %d of %d", current, maximum)


class Solver:
    """Builds rectangular collages and saves each one found as a PNG file.

    Images are placed row by row on the lowest gap of a bar graph; every
    collage found is written to the working directory.
    """

    def __init__(
        self,
        images: Sequence[ImageRes],
        progress_callback: Callable[[int, int], object] | None = None,
    ) -> None:
        self._images = sorted(images, key=lambda image: image.width)
        self._widths = [image.width for image in self._images]
        self._progress_callback = progress_callback or _log_progress
        self._progress: Progress | None = None
        self._solution: list[int] | None = None
        self._solution_area = 1_000_000
        self._solution_ground_size = 0

    def solve(self, ground_row_size: int) -> tuple[int, list[ImageRes]]:
        """Try every ordered ground row of the given size.

        Returns the ground row size and the images of the last collage
        found, or (0, []) when none was found.
        """
        if ground_row_size < 1:
            raise ValueError(f"ground row size must be positive, got {ground_row_size}")
        count = len(self._images)
        self._progress = Progress(
            num_variations(count, ground_row_size), self._progress_callback
        )
        for ground_row in variations(count, ground_row_size):
            self._progress.inc()
            self._solve_recursively(
                new_bar_graph(1), 0, [], list(ground_row), len(ground_row)
            )
        chosen = [self._images[index] for index in self._solution or ()]
        return self._solution_ground_size, chosen

    def _solve_recursively(
        self,
        bars: BarGraph,
        gap_index: int,
        used: list[int],
        new: list[int],
        ground_size: int,
    ) -> None:
        if len(used) > MAX_PLACED:
            return
        if not disjoint(used, new):
            return

        used = used + new
        bars = self._place_in_gap(bars, gap_index, new)

        if (
            len(bars) == 1
            and len(used) > MIN_COLLAGE
            and (self._solution is None or self._solution[0] != used[0])
        ):
            whole = bars[0]
            self._solution_area = whole.width * whole.height
            self._solution = used
            self._solution_ground_size = ground_size
            _log.info("%d %s %d x %d", ground_size, used, whole.width, whole.height)
            self._write_png()
            return

        gap_index = bars.low_index()
        for fitting in self._fitting_images(bars[gap_index].width):
            for ordered in permutations(fitting):
                self._solve_recursively(bars, gap_index, used, list(ordered), ground_size)

    def _fitting_images(self, width: int) -> Iterator[tuple[int, ...]]:
        """Yield ordered selections of distinct images whose widths sum to ``width``."""
        chosen: list[int] = []

        def walk(remaining: int) -> Iterator[tuple[int, ...]]:
            for index in range(bisect_right(self._widths, remaining)):
                if index in chosen:
                    continue
                chosen.append(index)
                gap = remaining - self._widths[index]
                if gap > 0:
                    yield from walk(gap)
                else:
                    yield tuple(chosen)
                chosen.pop()

        yield from walk(width)

    def _place_in_gap(self, bars: BarGraph, gap_index: int, new: list[int]) -> BarGraph:
        placed = BarGraph(bars)
        row = [
            Bar(width=self._images[index].width, height=self._images[index].height)
            for index in new
        ]
        placed.stack_row(gap_index, row)
        return placed

    def _write_png(self) -> None:
        images = [self._images[index] for index in self._solution or ()]
        filename = f"collage_{int(time.time())}_{self._solution_area}.png"
        write_collage_png(filename, self._solution_ground_size, images)