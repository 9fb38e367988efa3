"""Bar graph tracking the stacked heights of a collage."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from puzzlebox.nasacollage.util import max_index, min_index


@dataclass(frozen=True)
class Bar:
    """A column of the graph: its width and stacked height."""

    width: int = 0
    height: int = 0


class BarGraph(list):
    """Bars side by side, left to right; adjacent bars of equal height merge."""

    def low_index(self) -> int:
        """Return the index of the lowest bar."""
        return min_index(len(self), lambda i: self[i].height)

    def high_index(self) -> int:
        """Return the index of the highest bar."""
        return max_index(len(self), lambda i: self[i].height)

    def stack(self, index: int, bar: Bar) -> None:
        """Stack ``bar`` on the left end of the bar at ``index``."""
        self.stack_row(index, [bar])

    def _widen(self, index: int, extra: int) -> None:
        old = self[index]
        self[index] = Bar(width=old.width + extra, height=old.height)

    def stack_row(self, index: int, row: Iterable[Bar]) -> None:
        """Stack a row of bars side by side, starting at the bar at ``index``."""
        for bar in row:
            current = self[index]
            if current.width == bar.width:
                self[index] = Bar(width=current.width, height=current.height + bar.height)
                if index > 0 and self[index - 1].height == self[index].height:
                    self._widen(index - 1, self[index].width)
                    del self[index]
                    index -= 1
                if index < len(self) - 1 and self[index].height == self[index + 1].height:
                    self._widen(index, self[index + 1].width)
                    del self[index + 1]
                return

            placed = Bar(width=bar.width, height=bar.height + current.height)
            self[index] = Bar(width=current.width - bar.width, height=current.height)

            if index > 0 and self[index - 1].height == placed.height:
                self._widen(index - 1, placed.width)
                continue

            self.insert(index, placed)
            index += 1

        if self[index].width <= 0:
            del self[index]


def new_bar_graph(size: int) -> BarGraph:
    """Return a graph of ``size`` empty bars."""
    return BarGraph(Bar() for _ in range(size))