"""Lay out a collage and write it as a PNG file."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image

from puzzlebox.nasacollage.bargraph import Bar, new_bar_graph
from puzzlebox.nasacollage.imgres import ImageRes


@dataclass(frozen=True)
class ImageLocation:
    """Where an image goes in a collage: its top left corner."""

    image: ImageRes
    x: int
    y: int


def layout(
    ground_size: int, images: Sequence[ImageRes]
) -> tuple[list[ImageLocation], tuple[int, int]]:
    """Place images: the first ``ground_size`` side by side, the rest on the lowest gap.

    Returns the locations and the collage size as (width, height).
    """
    if not 1 <= ground_size <= len(images):
        raise ValueError(
            f"ground size must be between 1 and {len(images)}, got {ground_size}"
        )

    locations: list[ImageLocation] = []
    x = 0
    for image in images[:ground_size]:
        locations.append(ImageLocation(image=image, x=x, y=0))
        x += image.width

    bars = new_bar_graph(1)
    bars.stack_row(
        0, [Bar(width=image.width, height=image.height) for image in images[:ground_size]]
    )

    for image in images[ground_size:]:
        gap = bars.low_index()
        x = sum(bar.width for bar in bars[:gap])
        locations.append(ImageLocation(image=image, x=x, y=bars[gap].height))
        bars.stack(gap, Bar(width=image.width, height=image.height))

    return locations, (bars[0].width, bars[0].height)


def build_collage(ground_size: int, images: Sequence[ImageRes]) -> Image.Image:
    """Load the images and draw them into one RGBA collage."""
    locations, (width, height) = layout(ground_size, images)
    result = Image.new("RGBA", (width, height))
    for location in locations:
        visible_width = min(location.image.width, width - location.x)
        visible_height = min(location.image.height, height - location.y)
        if visible_width <= 0 or visible_height <= 0:
            continue
        with Image.open(location.image.filename) as source:
            tile = source.convert("RGBA").crop((0, 0, visible_width, visible_height))
        result.alpha_composite(tile, dest=(location.x, location.y))
    return result


def write_collage_png(
    filename: str | os.PathLike[str], ground_size: int, images: Sequence[ImageRes]
) -> None:
    """Build a collage and save it to ``filename`` as PNG."""
    build_collage(ground_size, images).save(filename, format="PNG")