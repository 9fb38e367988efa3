"""Read the resolutions of the images in a directory."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError


@dataclass(frozen=True)
class ImageRes:
    """An image file and its size in pixels."""

    filename: str
    width: int
    height: int


def list_dir(path: str | os.PathLike[str]) -> list[ImageRes]:
    """Return the resolution of every file in ``path``, sorted by name.

    Sub-directories are skipped. Raises ValueError naming the file if a
    file is not a readable image.
    """
    directory = os.fspath(path)
    with os.scandir(directory) as entries:
        names = sorted(entry.name for entry in entries if not entry.is_dir())

    result = []
    for name in names:
        filename = os.path.join(directory, name)
        try:
            with Image.open(filename) as image:
                width, height = image.size
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError(f"{filename}: {exc}") from exc
        result.append(ImageRes(filename=filename, width=width, height=height))
    return result