"""Image dimension reader backed by Pillow."""

from __future__ import annotations

from pathlib import Path

from PIL import Image


class ImageInspector:
    """Read image headers without decoding pixel data."""

    def read_dimensions(self, path: Path) -> tuple[int, int]:
        """Return (width, height).

        Raises PIL.UnidentifiedImageError for unsupported or corrupted files,
        FileNotFoundError when the file vanished, and OSError for other read failures,
        including headers that declare more pixels than Pillow will open.
        """
        try:
            with Image.open(path) as image:
                width, height = image.size
        except Image.DecompressionBombError as exc:
            raise OSError(str(exc)) from exc
        return int(width), int(height)
