"""Loading image files as 8-bit RGB pixel data."""

from __future__ import annotations

import os
import sys
from typing import Optional

from PIL import Image

_BYTES_PER_PIXEL = 3
_LOAD_GAMMA = 2.2
_MAGENTA = (255, 0, 255)


def float_to_byte(value: float) -> int:
    """Map a [0, 1] component to a byte, saturating outside that range."""
    if value <= 0.0:
        return 0
    if 1.0 <= value:
        return 255
    return int(256.0 * value)


_BYTE_TABLE = bytes(float_to_byte((b / 255.0) ** _LOAD_GAMMA) for b in range(256))


def _candidate_paths(filename: str) -> list[str]:
    return [filename] + ["../" * level + "images/" + filename for level in range(7)]


class RTWImage:
    """RGB pixel data read from an image file, searched for in likely places."""

    def __init__(self, image_filename: Optional[str] = None) -> None:
        self._data: Optional[bytes] = None
        self._width = 0
        self._height = 0
        if image_filename is None:
            return

        imagedir = os.environ.get("RTW_IMAGES")
        if imagedir and self.load(imagedir + "/" + image_filename):
            return
        for path in _candidate_paths(image_filename):
            if self.load(path):
                return

        print(f"ERROR: Could not load image file '{image_filename}'.", file=sys.stderr)

    def load(self, filename: str) -> bool:
        """Load the file, returning whether that succeeded."""
        try:
            with Image.open(filename) as img:
                rgb = img.convert("RGB")
        except (OSError, ValueError):
            self._data = None
            self._width = self._height = 0
            return False

        self._width, self._height = rgb.size
        self._data = rgb.tobytes().translate(_BYTE_TABLE)
        return True

    @property
    def width(self) -> int:
        return 0 if self._data is None else self._width

    @property
    def height(self) -> int:
        return 0 if self._data is None else self._height

    def pixel_data(self, x: int, y: int) -> tuple[int, int, int]:
        """The RGB bytes at (x, y), clamped to the image; magenta with no image."""
        if self._data is None:
            return _MAGENTA
        x = min(max(x, 0), self._width - 1)
        y = min(max(y, 0), self._height - 1)
        start = (y * self._width + x) * _BYTES_PER_PIXEL
        r, g, b = self._data[start:start + _BYTES_PER_PIXEL]
        return r, g, b