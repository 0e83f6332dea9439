"""Loading map files: extension check and splitting the text into rows."""

from __future__ import annotations

import os
from typing import Union

MAP_EXTENSION = ".ber"

PathLike = Union[str, "os.PathLike[str]"]


class MapError(ValueError):
    """Raised when a map file or grid is not a playable map."""


def has_map_extension(path: PathLike) -> bool:
    """True when the path names a file ending in ``.ber``."""
    return os.fspath(path).endswith(MAP_EXTENSION)


def parse_map_text(text: str) -> list[str]:
    """Split map text into rows, without their newlines.

    An empty text, or one ending with a newline, is rejected.
    """
    if not text:
        raise MapError("map is empty")
    if text.endswith("\n"):
        raise MapError("map ends with a newline")
    return text.split("\n")


def read_map(path: PathLike) -> list[str]:
    """Read a map file and return its rows.

    Errors opening the file propagate as :class:`OSError`; a malformed
    file raises :class:`MapError`.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    return parse_map_text(text)