"""Read program text from a file."""

from __future__ import annotations

import os

__all__ = ["read_file"]


def read_file(filename: str | os.PathLike[str]) -> str:
    """Return the whole contents of *filename* as text.

    Bytes that are not valid UTF-8 are replaced. Raises :class:`OSError`
    if the file cannot be opened or read.
    """
    with open(filename, "rb") as handle:
        data = handle.read()
    return data.decode("utf-8", errors="replace")