"""Loading and normalising plain text for the cipher exercises."""

from __future__ import annotations

import os
import string
from pathlib import Path

_LETTERS = frozenset(string.ascii_letters)


def _letters_only(text: str) -> str:
    """Keep ASCII letters only, lower-cased."""
    return "".join(ch for ch in text if ch in _LETTERS).lower()


def read_file(file_path: str | os.PathLike[str], max_chars: int | None = None) -> str:
    """Read a file and return its ASCII letters, lower-cased, truncated to ``max_chars``."""
    path = Path(file_path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise OSError(
            f"Failed to open file: {path}\nWorking dir: {Path.cwd()}"
        ) from exc
    content = _letters_only(raw.decode("latin-1"))
    if max_chars is not None:
        content = content[: max(max_chars, 0)]
    return content


def load_plain_text(text: str) -> str:
    """Return the ASCII letters of ``text``, lower-cased."""
    return _letters_only(text)