"""File and hashing helpers shared by the repository commands."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class MiniGitError(Exception):
    """Raised when a repository operation cannot be carried out."""


def compute_sha1(data: bytes | str) -> str:
    """Return the hexadecimal SHA-1 digest of *data* (text is UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha1(data).hexdigest()


def read_file(path: PathLike) -> bytes:
    """Return the contents of *path*, or empty bytes when it does not exist."""
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        return b""


def write_file(path: PathLike, content: bytes | str) -> None:
    """Replace the contents of *path* with *content*."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    Path(path).write_bytes(content)


def create_dir(path: PathLike) -> bool:
    """Create *path* and any missing parents; return False if it already existed."""
    directory = Path(path)
    if directory.is_dir():
        return False
    directory.mkdir(parents=True)
    return True