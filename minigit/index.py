"""Staging files for the next commit."""

from __future__ import annotations

import os
from pathlib import Path

from .objects import hash_blob
from .repository import REPO_DIR
from .utils import MiniGitError, PathLike, read_file


def add_to_index(filepath: PathLike, root: PathLike = ".") -> str:
    """Store *filepath* (relative to *root*) as a blob, stage it and return its hash."""
    repo = Path(root) / REPO_DIR
    if not repo.is_dir():
        raise MiniGitError("not a miniGit repository")
    source = Path(root) / filepath
    if not source.is_file():
        raise MiniGitError(f"File not found: {os.fspath(filepath)}")
    digest = hash_blob(read_file(source), root)
    with open(repo / "index", "a", encoding="utf-8") as index:
        index.write(f"{os.fspath(filepath)} {digest}\n")
    return digest