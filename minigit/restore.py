"""Restoring working files from the staging area or from a commit."""

from __future__ import annotations

import os
from pathlib import Path

from .objects import parse_commit_files, write_commit
from .repository import REPO_DIR, read_index
from .utils import MiniGitError, PathLike, read_file, write_file


def restore_file(filepath: PathLike, root: PathLike = ".") -> None:
    """Overwrite *filepath* with the version held in the staging area."""
    name = os.fspath(filepath)
    index = read_index(root)
    if name not in index:
        raise MiniGitError(f"File not found in index: {name}")
    write_file(
        Path(root) / name,
        read_file(Path(root) / REPO_DIR / "objects" / index[name]),
    )


def restore_staged_files(root: PathLike = ".") -> list[str]:
    """Overwrite every staged file with its staged version; return their paths."""
    objects = Path(root) / REPO_DIR / "objects"
    index = read_index(root)
    for name, blob in index.items():
        write_file(Path(root) / name, read_file(objects / blob))
    return list(index)


def restore_from_commit(commit_hash: str, message: str, root: PathLike = ".") -> list[str]:
    """Bring back the files of *commit_hash* and record them as a new commit.

    Returns the paths restored; the new commit becomes the current HEAD.
    """
    repo = Path(root) / REPO_DIR
    commit_path = repo / "objects" / commit_hash
    if not commit_hash or not commit_path.is_file():
        raise MiniGitError(f"Commit not found: {commit_hash}")

    files = parse_commit_files(read_file(commit_path))
    for name, blob in files.items():
        write_file(Path(root) / name, read_file(repo / "objects" / blob))

    write_file(
        repo / "index",
        "".join(f"{name} {blob}\n" for name, blob in sorted(files.items())),
    )
    write_commit(message, root)
    return list(files)