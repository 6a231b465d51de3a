"""Switching the working tree to a recorded commit."""

from __future__ import annotations

from pathlib import Path

from .objects import parse_commit_files
from .repository import REPO_DIR
from .utils import MiniGitError, PathLike, read_file, write_file


def checkout_commit(commit_hash: str, root: PathLike = ".") -> list[str]:
    """Write the files of *commit_hash* into the working tree and detach HEAD on it.

    The staging area is replaced with the commit's files. Returns the paths
    written, in order.
    """
    repo = Path(root) / REPO_DIR
    commit_path = repo / "objects" / commit_hash
    if not commit_hash or not commit_path.is_file():
        raise MiniGitError(f"Commit not found: {commit_hash}")

    files = parse_commit_files(read_file(commit_path))
    for name, blob in files.items():
        write_file(Path(root) / name, read_file(repo / "objects" / blob))

    write_file(repo / "HEAD", commit_hash)
    write_file(
        repo / "index",
        "".join(f"{name} {blob}\n" for name, blob in sorted(files.items())),
    )
    return list(files)