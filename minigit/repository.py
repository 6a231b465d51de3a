"""Repository creation and staging-area reading."""

from __future__ import annotations

from pathlib import Path

from .utils import PathLike, create_dir, read_file, write_file

REPO_DIR = ".miniGit"
DEFAULT_BRANCH = "master"


def init_repository(root: PathLike = ".") -> bool:
    """Create an empty repository under *root*; return False if one exists."""
    repo = Path(root) / REPO_DIR
    if repo.exists():
        return False
    create_dir(repo / "objects")
    create_dir(repo / "refs" / "heads")
    write_file(repo / "HEAD", f"ref: refs/heads/{DEFAULT_BRANCH}")
    write_file(repo / "refs" / "heads" / DEFAULT_BRANCH, "")
    write_file(repo / "index", "")
    return True


def read_index(root: PathLike = ".") -> dict[str, str]:
    """Return the staged files as a path-to-blob mapping, sorted by path.

    Later entries for the same path replace earlier ones.
    """
    text = read_file(Path(root) / REPO_DIR / "index").decode("utf-8")
    entries: dict[str, str] = {}
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        entries[fields[0]] = fields[1] if len(fields) > 1 else ""
    return dict(sorted(entries.items()))