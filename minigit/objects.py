"""Object storage, commits and the HEAD pointer."""

from __future__ import annotations

import time
from pathlib import Path

from .repository import REPO_DIR, read_index
from .utils import MiniGitError, PathLike, compute_sha1, read_file, write_file

_REF_PREFIX = "ref: "


def _repo(root: PathLike) -> Path:
    return Path(root) / REPO_DIR


def hash_blob(content: bytes | str, root: PathLike = ".") -> str:
    """Store *content* as an object and return its hash."""
    digest = compute_sha1(content)
    write_file(_repo(root) / "objects" / digest, content)
    return digest


def get_head_commit(root: PathLike = ".") -> str | None:
    """Return the hash of the commit HEAD points at, or None if there is none."""
    head_path = _repo(root) / "HEAD"
    if not head_path.exists():
        return None
    head = read_file(head_path).decode("utf-8").strip()
    if not head.startswith(_REF_PREFIX):
        return head or None
    commit = read_file(_repo(root) / head[len(_REF_PREFIX):]).decode("utf-8").strip()
    return commit or None


def parse_commit_files(content: bytes | str) -> dict[str, str]:
    """Return the path-to-blob mapping recorded in a commit object."""
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    lines = content.splitlines()
    start = 0
    if lines[start:start + 1] and lines[start].startswith("parent "):
        start += 1
    if lines[start:start + 1] and lines[start].startswith("date "):
        start += 1
    start += 1  # the message line
    files: dict[str, str] = {}
    for line in lines[start:]:
        fields = line.split()
        if len(fields) >= 2:
            files[fields[0]] = fields[1]
    return files


def _advance_head(repo: Path, commit: str) -> None:
    head = read_file(repo / "HEAD").decode("utf-8").strip()
    if head.startswith(_REF_PREFIX):
        write_file(repo / head[len(_REF_PREFIX):], commit)
    else:
        write_file(repo / "HEAD", commit)


def write_commit(message: str, root: PathLike = ".") -> str:
    """Record the parent tree plus the staged files as a new commit.

    Files missing from the working tree and not staged are dropped. The
    current branch (or a detached HEAD) moves to the new commit and the
    staging area is cleared. Returns the new commit's hash.
    """
    repo = _repo(root)
    if not (repo / "HEAD").is_file():
        raise MiniGitError("not a miniGit repository")

    parent = get_head_commit(root)
    tree = parse_commit_files(read_file(repo / "objects" / parent)) if parent else {}
    index = read_index(root)
    tree.update(index)
    tree = {
        name: blob
        for name, blob in sorted(tree.items())
        if name in index or (Path(root) / name).exists()
    }

    header = f"parent {parent}\n" if parent else ""
    body = "".join(f"{name} {blob}\n" for name, blob in tree.items())
    data = f"{header}date {time.ctime()}\n{message}\n{body}"

    digest = compute_sha1(data)
    write_file(repo / "objects" / digest, data)
    _advance_head(repo, digest)
    write_file(repo / "index", "")
    return digest