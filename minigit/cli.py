"""Command-line entry point: minigit <command> [args]."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from .checkout import checkout_commit
from .index import add_to_index
from .objects import get_head_commit, write_commit
from .repository import REPO_DIR, init_repository, read_index
from .restore import restore_file, restore_from_commit, restore_staged_files
from .utils import MiniGitError, PathLike, read_file

USAGE = "Usage: minigit <command> [args]"


def print_log(root: PathLike = ".") -> None:
    """Print the commit history from HEAD back to the first commit."""
    objects = Path(root) / REPO_DIR / "objects"
    commit = get_head_commit(root)
    while commit:
        lines = iter(read_file(objects / commit).decode("utf-8").splitlines())
        line = next(lines, "")
        parent = None
        if line.startswith("parent "):
            parent = line[len("parent "):]
            line = next(lines, "")
        date = line
        message = next(lines, "")
        print(f"commit {commit}\n    {message}\n    {date}\n")
        commit = parent


def show_status(root: PathLike = ".") -> None:
    """Print the files in the staging area."""
    print("Staged files:")
    for name in read_index(root):
        print(f"    {name}")


def _dispatch(args: list[str], root: PathLike) -> int:
    match args:
        case []:
            print(USAGE)
            return 1
        case ["init", *_]:
            if init_repository(root):
                print(f"Initialized empty miniGit repository in {REPO_DIR}/")
            else:
                print("Repo already initialized.")
        case ["add", path]:
            add_to_index(path, root)
        case ["commit", message]:
            write_commit(message, root)
        case ["log", *_]:
            print_log(root)
        case ["status", *_]:
            show_status(root)
        case ["restore", "--staged"]:
            for name in restore_staged_files(root):
                print(f"Restored: {name}")
        case ["restore", path]:
            restore_file(path, root)
        case ["restore", "--commit", commit]:
            for name in restore_from_commit(commit, f"Restore from commit {commit}", root):
                print(f"Restored: {name}")
        case ["checkout", commit]:
            for name in checkout_commit(commit, root):
                print(f"Checked out: {name}")
        case _:
            print("Unknown or incomplete command.", file=sys.stderr)
            return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command in the current directory and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return _dispatch(args, ".")
    except (MiniGitError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())