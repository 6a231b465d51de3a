# minigit

A small version control tool. It keeps file snapshots, a staging area and a
linear commit history in a `.miniGit` directory inside the current working
directory. Every stored object is named by the SHA-1 of its content.

## Installation

```
pip install .
```

## Usage

All commands work on the `.miniGit` repository in the current directory.

```
minigit init                      # create .miniGit/
minigit add notes.txt             # store the file's content and stage it
minigit status                    # list staged files
minigit commit "first snapshot"   # record staged files on top of the last commit
minigit log                       # show history, newest first
minigit restore notes.txt         # overwrite a file with its staged content
minigit restore --staged          # overwrite every staged file with its staged content
minigit restore --commit <hash>   # bring back a commit's files and commit that state
minigit checkout <hash>           # write a commit's files and point HEAD at that commit
```

The commit message is a single argument, so put quotes around a message that
has spaces in it. A message must fit on one line.

`minigit` with no command prints a usage line. An unknown command, or one with
the wrong number of arguments, prints `Unknown or incomplete command.` to
standard error. Errors such as a missing commit, a file that does not exist,
or a file that is not staged are printed to standard error as well. In all
these cases the exit status is 1; otherwise it is 0.

`log` prints, for each commit from HEAD back to the first one, its hash, its
message and its `date ...` line. `restore --commit` and `checkout` print one
`Restored:` or `Checked out:` line for every file they write.

## How the repository is laid out

```
.miniGit/
    HEAD                 "ref: refs/heads/master", or a commit hash after checkout
    index                one "path hash" line per staged file
    objects/<sha1>       file contents and commit objects
    refs/heads/master    hash of the latest commit on master
```

A commit object holds an optional `parent <hash>` line, a `date ...` line, the
message, and then one `path hash` line for every file in the snapshot, sorted
by path. A commit carries over the files of its parent. Staged files take the
place of the parent's entries, and files that no longer exist in the working
tree and are not staged are dropped. The staging area is cleared after each
commit. Adding the same file twice keeps the later entry.

`checkout` writes the commit's hash straight into `HEAD` and replaces the
staging area with that commit's files; commits made afterwards move `HEAD`
itself rather than `refs/heads/master`. `restore --commit` stages the commit's
files and then commits them with the message `Restore from commit <hash>`.

## Use from Python

The same operations can be called from Python. Each one takes the directory
that holds `.miniGit` as its `root`:

```python
from pathlib import Path

from minigit.repository import init_repository, read_index
from minigit.index import add_to_index
from minigit.objects import write_commit, get_head_commit

root = Path(".")
init_repository(root)
add_to_index("notes.txt", root)
commit_hash = write_commit("first snapshot", root)
assert get_head_commit(root) == commit_hash
assert read_index(root) == {}
```

Other functions: `minigit.objects.hash_blob` and `parse_commit_files`,
`minigit.checkout.checkout_commit`, `minigit.restore.restore_file`,
`restore_staged_files` and `restore_from_commit`, and `minigit.cli.print_log`,
`show_status` and `main`. `get_head_commit` returns `None` before the first
commit.

Failures such as a missing commit, a missing repository or a file that is not
staged raise `minigit.utils.MiniGitError`.

## What it does not do

There is a single branch, `master`, and no way to create or switch branches.
There is no diff, merge, tag, unstaging or file removal command, and no way
to exchange commits with another repository.

## Running the tests

```
pip install ".[test]"
pytest
```