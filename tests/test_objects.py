import pytest

from minigit.index import add_to_index
from minigit.objects import (
    get_head_commit,
    hash_blob,
    parse_commit_files,
    write_commit,
)
from minigit.repository import REPO_DIR, init_repository, read_index
from minigit.utils import MiniGitError, compute_sha1, read_file


@pytest.fixture
def repo(tmp_path):
    init_repository(tmp_path)
    return tmp_path


def commit_text(root, digest):
    return read_file(root / REPO_DIR / "objects" / digest).decode()


def test_hash_blob_stores_content(repo):
    digest = hash_blob(b"payload", repo)
    assert digest == compute_sha1(b"payload")
    assert read_file(repo / REPO_DIR / "objects" / digest) == b"payload"


def test_head_empty_in_fresh_repository(repo):
    assert get_head_commit(repo) is None


def test_head_without_repository(tmp_path):
    assert get_head_commit(tmp_path) is None


def test_first_commit(repo):
    (repo / "a.txt").write_text("hello")
    blob = add_to_index("a.txt", repo)
    digest = write_commit("first", repo)
    assert get_head_commit(repo) == digest
    text = commit_text(repo, digest)
    lines = text.splitlines()
    assert lines[0].startswith("date ")
    assert lines[1] == "first"
    assert compute_sha1(text) == digest
    assert parse_commit_files(text) == {"a.txt": blob}
    assert read_index(repo) == {}


def test_second_commit_keeps_parent_tree(repo):
    (repo / "a.txt").write_text("hello")
    blob_a = add_to_index("a.txt", repo)
    first = write_commit("first", repo)
    (repo / "b.txt").write_text("world")
    blob_b = add_to_index("b.txt", repo)
    second = write_commit("second", repo)
    text = commit_text(repo, second)
    assert text.splitlines()[0] == f"parent {first}"
    assert parse_commit_files(text) == {"a.txt": blob_a, "b.txt": blob_b}


def test_deleted_file_dropped(repo):
    (repo / "a.txt").write_text("hello")
    (repo / "b.txt").write_text("world")
    add_to_index("a.txt", repo)
    blob_b = add_to_index("b.txt", repo)
    write_commit("first", repo)
    (repo / "a.txt").unlink()
    second = write_commit("second", repo)
    assert parse_commit_files(commit_text(repo, second)) == {"b.txt": blob_b}


def test_parse_commit_files_skips_header_and_message():
    text = "parent abc\ndate Mon\nmessage with spaces\nf1 h1\nf2 h2\n"
    assert parse_commit_files(text) == {"f1": "h1", "f2": "h2"}


def test_parse_commit_files_without_parent():
    assert parse_commit_files(b"date Mon\nmsg\nf1 h1\n") == {"f1": "h1"}


def test_detached_head(repo):
    (repo / "a.txt").write_text("hello")
    add_to_index("a.txt", repo)
    digest = write_commit("first", repo)
    (repo / REPO_DIR / "HEAD").write_text(digest)
    assert get_head_commit(repo) == digest
    child = write_commit("child", repo)
    assert read_file(repo / REPO_DIR / "HEAD").decode() == child


def test_write_commit_without_repository(tmp_path):
    with pytest.raises(MiniGitError):
        write_commit("message", tmp_path)