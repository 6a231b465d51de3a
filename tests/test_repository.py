from minigit.repository import REPO_DIR, init_repository, read_index
from minigit.utils import read_file


def test_init_creates_layout(tmp_path):
    assert init_repository(tmp_path) is True
    repo = tmp_path / REPO_DIR
    assert (repo / "objects").is_dir()
    assert (repo / "refs" / "heads").is_dir()
    assert read_file(repo / "HEAD") == b"ref: refs/heads/master"
    assert read_file(repo / "refs" / "heads" / "master") == b""
    assert read_file(repo / "index") == b""


def test_init_twice_reports_existing(tmp_path):
    assert init_repository(tmp_path) is True
    assert init_repository(tmp_path) is False


def test_read_index_empty(tmp_path):
    init_repository(tmp_path)
    assert read_index(tmp_path) == {}


def test_read_index_without_repository(tmp_path):
    assert read_index(tmp_path) == {}


def test_read_index_later_entries_win_and_sorted(tmp_path):
    init_repository(tmp_path)
    (tmp_path / REPO_DIR / "index").write_text(
        "b.txt h2\na.txt h1\n\nb.txt h3\n"
    )
    entries = read_index(tmp_path)
    assert entries == {"a.txt": "h1", "b.txt": "h3"}
    assert list(entries) == ["a.txt", "b.txt"]