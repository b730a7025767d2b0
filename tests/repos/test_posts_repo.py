from pathlib import Path

import pytest

from folio.exceptions import DuplicatePostIdError, PostsIOError
from folio.repos.posts_repo import FilePostsRepo
from tests.conftest import make_post, write_post


def test_list_post_files_filters_extension_hidden_and_directories(posts_dir):
    write_post(posts_dir, "b.md", make_post("B", "2024-01-01", "[x]"))
    write_post(posts_dir, "a.MD", make_post("A", "2024-01-01", "[x]"))
    write_post(posts_dir, "readme.txt", "nope")
    write_post(posts_dir, ".swap.md", "nope")
    (posts_dir / "drafts").mkdir()
    repo = FilePostsRepo(posts_dir)

    result = repo.list_post_files()

    assert [p.name for p in result] == ["a.MD", "b.md"]


def test_list_post_files_ignores_substring_matches(posts_dir):
    # only a trailing extension counts, not ".md" anywhere in the name
    write_post(posts_dir, "notes.md.bak", "nope")
    write_post(posts_dir, "post.md", make_post("P", "2024-01-01", "[x]"))

    assert [p.name for p in FilePostsRepo(posts_dir).list_post_files()] == ["post.md"]


def test_list_post_files_wraps_os_errors(tmp_path):
    not_a_dir = tmp_path / "file.md"
    not_a_dir.write_text("x")

    with pytest.raises(PostsIOError, match="Cannot read posts directory"):
        FilePostsRepo(not_a_dir).list_post_files()


def test_get_post_file_resolves_each_extension(posts_dir):
    write_post(posts_dir, "long.markdown", make_post("L", "2024-01-01", "[x]"))
    repo = FilePostsRepo(posts_dir, extensions=[".md", ".markdown"])

    assert repo.get_post_file("long") == posts_dir / "long.markdown"
    assert repo.get_post_file("short") is None


def test_get_post_file_rejects_duplicate_ids(posts_dir):
    write_post(posts_dir, "dup.md", "x")
    write_post(posts_dir, "dup.markdown", "x")
    repo = FilePostsRepo(posts_dir, extensions=[".md", ".markdown"])

    with pytest.raises(DuplicatePostIdError) as excinfo:
        repo.get_post_file("dup")

    assert excinfo.value.post_id == "dup"
    assert len(excinfo.value.paths) == 2


def test_read_post_returns_utf8_text(posts_dir):
    path = write_post(posts_dir, "uni.md", "café ☕")

    assert FilePostsRepo(posts_dir).read_post(path) == "café ☕"


def test_read_post_wraps_missing_file(posts_dir):
    with pytest.raises(PostsIOError, match="Cannot read post file"):
        FilePostsRepo(posts_dir).read_post(posts_dir / "gone.md")


def test_post_id_for_strips_extension_only():
    assert FilePostsRepo.post_id_for(Path("posts/2024-recap.v2.md")) == "2024-recap.v2"


def test_get_post_file_matches_listed_ids_case_insensitively(posts_dir):
    write_post(posts_dir, "Shout.MD", make_post("S", "2024-01-01", "[x]"))
    repo = FilePostsRepo(posts_dir)

    assert repo.get_post_file("Shout") == posts_dir / "Shout.MD"
    assert repo.get_post_file("../posts/Shout") is None


def test_extensions_without_leading_dot_are_normalized(posts_dir):
    write_post(posts_dir, "post.md", make_post("P", "2024-01-01", "[x]"))
    write_post(posts_dir, "other.markdown", make_post("O", "2024-01-01", "[x]"))
    repo = FilePostsRepo(posts_dir, extensions=["md", "MARKDOWN", ""])

    assert repo.extensions == (".md", ".markdown")
    assert [p.name for p in repo.list_post_files()] == ["other.markdown", "post.md"]
