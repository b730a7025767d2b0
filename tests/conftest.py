import textwrap
from pathlib import Path

import pytest

from folio.repos.posts_repo import FilePostsRepo
from folio.services.posts_service import PostsService


def write_post(directory, name: str, text: str):
    """
    Write a post file; ``text`` is dedented so tests can inline it.
    """
    path = directory / name
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


def make_post(title: str, date: str, tags: str, body: str = "Body.") -> str:
    return f"---\ntitle: {title}\ndate: {date}\ntags: {tags}\n---\n{body}\n"


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


@pytest.fixture
def service(posts_dir):
    return PostsService(repo=FilePostsRepo(posts_dir))


class FakeRepo:
    """
    In-memory repo stand-in used in service tests.
    Maps file names to raw text; records reads and directory listings.
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads = []
        self.listings = 0

    def list_post_files(self):
        self.listings += 1
        return [Path(name) for name in sorted(self.files)]

    def get_post_file(self, post_id: str):
        name = f"{post_id}.md"
        return Path(name) if name in self.files else None

    def read_post(self, path):
        self.reads.append(path.name)
        return self.files[path.name]

    @staticmethod
    def post_id_for(path):
        return path.stem
