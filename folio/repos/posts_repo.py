import logging
from pathlib import Path
from typing import Iterable, List, Optional

from folio.exceptions import DuplicatePostIdError, PostsIOError

logger = logging.getLogger(__name__)


class FilePostsRepo:
    """Flat directory of markdown posts, one file per post."""

    def __init__(self, posts_dir, extensions: Iterable[str] = (".md",)):
        self.posts_dir = Path(posts_dir)
        self.extensions = tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in extensions
            if ext
        )

    def list_post_files(self) -> List[Path]:
        try:
            entries = sorted(self.posts_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise PostsIOError(
                f"Cannot read posts directory {self.posts_dir}: {e}"
            ) from e

        files = [path for path in entries if self._is_post_file(path)]
        self._check_unique_ids(files)
        logger.debug(f"Found {len(files)} posts in {self.posts_dir}")
        return files

    def get_post_file(self, post_id: str) -> Optional[Path]:
        # ids only ever come from enumeration, so "../x" or ".hidden" cannot match
        matches = (
            path
            for path in self.list_post_files()
            if self.post_id_for(path) == post_id
        )
        return next(matches, None)

    def read_post(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise PostsIOError(f"Cannot read post file {path}: {e}") from e

    @staticmethod
    def post_id_for(path: Path) -> str:
        return path.stem

    def _is_post_file(self, path: Path) -> bool:
        return (
            not path.name.startswith(".")
            and path.suffix.lower() in self.extensions
            and path.is_file()
        )

    def _check_unique_ids(self, files: List[Path]) -> None:
        by_id = {}
        for path in files:
            by_id.setdefault(self.post_id_for(path), []).append(path)
        for post_id, paths in by_id.items():
            if len(paths) > 1:
                raise DuplicatePostIdError(post_id, paths)
