import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from folio.exceptions import PostNotFoundError, PostParseError
from folio.schemas.blog import PostDetail, PostSummary
from folio.services.content_parser import ContentParser
from folio.services.renderer import render_markdown

logger = logging.getLogger(__name__)


class PostsService:
    """Read-time view over a posts directory.

    Nothing is cached: every call enumerates and parses the files again, so
    results always match what is on disk.
    """

    def __init__(self, repo, parser: Optional[ContentParser] = None):
        self.repo = repo
        self.parser = parser or ContentParser()

    def list_post_ids(self) -> List[str]:
        return [self.repo.post_id_for(path) for path in self.repo.list_post_files()]

    def get_post_metadata(
        self, post_ids: Optional[Iterable[str]] = None
    ) -> List[PostSummary]:
        if post_ids is None:
            paths = self.repo.list_post_files()
        else:
            by_id = {
                self.repo.post_id_for(path): path
                for path in self.repo.list_post_files()
            }
            paths = [self._resolve(post_id, by_id) for post_id in post_ids]

        return [self._load(path, include_content=False) for path in paths]

    def get_sorted_posts(self, tag: Optional[str] = None) -> List[PostSummary]:
        posts = self.get_post_metadata()
        if tag:
            posts = [post for post in posts if post.has_tag(tag)]
        # list.sort is stable, so equal dates keep filename order
        posts.sort(key=lambda post: post.date, reverse=True)
        return posts

    def get_post(self, post_id: str) -> PostDetail:
        return self._load(self._resolve(post_id), include_content=True)

    def get_post_html(self, post_id: str) -> str:
        return render_markdown(self.get_post(post_id).content)

    def list_tags(self) -> List[str]:
        tags = {tag for post in self.get_post_metadata() for tag in post.tags}
        return sorted(tags)

    def _resolve(self, post_id: str, by_id: Optional[dict] = None) -> Path:
        if by_id is None:
            path = self.repo.get_post_file(post_id)
        else:
            path = by_id.get(post_id)
        if path is None:
            raise PostNotFoundError(post_id)
        return path

    def _load(self, path: Path, include_content: bool):
        post_id = self.repo.post_id_for(path)
        try:
            text = self.repo.read_post(path)
        except UnicodeDecodeError as e:
            logger.warning(f"Failed to decode post {post_id}: {e}")
            raise PostParseError(post_id, f"not valid UTF-8: {e}") from e

        try:
            metadata, content = self.parser.parse(text, source=post_id)
            return parse_post_data(post_id, metadata, content, include_content)
        except PostParseError as e:
            logger.warning(f"Failed to parse post {post_id}: {e}")
            raise


def parse_post_data(
    post_id: str, metadata: dict, content: str, include_content: bool = False
):
    """Validate front matter into a post record."""
    data = {
        "id": post_id,
        "title": metadata.get("title"),
        "date": metadata.get("date"),
        "tags": metadata.get("tags"),
    }
    model = PostSummary
    if include_content:
        data["content"] = content
        model = PostDetail

    try:
        return model.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise PostParseError(post_id, f"invalid front matter ({problems})") from e
