from typing import Optional


class PostsError(Exception):
    """Base class for every error raised by the posts loader."""


class PostsIOError(PostsError, OSError):
    """The posts directory, or a file in it, could not be read."""


class PostParseError(PostsError, ValueError):
    def __init__(self, post_id: Optional[str], message: str):
        self.post_id = post_id
        prefix = f"{post_id}: " if post_id else ""
        super().__init__(f"{prefix}{message}")


class PostNotFoundError(PostsError, LookupError):
    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Post not found: {post_id}")


class DuplicatePostIdError(PostsError, ValueError):
    def __init__(self, post_id: str, paths):
        self.post_id = post_id
        self.paths = list(paths)
        names = ", ".join(p.name for p in self.paths)
        super().__init__(f"Duplicate post id {post_id!r}: {names}")
