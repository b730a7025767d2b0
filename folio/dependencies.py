from typing import Optional

from folio.repos.posts_repo import FilePostsRepo
from folio.services.content_parser import ContentParser
from folio.services.posts_service import PostsService
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow overrides in tests."""
    return settings


def get_posts_repo(current_settings: Optional[Settings] = None, posts_dir=None):
    current_settings = current_settings or get_settings()
    return FilePostsRepo(
        posts_dir or current_settings.POSTS_DIR,
        extensions=current_settings.normalized_extensions,
    )


def get_posts_service(current_settings: Optional[Settings] = None, posts_dir=None):
    repo = get_posts_repo(current_settings, posts_dir=posts_dir)
    return PostsService(repo=repo, parser=ContentParser())
