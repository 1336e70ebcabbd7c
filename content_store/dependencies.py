from typing import Optional

from content_store.repos.posts_repo import FilesystemPostsRepo
from content_store.services.markdown_renderer import MarkdownRenderer
from content_store.services.posts_service import PostsService
from content_store.settings import Settings, settings

_renderer = MarkdownRenderer()


def get_settings() -> Settings:
    """Small wrapper to allow overrides in tests."""
    return settings


def get_posts_repo(current_settings: Optional[Settings] = None) -> FilesystemPostsRepo:
    current_settings = current_settings or get_settings()
    return FilesystemPostsRepo(
        current_settings.content_path, extension=current_settings.CONTENT_EXTENSION
    )


def get_markdown_renderer() -> MarkdownRenderer:
    return _renderer


def get_posts_service(current_settings: Optional[Settings] = None) -> PostsService:
    """Build a fresh store; every call starts a new cache scope."""
    current_settings = current_settings or get_settings()
    return PostsService(
        repo=get_posts_repo(current_settings),
        renderer=get_markdown_renderer(),
        is_production=current_settings.is_production,
        max_workers=current_settings.LOAD_WORKERS,
    )
