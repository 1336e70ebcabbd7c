import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import yaml

from content_store.exceptions import NotFound, ValidationError
from content_store.schemas.blog import (
    AdjacentPosts,
    LoadedPost,
    PaginatedPosts,
    PostData,
    PostMeta,
)
from content_store.services.frontmatter_validator import validate_frontmatter
from content_store.services.markdown_renderer import MarkdownRenderer
from content_store.utils import LoadOnce, locale_sort_key

logger = logging.getLogger(__name__)


class PostsService:
    """
    Query API over one directory of markdown posts.

    Each instance is one cache scope: the directory is read on first use and
    the result is kept for the lifetime of the instance.
    """

    def __init__(
        self,
        repo,
        renderer: Optional[MarkdownRenderer] = None,
        *,
        is_production: bool = False,
        max_workers: int = 8,
    ):
        self.repo = repo
        self.renderer = renderer or MarkdownRenderer()
        self.is_production = is_production
        self.max_workers = max(1, max_workers)
        self._posts = LoadOnce(self._load_all_posts)

    def load_all(self) -> Tuple[LoadedPost, ...]:
        return self._posts.get()

    def list_meta(self) -> List[PostMeta]:
        return [post.meta for post in self.load_all()]

    def get_by_slug(self, slug: str) -> PostData:
        found = next((p for p in self.load_all() if p.meta.slug == slug), None)
        if found is None:
            logger.info(f"Post not found: {slug}")
            raise NotFound(slug)
        if self.is_production and found.meta.draft:
            logger.info(f"Hiding draft post in production: {slug}")
            raise NotFound(slug)

        content_html = self.renderer.render(found.content)
        return PostData(**found.meta.model_dump(), contentHtml=content_html)

    def get_post_or_none(self, slug: str) -> Optional[PostData]:
        try:
            return self.get_by_slug(slug)
        except NotFound:
            return None

    def get_adjacent(self, slug: str) -> AdjacentPosts:
        """Previous is the older neighbour, next the newer one."""
        metas = self.list_meta()
        index = next((i for i, m in enumerate(metas) if m.slug == slug), -1)
        if index < 0:
            return AdjacentPosts()

        return AdjacentPosts(
            previous=metas[index + 1] if index < len(metas) - 1 else None,
            next=metas[index - 1] if index > 0 else None,
        )

    def list_slugs(self) -> List[str]:
        return [meta.slug for meta in self.list_meta()]

    def by_tag(self, tag: str) -> List[PostMeta]:
        return [meta for meta in self.list_meta() if meta.tags and tag in meta.tags]

    def list_tags(self) -> List[str]:
        tags = {tag for meta in self.list_meta() for tag in meta.tags or []}
        return sorted(tags, key=locale_sort_key)

    def latest(self, limit: int = 3) -> List[PostMeta]:
        return self.list_meta()[:limit]

    def paginate(self, page: int, per_page: int) -> PaginatedPosts:
        """Page is 1-based; out-of-range pages are clamped, not rejected."""
        if per_page < 1:
            raise ValueError(f"per_page must be at least 1, got {per_page}")

        metas = self.list_meta()
        total = len(metas)
        total_pages = max(1, math.ceil(total / per_page))
        current_page = min(max(page, 1), total_pages)

        start = (current_page - 1) * per_page
        return PaginatedPosts(
            page=current_page,
            perPage=per_page,
            total=total,
            totalPages=total_pages,
            items=metas[start : start + per_page],
        )

    def _load_all_posts(self) -> Tuple[LoadedPost, ...]:
        slugs = self.repo.list_slugs()
        logger.info(f"Loading {len(slugs)} posts from {self.repo.content_dir}")
        if not slugs:
            return ()

        workers = min(self.max_workers, len(slugs))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            posts = list(executor.map(self._load_post, slugs))

        if self.is_production:
            drafts = [p.meta.slug for p in posts if p.meta.draft]
            if drafts:
                logger.debug(f"Skipping {len(drafts)} drafts: {drafts}")
            posts = [p for p in posts if not p.meta.draft]

        # ISO strings share one format, so string order is chronological
        posts.sort(key=lambda p: p.meta.date, reverse=True)
        return tuple(posts)

    def _load_post(self, slug: str) -> LoadedPost:
        try:
            parsed = self.repo.read_post(slug)
        except yaml.YAMLError as e:
            logger.warning(f"Failed to parse frontmatter for post {slug}: {e}")
            raise ValidationError(slug, f"Invalid frontmatter in {slug}") from e

        try:
            meta = validate_frontmatter(parsed.metadata, slug)
        except ValidationError as e:
            logger.warning(f"Rejected post {slug}: {e}")
            raise

        return LoadedPost(meta=meta, content=parsed.content)
