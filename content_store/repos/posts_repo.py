import logging
from pathlib import Path
from typing import List

import frontmatter

logger = logging.getLogger(__name__)


class FilesystemPostsRepo:
    def __init__(self, content_dir: str | Path, extension: str = ".md"):
        self.content_dir = Path(content_dir)
        self.extension = extension

    def list_slugs(self) -> List[str]:
        """Slugs of every markdown file in the content directory, sorted by filename."""
        if not self.content_dir.is_dir():
            logger.warning(f"Content directory not found: {self.content_dir}")
            return []

        return [
            path.name.removesuffix(self.extension)
            for path in sorted(self.content_dir.iterdir(), key=lambda p: p.name)
            if path.is_file() and path.name.endswith(self.extension)
        ]

    def post_path(self, slug: str) -> Path:
        return self.content_dir / f"{slug}{self.extension}"

    def read_post(self, slug: str) -> frontmatter.Post:
        # Undecodable bytes become U+FFFD
        raw = self.post_path(slug).read_text(encoding="utf-8", errors="replace")
        return frontmatter.loads(raw)
