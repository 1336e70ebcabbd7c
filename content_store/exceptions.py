class ContentStoreError(Exception):
    """Base class for content store failures."""


class ValidationError(ContentStoreError):
    """Frontmatter of a post is missing or malformed."""

    def __init__(self, slug: str, message: str):
        super().__init__(message)
        self.slug = slug


class NotFound(ContentStoreError):
    """No visible post exists for the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"Post not found: {slug}")
        self.slug = slug
