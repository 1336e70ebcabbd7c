import datetime
from collections.abc import Mapping
from typing import Any, List, Optional

from dateutil import parser as date_parser

from content_store.exceptions import ValidationError
from content_store.schemas.blog import PostMeta


def validate_frontmatter(data: Any, slug: str) -> PostMeta:
    """
    Turn an untyped frontmatter mapping into a normalized PostMeta.

    Raises ValidationError when the header is not a mapping, or when the
    title or date is missing or unusable.
    """
    if not data or not isinstance(data, Mapping):
        raise ValidationError(slug, f"Invalid frontmatter in {slug}")

    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError(slug, f'Missing/invalid "title" in {slug}')

    parsed_date = _parse_date(data.get("date"))
    if parsed_date is None:
        raise ValidationError(slug, f'Missing/invalid "date" in {slug}')

    description = data.get("description")
    draft = data.get("draft")

    return PostMeta(
        slug=slug,
        title=title.strip(),
        date=to_iso_string(parsed_date),
        description=description.strip() if isinstance(description, str) else None,
        draft=draft if isinstance(draft, bool) else False,
        tags=_normalize_tags(data.get("tags")),
    )


def to_iso_string(value: datetime.datetime) -> str:
    """Format as UTC ISO 8601 with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    value = value.astimezone(datetime.timezone.utc)
    return (
        f"{value.year:04d}-{value:%m-%dT%H:%M:%S}"
        f".{value.microsecond // 1000:03d}Z"
    )


def _parse_date(value: Any) -> Optional[datetime.datetime]:
    # Only strings count; YAML-decoded dates (unquoted values) are rejected
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        parsed = date_parser.isoparse(text)
    except (ValueError, OverflowError):
        try:
            parsed = date_parser.parse(text)
        except (ValueError, OverflowError):
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    try:
        return parsed.astimezone(datetime.timezone.utc)
    except OverflowError:
        return None


def _normalize_tags(value: Any) -> Optional[List[str]]:
    if not isinstance(value, (list, tuple)):
        return None
    tags = [tag.strip() for tag in value if isinstance(tag, str) and tag.strip()]
    return tags or None
