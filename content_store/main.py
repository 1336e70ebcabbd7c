import logging
from typing import Optional

from content_store import dependencies as deps
from content_store.services.posts_service import PostsService
from content_store.utils import LoadOnce

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    level = level or deps.get_settings().LOG_LEVEL
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


def _build_posts_service() -> PostsService:
    configure_logging()
    current_settings = deps.get_settings()
    service = deps.get_posts_service(current_settings)
    logger.info(
        f"Content store ready for {current_settings.CONTENT_DIR} "
        f"(environment={current_settings.ENVIRONMENT})"
    )
    return service


# Process-wide store; its post cache lives as long as the process
_posts_service = LoadOnce(_build_posts_service)


def create_posts_service() -> PostsService:
    return _posts_service.get()
