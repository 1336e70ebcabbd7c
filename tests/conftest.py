import textwrap
import threading
import time

import frontmatter
import pytest


class FakeRepo:
    """
    Minimal in-memory stand-in for FilesystemPostsRepo.
    Maps slug -> raw file text; counts directory listings.
    """

    def __init__(self, files: dict[str, str], delay: float = 0.0):
        self.files = files
        self.delay = delay
        self.content_dir = "memory://posts"
        self.list_calls = 0
        self._lock = threading.Lock()

    def list_slugs(self):
        with self._lock:
            self.list_calls += 1
        if self.delay:
            time.sleep(self.delay)
        return list(self.files)

    def read_post(self, slug: str) -> frontmatter.Post:
        return frontmatter.loads(textwrap.dedent(self.files[slug]).lstrip())


class FakeRenderer:
    """
    Renderer stand-in that records what it was asked to render.
    """

    def __init__(self):
        self.calls = []

    def render(self, content: str) -> str:
        self.calls.append(content)
        return f"<p>{content}</p>"


def make_post(title: str, date: str, body: str = "body", **extra) -> str:
    lines = ["---", f"title: {title}", f'date: "{date}"']
    for key, value in extra.items():
        lines.append(f"{key}: {value}")
    lines += ["---", body, ""]
    return "\n".join(lines)


@pytest.fixture
def three_posts() -> dict[str, str]:
    # Newest first by date: B, C, A
    return {
        "A": make_post("Post A", "2024-01-01", tags="[python, testing]"),
        "B": make_post("Post B", "2024-06-01", tags="[python]"),
        "C": make_post("Post C", "2024-03-01"),
    }


@pytest.fixture
def content_dir(tmp_path):
    """Write posts into a temporary content directory."""

    def write(files: dict[str, str]):
        for name, text in files.items():
            (tmp_path / name).write_text(text, encoding="utf-8")
        return tmp_path

    return write
