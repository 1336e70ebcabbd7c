from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin


class MarkdownRenderer:
    """GitHub-flavored markdown to HTML (tables, strikethrough, task lists)."""

    def __init__(self):
        self.md = (
            MarkdownIt("commonmark", {"html": True})
            .enable(["table", "strikethrough"])
            .use(tasklists_plugin)
        )

    def render(self, content: str) -> str:
        return self.md.render(content or "")


_default_renderer = MarkdownRenderer()


def render_markdown(content: str) -> str:
    return _default_renderer.render(content)
