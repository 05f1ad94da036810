from .config import HtmlTheme, RenderConfig
from .escape import escape_html
from .markdown import CommentRenderer, render_comment_html, render_sections

__all__ = [
    "CommentRenderer",
    "HtmlTheme",
    "RenderConfig",
    "escape_html",
    "render_comment_html",
    "render_sections",
]
