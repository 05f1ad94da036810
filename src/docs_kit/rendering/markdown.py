# src/docs_kit/rendering/markdown.py

"""Documentation comment -> HTML.

A deliberately small markdown dialect, applied as an ordered pipeline of
pure text transforms:

1. strip REF/CLOSE markers and audio-guide annotations
2. fenced code blocks (escaped, stashed out of reach of later stages)
3. pipe tables
4. headers, rules, blockquotes, list items
5. inline code (stashed), bold, italic, links
6. paragraphs

Anything stashed is put back only after the last stage, so code never
gets reinterpreted as markdown.
"""

import logging
import re
import uuid
from collections.abc import Callable
from time import monotonic

from docs_kit.observability import names
from docs_kit.observability.base import MetricsHook, NoOpMetricsHook
from docs_kit.parsers.models import ParseResult

from .config import HtmlTheme, RenderConfig
from .elements import element, void_element
from .escape import escape_html
from .tables import render_tables

logger = logging.getLogger(__name__)

_LEADING_REF = re.compile(r"^REF:\s*[\w-]+\s*\n?")
_CLOSE_MARKER = re.compile(r"CLOSE:\s*[\w-]+")
_AUDIO_GUIDES = (
    re.compile(r"\*\*Audio Guide:\*\*\s*`audio/[^`]+`\s*\n?"),
    re.compile(r"Audio Guide:\s*`audio/[^`]+`\s*\n?"),
)

_RENDERED_PRE = re.compile(r"<pre\b[\s\S]*?</pre>")
_FENCE = re.compile(r"```(\w+)?\n([\s\S]*?)```")
# whichever starts first wins, so a <pre> inside a fence stays part of its body
_FENCE_OR_PRE = re.compile(f"{_FENCE.pattern}|(?P<pre>{_RENDERED_PRE.pattern})")

_HEADERS = (
    (4, re.compile(r"^#### (.+)$", re.MULTILINE)),
    (3, re.compile(r"^### (.+)$", re.MULTILINE)),
    (2, re.compile(r"^## (.+)$", re.MULTILINE)),
    (1, re.compile(r"^# (.+)$", re.MULTILINE)),
)
_RULE = re.compile(r"^---+$", re.MULTILINE)
_BLOCKQUOTE = re.compile(r"^> (.+)$", re.MULTILINE)
_LIST_ITEM = re.compile(r"^- (.+)$", re.MULTILINE)
_ORDERED_ITEM = re.compile(r"^\d+\. (.+)$", re.MULTILINE)

_INLINE_CODE = re.compile(r"`([^`]+)`")
_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC = re.compile(r"\*([^*]+)\*")
_LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

_BLOCK_LINE = re.compile(r"^\s*</?(?:h[1-6]|hr|blockquote|li|ul|ol|table|pre|p|div)\b")

# markdown "#" sits one level below the page title
_HEADING_TAG_OFFSET = 1


class _Stash:
    """Holds finished HTML fragments behind opaque placeholder tokens.

    Tokens carry a per-instance nonce, so placeholder lookalikes in the
    comment text are never mistaken for stashed fragments.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._nonce = uuid.uuid4().hex
        self._block_token = re.compile(rf"<!--docs-kit:{self._nonce}:(\d+)-->")
        self._inline_token = re.compile(rf"\x02{self._nonce}:(\d+)\x03")

    def block(self, fragment: str) -> str:
        self._fragments.append(fragment)
        return f"<!--docs-kit:{self._nonce}:{len(self._fragments) - 1}-->"

    def inline(self, fragment: str) -> str:
        self._fragments.append(fragment)
        return f"\x02{self._nonce}:{len(self._fragments) - 1}\x03"

    def holds_block(self, line: str) -> bool:
        return bool(self._block_token.fullmatch(line.strip()))

    def restore(self, text: str) -> str:
        text = self._block_token.sub(self._fragment, text)
        return self._inline_token.sub(self._fragment, text)

    def _fragment(self, match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(self._fragments):
            return self._fragments[index]
        return match.group(0)


def strip_markers(text: str, strip_audio_guides: bool = True) -> str:
    text = _LEADING_REF.sub("", text)
    text = _CLOSE_MARKER.sub("", text)
    if strip_audio_guides:
        for pattern in _AUDIO_GUIDES:
            text = pattern.sub("", text)
    return text


def render_fences(text: str, stash: _Stash, config: RenderConfig) -> str:
    def fence(match: re.Match) -> str:
        if match.group("pre") is not None:
            # already-rendered blocks pass through untouched
            return stash.block(match.group(0))
        language = match.group(1) or config.default_language
        body = escape_html(match.group(2).lstrip("\n").rstrip())
        code = element(
            "code",
            f"language-{language}",
            body,
            attrs=f' data-language="{language}"',
        )
        return stash.block(element("pre", config.theme.code_block, code))

    return _FENCE_OR_PRE.sub(fence, text)


def render_block_elements(text: str, theme: HtmlTheme) -> str:
    for level, pattern in _HEADERS:
        tag = f"h{level + _HEADING_TAG_OFFSET}"
        css_class = theme.heading(level)
        text = pattern.sub(lambda m: element(tag, css_class, m.group(1)), text)
    text = _RULE.sub(lambda m: void_element("hr", theme.rule), text)
    text = _BLOCKQUOTE.sub(lambda m: element("blockquote", theme.blockquote, m.group(1)), text)
    text = _LIST_ITEM.sub(lambda m: element("li", theme.list_item, m.group(1)), text)
    return _ORDERED_ITEM.sub(
        lambda m: element("li", theme.ordered_list_item, m.group(1)), text
    )


def render_inline(text: str, stash: _Stash, theme: HtmlTheme) -> str:
    text = _INLINE_CODE.sub(
        lambda m: stash.inline(element("code", theme.inline_code, m.group(1))), text
    )
    text = _BOLD.sub(lambda m: element("strong", theme.strong, m.group(1)), text)
    text = _ITALIC.sub(lambda m: element("em", theme.emphasis, m.group(1)), text)
    return _LINK.sub(
        lambda m: element("a", theme.link, m.group(1), attrs=f' href="{m.group(2)}"'),
        text,
    )


def render_paragraphs(text: str, stash: _Stash, theme: HtmlTheme) -> str:
    """Join runs of plain lines into paragraphs; block lines pass through."""
    out: list[str] = []
    plain: list[str] = []
    for line in text.split("\n") + [""]:
        if line.strip() and not (_BLOCK_LINE.match(line) or stash.holds_block(line)):
            plain.append(line)
            continue
        if plain:
            out.append(element("p", theme.paragraph, "\n".join(plain)))
            plain = []
        if line.strip():
            out.append(line)
    return "\n".join(out)


class CommentRenderer:
    def __init__(
        self,
        config: RenderConfig = RenderConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook

    def render(self, comment: str) -> str:
        start = monotonic()
        theme = self.config.theme
        stash = _Stash()

        stages: list[Callable[[str], str]] = [
            lambda t: strip_markers(t, self.config.strip_audio_guides),
            lambda t: render_fences(t, stash, self.config),
            lambda t: render_tables(t, theme),
            lambda t: render_block_elements(t, theme),
            lambda t: render_inline(t, stash, theme),
            lambda t: render_paragraphs(t, stash, theme),
        ]
        html = comment
        for stage in stages:
            html = stage(html)
        html = stash.restore(html)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.RENDER_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.RENDER_COMMENTS_TOTAL)
        logger.debug("Rendered comment of %d chars into %d chars", len(comment), len(html))
        return html

    def render_sections(self, result: ParseResult) -> list[str]:
        return [self.render(section.comment) for section in result.sections]


def render_comment_html(comment: str, config: RenderConfig | None = None) -> str:
    return CommentRenderer(config or RenderConfig()).render(comment)


def render_sections(result: ParseResult, config: RenderConfig | None = None) -> list[str]:
    return CommentRenderer(config or RenderConfig()).render_sections(result)
