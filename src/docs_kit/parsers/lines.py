# src/docs_kit/parsers/lines.py

"""Line classification for annotated source files.

Every line of the input is tagged with exactly one ``LineKind``. The
classifier only needs to know whether it is inside a block comment,
which it tracks itself, so it can run as a plain generator ahead of the
section builder.

Recognized conventions:

- block comments ``/** ... */``, ``/* ... */`` and the JSX-wrapped
  ``{/* ... */}`` form
- line comments ``// ...``
- ``REF: <id>`` on a comment line, marking an addressable section
- ``// CLOSE: <id>`` or ``{/* CLOSE: <id> */}``, ending that section
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from enum import Enum

CLOSE_MARKER_PATTERNS = (
    re.compile(r"//\s*CLOSE:\s*([\w-]+)"),
    re.compile(r"\{\s*/\*\s*CLOSE:\s*([\w-]+)\s*\*/\s*\}"),
)
REF_PATTERN = re.compile(r"^REF:\s*([\w-]+)")

_BLOCK_OPEN_PREFIX = re.compile(r"^\s*\{?/\*\*?\s?")
_BLOCK_TERMINATOR_SUFFIX = re.compile(r"\s*\*+/\}?.*$")
_BLOCK_CLOSE_TAIL = re.compile(r"\s*\*\*?/\}?.*")
_BLOCK_BODY_DECORATION = re.compile(r"^\s*\*\s?")
_LINE_COMMENT_PREFIX = re.compile(r"^\s*//\s?")


class LineKind(str, Enum):
    """What a single source line is, as far as documentation goes."""

    CLOSE_MARKER = "close_marker"
    BLOCK_OPEN = "block_open"
    BLOCK_SINGLE = "block_single"  # opened and terminated on the same line
    BLOCK_BODY = "block_body"
    BLOCK_CLOSE = "block_close"
    LINE_COMMENT = "line_comment"
    BLANK = "blank"
    CODE = "code"


@dataclass(frozen=True)
class ClassifiedLine:
    number: int
    raw: str
    kind: LineKind
    text: str = ""  # comment text with decoration stripped
    ref_id: str | None = None
    close_id: str | None = None
    is_directive: bool = False  # line comment mentioning REF:/CLOSE:

    @property
    def is_comment(self) -> bool:
        return self.kind not in (LineKind.BLANK, LineKind.CODE)


def find_close_marker(line: str) -> str | None:
    for pattern in CLOSE_MARKER_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group(1)
    return None


def find_ref(text: str) -> str | None:
    match = REF_PATTERN.match(text)
    return match.group(1) if match else None


def opens_block_comment(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith("/*") or stripped.startswith("{/*")


def classify_line(raw: str, number: int, in_block: bool) -> ClassifiedLine:
    """Classify one line given whether a block comment is currently open."""
    close_id = find_close_marker(raw)
    if close_id is not None:
        return ClassifiedLine(number, raw, LineKind.CLOSE_MARKER, close_id=close_id)

    if opens_block_comment(raw):
        text = _BLOCK_TERMINATOR_SUFFIX.sub("", _BLOCK_OPEN_PREFIX.sub("", raw))
        kind = LineKind.BLOCK_SINGLE if "*/" in raw else LineKind.BLOCK_OPEN
        return _comment_line(number, raw, kind, text)

    if in_block and "*/" in raw:
        text = _BLOCK_BODY_DECORATION.sub("", _BLOCK_CLOSE_TAIL.sub("", raw, count=1))
        return _comment_line(number, raw, LineKind.BLOCK_CLOSE, text)

    if in_block:
        text = _BLOCK_BODY_DECORATION.sub("", raw)
        return _comment_line(number, raw, LineKind.BLOCK_BODY, text)

    if raw.strip().startswith("//"):
        text = _LINE_COMMENT_PREFIX.sub("", raw)
        line = _comment_line(number, raw, LineKind.LINE_COMMENT, text)
        if "CLOSE:" in raw or "REF:" in raw:
            return replace(line, is_directive=True)
        return line

    if not raw.strip():
        return ClassifiedLine(number, raw, LineKind.BLANK)

    return ClassifiedLine(number, raw, LineKind.CODE)


def classify_lines(lines: Iterable[str]) -> Iterator[ClassifiedLine]:
    """Classify lines in order, numbering them from 1."""
    in_block = False
    for number, raw in enumerate(lines, start=1):
        line = classify_line(raw, number, in_block)
        if line.kind is LineKind.BLOCK_OPEN:
            in_block = True
        elif line.kind in (LineKind.BLOCK_SINGLE, LineKind.BLOCK_CLOSE):
            in_block = False
        yield line


def _comment_line(number: int, raw: str, kind: LineKind, text: str) -> ClassifiedLine:
    ref_id = find_ref(text)
    if ref_id is not None:
        # REF lines are metadata, never part of the rendered comment
        return ClassifiedLine(number, raw, kind, "", ref_id=ref_id)
    return ClassifiedLine(number, raw, kind, text)
