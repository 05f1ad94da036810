# src/docs_kit/parsers/builder.py

"""Section building: a single forward fold over classified lines.

All scan state lives in one ``ScanState`` value that ``step`` advances
line by line and ``finish`` flushes at end of input. Sections are
emitted with placeholder clean-code ranges; the reconciler fills those
in afterwards.
"""

import logging
from dataclasses import dataclass, field

from .lines import ClassifiedLine, LineKind
from .models import Section

logger = logging.getLogger(__name__)


@dataclass
class ScanState:
    comment: list[str] = field(default_factory=list)
    code: list[str] = field(default_factory=list)
    ref_id: str | None = None

    comment_start: int | None = None
    code_start: int | None = None
    clean_start: int | None = None  # clean-code position of the first code line

    # where the comment unit being read began, and how much comment preceded it
    unit_start: int = 0
    unit_mark: int = 0

    close_markers: dict[str, int] = field(default_factory=dict)
    orphan_closes: int = 0

    clean_lines: list[str] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)
    clean_starts: list[int | None] = field(default_factory=list)
    ref_map: dict[str, int] = field(default_factory=dict)

    @property
    def has_pending(self) -> bool:
        return bool(self.comment or self.code) or self.ref_id is not None

    @property
    def has_doc(self) -> bool:
        """A comment or a REF id is waiting for its code."""
        return bool(self.comment) or self.ref_id is not None

    def governing_close(self) -> int | None:
        """CLOSE line recorded for the pending REF id, if any."""
        if self.ref_id is None:
            return None
        return self.close_markers.get(self.ref_id)


def step(state: ScanState, line: ClassifiedLine) -> None:
    """Advance ``state`` by one classified line."""
    if line.close_id is not None:
        _record_close(state, line.close_id, line.number)
    elif line.kind in (LineKind.BLOCK_OPEN, LineKind.BLOCK_SINGLE):
        _begin_comment_unit(state, line)
        _take_comment_text(state, line, keep_blank=False)
    elif line.kind is LineKind.BLOCK_BODY:
        _take_comment_text(state, line, keep_blank=True)
    elif line.kind is LineKind.BLOCK_CLOSE:
        _take_comment_text(state, line, keep_blank=False)
    elif line.kind is LineKind.LINE_COMMENT:
        if state.code and not line.is_directive and state.governing_close() is None:
            # comment embedded in running code stays with the code
            _append_code(state, line)
            return
        _begin_comment_unit(state, line)
        _take_comment_text(state, line, keep_blank=True)
    else:
        _take_code_line(state, line)


def finish(state: ScanState, last_line: int) -> None:
    """Flush whatever is still accumulated once the input is exhausted."""
    if state.has_pending:
        _flush(state, _end_line(state, last_line))


def _record_close(state: ScanState, close_id: str, number: int) -> None:
    if close_id != state.ref_id and close_id not in state.ref_map:
        state.orphan_closes += 1
        logger.debug("CLOSE without matching REF ignored: %s (line %d)", close_id, number)
    state.close_markers[close_id] = number
    logger.debug("Recorded CLOSE: %s at line %d", close_id, number)


def _begin_comment_unit(state: ScanState, line: ClassifiedLine) -> None:
    # bare code, or code whose REF scope has already closed, becomes its own section
    if state.code and (not state.has_doc or state.governing_close() is not None):
        _flush(state, _end_line(state, line.number - 1))

    if state.comment_start is None:
        state.comment_start = line.number
    state.unit_start = line.number
    state.unit_mark = len(state.comment)


def _take_comment_text(state: ScanState, line: ClassifiedLine, keep_blank: bool) -> None:
    if line.ref_id is not None:
        _capture_ref(state, line.ref_id)
        return
    if keep_blank or line.text.strip():
        state.comment.append(line.text)


def _capture_ref(state: ScanState, ref_id: str) -> None:
    earlier_comment = state.comment[: state.unit_mark]
    if state.code or (state.ref_id is not None and earlier_comment):
        # a new REF always starts a new addressable section
        _flush(
            state,
            _end_line(state, state.unit_start - 1),
            carry_from=state.unit_mark,
        )

    # a CLOSE seen before its REF belongs to nothing
    state.close_markers.pop(ref_id, None)
    state.ref_id = ref_id
    if state.comment_start is None:
        state.comment_start = state.unit_start
    logger.debug("Captured REF: %s at line %d", ref_id, state.unit_start)


def _take_code_line(state: ScanState, line: ClassifiedLine) -> None:
    close_line = state.governing_close()
    if close_line is not None and close_line <= line.number and state.has_pending:
        _flush(state, close_line - 1)
    elif line.kind is LineKind.BLANK and state.has_doc and state.code:
        _flush(state, line.number - 1)
        state.clean_lines.append(line.raw)
        return

    if line.kind is LineKind.BLANK and not state.code:
        # blank lines never open a code run
        state.clean_lines.append(line.raw)
        return

    _append_code(state, line)


def _append_code(state: ScanState, line: ClassifiedLine) -> None:
    state.clean_lines.append(line.raw)
    if not state.code:
        state.code_start = line.number
        state.clean_start = len(state.clean_lines)
    state.code.append(line.raw)


def _end_line(state: ScanState, default: int) -> int:
    close_line = state.governing_close()
    return close_line - 1 if close_line is not None else default


def _flush(state: ScanState, end_line: int, carry_from: int | None = None) -> None:
    if carry_from is None:
        comment_lines, carried = state.comment, []
    else:
        comment_lines, carried = state.comment[:carry_from], state.comment[carry_from:]

    comment = _trim_blank_lines(comment_lines)
    code = "\n".join(state.code)

    if comment or code.strip():
        start = (state.code_start if state.code else state.comment_start) or state.unit_start
        section = Section(
            start_line=start,
            end_line=max(start, end_line),
            start_line_in_clean_code=0,
            end_line_in_clean_code=0,
            comment=comment,
            code=code,
            ref_id=state.ref_id,
        )
        index = len(state.sections)
        state.sections.append(section)
        state.clean_starts.append(state.clean_start)
        if section.ref_id is not None:
            if section.ref_id in state.ref_map:
                logger.warning(
                    "Duplicate REF id %r: section %d replaces section %d",
                    section.ref_id,
                    index,
                    state.ref_map[section.ref_id],
                )
            state.ref_map[section.ref_id] = index
        logger.debug(
            "Emitted section %d: lines %d-%d ref=%s",
            index,
            section.start_line,
            section.end_line,
            section.ref_id,
        )

    state.comment = list(carried)
    state.code = []
    state.ref_id = None
    state.comment_start = state.unit_start if carried else None
    state.code_start = None
    state.clean_start = None
    state.unit_mark = 0


def _trim_blank_lines(lines: list[str]) -> str:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])
