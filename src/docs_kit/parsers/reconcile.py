# src/docs_kit/parsers/reconcile.py

from dataclasses import replace

from .config import ReconcileStrategy
from .models import Section

EMPTY_CODE_RANGE = (1, 1)


def reconcile_by_content(sections: list[Section], clean_lines: list[str]) -> list[Section]:
    """
    Locate each section's code inside the comment-stripped file.

    Approximate:
    - Matches the section's first code line (trimmed) against the first
      clean-code line with the same trimmed text
    - Duplicate lines resolve to their earliest occurrence
    - Falls back to ``[1, line_count]`` when nothing matches
    """
    first_seen: dict[str, int] = {}
    for position, text in enumerate(clean_lines, start=1):
        first_seen.setdefault(text.strip(), position)

    reconciled = []
    for section in sections:
        if not section.code.strip():
            reconciled.append(_with_clean_range(section, *EMPTY_CODE_RANGE))
            continue

        code_lines = section.code.split("\n")
        start = first_seen.get(code_lines[0].strip(), 1)
        reconciled.append(_with_clean_range(section, start, start + len(code_lines) - 1))
    return reconciled


def reconcile_by_provenance(
    sections: list[Section], clean_starts: list[int | None]
) -> list[Section]:
    """Use the clean-code positions recorded while scanning."""
    reconciled = []
    for section, clean_start in zip(sections, clean_starts):
        if not section.code.strip() or clean_start is None:
            reconciled.append(_with_clean_range(section, *EMPTY_CODE_RANGE))
            continue

        line_count = len(section.code.split("\n"))
        reconciled.append(
            _with_clean_range(section, clean_start, clean_start + line_count - 1)
        )
    return reconciled


def reconcile(
    sections: list[Section],
    clean_lines: list[str],
    clean_starts: list[int | None],
    strategy: ReconcileStrategy = "content",
) -> list[Section]:
    if strategy == "content":
        return reconcile_by_content(sections, clean_lines)
    if strategy == "provenance":
        return reconcile_by_provenance(sections, clean_starts)
    raise ValueError(f"Unknown reconcile strategy: {strategy}")


def _with_clean_range(section: Section, start: int, end: int) -> Section:
    return replace(section, start_line_in_clean_code=start, end_line_in_clean_code=end)
