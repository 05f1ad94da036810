# src/docs_kit/parsers/models.py

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Section:
    """A documentation block paired with the code it explains.

    Line numbers are 1-based and inclusive. ``start_line``/``end_line``
    address the original file, the ``*_in_clean_code`` pair addresses
    ``ParseResult.code_without_comments``.
    """

    start_line: int
    end_line: int
    start_line_in_clean_code: int
    end_line_in_clean_code: int
    comment: str
    code: str
    ref_id: str | None = None


@dataclass(frozen=True)
class ParseResult:
    """Everything one parse of an annotated source file produces.

    Immutable. Recomputed wholesale whenever the source changes.
    """

    sections: list[Section]
    code_without_comments: str
    original_code: str
    ref_map: dict[str, int] = field(default_factory=dict)

    def section_for(self, ref_id: str) -> Section | None:
        """Resolve a REF id to its section, or ``None`` when there is no deep link."""
        index = self.ref_map.get(ref_id)
        if index is None or not 0 <= index < len(self.sections):
            return None
        return self.sections[index]

    def section_at_line(self, line_number: int) -> Section | None:
        for section in self.sections:
            if section.start_line <= line_number <= section.end_line:
                return section
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sections": [asdict(s) for s in self.sections],
            "code_without_comments": self.code_without_comments,
            "original_code": self.original_code,
            "ref_map": dict(self.ref_map),
        }
