from pathlib import Path

import pytest

from docs_kit.parsers.models import ParseResult
from docs_kit.parsers.source_parser import AnnotatedSourceParser

BADGE_LINES = [
    "/**",
    " * REF: badge-component",
    " *",
    " * # Badge Component",
    " *",
    " * Small label for statuses.",
    " */",
    "",
    "/**",
    " * REF: badge-props",
    " *",
    " * ## Props",
    " *",
    " * | Prop | Type |",
    " * |------|------|",
    " * | `label` | string |",
    " */",
    "interface BadgeProps {",
    "  label: string",
    "}",
    "// CLOSE: badge-props",
    "",
    "/**",
    " * REF: badge-render",
    " *",
    " * ## Render",
    " *",
    " * ```tsx",
    ' * <Badge label="ok" />',
    " * ```",
    " */",
    "export default function Badge({ label }: BadgeProps) {",
    "  // fall back to a dash",
    "  const text = label || '-'",
    "  return (",
    '    <span className="badge">',
    "      {/* Label */}",
    "      {text}",
    "    </span>",
    "  )",
    "}",
    "// CLOSE: badge-render",
    "// CLOSE: badge-component",
]


def _write_badge_component(path: Path) -> None:
    """Writes an annotated TSX component the way course material is authored."""
    path.write_text("\n".join(BADGE_LINES) + "\n", encoding="utf-8")


@pytest.fixture(scope="module")
def badge_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    path: Path = tmp_path_factory.mktemp("sources") / "Badge.tsx"
    _write_badge_component(path)
    return path


@pytest.fixture(scope="module")
def parsed_badge(badge_path: Path) -> ParseResult:
    parser = AnnotatedSourceParser()
    return parser.parse(badge_path.read_text(encoding="utf-8"))
