from pathlib import Path

from docs_kit.parsers.models import ParseResult
from docs_kit.rendering import HtmlTheme, RenderConfig, render_comment_html

UNSTYLED = RenderConfig(theme=HtmlTheme.unstyled())

# --- Section-level tests ---


def test_every_ref_resolves(parsed_badge: ParseResult) -> None:
    assert parsed_badge.ref_map == {
        "badge-component": 0,
        "badge-props": 1,
        "badge-render": 2,
    }


def test_section_line_ranges(parsed_badge: ParseResult) -> None:
    ranges = [(s.start_line, s.end_line) for s in parsed_badge.sections]
    assert ranges == [(1, 8), (18, 20), (32, 41)]


def test_intro_section_has_no_code(parsed_badge: ParseResult) -> None:
    intro = parsed_badge.sections[0]

    assert intro.comment == "# Badge Component\n\nSmall label for statuses."
    assert intro.code == ""
    assert (intro.start_line_in_clean_code, intro.end_line_in_clean_code) == (1, 1)


def test_close_marker_ends_props_section(parsed_badge: ParseResult) -> None:
    props = parsed_badge.section_for("badge-props")

    assert props is not None
    assert props.code == "interface BadgeProps {\n  label: string\n}"


def test_inline_comments_inside_code(parsed_badge: ParseResult) -> None:
    render = parsed_badge.section_for("badge-render")

    assert render is not None
    assert "  // fall back to a dash" in render.code.split("\n")
    assert "{/* Label */}" not in render.code
    assert render.comment.endswith("```\nLabel")
    assert len(render.code.split("\n")) == 9


def test_section_at_line(parsed_badge: ParseResult) -> None:
    assert parsed_badge.section_at_line(1) is parsed_badge.sections[0]
    assert parsed_badge.section_at_line(19) is parsed_badge.section_for("badge-props")
    assert parsed_badge.section_at_line(42) is None


# --- Clean-code tests ---


def test_clean_code_drops_comments(parsed_badge: ParseResult) -> None:
    clean = parsed_badge.code_without_comments.split("\n")

    assert len(clean) == 15
    assert not any("CLOSE:" in line or "REF:" in line for line in clean)


def test_clean_ranges_point_at_section_code(parsed_badge: ParseResult) -> None:
    clean = parsed_badge.code_without_comments.split("\n")

    for section in parsed_badge.sections[1:]:
        start = section.start_line_in_clean_code
        end = section.end_line_in_clean_code
        assert clean[start - 1 : end] == section.code.split("\n")


def test_original_code_is_kept(parsed_badge: ParseResult, badge_path: Path) -> None:
    assert parsed_badge.original_code == badge_path.read_text(encoding="utf-8")


# --- Rendering tests ---


def test_renders_props_table(parsed_badge: ParseResult) -> None:
    props = parsed_badge.section_for("badge-props")
    assert props is not None

    html = render_comment_html(props.comment, UNSTYLED)

    assert html.startswith("<h3>Props</h3>")
    assert "<td><code>label</code></td>" in html


def test_renders_fenced_example(parsed_badge: ParseResult) -> None:
    render = parsed_badge.section_for("badge-render")
    assert render is not None

    html = render_comment_html(render.comment, UNSTYLED)

    assert (
        '<pre><code class="language-tsx" data-language="tsx">'
        "&lt;Badge label=&quot;ok&quot; /&gt;</code></pre>"
    ) in html
    assert html.endswith("<p>Label</p>")
