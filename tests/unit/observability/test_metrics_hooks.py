from docs_kit.observability import InMemoryMetricsHook, NoOpMetricsHook, names
from docs_kit.parsers import AnnotatedSourceParser
from docs_kit.rendering import CommentRenderer


class TestInMemoryMetricsHook:
    def test_accumulates(self) -> None:
        hook = InMemoryMetricsHook()

        hook.increment(names.PARSE_SECTIONS_CREATED, 3)
        hook.increment(names.PARSE_SECTIONS_CREATED)
        hook.record_latency(names.PARSE_DURATION, 1.5)
        hook.record_gauge(names.PARSE_SOURCE_LINES, 10)
        hook.record_gauge(names.PARSE_SOURCE_LINES, 12)

        assert hook.counters == {names.PARSE_SECTIONS_CREATED: 4}
        assert hook.latencies == {names.PARSE_DURATION: [1.5]}
        assert hook.gauges == {names.PARSE_SOURCE_LINES: 12}


def test_noop_hook_accepts_everything() -> None:
    hook = NoOpMetricsHook()

    hook.increment(names.RENDER_COMMENTS_TOTAL, labels={"theme": "default"})
    hook.record_latency(names.RENDER_DURATION, 0.1)
    hook.record_gauge(names.PARSE_SOURCE_LINES, 1)


def test_parser_and_renderer_report_through_hook() -> None:
    hook = InMemoryMetricsHook()
    source = "/** REF: a */\nx = 1\n// CLOSE: a\n// CLOSE: ghost\n"

    result = AnnotatedSourceParser(metrics_hook=hook).parse(source)
    CommentRenderer(metrics_hook=hook).render_sections(result)

    assert hook.gauges[names.PARSE_SOURCE_LINES] == 5
    assert hook.counters[names.PARSE_REFS_RESOLVED] == 1
    assert hook.counters[names.PARSE_ORPHAN_CLOSE_MARKERS] == 1
    assert hook.counters[names.RENDER_COMMENTS_TOTAL] == len(result.sections)
    assert set(hook.latencies) == {names.PARSE_DURATION, names.RENDER_DURATION}
