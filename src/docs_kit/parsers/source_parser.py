# src/docs_kit/parsers/source_parser.py

import logging
from time import monotonic

from docs_kit.observability import names
from docs_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import SourceParser
from .builder import ScanState, finish, step
from .config import ParserConfig
from .lines import classify_lines
from .models import ParseResult
from .reconcile import reconcile

logger = logging.getLogger(__name__)


class AnnotatedSourceParser(SourceParser):
    """
    Splits a hand-annotated source file into documentation/code sections.

    - One forward pass classifies lines and builds sections
    - A second pass fills in clean-code line ranges
    - REF/CLOSE markers become entries in ``ParseResult.ref_map``
    - Never raises on malformed annotations
    """

    def __init__(
        self,
        config: ParserConfig = ParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook

    def parse(self, source: str) -> ParseResult:
        start = monotonic()
        lines = source.split("\n")

        state = ScanState()
        for line in classify_lines(lines):
            step(state, line)
        finish(state, len(lines))

        sections = reconcile(
            state.sections,
            state.clean_lines,
            state.clean_starts,
            strategy=self.config.reconcile,
        )
        result = ParseResult(
            sections=sections,
            code_without_comments="\n".join(state.clean_lines),
            original_code=source,
            ref_map=dict(state.ref_map),
        )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.PARSE_SOURCE_LINES, len(lines))
        self.metrics_hook.increment(names.PARSE_SECTIONS_CREATED, len(sections))
        self.metrics_hook.increment(names.PARSE_REFS_RESOLVED, len(result.ref_map))
        if state.orphan_closes:
            logger.warning("Ignored %d CLOSE marker(s) without a REF", state.orphan_closes)
            self.metrics_hook.increment(
                names.PARSE_ORPHAN_CLOSE_MARKERS, state.orphan_closes
            )
        logger.info(
            "Parsed %d lines into %d sections (%d refs)",
            len(lines),
            len(sections),
            len(result.ref_map),
        )
        return result


def parse_source_file(
    source: str,
    *,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParseResult:
    """Parse annotated source text with a one-off parser.

    Example:
        >>> result = parse_source_file("/** Hi */\\nx = 1")
        >>> result.sections[0].comment
        'Hi'
    """
    parser = AnnotatedSourceParser(config or ParserConfig(), metrics_hook=metrics_hook)
    return parser.parse(source)
