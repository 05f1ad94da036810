# src/docs_kit/cli.py

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from docs_kit import __version__
from docs_kit.observability.base import InMemoryMetricsHook
from docs_kit.parsers.config import RECONCILE_STRATEGIES, ParserConfig
from docs_kit.parsers.source_parser import AnnotatedSourceParser
from docs_kit.rendering.config import HtmlTheme, RenderConfig
from docs_kit.rendering.markdown import CommentRenderer
from docs_kit.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-kit",
        description="Split annotated source files into documentation/code sections.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"docs-kit {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--config", type=Path, help="YAML settings file")
    parser.add_argument(
        "--stats", action="store_true", help="Print collected metrics to stderr"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Print sections as JSON")
    parse_cmd.add_argument("input", type=Path, help="Annotated source file")
    parse_cmd.add_argument(
        "--reconcile",
        choices=RECONCILE_STRATEGIES,
        help="How clean-code line ranges are derived",
    )

    render_cmd = commands.add_parser("render", help="Print section comments as HTML")
    render_cmd.add_argument("input", type=Path, help="Annotated source file")
    render_cmd.add_argument("--ref", help="Only render the section with this REF id")
    render_cmd.add_argument(
        "--unstyled", action="store_true", help="Emit HTML without CSS classes"
    )
    return parser


def _settings(args: argparse.Namespace) -> Settings:
    return load_settings(args.config) if args.config else Settings()


def _run_parse(args: argparse.Namespace, metrics: InMemoryMetricsHook) -> int:
    config = _settings(args).parser_config()
    if args.reconcile:
        config = ParserConfig(reconcile=args.reconcile)
    source = args.input.read_text(encoding="utf-8")
    result = AnnotatedSourceParser(config, metrics_hook=metrics).parse(source)
    print(json.dumps(result.to_dict(), indent=2))
    return 0


def _run_render(args: argparse.Namespace, metrics: InMemoryMetricsHook) -> int:
    settings = _settings(args)
    config = settings.render_config()
    if args.unstyled:
        config = RenderConfig(
            default_language=config.default_language,
            theme=HtmlTheme.unstyled(),
            strip_audio_guides=config.strip_audio_guides,
        )
    source = args.input.read_text(encoding="utf-8")
    result = AnnotatedSourceParser(
        settings.parser_config(), metrics_hook=metrics
    ).parse(source)
    renderer = CommentRenderer(config, metrics_hook=metrics)

    if args.ref:
        section = result.section_for(args.ref)
        if section is None:
            print(f"error: no section with REF '{args.ref}'", file=sys.stderr)
            return 1
        print(renderer.render(section.comment))
        return 0

    for section in result.sections:
        if section.comment:
            print(renderer.render(section.comment))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    metrics = InMemoryMetricsHook()
    handlers = {"parse": _run_parse, "render": _run_render}
    try:
        code = handlers[args.command](args, metrics)
    except (OSError, ValidationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.stats:
        print(
            json.dumps({"counters": metrics.counters, "gauges": metrics.gauges}),
            file=sys.stderr,
        )
    return code


if __name__ == "__main__":
    sys.exit(main())
