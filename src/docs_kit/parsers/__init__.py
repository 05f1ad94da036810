from .base import SourceParser
from .config import ParserConfig, ReconcileStrategy
from .lines import ClassifiedLine, LineKind, classify_line, classify_lines
from .models import ParseResult, Section
from .source_parser import AnnotatedSourceParser, parse_source_file

__all__ = [
    "AnnotatedSourceParser",
    "ClassifiedLine",
    "LineKind",
    "ParseResult",
    "ParserConfig",
    "ReconcileStrategy",
    "Section",
    "SourceParser",
    "classify_line",
    "classify_lines",
    "parse_source_file",
]
