__version__ = "0.1.0"

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsing
from .parsers import (
    AnnotatedSourceParser,
    ParserConfig,
    ParseResult,
    Section,
    SourceParser,
    parse_source_file,
)

# Rendering
from .rendering import (
    CommentRenderer,
    HtmlTheme,
    RenderConfig,
    render_comment_html,
    render_sections,
)

# Settings
from .settings import Settings, load_settings

__all__ = [
    "__version__",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsing
    "AnnotatedSourceParser",
    "ParserConfig",
    "ParseResult",
    "Section",
    "SourceParser",
    "parse_source_file",
    # Rendering
    "CommentRenderer",
    "HtmlTheme",
    "RenderConfig",
    "render_comment_html",
    "render_sections",
    # Settings
    "Settings",
    "load_settings",
]
