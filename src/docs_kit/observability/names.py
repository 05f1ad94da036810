# src/docs_kit/observability/names.py

"""Standard metric names for docs-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
PARSE_SECTIONS_CREATED = "parse_sections_created"
PARSE_REFS_RESOLVED = "parse_refs_resolved"
PARSE_ORPHAN_CLOSE_MARKERS = "parse_orphan_close_markers"

# Gauges
PARSE_SOURCE_LINES = "parse_source_lines"


# ============================================================================
# Renderer Metrics
# ============================================================================

# Duration
RENDER_DURATION = "render_duration"

# Counters
RENDER_COMMENTS_TOTAL = "render_comments_total"
