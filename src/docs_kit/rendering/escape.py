# src/docs_kit/rendering/escape.py

import html


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for safe embedding inside an element.

    Only fenced-code bodies go through here; the renderer never escapes
    markup it produced itself.
    """
    return html.escape(text, quote=True)
