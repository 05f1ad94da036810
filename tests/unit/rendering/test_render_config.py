from dataclasses import fields

import pytest

from docs_kit.rendering import HtmlTheme, RenderConfig, escape_html


class TestHtmlTheme:
    def test_unstyled_has_no_classes(self) -> None:
        theme = HtmlTheme.unstyled()

        assert all(getattr(theme, f.name) == "" for f in fields(theme))

    def test_heading_lookup(self) -> None:
        theme = HtmlTheme()

        assert theme.heading(1) == theme.heading_1
        assert theme.heading(4) == theme.heading_4


class TestRenderConfig:
    def test_defaults(self) -> None:
        config = RenderConfig()

        assert config.default_language == "typescript"
        assert config.theme == HtmlTheme()
        assert config.strip_audio_guides is True

    def test_blank_default_language_raises(self) -> None:
        with pytest.raises(ValueError, match="default_language must not be empty"):
            RenderConfig(default_language="  ")


def test_escape_html() -> None:
    assert escape_html("<a href=\"x\">Tom & 'Jerry'</a>") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; &#x27;Jerry&#x27;&lt;/a&gt;"
    )
