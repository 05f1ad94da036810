from pathlib import Path

import pytest
from pydantic import ValidationError

from docs_kit.rendering import HtmlTheme
from docs_kit.settings import Settings, load_settings


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "docs-kit.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadSettings:
    def test_loads_parser_and_render_sections(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "parser:\n  reconcile: provenance\nrender:\n  default_language: tsx\n  unstyled: true\n",
        )

        settings = load_settings(path)

        assert settings.parser_config().reconcile == "provenance"
        render = settings.render_config()
        assert render.default_language == "tsx"
        assert render.theme == HtmlTheme.unstyled()

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(_write(tmp_path, ""))

        assert settings == Settings()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "absent.yaml")

    def test_unknown_key_is_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "parsers:\n  reconcile: content\n")

        with pytest.raises(ValidationError):
            load_settings(path)

    def test_unknown_strategy_is_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "parser:\n  reconcile: fuzzy\n")

        with pytest.raises(ValidationError):
            load_settings(path)


class TestRenderConfig:
    def test_theme_overrides_apply_on_top_of_base(self) -> None:
        settings = Settings(render={"unstyled": True, "theme": {"paragraph": "prose"}})

        theme = settings.render_config().theme

        assert theme.paragraph == "prose"
        assert theme.table == ""

    def test_unknown_theme_element_raises(self) -> None:
        settings = Settings(render={"theme": {"sidebar": "x"}})

        with pytest.raises(ValueError, match="Unknown theme elements"):
            settings.render_config()
