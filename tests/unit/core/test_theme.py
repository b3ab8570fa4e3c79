"""Unit tests for theme module.

Tests for color validation, theme file merging, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

import logging
from pathlib import Path

import pytest
import rmd.core.theme as theme_module
from rmd.core.theme import (
    ThemeColors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
    read_colors,
)
from rich.theme import Theme


@pytest.fixture
def user_theme(isolated_env: Path, tmp_path: Path) -> Path:
    """Path of the user theme override inside the isolated config home."""
    theme_dir = tmp_path / "config" / "rmd"
    theme_dir.mkdir(parents=True)
    return theme_dir / "theme.toml"


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.muted == "#b2bec3"
        assert colors.error == "#f53263"
        assert colors.blocked == "#d44ebc"

    def test_short_and_long_hex(self) -> None:
        """#RGB and #RRGGBB are accepted, whitespace is stripped."""
        colors = ThemeColors(trashed="#abc", deleted=" #123456 ")
        assert colors.trashed == "#abc"
        assert colors.deleted == "#123456"

    @pytest.mark.parametrize("value", ["ffffff", "#ff", "#fffffff", "#gggggg", "red"])
    def test_invalid_hex_rejected(self, value: str) -> None:
        """Anything but a hex code is rejected."""
        with pytest.raises(ValueError, match="expected #RGB or #RRGGBB"):
            ThemeColors(muted=value)

    def test_non_string_rejected(self) -> None:
        """Numbers are not colors."""
        with pytest.raises(ValueError, match="expected #RGB or #RRGGBB"):
            ThemeColors(muted=123)  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(header="#ffffff")  # type: ignore[call-arg]


class TestReadColors:
    """Tests for read_colors."""

    def test_reads_colors_table(self, tmp_path: Path) -> None:
        """Entries of the [colors] table are returned as-is."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nmuted = "#000000"\nerror = 3\n')

        assert read_colors(theme_file) == {"muted": "#000000", "error": 3}

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is an empty table."""
        assert read_colors(tmp_path / "absent.toml") == {}

    def test_invalid_toml(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Broken TOML is logged and ignored."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("[colors\n")

        with caplog.at_level(logging.WARNING, logger="rmd.core.theme"):
            assert read_colors(theme_file) == {}

        assert "Ignoring theme file" in caplog.text

    def test_colors_not_a_table(self, tmp_path: Path) -> None:
        """A non-table colors entry is ignored."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert read_colors(theme_file) == {}


class TestLoadTheme:
    """Tests for load_theme."""

    def test_bundled_theme_matches_defaults(self, isolated_env: Path) -> None:
        """The bundled theme file carries every default color."""
        bundled = read_colors(get_bundled_theme_path())

        assert set(bundled) == set(ThemeColors.model_fields)
        assert load_theme() == ThemeColors()

    def test_user_override_is_partial(self, user_theme: Path) -> None:
        """User colors replace only the styles they name."""
        user_theme.write_text('[colors]\ntrashed = "#00ff00"\n')

        colors = load_theme()

        assert colors.trashed == "#00ff00"
        assert colors.error == ThemeColors().error

    def test_explicit_override_path(self, isolated_env: Path, tmp_path: Path) -> None:
        """An explicit override file wins over the XDG location."""
        override = tmp_path / "custom.toml"
        override.write_text('[colors]\nblocked = "#123"\n')

        assert load_theme(override).blocked == "#123"

    def test_invalid_entries_skipped(
        self, user_theme: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Bad entries keep the bundled color, good ones still apply."""
        user_theme.write_text(
            '[colors]\ntrashed = "green"\nheader = "#000000"\ndeleted = "#111111"\n'
        )

        with caplog.at_level(logging.WARNING, logger="rmd.core.theme"):
            colors = load_theme()

        assert colors.trashed == ThemeColors().trashed
        assert colors.deleted == "#111111"
        assert "Invalid color for 'trashed'" in caplog.text
        assert "Unknown style 'header'" in caplog.text


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_every_color_becomes_a_style(self) -> None:
        """Each ThemeColors field is a named style."""
        theme = get_rich_theme(ThemeColors())

        for name in ThemeColors.model_fields:
            assert name in theme.styles

    def test_modifiers_applied(self) -> None:
        """Errors are bold, muted text is not."""
        theme = get_rich_theme(ThemeColors())

        assert theme.styles["error"].bold is True
        assert not theme.styles["muted"].bold

    def test_get_theme_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """get_theme builds the theme once."""
        monkeypatch.setattr(theme_module, "_cached_theme", None)

        first = get_theme()

        assert isinstance(first, Theme)
        assert get_theme() is first
