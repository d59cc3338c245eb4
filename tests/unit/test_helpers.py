"""Tests for reusable style fragments."""

from styleforge import css
from styleforge.styles.helpers import (
    center,
    compose_styles,
    container,
    cover,
    reset_button,
    responsive,
    truncate,
    visually_hidden,
)


class TestFragments:
    def test_center(self) -> None:
        assert center() == {"display": "flex", "justifyContent": "center", "alignItems": "center"}

    def test_cover(self) -> None:
        style = cover()
        assert style["position"] == "absolute"
        assert [style[side] for side in ("top", "right", "bottom", "left")] == [0, 0, 0, 0]

    def test_truncate(self) -> None:
        assert truncate()["textOverflow"] == "ellipsis"

    def test_reset_button(self) -> None:
        style = reset_button()
        assert style["background"] == "none"
        assert style["cursor"] == "pointer"

    def test_visually_hidden_compiles(self) -> None:
        result = css({"srOnly": visually_hidden()})
        assert "clip: rect(0, 0, 0, 0);" in result.css
        assert "padding: 0px;" in result.css

    def test_container(self) -> None:
        assert container()["maxWidth"] == "1200px"
        assert container("960px")["maxWidth"] == "960px"

    def test_fresh_dicts(self) -> None:
        first = center()
        first["display"] = "grid"
        assert center()["display"] == "flex"


class TestComposeStyles:
    def test_later_styles_win(self) -> None:
        composed = compose_styles(
            {"padding": "10px", "color": "blue"},
            {"color": "red", "background": "yellow"},
            {"background": "green"},
        )
        assert composed == {"padding": "10px", "color": "red", "background": "green"}

    def test_skips_none(self) -> None:
        composed = compose_styles({"padding": "10px"}, None, {"margin": "20px"})
        assert composed == {"padding": "10px", "margin": "20px"}

    def test_inputs_untouched(self) -> None:
        base = {"padding": 1}
        compose_styles(base, {"padding": 2})
        assert base == {"padding": 1}


class TestResponsive:
    def test_builds_media_key(self) -> None:
        style = responsive(
            base={"fontSize": "16px", "color": "black"},
            mobile={"fontSize": "14px"},
            desktop={"fontSize": "18px"},
        )
        assert style["fontSize"] == "16px"
        assert style["@media"]["mobile"] == {"fontSize": "14px"}
        assert style["@media"]["desktop"] == {"fontSize": "18px"}

    def test_without_breakpoints(self) -> None:
        assert responsive(base={"color": "red"}) == {"color": "red"}
        assert responsive() == {}

    def test_none_breakpoints_dropped(self) -> None:
        assert responsive(mobile=None, wide={"color": "red"}) == {"@media": {"wide": {"color": "red"}}}

    def test_compiles(self) -> None:
        result = css({"title": responsive(base={"fontSize": 16}, mobile={"fontSize": 14})})
        cls = result.class_map["title"]
        assert result.css == (
            f".{cls} {{ font-size: 16px; }} "
            f"@media (max-width: 640px) {{ .{cls} {{ font-size: 14px; }} }}"
        )
