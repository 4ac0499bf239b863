"""Unit tests for the theme registry and style derivation."""

import pytest

from yamlresume.contexts.compiling.themes import (
    DEFAULT_THEME,
    THEME_NAMES,
    THEMES,
    create_styles,
    resolve_theme_name,
)

STYLE_ROLES = {
    "name",
    "tagline",
    "metaLine",
    "sectionTitle",
    "itemTitle",
    "itemMeta",
    "body",
    "bullet",
    "link",
}


@pytest.mark.unit
def test_registered_themes():
    assert set(THEME_NAMES) == {"classic", "modern", "contrast"}
    assert DEFAULT_THEME == "modern"


@pytest.mark.unit
def test_registry_is_read_only():
    with pytest.raises(TypeError):
        THEMES["neon"] = THEMES["modern"]


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", "neon", "Modern", 42])
def test_unknown_theme_resolves_to_default(value):
    assert resolve_theme_name(value) == "modern"


@pytest.mark.unit
@pytest.mark.parametrize("name", ["classic", "modern", "contrast"])
def test_known_theme_resolves_to_itself(name):
    assert resolve_theme_name(name) == name


@pytest.mark.unit
@pytest.mark.parametrize("name", ["classic", "modern", "contrast"])
def test_styles_cover_all_roles(name):
    assert set(create_styles(name)) == STYLE_ROLES


@pytest.mark.unit
def test_styles_are_deterministic():
    assert create_styles("classic") == create_styles("classic")


@pytest.mark.unit
def test_styles_use_palette_colors():
    palette = THEMES["modern"]
    styles = create_styles("modern")

    assert styles["name"].font_size == 26
    assert styles["name"].bold is True
    assert styles["name"].color == palette.text
    assert styles["itemMeta"].font_size == 9.5
    assert styles["itemMeta"].color == palette.muted
    assert styles["metaLine"].color == palette.subtle
    assert styles["link"].color == palette.accent
    assert styles["link"].decoration == "underline"


@pytest.mark.unit
def test_unknown_theme_lookup_fails():
    with pytest.raises(KeyError):
        create_styles("neon")


@pytest.mark.unit
def test_style_wire_format():
    style = create_styles("modern")["body"].to_dict()
    assert style == {
        "fontSize": 10,
        "color": "#111827",
        "lineHeight": 1.4,
        "margin": [0, 1, 0, 2],
    }
