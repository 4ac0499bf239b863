"""
Theme Registry

Fixed set of named color palettes and the style sheet derived from each.
The registry is closed: unknown names are resolved to DEFAULT_THEME by
resolve_theme_name() before lookup, never inside THEMES itself.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from yamlresume.contexts.compiling.document_nodes import TextStyle

DEFAULT_THEME = "modern"


@dataclass(frozen=True)
class Palette:
    """Five colors a theme is built from."""

    text: str
    muted: str
    subtle: str
    accent: str
    divider: str


THEMES: Mapping[str, Palette] = MappingProxyType(
    {
        "classic": Palette(
            text="#000000",
            muted="#333333",
            subtle="#555555",
            accent="#000000",
            divider="#000000",
        ),
        "modern": Palette(
            text="#111827",
            muted="#6b7280",
            subtle="#9ca3af",
            accent="#2563eb",
            divider="#e5e7eb",
        ),
        "contrast": Palette(
            text="#000000",
            muted="#1f2937",
            subtle="#374151",
            accent="#111827",
            divider="#111827",
        ),
    }
)

THEME_NAMES = tuple(THEMES)


def resolve_theme_name(value: Any) -> str:
    """
    Return value if it names a registered theme, otherwise DEFAULT_THEME.

    Examples:
        >>> resolve_theme_name("classic")
        'classic'
        >>> resolve_theme_name(None)
        'modern'
        >>> resolve_theme_name("neon")
        'modern'
    """
    if isinstance(value, str) and value in THEMES:
        return value
    return DEFAULT_THEME


def create_styles(theme_name: str) -> Dict[str, TextStyle]:
    """
    Derive the style sheet for a theme.

    Args:
        theme_name: Registered theme name

    Returns:
        Style role name -> TextStyle

    Raises:
        KeyError: If theme_name is not registered
    """
    colors = THEMES[theme_name]

    return {
        "name": TextStyle(font_size=26, bold=True, color=colors.text, margin=(0, 0, 0, 4)),
        "tagline": TextStyle(font_size=12, color=colors.muted, margin=(0, 0, 0, 10)),
        "metaLine": TextStyle(font_size=10, color=colors.subtle, margin=(0, 0, 0, 6)),
        "sectionTitle": TextStyle(
            font_size=13, bold=True, color=colors.text, margin=(0, 18, 0, 6)
        ),
        "itemTitle": TextStyle(font_size=11, bold=True, color=colors.text),
        "itemMeta": TextStyle(font_size=9.5, color=colors.muted, margin=(0, 1, 0, 3)),
        "body": TextStyle(font_size=10, color=colors.text, line_height=1.4, margin=(0, 1, 0, 2)),
        "bullet": TextStyle(font_size=10, color=colors.text, line_height=1.3),
        "link": TextStyle(font_size=9, color=colors.accent, decoration="underline"),
    }
