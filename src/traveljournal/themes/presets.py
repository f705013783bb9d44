"""Built-in system themes.

These are module-level immutable values; themes fetched from the API have
exactly the same shape and are only used in their place when available.
"""

from typing import Optional, Tuple
from uuid import UUID

from traveljournal.models.theme import (
    CategoryBadgeStyle,
    DividerBlockStyle,
    DividerLineStyle,
    HeaderStyle,
    JournalTheme,
    MomentBlockStyle,
    PhotoBlockStyle,
    RecommendationBlockStyle,
    StampStyle,
    ThemeBlocks,
    ThemeColors,
    ThemeStyle,
    ThemeTypography,
    TipBlockStyle,
)


DEFAULT_THEME = JournalTheme(
    id=UUID("00000000-0000-0000-0000-000000000001"),
    name="Default",
    slug="default",
    description="Clean, minimal design that lets your content shine",
    is_system=True,
    typography=ThemeTypography(
        heading_font="system-serif",
        body_font="system",
        label_font="system",
    ),
    colors=ThemeColors(
        primary="#1a1a2e",
        secondary="#c9a227",
        background="#ffffff",
        card_background="#f8f9fa",
        text_primary="#1a1a2e",
        text_secondary="#666666",
        text_muted="#888888",
        accent="#c9a227",
        border="#e0e0e0",
    ),
    blocks=ThemeBlocks(
        moment=MomentBlockStyle(
            card_background="#ffffff",
            stamp_style=StampStyle.MINIMAL,
            stamp_color="#1a1a2e",
        ),
        recommendation=RecommendationBlockStyle(
            card_background="#ffffff",
            stay=CategoryBadgeStyle(background="#3b82f6", text="#ffffff"),
            eat=CategoryBadgeStyle(background="#ef4444", text="#ffffff"),
            do_=CategoryBadgeStyle(background="#f59e0b", text="#1a1a2e"),
            shop=CategoryBadgeStyle(background="#22c55e", text="#ffffff"),
        ),
        photo=PhotoBlockStyle(
            border_color="#e0e0e0",
            border_radius=8,
            frame_color="#ffffff",
            caption_background="#ffffff",
            caption_text_color="#333333",
        ),
        tip=TipBlockStyle(
            background="#f0f9ff",
            border_color="#3b82f6",
            icon_color="#3b82f6",
        ),
        divider=DividerBlockStyle(
            line_color="#e0e0e0",
            line_style=DividerLineStyle.SOLID,
        ),
    ),
    style=ThemeStyle(
        show_paper_texture=False,
        show_grid_lines=False,
        card_border_radius=12,
        card_shadow=True,
        header_style=HeaderStyle.STANDARD,
    ),
)


PASSPORT_THEME = JournalTheme(
    id=UUID("00000000-0000-0000-0000-000000000002"),
    name="Passport",
    slug="passport",
    description="Vintage travel journal with paper texture and stamps",
    is_system=True,
    typography=ThemeTypography(
        heading_font="system-serif",
        body_font="system-mono",
        label_font="system-mono",
    ),
    colors=ThemeColors(
        primary="#0038A8",
        secondary="#FCD116",
        background="#f5f1e8",
        card_background="#ebe6d9",
        text_primary="#1a1a2e",
        text_secondary="#666666",
        text_muted="#888888",
        accent="#CE1126",
        border="#d4cfc2",
    ),
    blocks=ThemeBlocks(
        moment=MomentBlockStyle(
            card_background="#ebe6d9",
            stamp_style=StampStyle.RUBBER,
            stamp_color="#CE1126",
        ),
        recommendation=RecommendationBlockStyle(
            card_background="#ffffff",
            stay=CategoryBadgeStyle(background="#0038A8", text="#ffffff"),
            eat=CategoryBadgeStyle(background="#CE1126", text="#ffffff"),
            do_=CategoryBadgeStyle(background="#FCD116", text="#1a1a2e"),
            shop=CategoryBadgeStyle(background="#27ae60", text="#ffffff"),
        ),
        photo=PhotoBlockStyle(
            border_color="#d4cfc2",
            border_radius=2,
            frame_color="#f5f1e8",
            caption_background="#f5f1e8",
            caption_text_color="#4a4a4a",
        ),
        tip=TipBlockStyle(
            background="#FFF8E1",
            border_color="#FCD116",
            icon_color="#FCD116",
        ),
        divider=DividerBlockStyle(
            line_color="#d4cfc2",
            line_style=DividerLineStyle.DASHED,
        ),
    ),
    style=ThemeStyle(
        show_paper_texture=True,
        show_grid_lines=True,
        card_border_radius=4,
        card_shadow=True,
        header_style=HeaderStyle.PASSPORT,
    ),
)


RETRO_THEME = JournalTheme(
    id=UUID("00000000-0000-0000-0000-000000000003"),
    name="Retro",
    slug="retro",
    description="Nostalgic Web 1.0 vibes with bold colors",
    is_system=True,
    typography=ThemeTypography(
        heading_font="system-rounded",
        body_font="system-mono",
        label_font="system",
    ),
    colors=ThemeColors(
        primary="#0000FF",
        secondary="#FF00FF",
        background="#C0C0C0",
        card_background="#FFFFFF",
        text_primary="#000000",
        text_secondary="#000080",
        text_muted="#808080",
        accent="#FF0000",
        border="#000000",
    ),
    blocks=ThemeBlocks(
        moment=MomentBlockStyle(
            card_background="#FFFFFF",
            stamp_style=StampStyle.VINTAGE,
            stamp_color="#FF0000",
        ),
        recommendation=RecommendationBlockStyle(
            card_background="#FFFFFF",
            stay=CategoryBadgeStyle(background="#0000FF", text="#FFFFFF"),
            eat=CategoryBadgeStyle(background="#FF0000", text="#FFFFFF"),
            do_=CategoryBadgeStyle(background="#FFFF00", text="#000000"),
            shop=CategoryBadgeStyle(background="#00FF00", text="#000000"),
        ),
        photo=PhotoBlockStyle(
            border_color="#000000",
            border_radius=0,
            frame_color="#FFFFFF",
            caption_background="#FFFFFF",
            caption_text_color="#000000",
        ),
        tip=TipBlockStyle(
            background="#FFFF00",
            border_color="#000000",
            icon_color="#FF0000",
        ),
        divider=DividerBlockStyle(
            line_color="#808080",
            line_style=DividerLineStyle.DOTTED,
        ),
    ),
    style=ThemeStyle(
        show_paper_texture=False,
        show_grid_lines=False,
        card_border_radius=0,
        card_shadow=False,
        header_style=HeaderStyle.MINIMAL,
    ),
)


SYSTEM_THEMES: Tuple[JournalTheme, ...] = (DEFAULT_THEME, PASSPORT_THEME, RETRO_THEME)


def get_system_theme(slug: str) -> Optional[JournalTheme]:
    """Return the built-in theme with ``slug``, or None."""
    for theme in SYSTEM_THEMES:
        if theme.slug == slug:
            return theme
    return None
