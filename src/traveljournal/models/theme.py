"""Declarative journal theme configuration (maps to ThemeDto).

Themes are immutable values: colours are hex strings, typography holds font
tokens, and ``blocks`` holds the per-block-type style table. Resolution of
these values into concrete attributes lives in ``traveljournal.themes.resolver``.
"""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import Field

from traveljournal.models.base import WireModel


class StampStyle(str, Enum):
    """Visual style of a moment's stamp."""

    RUBBER = "rubber"  # classic passport stamp
    MINIMAL = "minimal"  # plain text badge
    VINTAGE = "vintage"  # aged, distressed


class DividerLineStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class HeaderStyle(str, Enum):
    """Visual style of the journal header."""

    STANDARD = "standard"
    PASSPORT = "passport"  # with country illustration
    MINIMAL = "minimal"  # title only


class ThemeTypography(WireModel):
    """Font tokens per text role.

    A token is one of ``system``, ``system-serif``, ``system-mono``,
    ``system-rounded`` or the name of a custom font such as "Playfair Display".
    """

    heading_font: str = "system-serif"
    body_font: str = "system"
    label_font: str = "system-mono"

    model_config = {"frozen": True}


class ThemeColors(WireModel):
    """Colour palette of a theme."""

    primary: str
    secondary: str
    background: str
    card_background: str
    text_primary: str
    text_secondary: str
    text_muted: str
    accent: str
    border: str

    model_config = {"frozen": True}


class MomentBlockStyle(WireModel):
    card_background: str
    stamp_style: StampStyle
    stamp_color: str

    model_config = {"frozen": True}


class CategoryBadgeStyle(WireModel):
    """Badge colours for one recommendation category."""

    background: str
    text: str

    model_config = {"frozen": True}


class RecommendationBlockStyle(WireModel):
    """Card background plus one badge style per recommendation category.

    Use ``traveljournal.themes.resolver.badge_style`` to pick the badge for a
    category.
    """

    card_background: str
    stay: CategoryBadgeStyle
    eat: CategoryBadgeStyle
    # "do" is a keyword in Python
    do_: CategoryBadgeStyle = Field(..., alias="do")
    shop: CategoryBadgeStyle

    model_config = {"frozen": True}


class PhotoBlockStyle(WireModel):
    border_color: str
    border_radius: int = Field(..., ge=0)
    frame_color: Optional[str] = None
    caption_background: Optional[str] = None
    caption_text_color: Optional[str] = None

    model_config = {"frozen": True}


class TipBlockStyle(WireModel):
    background: str
    border_color: str
    icon_color: str

    model_config = {"frozen": True}


class DividerBlockStyle(WireModel):
    line_color: str
    line_style: DividerLineStyle

    model_config = {"frozen": True}


class ThemeBlocks(WireModel):
    """Per-block-type style table."""

    moment: MomentBlockStyle
    recommendation: RecommendationBlockStyle
    photo: PhotoBlockStyle
    tip: TipBlockStyle
    divider: DividerBlockStyle

    model_config = {"frozen": True}


class ThemeStyle(WireModel):
    """Global style switches of a theme."""

    show_paper_texture: bool = False
    show_grid_lines: bool = False
    card_border_radius: int = Field(default=12, ge=0)
    card_shadow: bool = True
    header_style: HeaderStyle = HeaderStyle.STANDARD

    model_config = {"frozen": True}


class JournalTheme(WireModel):
    """Complete theme configuration for a journal."""

    id: UUID
    name: str
    slug: str = Field(..., min_length=1, description="Stable lookup key, e.g. 'passport'")
    description: Optional[str] = None
    is_system: bool = False
    typography: ThemeTypography
    colors: ThemeColors
    blocks: ThemeBlocks
    style: ThemeStyle

    model_config = {"frozen": True}
