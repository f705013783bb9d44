"""Resolve a block plus the active theme into concrete style attributes.

Everything here is a pure function of its arguments: font availability is
passed in by the caller instead of being looked up from global state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Collection, Optional, assert_never

from traveljournal.models.block import EditorBlock
from traveljournal.models.enums import BlockType, RecommendationCategory
from traveljournal.models.theme import (
    CategoryBadgeStyle,
    DividerLineStyle,
    JournalTheme,
    RecommendationBlockStyle,
    StampStyle,
    ThemeTypography,
)


class FontDesign(str, Enum):
    DEFAULT = "default"
    SERIF = "serif"
    MONOSPACED = "monospaced"
    ROUNDED = "rounded"


class FontWeight(str, Enum):
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"


SYSTEM_FONT_FAMILY = "system"


@dataclass(frozen=True)
class FontDescriptor:
    """A concrete font: either a custom family or the system family with a design."""

    family: str
    size: float
    weight: FontWeight
    design: FontDesign
    is_custom: bool = False


_SYSTEM_TOKENS = {
    "system": FontDesign.DEFAULT,
    "system-default": FontDesign.DEFAULT,
    "system-serif": FontDesign.SERIF,
    "system-mono": FontDesign.MONOSPACED,
    "system-monospaced": FontDesign.MONOSPACED,
    "system-rounded": FontDesign.ROUNDED,
}


def badge_style(
    style: RecommendationBlockStyle, category: RecommendationCategory
) -> CategoryBadgeStyle:
    """Return the badge style of ``category`` in a recommendation style table.

    The chain is exhaustive over RecommendationCategory; a new category
    without a branch here is reported by the type checker at assert_never.
    """
    if category is RecommendationCategory.STAY:
        return style.stay
    elif category is RecommendationCategory.EAT:
        return style.eat
    elif category is RecommendationCategory.DO:
        return style.do_
    elif category is RecommendationCategory.SHOP:
        return style.shop
    else:
        assert_never(category)


def resolve_font(
    token: str,
    size: float,
    weight: FontWeight,
    design: FontDesign = FontDesign.DEFAULT,
    available_fonts: Collection[str] = (),
) -> FontDescriptor:
    """Map a typography token to a concrete font.

    System tokens (case-insensitive) select the system family with their own
    design. Any other token names a custom font: it is used when present in
    ``available_fonts``, otherwise the system family is used with ``design``
    as the hint.

    Example:
        >>> resolve_font("Playfair Display", 20, FontWeight.SEMIBOLD, FontDesign.SERIF)
        FontDescriptor(family='system', size=20, weight=<FontWeight.SEMIBOLD: 'semibold'>, design=<FontDesign.SERIF: 'serif'>, is_custom=False)
    """
    system_design = _SYSTEM_TOKENS.get(token.lower())
    if system_design is not None:
        return FontDescriptor(SYSTEM_FONT_FAMILY, size, weight, system_design)

    if token in available_fonts:
        return FontDescriptor(token, size, weight, design, is_custom=True)

    return FontDescriptor(SYSTEM_FONT_FAMILY, size, weight, design)


def heading_font(
    typography: ThemeTypography,
    size: float,
    weight: FontWeight = FontWeight.SEMIBOLD,
    available_fonts: Collection[str] = (),
) -> FontDescriptor:
    return resolve_font(typography.heading_font, size, weight, FontDesign.SERIF, available_fonts)


def body_font(
    typography: ThemeTypography,
    size: float,
    weight: FontWeight = FontWeight.REGULAR,
    available_fonts: Collection[str] = (),
) -> FontDescriptor:
    return resolve_font(typography.body_font, size, weight, FontDesign.DEFAULT, available_fonts)


def label_font(
    typography: ThemeTypography,
    size: float,
    weight: FontWeight = FontWeight.MEDIUM,
    available_fonts: Collection[str] = (),
) -> FontDescriptor:
    return resolve_font(typography.label_font, size, weight, FontDesign.MONOSPACED, available_fonts)


@dataclass(frozen=True)
class ResolvedBlockStyle:
    """Concrete visual attributes for rendering one block under a theme.

    Only the attributes relevant to ``block_type`` are set.
    """

    block_type: BlockType
    card_background: Optional[str] = None
    badge: Optional[CategoryBadgeStyle] = None
    rating_color: Optional[str] = None
    stamp_style: Optional[StampStyle] = None
    stamp_color: Optional[str] = None
    border_color: Optional[str] = None
    border_radius: Optional[int] = None
    background: Optional[str] = None
    icon_color: Optional[str] = None
    line_color: Optional[str] = None
    line_style: Optional[DividerLineStyle] = None


def resolve_block_style(block: EditorBlock, theme: JournalTheme) -> ResolvedBlockStyle:
    """Resolve ``block`` against ``theme``.

    A moment's stamp colour always comes from the theme. A recommendation
    without a category gets no badge.
    """
    blocks = theme.blocks
    block_type = block.type

    if block_type is BlockType.MOMENT:
        return ResolvedBlockStyle(
            block_type=block_type,
            card_background=blocks.moment.card_background,
            stamp_style=blocks.moment.stamp_style,
            stamp_color=blocks.moment.stamp_color,
        )
    elif block_type is BlockType.RECOMMENDATION:
        category = block.data.category
        rating = block.data.rating
        return ResolvedBlockStyle(
            block_type=block_type,
            card_background=blocks.recommendation.card_background,
            badge=badge_style(blocks.recommendation, category) if category is not None else None,
            rating_color=rating.color if rating is not None else None,
        )
    elif block_type is BlockType.PHOTO:
        return ResolvedBlockStyle(
            block_type=block_type,
            card_background=blocks.photo.frame_color,
            border_color=blocks.photo.border_color,
            border_radius=blocks.photo.border_radius,
        )
    elif block_type is BlockType.TIP:
        return ResolvedBlockStyle(
            block_type=block_type,
            background=blocks.tip.background,
            border_color=blocks.tip.border_color,
            icon_color=blocks.tip.icon_color,
        )
    elif block_type is BlockType.DIVIDER:
        return ResolvedBlockStyle(
            block_type=block_type,
            line_color=blocks.divider.line_color,
            line_style=blocks.divider.line_style,
        )
    else:
        assert_never(block_type)
