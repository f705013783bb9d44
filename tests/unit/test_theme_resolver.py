"""Unit tests for badge, font and block style resolution."""

import pytest

from traveljournal.models.block import EditorBlock
from traveljournal.models.enums import BlockType, Rating, RecommendationCategory
from traveljournal.models.theme import DividerLineStyle, StampStyle, ThemeTypography
from traveljournal.themes.presets import DEFAULT_THEME, PASSPORT_THEME, RETRO_THEME, SYSTEM_THEMES
from traveljournal.themes.resolver import (
    SYSTEM_FONT_FAMILY,
    FontDesign,
    FontWeight,
    badge_style,
    body_font,
    heading_font,
    label_font,
    resolve_block_style,
    resolve_font,
)


class TestBadgeStyle:
    """Test badge lookup for every category under every preset."""

    @pytest.mark.parametrize("theme", SYSTEM_THEMES, ids=lambda t: t.slug)
    @pytest.mark.parametrize("category", list(RecommendationCategory))
    def test_every_category_has_a_badge(self, theme, category):
        badge = badge_style(theme.blocks.recommendation, category)
        assert badge.background
        assert badge.text

    def test_default_theme_badges(self):
        style = DEFAULT_THEME.blocks.recommendation
        assert badge_style(style, RecommendationCategory.STAY).background == "#3b82f6"
        assert badge_style(style, RecommendationCategory.EAT).background == "#ef4444"
        assert badge_style(style, RecommendationCategory.DO).background == "#f59e0b"
        assert badge_style(style, RecommendationCategory.DO).text == "#1a1a2e"
        assert badge_style(style, RecommendationCategory.SHOP).background == "#22c55e"

    def test_badges_differ_between_themes(self):
        eat = RecommendationCategory.EAT
        assert badge_style(PASSPORT_THEME.blocks.recommendation, eat).background == "#CE1126"
        assert badge_style(RETRO_THEME.blocks.recommendation, eat).background == "#FF0000"


class TestResolveFont:
    """Test token mapping and custom font fallback."""

    @pytest.mark.parametrize(
        "token,design",
        [
            ("system", FontDesign.DEFAULT),
            ("system-serif", FontDesign.SERIF),
            ("system-mono", FontDesign.MONOSPACED),
            ("system-rounded", FontDesign.ROUNDED),
            ("System-Serif", FontDesign.SERIF),
        ],
    )
    def test_system_tokens(self, token, design):
        font = resolve_font(token, 17, FontWeight.REGULAR)
        assert font.family == SYSTEM_FONT_FAMILY
        assert font.design is design
        assert font.is_custom is False

    def test_system_token_ignores_design_hint(self):
        font = resolve_font("system-mono", 12, FontWeight.MEDIUM, FontDesign.SERIF)
        assert font.design is FontDesign.MONOSPACED

    def test_available_custom_font(self):
        font = resolve_font(
            "Playfair Display", 20, FontWeight.BOLD, available_fonts={"Playfair Display"}
        )
        assert font.family == "Playfair Display"
        assert font.is_custom is True
        assert font.size == 20
        assert font.weight is FontWeight.BOLD

    def test_unavailable_custom_font_falls_back_with_hint(self):
        font = resolve_font("Playfair Display", 20, FontWeight.SEMIBOLD, FontDesign.SERIF)
        assert font.family == SYSTEM_FONT_FAMILY
        assert font.design is FontDesign.SERIF
        assert font.weight is FontWeight.SEMIBOLD
        assert font.is_custom is False

    def test_resolution_is_pure(self):
        first = resolve_font("Courier Prime", 14, FontWeight.REGULAR)
        second = resolve_font("Courier Prime", 14, FontWeight.REGULAR)
        assert first == second


class TestRoleFonts:
    """Test the heading/body/label helpers."""

    def test_default_hints_for_unknown_custom_fonts(self):
        typography = ThemeTypography(heading_font="Lora", body_font="Inter", label_font="Space Mono")

        assert heading_font(typography, 24).design is FontDesign.SERIF
        assert heading_font(typography, 24).weight is FontWeight.SEMIBOLD
        assert body_font(typography, 16).design is FontDesign.DEFAULT
        assert body_font(typography, 16).weight is FontWeight.REGULAR
        assert label_font(typography, 12).design is FontDesign.MONOSPACED
        assert label_font(typography, 12).weight is FontWeight.MEDIUM

    def test_passport_body_is_monospaced(self):
        assert body_font(PASSPORT_THEME.typography, 16).design is FontDesign.MONOSPACED

    def test_custom_heading_when_available(self):
        typography = ThemeTypography(heading_font="Lora")
        font = heading_font(typography, 24, available_fonts=["Lora"])
        assert font.family == "Lora"
        assert font.is_custom is True


class TestResolveBlockStyle:
    """Test per-block-type style resolution."""

    def test_moment_uses_theme_stamp(self):
        style = resolve_block_style(EditorBlock.new_moment(title="A"), PASSPORT_THEME)

        assert style.block_type is BlockType.MOMENT
        assert style.card_background == "#ebe6d9"
        assert style.stamp_style is StampStyle.RUBBER
        assert style.stamp_color == "#CE1126"

    def test_moment_stamp_color_comes_from_theme(self):
        """A block's own stamp_color does not change the themed stamp."""
        block = EditorBlock.new_moment(title="A", stamp_color="#123456")
        assert resolve_block_style(block, PASSPORT_THEME).stamp_color == "#CE1126"
        assert resolve_block_style(block, RETRO_THEME).stamp_color == "#FF0000"

    def test_recommendation_badge_and_rating(self):
        block = EditorBlock.new_recommendation(
            name="Ichiran", category=RecommendationCategory.DO, rating=Rating.S
        )
        style = resolve_block_style(block, RETRO_THEME)

        assert style.badge.background == "#FFFF00"
        assert style.rating_color == "#FFD700"
        assert style.card_background == "#FFFFFF"

    def test_recommendation_without_category_or_rating(self):
        block = EditorBlock(order=0, type=BlockType.RECOMMENDATION)
        style = resolve_block_style(block, DEFAULT_THEME)
        assert style.badge is None
        assert style.rating_color is None

    def test_photo(self):
        style = resolve_block_style(EditorBlock.new_photo(), DEFAULT_THEME)
        assert style.card_background == "#ffffff"
        assert style.border_color == "#e0e0e0"
        assert style.border_radius == 8

    def test_tip(self):
        style = resolve_block_style(EditorBlock.new_tip(), PASSPORT_THEME)
        assert style.background == "#FFF8E1"
        assert style.border_color == "#FCD116"
        assert style.icon_color == "#FCD116"

    def test_divider(self):
        style = resolve_block_style(EditorBlock.new_divider(), RETRO_THEME)
        assert style.line_color == "#808080"
        assert style.line_style is DividerLineStyle.DOTTED

    @pytest.mark.parametrize("theme", SYSTEM_THEMES, ids=lambda t: t.slug)
    def test_every_block_type_resolves(self, theme):
        blocks = [
            EditorBlock.new_moment(),
            EditorBlock.new_recommendation(name="x", category=RecommendationCategory.STAY),
            EditorBlock.new_photo(),
            EditorBlock.new_tip(),
            EditorBlock.new_divider(),
        ]
        resolved = [resolve_block_style(block, theme).block_type for block in blocks]
        assert resolved == list(BlockType)
