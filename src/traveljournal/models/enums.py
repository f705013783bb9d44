"""Closed vocabularies shared by the draft and published journal models.

Wire encodings are part of the backend contract:
- BlockType and RecommendationCategory travel as lowercase strings
- Rating travels as its integer value (0 = best)
"""

from enum import Enum, IntEnum


class BlockType(str, Enum):
    """Kind of a journal block; decides which data fields are meaningful."""

    MOMENT = "moment"
    RECOMMENDATION = "recommendation"
    PHOTO = "photo"
    TIP = "tip"
    DIVIDER = "divider"

    @property
    def icon(self) -> str:
        """SF Symbol name used for the block type in the editor palette."""
        return _BLOCK_TYPE_ICONS[self]

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class RecommendationCategory(str, Enum):
    """Category of a recommendation block."""

    STAY = "stay"
    EAT = "eat"
    DO = "do"
    SHOP = "shop"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]

    @classmethod
    def _missing_(cls, value: object):
        # The backend also encodes categories by declaration index
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            return None
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class Rating(IntEnum):
    """Letter-grade rating for recommendations.

    The integer values are the wire encoding and must never be renumbered.
    Lower is better, so ``Rating.S < Rating.F``.
    """

    S = 0
    A = 1
    B = 2
    C = 3
    D = 4
    F = 5

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return _RATING_DESCRIPTIONS[self]

    @property
    def color(self) -> str:
        """Hex colour of the rating badge."""
        return _RATING_COLORS[self]


_BLOCK_TYPE_ICONS = {
    BlockType.MOMENT: "sparkles",
    BlockType.RECOMMENDATION: "star.fill",
    BlockType.PHOTO: "camera.fill",
    BlockType.TIP: "lightbulb.fill",
    BlockType.DIVIDER: "minus",
}

_CATEGORY_ICONS = {
    RecommendationCategory.STAY: "bed.double.fill",
    RecommendationCategory.EAT: "fork.knife",
    RecommendationCategory.DO: "figure.walk",
    RecommendationCategory.SHOP: "bag.fill",
}

_RATING_DESCRIPTIONS = {
    Rating.S: "Exceptional",
    Rating.A: "Excellent",
    Rating.B: "Good",
    Rating.C: "Average",
    Rating.D: "Below Average",
    Rating.F: "Poor",
}

_RATING_COLORS = {
    Rating.S: "#FFD700",  # gold
    Rating.A: "#4CAF50",
    Rating.B: "#8BC34A",
    Rating.C: "#FFC107",
    Rating.D: "#FF9800",
    Rating.F: "#F44336",
}


def coerce_block_type(value: object) -> object:
    """Accept any casing of a block type name before validation."""
    if isinstance(value, str) and not isinstance(value, BlockType):
        return BlockType(value)
    return value


def coerce_category(value: object) -> object:
    """Accept the backend integer codes and any casing before validation."""
    if isinstance(value, RecommendationCategory) or isinstance(value, bool):
        return value
    if isinstance(value, (str, int)):
        return RecommendationCategory(value)
    return value
