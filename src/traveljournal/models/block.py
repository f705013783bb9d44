"""Draft block model used by the journal editor.

``EditorBlockData`` deliberately keeps the flexible "one shape fits all"
layout of the backend's draft DTO: it carries the union of every block
type's fields, and only the ones relevant to the owning block's type are
meaningful.

Field usage by block type:
- moment: date, title, content, image_url, stamp_text, stamp_color
- recommendation: name, category, rating, price_level, note, image_url
- photo: image_url, caption, rotation
- tip: title, content
- divider: (none)
"""

from typing import Annotated, Optional
from uuid import UUID, uuid4

from pydantic import BeforeValidator, Field

from traveljournal.models.base import WireModel
from traveljournal.models.enums import (
    BlockType,
    Rating,
    RecommendationCategory,
    coerce_block_type,
    coerce_category,
)
from traveljournal.models.location import EditorLocation


CategoryField = Annotated[RecommendationCategory, BeforeValidator(coerce_category)]
BlockTypeField = Annotated[BlockType, BeforeValidator(coerce_block_type)]


class EditorBlockData(WireModel):
    """Sparse field bag for a block's content (maps to DraftBlockDataDto)."""

    # Moment
    date: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    stamp_text: Optional[str] = None
    stamp_color: Optional[str] = None

    # Recommendation
    name: Optional[str] = None
    category: Optional[CategoryField] = None
    rating: Optional[Rating] = None
    price_level: Optional[int] = None
    note: Optional[str] = None

    # Photo
    caption: Optional[str] = None
    rotation: Optional[int] = None

    # Shared by moment, recommendation and photo
    image_url: Optional[str] = None

    @classmethod
    def moment(
        cls,
        date: Optional[str] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
        image_url: Optional[str] = None,
        stamp_text: Optional[str] = None,
        stamp_color: Optional[str] = None,
    ) -> "EditorBlockData":
        return cls(
            date=date,
            title=title,
            content=content,
            image_url=image_url,
            stamp_text=stamp_text,
            stamp_color=stamp_color,
        )

    @classmethod
    def recommendation(
        cls,
        name: str,
        category: RecommendationCategory,
        rating: Optional[Rating] = None,
        price_level: Optional[int] = None,
        note: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> "EditorBlockData":
        return cls(
            name=name,
            category=category,
            rating=rating,
            price_level=price_level,
            note=note,
            image_url=image_url,
        )

    @classmethod
    def photo(
        cls,
        image_url: Optional[str] = None,
        caption: Optional[str] = None,
        rotation: Optional[int] = None,
    ) -> "EditorBlockData":
        return cls(image_url=image_url, caption=caption, rotation=rotation)

    @classmethod
    def tip(cls, title: Optional[str] = None, content: Optional[str] = None) -> "EditorBlockData":
        return cls(title=title, content=content)

    @classmethod
    def divider(cls) -> "EditorBlockData":
        return cls()


class EditorBlock(WireModel):
    """A single ordered unit of a trip's draft (maps to DraftBlockDto).

    ``order`` is owned by the containing EditorContent; a block never
    renumbers itself. ``location`` is only meaningful for moments and
    recommendations.
    """

    id: UUID = Field(
        default_factory=uuid4,
        frozen=True,
        description="Stable block identity"
    )

    order: int = Field(
        ...,
        description="Zero-based rank among sibling blocks"
    )

    type: BlockTypeField = Field(
        ...,
        frozen=True,
        description="Discriminant deciding which data fields are meaningful"
    )

    location: Optional[EditorLocation] = Field(
        default=None,
        description="Unresolved place for moment and recommendation blocks"
    )

    data: EditorBlockData = Field(
        default_factory=EditorBlockData,
        description="Field bag holding the block's content"
    )

    @classmethod
    def new_moment(
        cls,
        order: int = 0,
        date: Optional[str] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
        image_url: Optional[str] = None,
        stamp_text: Optional[str] = None,
        stamp_color: Optional[str] = None,
        location: Optional[EditorLocation] = None,
    ) -> "EditorBlock":
        return cls(
            order=order,
            type=BlockType.MOMENT,
            location=location,
            data=EditorBlockData.moment(
                date=date,
                title=title,
                content=content,
                image_url=image_url,
                stamp_text=stamp_text,
                stamp_color=stamp_color,
            ),
        )

    @classmethod
    def new_recommendation(
        cls,
        name: str,
        category: RecommendationCategory,
        order: int = 0,
        rating: Optional[Rating] = None,
        price_level: Optional[int] = None,
        note: Optional[str] = None,
        image_url: Optional[str] = None,
        location: Optional[EditorLocation] = None,
    ) -> "EditorBlock":
        return cls(
            order=order,
            type=BlockType.RECOMMENDATION,
            location=location,
            data=EditorBlockData.recommendation(
                name=name,
                category=category,
                rating=rating,
                price_level=price_level,
                note=note,
                image_url=image_url,
            ),
        )

    @classmethod
    def new_photo(
        cls,
        order: int = 0,
        image_url: Optional[str] = None,
        caption: Optional[str] = None,
        rotation: Optional[int] = None,
    ) -> "EditorBlock":
        return cls(
            order=order,
            type=BlockType.PHOTO,
            data=EditorBlockData.photo(image_url=image_url, caption=caption, rotation=rotation),
        )

    @classmethod
    def new_tip(
        cls,
        order: int = 0,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> "EditorBlock":
        return cls(
            order=order,
            type=BlockType.TIP,
            data=EditorBlockData.tip(title=title, content=content),
        )

    @classmethod
    def new_divider(cls, order: int = 0) -> "EditorBlock":
        return cls(order=order, type=BlockType.DIVIDER, data=EditorBlockData.divider())

    model_config = {"frozen": False}  # order, location and data are edited in place
