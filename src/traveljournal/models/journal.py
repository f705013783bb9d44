"""Published journal entries returned by GET /trips/{tripId}/journal.

The published form is read-only and strongly typed: exactly one of the
per-type sub-entities is populated, matching ``block_type``. Places are
already resolved to ``PlaceSummary`` records, so the OSM identity a draft
location carried is gone.
"""

from typing import Optional
from uuid import UUID

from pydantic import Field

from traveljournal.models.base import WireModel
from traveljournal.models.block import BlockTypeField, CategoryField
from traveljournal.models.enums import Rating


class PlaceSummary(WireModel):
    """Resolved place as the backend stores it."""

    id: UUID
    name: str
    display_name: str
    country_code: str

    model_config = {"frozen": True}


class JournalMoment(WireModel):
    id: UUID
    date: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    stamp_text: Optional[str] = None
    stamp_color: Optional[str] = None
    place: Optional[PlaceSummary] = None

    model_config = {"frozen": True}


class JournalRecommendation(WireModel):
    id: UUID
    name: str
    category: CategoryField
    rating: Optional[Rating] = None
    price_level: Optional[int] = None
    note: Optional[str] = None
    image_url: Optional[str] = None
    place: Optional[PlaceSummary] = None

    model_config = {"frozen": True}


class JournalPhoto(WireModel):
    id: UUID
    image_url: Optional[str] = None
    caption: Optional[str] = None
    rotation: int = 0

    model_config = {"frozen": True}


class JournalTip(WireModel):
    id: UUID
    title: Optional[str] = None
    content: Optional[str] = None

    model_config = {"frozen": True}


class JournalDivider(WireModel):
    id: UUID

    model_config = {"frozen": True}


class JournalEntry(WireModel):
    """One published block (maps to JournalEntryDto)."""

    id: UUID
    order: int
    block_type: BlockTypeField
    save_count: int = Field(default=0, ge=0, description="How many readers saved this entry")
    is_saved: Optional[bool] = Field(
        default=None,
        description="Whether the current user saved it; None when anonymous"
    )

    moment: Optional[JournalMoment] = None
    recommendation: Optional[JournalRecommendation] = None
    photo: Optional[JournalPhoto] = None
    tip: Optional[JournalTip] = None
    divider: Optional[JournalDivider] = None

    model_config = {"frozen": True}
