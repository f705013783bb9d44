"""Conversion between published journal entries and draft editor blocks.

Published -> draft is used to re-render a published journal with the same
themed block views the editor uses. The conversion is total over BlockType
and never fails: a missing sub-entity yields absent fields (and, for a
recommendation, an empty name in the "eat" category).

It is intentionally not an exact inverse of publishing. A published place
no longer remembers its OSM identity, so the resulting EditorLocation is a
placeholder with ``osm_type="N"``, ``osm_id=0`` and zero coordinates.
"""

from typing import Iterable, Optional
from uuid import NAMESPACE_URL, uuid4, uuid5

from traveljournal.models.block import EditorBlock, EditorBlockData
from traveljournal.models.content import EditorContent
from traveljournal.models.enums import BlockType, RecommendationCategory
from traveljournal.models.journal import (
    JournalDivider,
    JournalEntry,
    JournalMoment,
    JournalPhoto,
    JournalRecommendation,
    JournalTip,
    PlaceSummary,
)
from traveljournal.models.location import EditorLocation


PLACEHOLDER_OSM_TYPE = "N"
PLACEHOLDER_OSM_ID = 0


def to_editor_location(place: PlaceSummary) -> EditorLocation:
    """Placeholder EditorLocation for a resolved place (OSM identity is lost)."""
    return EditorLocation(
        osm_type=PLACEHOLDER_OSM_TYPE,
        osm_id=PLACEHOLDER_OSM_ID,
        name=place.name,
        display_name=place.display_name,
        latitude=0,
        longitude=0,
    )


def _location(place: Optional[PlaceSummary]) -> Optional[EditorLocation]:
    return to_editor_location(place) if place is not None else None


def to_editor_block(entry: JournalEntry) -> EditorBlock:
    """Convert a published entry into an EditorBlock with the same id, order and type."""
    block_type = entry.block_type

    if block_type is BlockType.MOMENT:
        moment = entry.moment
        return EditorBlock(
            id=entry.id,
            order=entry.order,
            type=BlockType.MOMENT,
            location=_location(moment.place) if moment else None,
            data=EditorBlockData.moment(
                date=moment.date if moment else None,
                title=moment.title if moment else None,
                content=moment.content if moment else None,
                image_url=moment.image_url if moment else None,
                stamp_text=moment.stamp_text if moment else None,
                stamp_color=moment.stamp_color if moment else None,
            ),
        )

    if block_type is BlockType.RECOMMENDATION:
        recommendation = entry.recommendation
        return EditorBlock(
            id=entry.id,
            order=entry.order,
            type=BlockType.RECOMMENDATION,
            location=_location(recommendation.place) if recommendation else None,
            data=EditorBlockData.recommendation(
                name=recommendation.name if recommendation else "",
                category=recommendation.category if recommendation else RecommendationCategory.EAT,
                rating=recommendation.rating if recommendation else None,
                price_level=recommendation.price_level if recommendation else None,
                note=recommendation.note if recommendation else None,
                image_url=recommendation.image_url if recommendation else None,
            ),
        )

    if block_type is BlockType.PHOTO:
        photo = entry.photo
        return EditorBlock(
            id=entry.id,
            order=entry.order,
            type=BlockType.PHOTO,
            data=EditorBlockData.photo(
                image_url=photo.image_url if photo else None,
                caption=photo.caption if photo else None,
                rotation=photo.rotation if photo else None,
            ),
        )

    if block_type is BlockType.TIP:
        tip = entry.tip
        return EditorBlock(
            id=entry.id,
            order=entry.order,
            type=BlockType.TIP,
            data=EditorBlockData.tip(
                title=tip.title if tip else None,
                content=tip.content if tip else None,
            ),
        )

    # Divider
    return EditorBlock(
        id=entry.id,
        order=entry.order,
        type=BlockType.DIVIDER,
        data=EditorBlockData.divider(),
    )


def to_editor_content(entries: Iterable[JournalEntry]) -> EditorContent:
    """Convert a published journal into EditorContent, sorted by entry order.

    Orders are kept as published, not renumbered.
    """
    blocks = [to_editor_block(entry) for entry in sorted(entries, key=lambda e: e.order)]
    return EditorContent(blocks=blocks)


def to_place_summary(location: EditorLocation) -> PlaceSummary:
    """Preview-only PlaceSummary for a draft location.

    The id is derived from the OSM identity so repeated previews agree; the
    country code is unknown until the backend resolves the place.
    """
    return PlaceSummary(
        id=uuid5(NAMESPACE_URL, f"{location.osm_type}/{location.osm_id}"),
        name=location.name,
        display_name=location.display_name,
        country_code="",
    )


def to_journal_entry(
    block: EditorBlock, save_count: int = 0, is_saved: Optional[bool] = None
) -> JournalEntry:
    """Build a published-shaped preview of a draft block.

    Only for previews and tests; real entries come from the backend's
    publish step.
    """
    data = block.data
    place = to_place_summary(block.location) if block.location is not None else None
    sub_entities = {}

    if block.type is BlockType.MOMENT:
        sub_entities["moment"] = JournalMoment(
            id=uuid4(),
            date=data.date,
            title=data.title,
            content=data.content,
            image_url=data.image_url,
            stamp_text=data.stamp_text,
            stamp_color=data.stamp_color,
            place=place,
        )
    elif block.type is BlockType.RECOMMENDATION:
        sub_entities["recommendation"] = JournalRecommendation(
            id=uuid4(),
            name=data.name or "",
            category=data.category or RecommendationCategory.EAT,
            rating=data.rating,
            price_level=data.price_level,
            note=data.note,
            image_url=data.image_url,
            place=place,
        )
    elif block.type is BlockType.PHOTO:
        sub_entities["photo"] = JournalPhoto(
            id=uuid4(),
            image_url=data.image_url,
            caption=data.caption,
            rotation=data.rotation or 0,
        )
    elif block.type is BlockType.TIP:
        sub_entities["tip"] = JournalTip(id=uuid4(), title=data.title, content=data.content)
    else:
        sub_entities["divider"] = JournalDivider(id=uuid4())

    return JournalEntry(
        id=block.id,
        order=block.order,
        block_type=block.type,
        save_count=save_count,
        is_saved=is_saved,
        **sub_entities,
    )
