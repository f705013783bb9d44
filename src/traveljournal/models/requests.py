"""Request and response bodies for the draft editor endpoints."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import field_validator

from traveljournal.models.base import WireModel
from traveljournal.models.block import BlockTypeField, EditorBlock, EditorBlockData
from traveljournal.models.content import EditorContent
from traveljournal.models.location import EditorLocation


class AddBlockRequest(WireModel):
    """Body for POST /trips/{tripId}/draft/blocks."""

    type: BlockTypeField
    location: Optional[EditorLocation] = None
    data: EditorBlockData
    insert_at_order: Optional[int] = None

    @classmethod
    def from_block(cls, block: EditorBlock, insert_at_order: Optional[int] = None) -> "AddBlockRequest":
        return cls(
            type=block.type,
            location=block.location,
            data=block.data,
            insert_at_order=insert_at_order,
        )

    model_config = {"frozen": True}


class UpdateBlockRequest(WireModel):
    """Body for PUT /trips/{tripId}/draft/blocks/{blockId}."""

    location: Optional[EditorLocation] = None
    data: EditorBlockData

    @classmethod
    def from_block(cls, block: EditorBlock) -> "UpdateBlockRequest":
        return cls(location=block.location, data=block.data)

    model_config = {"frozen": True}


class SaveDraftRequest(WireModel):
    """Body for PUT /trips/{tripId}/draft (full save)."""

    blocks: List[EditorBlock]

    @field_validator("blocks")
    @classmethod
    def snapshot_blocks(cls, v: List[EditorBlock]) -> List[EditorBlock]:
        # Later edits to the source content must not change a built request
        return [block.model_copy(deep=True) for block in v]

    @classmethod
    def from_content(cls, content: EditorContent) -> "SaveDraftRequest":
        return cls(blocks=content.blocks)

    model_config = {"frozen": True}


class ReorderBlocksRequest(WireModel):
    """Body for PUT /trips/{tripId}/draft/blocks/reorder."""

    block_ids: List[UUID]

    @classmethod
    def from_content(cls, content: EditorContent) -> "ReorderBlocksRequest":
        return cls(block_ids=content.block_ids)

    model_config = {"frozen": True}


class SetDraftThemeRequest(WireModel):
    """Body for PATCH /trips/{tripId}/draft-theme."""

    theme_id: UUID

    model_config = {"frozen": True}


class EditorResponse(WireModel):
    """Response of GET /trips/{tripId}/draft (maps to DraftResponseDto)."""

    trip_id: UUID
    last_updated_at: Optional[datetime] = None
    blocks: List[EditorBlock]

    @property
    def content(self) -> EditorContent:
        """A fresh EditorContent holding copies of the returned blocks."""
        return EditorContent(blocks=self.blocks)
