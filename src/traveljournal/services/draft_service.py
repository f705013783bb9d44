"""Draft editor endpoints: load, add, update, delete, save and reorder blocks."""

from typing import Optional
from uuid import UUID

from traveljournal.models.block import EditorBlock
from traveljournal.models.content import EditorContent
from traveljournal.models.requests import (
    AddBlockRequest,
    EditorResponse,
    ReorderBlocksRequest,
    SaveDraftRequest,
    UpdateBlockRequest,
)
from traveljournal.services.api_client import APIClient
from traveljournal.utils.logging import get_logger


logger = get_logger(__name__)


class DraftService:
    """Transports EditorContent and EditorBlock values to and from the backend."""

    def __init__(self, client: APIClient):
        self.client = client

    async def get_draft(self, trip_id: UUID) -> EditorResponse:
        draft = await self.client.request(
            "GET", f"/trips/{trip_id}/draft", response_model=EditorResponse
        )
        logger.info("draft_loaded", trip_id=str(trip_id), block_count=len(draft.blocks))
        return draft

    async def add_block(
        self, trip_id: UUID, block: EditorBlock, insert_at_order: Optional[int] = None
    ) -> EditorBlock:
        """Create ``block`` on the server; returns the stored block with its assigned order."""
        return await self.client.request(
            "POST",
            f"/trips/{trip_id}/draft/blocks",
            response_model=EditorBlock,
            body=AddBlockRequest.from_block(block, insert_at_order=insert_at_order),
        )

    async def update_block(self, trip_id: UUID, block: EditorBlock) -> EditorBlock:
        return await self.client.request(
            "PUT",
            f"/trips/{trip_id}/draft/blocks/{block.id}",
            response_model=EditorBlock,
            body=UpdateBlockRequest.from_block(block),
        )

    async def delete_block(self, trip_id: UUID, block_id: UUID) -> None:
        await self.client.request_void("DELETE", f"/trips/{trip_id}/draft/blocks/{block_id}")

    async def save_draft(self, trip_id: UUID, content: EditorContent) -> None:
        """Replace the whole server-side draft with ``content``."""
        logger.info("draft_saving", trip_id=str(trip_id), block_count=len(content.blocks))
        await self.client.request_void(
            "PUT", f"/trips/{trip_id}/draft", body=SaveDraftRequest.from_content(content)
        )

    async def reorder_blocks(self, trip_id: UUID, content: EditorContent) -> None:
        """Send the current block sequence of ``content`` as the new server order.

        The complete id list is always sent, since the backend treats the
        request as the new membership just like EditorContent.reorder.
        """
        await self.client.request_void(
            "PUT",
            f"/trips/{trip_id}/draft/blocks/reorder",
            body=ReorderBlocksRequest.from_content(content),
        )
