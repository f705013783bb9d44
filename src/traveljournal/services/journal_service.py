"""Published journal endpoint."""

from typing import List
from uuid import UUID

from traveljournal.editor.converter import to_editor_content
from traveljournal.models.content import EditorContent
from traveljournal.models.journal import JournalEntry
from traveljournal.services.api_client import APIClient


class JournalService:
    def __init__(self, client: APIClient):
        self.client = client

    async def get_journal_entries(self, trip_id: UUID) -> List[JournalEntry]:
        """Published entries of a trip.

        Works without a token for public or unlisted trips.
        """
        return await self.client.request(
            "GET", f"/trips/{trip_id}/journal", response_model=List[JournalEntry]
        )

    async def get_journal_content(self, trip_id: UUID) -> EditorContent:
        """Published entries converted to editor blocks for themed rendering."""
        return to_editor_content(await self.get_journal_entries(trip_id))
