"""Pydantic data models for traveljournal."""

from traveljournal.models.block import EditorBlock, EditorBlockData
from traveljournal.models.content import EditorContent, IndexOutOfRangeError
from traveljournal.models.enums import BlockType, Rating, RecommendationCategory
from traveljournal.models.journal import JournalEntry, PlaceSummary
from traveljournal.models.location import EditorLocation
from traveljournal.models.theme import JournalTheme

__all__ = [
    "BlockType",
    "EditorBlock",
    "EditorBlockData",
    "EditorContent",
    "EditorLocation",
    "IndexOutOfRangeError",
    "JournalEntry",
    "JournalTheme",
    "PlaceSummary",
    "Rating",
    "RecommendationCategory",
]
