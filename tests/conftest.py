"""Shared test fixtures for all test modules."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, Mock
from uuid import UUID, uuid4

import pytest

from traveljournal.models.config import APIConfig
from traveljournal.models.enums import BlockType, Rating, RecommendationCategory
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


TRIP_ID = UUID("6f1c2d3e-4a5b-4c6d-8e9f-0a1b2c3d4e5f")


@pytest.fixture
def trip_id():
    return TRIP_ID


@pytest.fixture
def shibuya_location():
    """EditorLocation as returned by place search."""
    return EditorLocation(
        osm_type="R",
        osm_id=1758858,
        name="Shibuya",
        display_name="Shibuya, Tokyo, Kanto, Japan",
        latitude=Decimal("35.6619707"),
        longitude=Decimal("139.7036319"),
    )


@pytest.fixture
def shibuya_place():
    return PlaceSummary(
        id=uuid4(),
        name="Shibuya",
        display_name="Shibuya, Tokyo, Japan",
        country_code="JP",
    )


@pytest.fixture
def moment_entry(shibuya_place):
    return JournalEntry(
        id=uuid4(),
        order=0,
        block_type=BlockType.MOMENT,
        save_count=24,
        is_saved=False,
        moment=JournalMoment(
            id=uuid4(),
            date="Jan 15, 2026",
            title="Arrived in Tokyo",
            content="Finally landed after a 14-hour flight.",
            stamp_text="DAY 1",
            stamp_color="#c9a227",
            place=shibuya_place,
        ),
    )


@pytest.fixture
def recommendation_entry(shibuya_place):
    return JournalEntry(
        id=uuid4(),
        order=2,
        block_type=BlockType.RECOMMENDATION,
        save_count=38,
        is_saved=False,
        recommendation=JournalRecommendation(
            id=uuid4(),
            name="Ichiran Ramen",
            category=RecommendationCategory.EAT,
            rating=Rating.S,
            price_level=2,
            note="Best tonkotsu ramen I've ever had.",
            image_url="https://cdn.example.com/ichiran.jpg",
            place=shibuya_place,
        ),
    )


@pytest.fixture
def published_entries(moment_entry, recommendation_entry):
    """A small published journal with every block type, deliberately out of order."""
    return [
        recommendation_entry,
        JournalEntry(
            id=uuid4(),
            order=4,
            block_type=BlockType.DIVIDER,
            divider=JournalDivider(id=uuid4()),
        ),
        moment_entry,
        JournalEntry(
            id=uuid4(),
            order=1,
            block_type=BlockType.TIP,
            save_count=15,
            is_saved=True,
            tip=JournalTip(id=uuid4(), title="Getting Around", content="Get a Suica card."),
        ),
        JournalEntry(
            id=uuid4(),
            order=3,
            block_type=BlockType.PHOTO,
            save_count=56,
            photo=JournalPhoto(id=uuid4(), caption="Sunset over Mount Fuji", rotation=-2),
        ),
    ]


@pytest.fixture
def api_config():
    return APIConfig(base_url="https://api.test.com/api", access_token="test-token")


@pytest.fixture
def mock_http_client():
    """Factory for a mocked httpx.AsyncClient returning one canned response.

    Pass ``json_body=ValueError(...)`` to simulate a non-JSON body.
    """

    def factory(status_code=200, json_body=None):
        mock_response = MagicMock()
        mock_response.status_code = status_code
        if isinstance(json_body, Exception):
            mock_response.json = Mock(side_effect=json_body)
        else:
            mock_response.json = Mock(return_value=json_body)

        mock_client = AsyncMock()
        mock_client.request = AsyncMock(return_value=mock_response)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=None)
        return mock_client

    return factory
