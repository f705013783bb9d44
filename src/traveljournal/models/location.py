"""Unresolved location attached to a draft block."""

from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from traveljournal.models.base import WireModel


# Coordinates are numbers on the wire, not the strings pydantic emits for Decimal
Coordinate = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class EditorLocation(WireModel):
    """A place picked from place search, before the backend resolves it.

    The OSM type/id pair is the external identity the backend uses to get or
    create its own permanent place record on publish.
    """

    osm_type: str = Field(
        ...,
        description="OSM element type: 'N' (node), 'W' (way) or 'R' (relation)"
    )

    osm_id: int = Field(
        ...,
        ge=-(2**63),
        lt=2**63,
        description="OSM element id (int64)"
    )

    name: str = Field(..., description="Short place name")

    display_name: str = Field(
        ...,
        description="Full comma-separated name, e.g. 'Shibuya, Tokyo, Kanto, Japan'"
    )

    latitude: Coordinate
    longitude: Coordinate

    @property
    def city_and_state(self) -> str:
        """Shortened display name.

        "Place, City, State, Country" gives "City, State"; with two or three
        components the last two are used; anything else falls back to the
        full display name.
        """
        components = [part.strip() for part in self.display_name.split(",") if part]
        if len(components) >= 4:
            return f"{components[1]}, {components[2]}"
        if len(components) >= 2:
            return f"{components[-2]}, {components[-1]}"
        return self.display_name

    model_config = {"frozen": True}
