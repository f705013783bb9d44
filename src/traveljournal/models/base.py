"""Base model for everything that crosses the API boundary."""

from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Pydantic model with the backend's camelCase JSON field names.

    Attributes stay snake_case in Python; either form is accepted on input.
    """

    def to_wire(self) -> dict[str, Any]:
        """Dump to the JSON-ready dict the backend expects.

        Absent optionals are omitted rather than sent as null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
