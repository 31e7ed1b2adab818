"""Base model for payloads exchanged with the Sourcegraph API.

The API speaks PascalCase JSON keys (``UnitType``, ``CommitID``, ...). Models
declare snake_case fields and accept either spelling on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Dump to the JSON shape the API expects, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
