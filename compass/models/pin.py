from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from compass.models.location import Location


class Pin(BaseModel):
    """Map marker document as stored by the backend.

    Every field is optional and independent of the others. Field names
    follow Python conventions; the aliases are the keys used in the
    stored document (``_id`` and ``__v`` come from the document store).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "location": {"lat": 1.0, "lng": 2.0},
                "_id": "abc123",
                "pinId": None,
                "createdAt": "2021-04-09T00:00:00Z",
                "__v": 3
            }
        },
    )

    location: Optional[Location] = Field(None, description="Where the pin is placed")

    # Identifiers
    id: Optional[str] = Field(None, alias="_id", description="Identifier assigned by the backend store")
    pin_id: Optional[str] = Field(None, alias="pinId", description="Secondary pin identifier")

    # Metadata
    created_at: Optional[str] = Field(None, alias="createdAt", description="Creation timestamp, kept as sent")
    version: Optional[int] = Field(None, alias="__v", description="Document revision counter")
