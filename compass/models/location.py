from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Geographic coordinate pair as stored on a pin document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    lat: float = Field(..., description="Latitude in decimal degrees", examples=[43.6532])
    lng: float = Field(..., description="Longitude in decimal degrees", examples=[-79.3832])


class LocationReading(BaseModel):
    """A single location fix reported by the device.

    Carries the coordinate plus the accuracy and timing metadata that
    comes with it. Readings are pushed one at a time to a
    LocationUpdateNotifier.
    """

    model_config = ConfigDict(frozen=True)

    # Coordinate
    latitude: float
    longitude: float

    # Fix quality
    horizontal_accuracy: Optional[float] = Field(None, ge=0, description="Accuracy radius in meters")
    altitude: Optional[float] = None

    # Motion
    speed: Optional[float] = Field(None, description="Meters per second")
    course: Optional[float] = Field(None, description="Degrees clockwise from true north")

    # Temporal
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_location(self) -> Location:
        return Location(lat=self.latitude, lng=self.longitude)
