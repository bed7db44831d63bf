"""Profile and location schemas."""

from typing import Annotated

from pydantic import BaseModel, Field

from silentsos.db.base import Base
from silentsos.models import Location

# JSON numbers only: strings and booleans are rejected rather than coerced
Latitude = Annotated[float, Field(strict=True)]
Longitude = Annotated[float, Field(strict=True)]


class ProfileUpdate(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None


class LocationUpdate(BaseModel):
    lat: Latitude
    lng: Longitude


class LocationResponse(Base):
    ok: bool = True
    last_location: Location
