"""
Album Service Models

Models for the album record microservice.
Request models are strict: payloads must match the expected shape exactly.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# ==================== Core Models ====================

class Album(BaseModel):
    """Album record as stored"""
    album_id: str
    name: str
    artist: str
    price: float
    image: Optional[bytes] = None

    model_config = ConfigDict(from_attributes=True)


class AlbumRef(BaseModel):
    """Reference to an existing album (identifier only)"""
    album_id: str

    model_config = ConfigDict(from_attributes=True)


# ==================== Request Models ====================

class AlbumCreateRequest(BaseModel):
    """Album creation request

    Missing fields take their zero value (empty string, 0.0). Present fields must
    have the right JSON type: integers are accepted as prices; strings, booleans,
    null and non-finite numbers are not.
    """
    name: str = Field("", description="Album name")
    artist: str = Field("", description="Album artist")
    price: float = Field(0.0, allow_inf_nan=False, description="Album price")

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Abbey Road",
                "artist": "The Beatles",
                "price": 9.99,
            }
        },
    )


# ==================== Response Models ====================

class AlbumIDResponse(BaseModel):
    """Album identifier response (create and fetch)"""
    album_id: str = Field(..., alias="albumID")

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "ok"


class MessageResponse(BaseModel):
    """Failure body for album lookups"""
    message: str


class ErrorResponse(BaseModel):
    """Failure body for album creation"""
    error: str
