"""
Geo Domain Models

Defines geographic points and the built-in table used to seed the geo set.
"""

from pydantic import BaseModel, ConfigDict, Field

from redis_test_drive.domain.types import RequiredStr


class GeoPoint(BaseModel):
    """Labelled geographic point, the label is the member name within the geo set"""

    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")
    label: RequiredStr = Field(..., description="Label")

    model_config = ConfigDict(frozen=True)


SEED_POINTS: tuple[GeoPoint, ...] = (
    GeoPoint(latitude=41.226567703202, longitude=-96.07906965916344, label="Tim's Domicile"),
    GeoPoint(latitude=41.23665494384777, longitude=-96.1230578591632, label="Dave & Busters"),
    GeoPoint(latitude=41.26451910012323, longitude=-96.06945525916254, label="Cheesecake Factory"),
    GeoPoint(latitude=41.22493028558474, longitude=-95.92865423218247, label="#1 Zoo in the World"),
    GeoPoint(latitude=39.17685704075071, longitude=-94.48629091688504, label="Worlds of Fun"),
)
