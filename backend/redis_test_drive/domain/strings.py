"""
String Domain Models

Defines the request bodies accepted by the Strings controller.
"""

from pydantic import BaseModel, ConfigDict, Field

from redis_test_drive.domain.types import RequiredStr


class SimpleObject(BaseModel):
    """Arbitrary JSON object cached as a serialized string"""

    model_config = ConfigDict(extra="allow")


class SetStringRequest(BaseModel):
    """Key/value pair to cache"""

    key: RequiredStr = Field(..., description="Key")
    value: RequiredStr = Field(..., description="Value")


class SetStringObjectRequest(BaseModel):
    """Key/object pair to cache"""

    key: RequiredStr = Field(..., description="Key")
    value: SimpleObject = Field(..., description="Object value, stored as JSON")
