"""
User-related Pydantic models
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar
from pydantic import BaseModel, Field

# Mutable fields, in the order the API documents them
USER_FIELDS = ("name", "email", "gender", "status")

# Subset of USER_FIELDS mapped to new values
PartialUpdateRequest = Dict[str, str]

T = TypeVar("T")


class UserCreateRequest(BaseModel):
    """Creation and full-update payload.

    Fields are plain strings so deliberately invalid payloads can be sent.
    """
    name: str
    email: str
    gender: str
    status: str


class UserResponse(BaseModel):
    id: int = Field(gt=0)
    name: str
    email: str
    gender: str
    status: str


class ErrorEntry(BaseModel):
    """One validation failure reported by the API"""
    field: str
    message: str


@dataclass
class DecodeResult(Generic[T]):
    """Result of decoding a response body into a typed shape"""
    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    raw: Any = None

    @classmethod
    def ok(cls, value: T, raw: Any = None) -> "DecodeResult[T]":
        return cls(success=True, value=value, raw=raw)

    @classmethod
    def failure(cls, error: str, raw: Any = None) -> "DecodeResult[T]":
        return cls(success=False, error=error, raw=raw)
