"""
Pydantic schemas for the homepage API.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


# Request fields are only checked for presence (truthiness) by the routes;
# any JSON value is accepted and stored as sent.
class MessagePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[Any] = None
    email: Optional[Any] = None
    content: Optional[Any] = None


class ContactPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[Any] = None
    email: Optional[Any] = None
    message: Optional[Any] = None


class MessageResponse(BaseModel):
    id: int
    name: str
    email: str
    content: str
    timestamp: int


class ContactResponse(BaseModel):
    success: bool


class ErrorResponse(BaseModel):
    error: str
