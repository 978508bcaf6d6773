from typing import Literal
from pydantic import BaseModel


class CaptureStatusResponse(BaseModel):
    """Device capture flag: "1" capturing, "0" stopped"""
    status: Literal["0", "1"]
    capturing: bool


class CaptureStatusUpdateRequest(BaseModel):
    status: Literal["0", "1"]


class CaptureStatusChangeResponse(CaptureStatusResponse):
    """New status plus the notice shown to the user"""
    title: str
    description: str
