from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class SessionInfo(BaseModel):
    original_filename: str = ""
    upload_time: str = ""
    variables_count: int = 0


class SessionsResponse(BaseModel):
    status: str = ""
    active_sessions: int = 0
    sessions: Dict[str, SessionInfo] = Field(default_factory=dict)


class DeleteSessionResponse(BaseModel):
    message: str
    status: str
