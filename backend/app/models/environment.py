from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class UploadEnvResponse(BaseModel):
    message: str = ""
    session_id: str = ""
    status: str = ""
    variables: List[str] = Field(default_factory=list)
    variables_count: int = 0


class SampleEnvResponse(BaseModel):
    status: str = ""
    description: str = ""
    sample_env_content: str = ""
