from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Request(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    path: str

    @field_validator("method", "path")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("request line tokens must be non-empty")
        return v


class StatusReport(BaseModel):
    status: str = "ok"
    message: str = "Server is running"
