from __future__ import annotations

from pydantic import BaseModel


class SourceOut(BaseModel):
    name: str
    kind: str
    locator: str

    class Config:
        from_attributes = True
