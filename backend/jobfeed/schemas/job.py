from __future__ import annotations

from pydantic import BaseModel


class JobPostingOut(BaseModel):
    company: str
    title: str
    location: str
    category: str
    apply_url: str

    class Config:
        from_attributes = True
