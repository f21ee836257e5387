"""Pydantic models for VCS data."""

from pydantic import BaseModel, Field


class Revision(BaseModel):
    """Source-control position of the working tree."""

    head: str = Field(description="Full hash of the current commit")
    merge_base: str = Field(description="Common ancestor with the upstream ref")

    def short(self, length: int = 8) -> tuple[str, str]:
        return self.head[:length], self.merge_base[:length]
