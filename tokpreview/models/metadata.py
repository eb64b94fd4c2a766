"""Pydantic models for resolved video metadata."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class VideoReference(BaseModel):
    """A canonical link to a hosted video or photo post."""

    url: str

    @field_validator("url")
    @classmethod
    def _strip_url(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("url must not be blank")
        return stripped


class NormalizedMetadata(BaseModel):
    """Preview metadata produced by exactly one resolution strategy."""

    title: str | None = None
    cover: str | None = None
    author: str | None = None
    views: int | None = Field(default=None, ge=0)
    source: str | None = Field(default=None, exclude=True)

    @property
    def has_content(self) -> bool:
        """A record is usable only if it carries a title or a cover."""
        return self.title is not None or self.cover is not None
