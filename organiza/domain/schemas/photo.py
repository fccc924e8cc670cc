"""Pydantic schemas for photos attached to visits and projects."""

from typing import Literal

from pydantic import BaseModel, Field


class PhotoCreate(BaseModel):
    url: str = Field(min_length=1)  # http(s) URL or base64 data URL
    description: str = Field(min_length=3)
    type: Literal["camera", "upload"] = "upload"


class PhotoRead(PhotoCreate):
    id: str


class ProjectPhotoCreate(PhotoCreate):
    stage: Literal["before", "after"]
