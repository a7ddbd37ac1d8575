"""Request/response models for the outline HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from logoutline.core.contracts.block import Block
from logoutline.outline.display import NodeView


class OutlineRequest(BaseModel):
    """A log document to outline."""

    text: str = Field(..., description="Full document content.")
    original: str | None = Field(
        default=None,
        description="Unprocessed document, when `text` has already been preprocessed.",
    )
    source_name: str = Field(default="<request>", description="Name used in messages.")


class OutlineResponse(BaseModel):
    blocks: list[Block]
    forest: list[NodeView]
    message: str = ""


class SearchRequest(OutlineRequest):
    query: str = Field(..., description="Case-insensitive title substring.")


class SearchResponse(BaseModel):
    matches: list[NodeView]


class HighlightRequest(OutlineRequest):
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)


__all__ = [
    "HighlightRequest",
    "OutlineRequest",
    "OutlineResponse",
    "SearchRequest",
    "SearchResponse",
]
