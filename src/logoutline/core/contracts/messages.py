"""Messages exchanged between the outline tree and a rendered log view.

The parser does not send these itself; it defines the payload because it is
the component that originates the offsets.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from logoutline.core.contracts.block import Block


class HighlightMessage(BaseModel):
    """Ask a rendered view to scroll to and select one block."""

    command: Literal["highlight"] = "highlight"
    start: int = Field(..., ge=0, description="Reference-document start offset.")
    end: int = Field(..., ge=0, description="Reference-document end offset.")
    title_line: Annotated[int, Field(ge=0)] | None = Field(
        default=None, description="Line to place the cursor on, when known."
    )

    @classmethod
    def for_block(cls, block: Block) -> HighlightMessage:
        """Build the message targeting `block`."""
        return cls(start=block.start, end=block.end, title_line=block.title_line)


__all__ = ["HighlightMessage"]
