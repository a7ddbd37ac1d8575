"""
Block Contract

A Block is one job record extracted from a log document: the text between a
``<pre>`` and its ``</pre>``, normalized, plus the metadata found around it.

Offsets (`start`, `end`) and `title_line` always refer to the *reference*
document: the unprocessed original when the caller supplied one, otherwise
the scanned text.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from logoutline.core.contracts.level import NestingLevel

NonNegativeInt = Annotated[int, Field(ge=0)]
Seconds = Annotated[float, Field(ge=0.0, allow_inf_nan=False)]


class Block(BaseModel):
    """A job record extracted from a log document."""

    model_config = ConfigDict(frozen=True)

    level: NonNegativeInt | None = Field(
        default=None, description="Markup nesting depth at the block start; None if unknown."
    )
    title: str = Field(default="", description="First non-blank line of the content, trimmed.")
    content: str = Field(default="", description="Tag-free, entity-decoded, normalized body.")
    start: int = Field(..., ge=0, description="Start offset (inclusive) in the reference document.")
    end: int = Field(..., ge=0, description="End offset (exclusive) in the reference document.")
    elapsed: Seconds | None = Field(
        default=None,
        description="Elapsed seconds; 0 for skipped/deactivated jobs; None if not found.",
    )
    realization: int | None = Field(default=None, description="Project realization number.")
    title_line: NonNegativeInt | None = Field(
        default=None, description="Zero-based line of the title in the reference document."
    )

    @model_validator(mode="after")
    def _check_range(self) -> Block:
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) precedes start ({self.start})")
        if self.title != self.title.strip():
            raise ValueError("title must be whitespace-trimmed")
        return self

    @property
    def nesting(self) -> NestingLevel:
        """The level as an ordered :class:`NestingLevel`."""
        return NestingLevel.of(self.level)


__all__ = ["Block"]
