"""Ordered nesting level with an explicit "unknown" rank.

Blocks whose depth could not be inferred still have to take part in the
stack-based tree assembly. Rather than substituting a magic ``-1``, levels are
wrapped in :class:`NestingLevel`, whose :data:`NestingLevel.UNKNOWN` member
ranks strictly below every known depth, so comparisons stay total.

>>> NestingLevel.UNKNOWN < NestingLevel.of(0) < NestingLevel.of(3)
True
>>> NestingLevel.of(None) is NestingLevel.UNKNOWN
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class NestingLevel:
    """A depth value; ``known=False`` sorts before all known depths."""

    known: bool
    depth: int = 0

    UNKNOWN: ClassVar[NestingLevel]

    @classmethod
    def of(cls, level: int | None) -> NestingLevel:
        """Wrap a raw ``int | None`` level."""
        if level is None:
            return cls.UNKNOWN
        return cls(known=True, depth=level)

    @property
    def value(self) -> int | None:
        """Raw level, ``None`` when unknown."""
        return self.depth if self.known else None

    def __str__(self) -> str:
        return str(self.depth) if self.known else "N/A"


NestingLevel.UNKNOWN = NestingLevel(known=False)

__all__ = ["NestingLevel"]
