"""Pydantic contracts shared by the parser, the outline builder and the front ends."""

from __future__ import annotations

from logoutline.core.contracts.block import Block
from logoutline.core.contracts.level import NestingLevel
from logoutline.core.contracts.messages import HighlightMessage
from logoutline.core.contracts.node import Node

__all__ = ["Block", "HighlightMessage", "NestingLevel", "Node"]
