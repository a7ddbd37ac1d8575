"""Lightweight, typed Result container for explicit success/failure returns.

Motivation
----------
The block extractor never raises on malformed input; instead, steps that can
miss (such as locating a block inside the unprocessed document) return a
`Result` so the caller picks the fallback explicitly and can log why.

- `Ok(value)` / `Err(error)` variants,
- `is_ok` to branch,
- `unwrap`, `unwrap_err` to read them back.

Example
-------
>>> from logoutline.core.result import ok, err, Result
>>> def find(haystack: str, needle: str) -> Result[int, str]:
...     i = haystack.find(needle)
...     return ok(i) if i >= 0 else err(f"{needle!r} not found")
>>> find("abc", "c").unwrap()
2
>>> find("abc", "z").unwrap_err()
"'z' not found"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Sum type representing either success (`Ok[T]`) or failure (`Err[E]`)."""

    def is_ok(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def unwrap(self) -> T:
        """Return the inner value if ``Ok``, else raise ``RuntimeError``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def unwrap_err(self) -> E:
        """Return the error value if ``Err``, else raise."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)
