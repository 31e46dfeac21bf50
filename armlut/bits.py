"""Bit-field helpers and the decoded-instruction record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Decoded:
    """An instruction format name paired with the handler expression for it."""

    fmt: str
    handler: str


def bit(value: int, index: int) -> bool:
    """Return whether bit ``index`` of ``value`` is set."""
    if index < 0:
        raise ValueError(f"bit index must be non-negative, got {index}")
    return bool((value >> index) & 1)


def bit_range(value: int, start: int, end: int) -> int:
    """Return the bits ``start`` (inclusive) to ``end`` (exclusive) of ``value``."""
    if start < 0 or end < start:
        raise ValueError(f"invalid bit range {start}..{end}")
    return (value >> start) & ((1 << (end - start)) - 1)