"""Monotonic logical clock for supplying registration heights."""

from __future__ import annotations

from pyvehreg.models.context import CallContext


class BlockClock:
    """A block-height counter that only moves forward.

    The registry never reads a clock itself; hosts use this to build the
    :class:`CallContext` they pass with each call.
    """

    def __init__(self, start: int = 0) -> None:
        if isinstance(start, bool) or not isinstance(start, int):
            raise TypeError(f"start must be an int, got {type(start).__name__}")
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._height = start

    @property
    def height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move forward by *blocks* and return the new height."""
        if isinstance(blocks, bool) or not isinstance(blocks, int):
            raise TypeError(f"blocks must be an int, got {type(blocks).__name__}")
        if blocks <= 0:
            raise ValueError(f"blocks must be positive, got {blocks}")
        self._height += blocks
        return self._height

    def context(self, sender: str) -> CallContext:
        """Build a call context for *sender* at the current height."""
        return CallContext(sender=sender, block_height=self._height)

    def __repr__(self) -> str:
        return f"BlockClock(height={self._height})"
