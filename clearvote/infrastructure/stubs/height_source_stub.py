"""Manual height source stub.

Holds a height that the host (or a test) sets and advances explicitly.
The registry only reads it.

Usage:
    heights = ManualHeightSource(100)
    heights.advance()        # 101
    heights.set_height(250)  # jumps forward
"""

from __future__ import annotations

import threading

from clearvote.application.ports.height_source import HeightSource


class ManualHeightSource(HeightSource):
    """In-memory monotonic height counter."""

    def __init__(self, initial_height: int = 0) -> None:
        """Initialize at the given height.

        Raises:
            ValueError: If initial_height is negative.
        """
        if initial_height < 0:
            raise ValueError(f"initial_height must be non-negative, got {initial_height}")
        self._height = initial_height
        self._lock = threading.Lock()

    def current_height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the height forward and return the new value.

        Raises:
            ValueError: If blocks is negative.
        """
        if blocks < 0:
            raise ValueError(f"cannot advance by a negative amount ({blocks})")
        with self._lock:
            self._height += blocks
            return self._height

    def set_height(self, height: int) -> None:
        """Jump to a height that is not lower than the current one.

        Raises:
            ValueError: If height would move backwards.
        """
        with self._lock:
            if height < self._height:
                raise ValueError(
                    f"height cannot move backwards ({height} < {self._height})"
                )
            self._height = height
