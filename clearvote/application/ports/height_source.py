"""Height source port.

The ledger supplies a monotonically increasing height that the registry
records as each voter's registration height. The registry reads it and
never advances it.
"""

from abc import ABC, abstractmethod


class HeightSource(ABC):
    """Abstract interface for reading the current ledger height."""

    @abstractmethod
    def current_height(self) -> int:
        """Return the current height.

        Successive calls never return a smaller value.
        """
        ...
