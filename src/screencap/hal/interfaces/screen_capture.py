"""Screen capture interface definition."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...model import RawFrame


@dataclass
class Monitor:
    """Monitor information."""

    index: int
    x: int
    y: int
    width: int
    height: int
    is_primary: bool = False
    name: str | None = None

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Get monitor bounds as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @property
    def resolution(self) -> str:
        return f"{self.width}x{self.height}"


class IScreenCapture(ABC):
    """Interface for the in-process screen grab primitive."""

    @abstractmethod
    def get_monitors(self) -> list[Monitor]:
        """Enumerate available monitors.

        Returns:
            Monitors indexed 0..N-1, possibly empty

        Raises:
            CaptureFailedError: If enumeration itself fails
        """
        pass

    @abstractmethod
    def grab(self, monitor: int) -> RawFrame:
        """Grab one monitor as an RGBA8 frame.

        Args:
            monitor: Monitor index (0-based)

        Returns:
            RawFrame of the monitor

        Raises:
            CaptureFailedError: If the grab fails
        """
        pass

    def close(self) -> None:
        """Release capture resources."""
        pass
