"""MSS-based screen capture implementation."""

import mss
import mss.base
import mss.exception
from PIL import Image

from ...exceptions import CaptureFailedError, ScreenNotFoundError
from ...logging import get_logger
from ...model import RawFrame
from ..interfaces.screen_capture import IScreenCapture, Monitor

logger = get_logger(__name__)


class MSSScreenCapture(IScreenCapture):
    """Fast screen capture implementation using MSS.

    MSS provides direct system-level screen capture without dependencies
    on GUI automation libraries. It yields BGRA pixels; frames are handed
    out as RGBA with an opaque alpha channel.
    """

    def __init__(self) -> None:
        self._sct: mss.base.MSSBase | None = None

    @property
    def sct(self) -> mss.base.MSSBase:
        """Get or lazily create the mss instance."""
        if self._sct is None:
            try:
                self._sct = mss.mss()
            except mss.exception.ScreenShotError as e:
                raise CaptureFailedError("Failed to open display", e) from e
            logger.debug("mss_instance_created")
        return self._sct

    def get_monitors(self) -> list[Monitor]:
        """Enumerate available monitors.

        Returns:
            List of Monitor objects
        """
        try:
            raw_monitors = self.sct.monitors
        except mss.exception.ScreenShotError as e:
            raise CaptureFailedError("Failed to enumerate monitors", e) from e

        monitors = []

        # Skip index 0 as it's the combined virtual monitor
        for i, mon in enumerate(raw_monitors[1:], 1):
            monitor = Monitor(
                index=i - 1,
                x=mon["left"],
                y=mon["top"],
                width=mon["width"],
                height=mon["height"],
                is_primary=(i == 1),
                name=f"Monitor {i}",
            )
            monitors.append(monitor)

            logger.debug(
                "monitor_detected",
                index=monitor.index,
                bounds=monitor.bounds,
                is_primary=monitor.is_primary,
            )

        return monitors

    def grab(self, monitor: int) -> RawFrame:
        """Grab one monitor as an RGBA8 frame.

        Args:
            monitor: Monitor index (0-based)

        Returns:
            RawFrame of the monitor

        Raises:
            ScreenNotFoundError: If the index is out of range
            CaptureFailedError: If the grab fails
        """
        try:
            raw_monitors = self.sct.monitors
        except mss.exception.ScreenShotError as e:
            raise CaptureFailedError("Failed to enumerate monitors", e) from e

        if not 0 <= monitor < len(raw_monitors) - 1:
            raise ScreenNotFoundError(monitor)

        try:
            sct_img = self.sct.grab(raw_monitors[monitor + 1])  # +1 for mss indexing
        except mss.exception.ScreenShotError as e:
            raise CaptureFailedError(f"Failed to capture screen {monitor}", e) from e

        image = Image.frombytes("RGB", sct_img.size, sct_img.bgra, "raw", "BGRX")
        frame = RawFrame(
            width=image.width, height=image.height, pixels=image.convert("RGBA").tobytes()
        )

        logger.debug("screen_captured", monitor=monitor, size=frame.size)

        return frame

    def close(self) -> None:
        """Close screen capture resources."""
        if self._sct is not None:
            self._sct.close()
            self._sct = None
        logger.debug("mss_capture_closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
