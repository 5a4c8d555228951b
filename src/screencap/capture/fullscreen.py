"""Fullscreen capture backend.

Grabs whole screens through the in-process capture primitive and writes
them through ImagePersistence.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..exceptions import (
    CaptureFailedError,
    NoScreensFoundError,
    ScreenNotFoundError,
    ScreenshotException,
)
from ..hal.interfaces import IScreenCapture, Monitor
from ..logging import get_logger
from ..model import CapturedArtifact, CaptureMode, CaptureRequest
from ..persistence import ImagePersistence, generate_filename

logger = get_logger(__name__)


class FullscreenBackend:
    """Captures one screen, or every screen, to image files."""

    def __init__(
        self,
        screen_capture: IScreenCapture,
        persistence: ImagePersistence | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the backend.

        Args:
            screen_capture: Screen grab primitive
            persistence: Image writer
            clock: Source of the timestamp used in filenames
        """
        self.screen_capture = screen_capture
        self.persistence = persistence or ImagePersistence()
        self._clock = clock

    def _enumerate(self) -> list[Monitor]:
        monitors = self.screen_capture.get_monitors()
        if not monitors:
            raise NoScreensFoundError()
        return monitors

    def _destination(self, request: CaptureRequest, screen_index: int) -> Path:
        filename = generate_filename(
            request.filename_template,
            self._clock(),
            f"screen_{screen_index}",
            request.extension,
            request.custom_filename,
        )
        return request.output_directory / filename

    def _capture_screen(self, request: CaptureRequest, screen_index: int) -> CapturedArtifact:
        frame = self.screen_capture.grab(screen_index)
        logger.debug("frame_captured", screen=screen_index, size=frame.size, bytes=len(frame.pixels))
        return self.persistence.persist(
            frame,
            request.format,
            request.quality,
            self._destination(request, screen_index),
            mode=CaptureMode.FULLSCREEN,
            screen_index=screen_index,
        )

    def capture(self, request: CaptureRequest) -> CapturedArtifact:
        """Capture the screen addressed by ``request.screen_index``.

        Raises:
            NoScreensFoundError: If no screens are available
            ScreenNotFoundError: If the index is out of range
        """
        logger.debug("fullscreen_capture_started", screen=request.screen_index)

        monitors = self._enumerate()
        if not 0 <= request.screen_index < len(monitors):
            raise ScreenNotFoundError(request.screen_index)

        monitor = monitors[request.screen_index]
        logger.debug("capturing_screen", screen=monitor.index, resolution=monitor.resolution)

        return self._capture_screen(request, request.screen_index)

    def capture_all(self, request: CaptureRequest) -> list[CapturedArtifact]:
        """Capture every screen independently.

        A screen that fails to capture or save is logged and skipped.

        Returns:
            Artifacts of the screens that succeeded, in screen order

        Raises:
            NoScreensFoundError: If no screens are available
            CaptureFailedError: If not a single screen succeeded
        """
        monitors = self._enumerate()
        artifacts: list[CapturedArtifact] = []

        for monitor in monitors:
            try:
                artifacts.append(self._capture_screen(request, monitor.index))
            except ScreenshotException as e:
                logger.warning("screen_capture_skipped", screen=monitor.index, error=str(e))

        if not artifacts:
            raise CaptureFailedError("No screens captured")

        logger.info("all_screens_captured", captured=len(artifacts), total=len(monitors))
        return artifacts
