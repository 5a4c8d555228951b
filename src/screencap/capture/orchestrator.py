"""Capture orchestrator.

Dispatches a CaptureRequest to the backend for its mode and turns the
result into a single outcome with an exit code.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from ..exceptions import ScreenshotException
from ..hal import HALContainer, Monitor
from ..logging import LogContext, get_logger
from ..model import CapturedArtifact, CaptureMode, CaptureRequest
from ..persistence import ImagePersistence
from .external_tool import ExternalToolBackend
from .fullscreen import FullscreenBackend

logger = get_logger(__name__)

EXIT_SUCCESS = 0


@dataclass
class CaptureOutcome:
    """Result of one orchestrated request.

    Attributes:
        artifacts: Files produced (empty on failure)
        error: Error that stopped the request, if any
    """

    artifacts: list[CapturedArtifact] = field(default_factory=list)
    error: ScreenshotException | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        if self.error is None:
            return EXIT_SUCCESS
        return self.error.exit_code


class CaptureOrchestrator:
    """Coordinates capture backends for the three capture modes."""

    def __init__(
        self,
        hal: HALContainer,
        persistence: ImagePersistence | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            hal: Screen capture and process runner collaborators
            persistence: Image writer for fullscreen captures
            sleep: Blocking wait used for the pre-capture delay
            clock: Source of filename timestamps
        """
        self.hal = hal
        self._sleep = sleep
        self.fullscreen = FullscreenBackend(hal.screen_capture, persistence, clock=clock)
        self.external = ExternalToolBackend(hal.process_runner, hal.platform, clock=clock)

        self._backends: dict[CaptureMode, Callable[[CaptureRequest], CapturedArtifact]] = {
            CaptureMode.FULLSCREEN: self.fullscreen.capture,
            CaptureMode.SELECTION: self.external.capture,
            CaptureMode.WINDOW: self.external.capture,
        }

    def _wait(self, request: CaptureRequest) -> None:
        if request.delay > 0:
            logger.debug("capture_delayed", seconds=request.delay)
            self._sleep(request.delay)

    def execute(self, request: CaptureRequest) -> CapturedArtifact:
        """Run one request and return its artifact.

        Raises:
            ScreenshotException: Whatever the backend raised
        """
        with LogContext(logger, mode=request.mode.value) as log:
            self._wait(request)
            artifact = self._backends[request.mode](request)
            log.info("capture_completed", path=str(artifact.path))
            return artifact

    def capture_all_screens(self, request: CaptureRequest) -> list[CapturedArtifact]:
        """Capture every screen; partial success is success.

        Raises:
            NoScreensFoundError: If no screens are available
            CaptureFailedError: If no screen could be captured
        """
        self._wait(request)
        return self.fullscreen.capture_all(request)

    def list_screens(self) -> list[Monitor]:
        """Enumerate screens without capturing anything."""
        return self.hal.screen_capture.get_monitors()

    def run(self, request: CaptureRequest, all_screens: bool = False) -> CaptureOutcome:
        """Run a request and map the result to an outcome.

        Args:
            request: Request to run
            all_screens: Capture every screen (fullscreen mode only)

        Returns:
            Outcome holding either the artifacts or the error
        """
        try:
            if all_screens and request.mode == CaptureMode.FULLSCREEN:
                artifacts = self.capture_all_screens(request)
            else:
                artifacts = [self.execute(request)]
        except ScreenshotException as e:
            logger.debug("capture_failed", mode=request.mode.value, error=str(e))
            return CaptureOutcome(error=e)

        return CaptureOutcome(artifacts=artifacts)
