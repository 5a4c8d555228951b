"""Selection and window capture through external interactive tools."""

from collections.abc import Callable
from datetime import datetime

from ..config import Platform
from ..exceptions import CaptureFailedError, PlatformNotSupportedError
from ..hal.interfaces import IProcessRunner
from ..logging import get_logger
from ..model import CapturedArtifact, CaptureMode, CaptureRequest
from ..persistence import ensure_unique, generate_filename, validate_destination
from .tool_chains import get_tool_chain, run_tool_chain

logger = get_logger(__name__)


class ExternalToolBackend:
    """Runs the platform tool chain for selection and window captures.

    The tools write the file themselves; this backend only picks the
    path, runs the chain and checks that the file really appeared.
    """

    def __init__(
        self,
        runner: IProcessRunner,
        platform: Platform,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.runner = runner
        self.platform = platform
        self._clock = clock

    def _unsupported(self, mode: CaptureMode) -> PlatformNotSupportedError:
        label = mode.value.capitalize()
        if self.platform == Platform.WINDOWS:
            return PlatformNotSupportedError(f"{label} capture not yet implemented for Windows")
        return PlatformNotSupportedError(f"{label} capture not supported on this platform")

    def capture(self, request: CaptureRequest) -> CapturedArtifact:
        """Run the tool chain for ``request.mode``.

        Raises:
            PlatformNotSupportedError: If no chain exists for this platform and mode
            ExternalCommandFailedError: If the last tool could not be launched
            CaptureFailedError: If no tool succeeded or no file was produced
        """
        mode = request.mode
        chain = get_tool_chain(self.platform, mode)
        if chain is None:
            raise self._unsupported(mode)

        logger.debug("external_capture_started", mode=mode.value, platform=self.platform.value)

        filename = generate_filename(
            request.filename_template,
            self._clock(),
            mode.value,
            request.extension,
            request.custom_filename,
        )
        destination = request.output_directory / filename
        validate_destination(destination)
        path = ensure_unique(destination)

        success = run_tool_chain(self.runner, chain, path)

        # Some tools exit 0 on cancel without writing anything
        if success and path.exists():
            logger.info("capture_saved", mode=mode.value, path=str(path))
            return CapturedArtifact(path=path.absolute(), mode=mode)

        raise CaptureFailedError(f"{mode.value.capitalize()} capture failed")
