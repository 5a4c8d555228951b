"""Open a capture with the system's default viewer."""

from pathlib import Path

from ..capture.tool_chains import ToolSpec, flags_then_path, run_tool_chain
from ..config import Platform
from ..exceptions import ExternalCommandFailedError
from ..hal.interfaces import IProcessRunner
from ..logging import get_logger

logger = get_logger(__name__)

_OPENERS: dict[Platform, ToolSpec] = {
    Platform.LINUX: ToolSpec("xdg-open", flags_then_path()),
    Platform.MACOS: ToolSpec("open", flags_then_path()),
    Platform.WINDOWS: ToolSpec("cmd", flags_then_path("/c", "start", "")),
}


def open_file(path: Path, runner: IProcessRunner, platform: Platform) -> bool:
    """Open a file with the default application.

    Failure is reported through the log and the return value only; the
    capture itself has already succeeded at this point.

    Returns:
        True if the viewer was launched successfully
    """
    opener = _OPENERS.get(platform)
    if opener is None:
        logger.warning("auto_open_unsupported", platform=platform.value)
        return False

    try:
        opened = run_tool_chain(runner, (opener,), path, capture_output=False)
    except ExternalCommandFailedError as e:
        logger.warning("auto_open_failed", path=str(path), error=str(e))
        return False

    if not opened:
        logger.warning("auto_open_failed", path=str(path), program=opener.program)
    return opened
