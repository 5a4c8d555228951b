"""Platform tool chains for interactive capture modes.

Selection and window captures are delegated to external tools. Which tools
run, and in what order, is a fixed table keyed by (platform, mode); a
missing entry means the combination is unsupported.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from ..config import Platform
from ..exceptions import ExternalCommandFailedError
from ..hal.interfaces import IProcessRunner
from ..logging import get_logger
from ..model import CaptureMode

logger = get_logger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    """How to invoke one external tool.

    Attributes:
        program: Executable name
        build_args: Builds the argument list for a target path
        description: Human-readable note for logs
    """

    program: str
    build_args: Callable[[Path], list[str]]
    description: str = ""


def flags_then_path(*flags: str) -> Callable[[Path], list[str]]:
    """Argument builder placing fixed flags before the target path."""

    def build(path: Path) -> list[str]:
        return [*flags, str(path)]

    return build


_LINUX_SELECTION = (
    ToolSpec("maim", flags_then_path("-s"), "fast, no flash"),
    ToolSpec("scrot", flags_then_path("-s"), "fast alternative"),
    ToolSpec("import", flags_then_path(), "ImageMagick generic screenshot"),
    ToolSpec("gnome-screenshot", flags_then_path("-a", "-f"), "may show a brief flash"),
)

_LINUX_WINDOW = (ToolSpec("gnome-screenshot", flags_then_path("-w", "-f"), "window mode"),)

# -x: no sound, -o: no window shadow
_MACOS_SELECTION = (ToolSpec("screencapture", flags_then_path("-s", "-x", "-o"), "region"),)

_MACOS_WINDOW = (ToolSpec("screencapture", flags_then_path("-W", "-x", "-o"), "window"),)

TOOL_CHAINS: MappingProxyType[tuple[Platform, CaptureMode], tuple[ToolSpec, ...]] = (
    MappingProxyType(
        {
            (Platform.LINUX, CaptureMode.SELECTION): _LINUX_SELECTION,
            (Platform.LINUX, CaptureMode.WINDOW): _LINUX_WINDOW,
            (Platform.MACOS, CaptureMode.SELECTION): _MACOS_SELECTION,
            (Platform.MACOS, CaptureMode.WINDOW): _MACOS_WINDOW,
        }
    )
)


def get_tool_chain(platform: Platform, mode: CaptureMode) -> tuple[ToolSpec, ...] | None:
    """Look up the tool chain for a platform and mode, or None if unsupported."""
    return TOOL_CHAINS.get((platform, mode))


def run_tool_chain(
    runner: IProcessRunner,
    chain: Sequence[ToolSpec],
    path: Path,
    stdin: bytes | None = None,
    capture_output: bool = True,
) -> bool:
    """Try each tool in order until one reports success.

    A tool that cannot be launched is skipped, unless it is the last one in
    the chain, in which case the launch error propagates.

    Args:
        runner: Process runner
        chain: Tools in priority order
        path: Target path passed to each tool
        stdin: Optional bytes fed to each tool
        capture_output: Collect tool output; pass False for helpers that fork

    Returns:
        True if some tool exited with status 0

    Raises:
        ExternalCommandFailedError: If the last tool could not be launched
    """
    last = len(chain) - 1

    for position, tool in enumerate(chain):
        try:
            status = runner.run(
                tool.program, tool.build_args(path), stdin=stdin, capture_output=capture_output
            )
        except ExternalCommandFailedError:
            if position == last:
                raise
            logger.debug("tool_unavailable", program=tool.program)
            continue

        if status == 0:
            logger.debug("tool_succeeded", program=tool.program, description=tool.description)
            return True

        logger.debug("tool_failed", program=tool.program, status=status)

    return False
