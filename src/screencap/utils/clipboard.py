"""Clipboard sink for written captures.

The file is decoded to an uncompressed RGB grid and handed to the platform
clipboard as a PNG through an external helper tool.
"""

import os
import tempfile
from io import BytesIO
from pathlib import Path

from PIL import Image

from ..capture.tool_chains import ToolSpec, run_tool_chain
from ..config import Platform, detect_platform, is_wayland_session
from ..exceptions import ClipboardError, ExternalCommandFailedError, PlatformNotSupportedError
from ..hal.interfaces import IProcessRunner
from ..logging import get_logger

logger = get_logger(__name__)


def _fixed_args(*args: str):
    def build(path: Path) -> list[str]:
        return list(args)

    return build


def _osascript_args(path: Path) -> list[str]:
    script = f'set the clipboard to (read (POSIX file "{path}") as «class PNGf»)'
    return ["-e", script]


def _powershell_args(path: Path) -> list[str]:
    script = (
        "Add-Type -AssemblyName System.Windows.Forms, System.Drawing; "
        f"[System.Windows.Forms.Clipboard]::SetImage([System.Drawing.Image]::FromFile('{path}'))"
    )
    return ["-NoProfile", "-STA", "-Command", script]


_WL_COPY = ToolSpec("wl-copy", _fixed_args("--type", "image/png"), "Wayland clipboard")
_XCLIP = ToolSpec(
    "xclip", _fixed_args("-selection", "clipboard", "-t", "image/png", "-i"), "X11 clipboard"
)
_OSASCRIPT = ToolSpec("osascript", _osascript_args, "macOS pasteboard")
_POWERSHELL = ToolSpec("powershell", _powershell_args, "Windows Forms clipboard")


def clipboard_chain(platform: Platform) -> tuple[ToolSpec, ...] | None:
    """Clipboard helpers to try on a platform, or None if there are none."""
    if platform == Platform.LINUX:
        return (_WL_COPY, _XCLIP) if is_wayland_session() else (_XCLIP,)
    if platform == Platform.MACOS:
        return (_OSASCRIPT,)
    if platform == Platform.WINDOWS:
        return (_POWERSHELL,)
    return None


def _to_rgb_png(path: Path) -> bytes:
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
    except OSError as e:
        raise ClipboardError(f"Failed to read image {path}", e) from e

    buffer = BytesIO()
    rgb.save(buffer, format="PNG")
    return buffer.getvalue()


def copy_file_to_clipboard(
    path: Path, runner: IProcessRunner, platform: Platform | None = None
) -> None:
    """Copy an image file to the clipboard.

    Args:
        path: Image file to copy
        runner: Process runner used to reach the clipboard helper
        platform: Target platform, detected when omitted

    Raises:
        PlatformNotSupportedError: If no clipboard helper exists for the platform
        ClipboardError: If the image cannot be decoded or no helper succeeds
    """
    platform = platform or detect_platform()
    chain = clipboard_chain(platform)
    if chain is None:
        logger.warning("clipboard_unsupported", platform=platform.value)
        raise PlatformNotSupportedError("Clipboard not supported on this platform")

    logger.debug("copying_to_clipboard", path=str(path))
    png = _to_rgb_png(path)

    try:
        if platform == Platform.LINUX:
            copied = run_tool_chain(runner, chain, path, stdin=png, capture_output=False)
        else:
            # osascript and PowerShell read the image from a file
            fd, temp_name = tempfile.mkstemp(suffix=".png", prefix="screencap-")
            temp_path = Path(temp_name)
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(png)
                copied = run_tool_chain(runner, chain, temp_path, capture_output=False)
            finally:
                temp_path.unlink(missing_ok=True)
    except ExternalCommandFailedError as e:
        raise ClipboardError("No clipboard helper could be launched", e) from e

    if not copied:
        raise ClipboardError(f"Failed to copy {path} to clipboard")

    logger.info("copied_to_clipboard", path=str(path))
