"""Pytest configuration and fixtures."""

import os
from collections.abc import Sequence
from datetime import datetime
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

# Keep structlog quiet; set before screencap configures logging lazily
os.environ["SCREENCAP_DISABLE_CONSOLE_LOGGING"] = "1"

from screencap.config import Platform, reset_settings  # noqa: E402
from screencap.exceptions import CaptureFailedError, ExternalCommandFailedError  # noqa: E402
from screencap.hal import HALContainer, IProcessRunner, IScreenCapture, Monitor  # noqa: E402
from screencap.model import CaptureMode, CaptureRequest, RawFrame  # noqa: E402

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5)

# Marker for a program that cannot be launched
MISSING = object()


def solid_frame(width: int, height: int, color=(10, 120, 200, 255)) -> RawFrame:
    """Build an RGBA frame filled with one color."""
    return RawFrame(width=width, height=height, pixels=bytes(color) * (width * height))


def png_bytes(width: int = 2, height: int = 2) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height), color="red").save(buffer, format="PNG")
    return buffer.getvalue()


class FakeScreenCapture(IScreenCapture):
    """Screen grab fake with configurable screens and failures."""

    def __init__(self, sizes: Sequence[tuple[int, int]] = ((8, 6),), failing: Sequence[int] = ()):
        self.monitors = []
        x = 0
        for index, (width, height) in enumerate(sizes):
            self.monitors.append(
                Monitor(index=index, x=x, y=0, width=width, height=height, is_primary=index == 0)
            )
            x += width
        self.failing = set(failing)
        self.grabs: list[int] = []
        self.closed = False

    def get_monitors(self) -> list[Monitor]:
        return list(self.monitors)

    def grab(self, monitor: int) -> RawFrame:
        self.grabs.append(monitor)
        if monitor in self.failing:
            raise CaptureFailedError(f"Failed to capture screen {monitor}")
        m = self.monitors[monitor]
        return solid_frame(m.width, m.height, color=((monitor * 40) % 256, 100, 200, 255))

    def close(self) -> None:
        self.closed = True


class FakeProcessRunner(IProcessRunner):
    """Process runner fake.

    ``results`` maps a program to its exit status, or to MISSING when the
    program cannot be launched. Unlisted programs exit 0. When
    ``writes_output`` is set, a successful run writes a PNG to the last
    argument if that is a new absolute path, the way capture tools write
    their target.
    """

    def __init__(self, results: dict | None = None, writes_output: bool = False):
        self.results = results or {}
        self.writes_output = writes_output
        self.calls: list[tuple[str, list[str], bytes | None]] = []
        self.capture_flags: list[bool] = []

    @property
    def programs(self) -> list[str]:
        return [program for program, _, _ in self.calls]

    def run(
        self,
        program: str,
        args: Sequence[str],
        stdin: bytes | None = None,
        capture_output: bool = True,
    ) -> int:
        self.calls.append((program, list(args), stdin))
        self.capture_flags.append(capture_output)
        result = self.results.get(program, 0)
        if result is MISSING:
            raise ExternalCommandFailedError(program, FileNotFoundError(program))
        if result == 0 and self.writes_output and args:
            target = Path(args[-1])
            if target.is_absolute() and not target.exists():
                target.write_bytes(png_bytes())
        return result


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from the caller's screencap environment."""
    for name in list(os.environ):
        if name.startswith("SCREENCAP_") and name != "SCREENCAP_DISABLE_CONSOLE_LOGGING":
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixed_clock():
    """Clock returning a constant timestamp."""
    return lambda: FIXED_TIME


@pytest.fixture
def output_dir(tmp_path):
    """Directory captures are written to."""
    return tmp_path / "shots"


@pytest.fixture
def make_request(output_dir):
    """Factory for capture requests writing into output_dir."""

    def factory(mode: CaptureMode = CaptureMode.FULLSCREEN, **kwargs) -> CaptureRequest:
        kwargs.setdefault("output_directory", output_dir)
        return CaptureRequest(mode=mode, **kwargs)

    return factory


@pytest.fixture
def make_hal():
    """Factory for HAL containers built from fakes."""

    def factory(
        platform: Platform = Platform.LINUX,
        screen_capture: IScreenCapture | None = None,
        runner: IProcessRunner | None = None,
    ) -> HALContainer:
        return HALContainer(
            screen_capture=screen_capture or FakeScreenCapture(),
            process_runner=runner or FakeProcessRunner(writes_output=True),
            platform=platform,
        )

    return factory
