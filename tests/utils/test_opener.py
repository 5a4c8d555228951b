"""Tests for opening captures in the default viewer."""

from pathlib import Path

import pytest

from conftest import MISSING, FakeProcessRunner
from screencap.config import Platform
from screencap.utils import open_file

TARGET = Path("/tmp/shot.png")


@pytest.mark.parametrize(
    "platform,program,args",
    [
        (Platform.LINUX, "xdg-open", [str(TARGET)]),
        (Platform.MACOS, "open", [str(TARGET)]),
        (Platform.WINDOWS, "cmd", ["/c", "start", "", str(TARGET)]),
    ],
)
def test_platform_openers(platform, program, args) -> None:
    runner = FakeProcessRunner()

    assert open_file(TARGET, runner, platform) is True
    assert runner.calls == [(program, args, None)]


def test_failure_is_reported_not_raised() -> None:
    assert open_file(TARGET, FakeProcessRunner({"xdg-open": 4}), Platform.LINUX) is False
    assert open_file(TARGET, FakeProcessRunner({"xdg-open": MISSING}), Platform.LINUX) is False


def test_unknown_platform() -> None:
    runner = FakeProcessRunner()
    assert open_file(TARGET, runner, Platform.UNKNOWN) is False
    assert runner.calls == []


def test_viewer_runs_without_output_capture() -> None:
    runner = FakeProcessRunner()

    open_file(TARGET, runner, Platform.MACOS)

    assert runner.capture_flags == [False]
