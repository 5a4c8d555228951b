"""Tests for the platform tool chain table and runner."""

from pathlib import Path

import pytest

from conftest import MISSING, FakeProcessRunner
from screencap.capture import TOOL_CHAINS, ToolSpec, get_tool_chain, run_tool_chain
from screencap.capture.tool_chains import flags_then_path
from screencap.config import Platform
from screencap.exceptions import ExternalCommandFailedError
from screencap.model import CaptureMode

TARGET = Path("/tmp/shot.png")


def test_linux_selection_order() -> None:
    chain = get_tool_chain(Platform.LINUX, CaptureMode.SELECTION)
    assert [tool.program for tool in chain] == ["maim", "scrot", "import", "gnome-screenshot"]
    assert chain[-1].build_args(TARGET) == ["-a", "-f", str(TARGET)]


def test_macos_chains() -> None:
    selection = get_tool_chain(Platform.MACOS, CaptureMode.SELECTION)
    window = get_tool_chain(Platform.MACOS, CaptureMode.WINDOW)

    assert selection[0].build_args(TARGET) == ["-s", "-x", "-o", str(TARGET)]
    assert window[0].build_args(TARGET) == ["-W", "-x", "-o", str(TARGET)]


@pytest.mark.parametrize("platform", [Platform.WINDOWS, Platform.UNKNOWN])
@pytest.mark.parametrize("mode", [CaptureMode.SELECTION, CaptureMode.WINDOW])
def test_unsupported_combinations_have_no_chain(platform, mode) -> None:
    assert get_tool_chain(platform, mode) is None


def test_fullscreen_never_uses_tools() -> None:
    assert all(mode != CaptureMode.FULLSCREEN for _, mode in TOOL_CHAINS)


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        TOOL_CHAINS[(Platform.WINDOWS, CaptureMode.WINDOW)] = ()  # type: ignore[index]


class TestRunToolChain:
    """Tests for run_tool_chain."""

    chain = (
        ToolSpec("first", flags_then_path("-a")),
        ToolSpec("second", flags_then_path()),
        ToolSpec("third", flags_then_path("-z")),
    )

    def test_stops_at_first_success(self) -> None:
        runner = FakeProcessRunner()

        assert run_tool_chain(runner, self.chain, TARGET) is True
        assert runner.calls == [("first", ["-a", str(TARGET)], None)]

    def test_falls_through_failures_and_missing_tools(self) -> None:
        runner = FakeProcessRunner({"first": MISSING, "second": 1})

        assert run_tool_chain(runner, self.chain, TARGET) is True
        assert runner.programs == ["first", "second", "third"]

    def test_all_fail_returns_false(self) -> None:
        runner = FakeProcessRunner({"first": 1, "second": 2, "third": 1})
        assert run_tool_chain(runner, self.chain, TARGET) is False

    def test_missing_last_tool_propagates(self) -> None:
        runner = FakeProcessRunner({"first": 1, "second": 1, "third": MISSING})

        with pytest.raises(ExternalCommandFailedError) as exc_info:
            run_tool_chain(runner, self.chain, TARGET)

        assert exc_info.value.program == "third"

    def test_stdin_passed_to_every_tool(self) -> None:
        runner = FakeProcessRunner({"first": 1})

        run_tool_chain(runner, self.chain, TARGET, stdin=b"png")

        assert [stdin for _, _, stdin in runner.calls] == [b"png", b"png"]
