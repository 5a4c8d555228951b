"""Tests for the clipboard sink."""

from io import BytesIO

import pytest
from PIL import Image

from conftest import MISSING, FakeProcessRunner
from screencap.config import Platform
from screencap.exceptions import ClipboardError, PlatformNotSupportedError
from screencap.utils import clipboard_chain, copy_file_to_clipboard


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "shot.png"
    Image.new("RGBA", (3, 2), color=(255, 0, 0, 128)).save(path)
    return path


@pytest.fixture
def x11(monkeypatch):
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
    monkeypatch.setenv("XDG_SESSION_TYPE", "x11")


@pytest.fixture
def wayland(monkeypatch):
    monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")


def test_linux_chain_depends_on_session(x11) -> None:
    assert [t.program for t in clipboard_chain(Platform.LINUX)] == ["xclip"]


def test_wayland_prefers_wl_copy(wayland) -> None:
    assert [t.program for t in clipboard_chain(Platform.LINUX)] == ["wl-copy", "xclip"]


def test_linux_sends_rgb_png_on_stdin(x11, image_file) -> None:
    runner = FakeProcessRunner()

    copy_file_to_clipboard(image_file, runner, Platform.LINUX)

    program, args, stdin = runner.calls[0]
    assert program == "xclip"
    assert args == ["-selection", "clipboard", "-t", "image/png", "-i"]
    with Image.open(BytesIO(stdin)) as image:
        assert image.format == "PNG"
        assert image.mode == "RGB"
        assert image.size == (3, 2)


def test_wayland_falls_back_to_xclip(wayland, image_file) -> None:
    runner = FakeProcessRunner({"wl-copy": MISSING})

    copy_file_to_clipboard(image_file, runner, Platform.LINUX)

    assert runner.programs == ["wl-copy", "xclip"]


def test_macos_uses_temp_file(image_file) -> None:
    runner = FakeProcessRunner()

    copy_file_to_clipboard(image_file, runner, Platform.MACOS)

    program, args, stdin = runner.calls[0]
    assert program == "osascript"
    assert stdin is None
    assert "screencap-" in args[1]
    assert "PNGf" in args[1]


def test_windows_uses_sta_powershell(image_file) -> None:
    runner = FakeProcessRunner()

    copy_file_to_clipboard(image_file, runner, Platform.WINDOWS)

    program, args, _ = runner.calls[0]
    assert program == "powershell"
    assert "-STA" in args
    assert "SetImage" in args[-1]


def test_helper_failure(x11, image_file) -> None:
    with pytest.raises(ClipboardError):
        copy_file_to_clipboard(image_file, FakeProcessRunner({"xclip": 1}), Platform.LINUX)


def test_helper_missing(x11, image_file) -> None:
    with pytest.raises(ClipboardError, match="could be launched"):
        copy_file_to_clipboard(image_file, FakeProcessRunner({"xclip": MISSING}), Platform.LINUX)


def test_unreadable_image(x11, tmp_path) -> None:
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"not an image")

    with pytest.raises(ClipboardError, match="Failed to read image"):
        copy_file_to_clipboard(broken, FakeProcessRunner(), Platform.LINUX)


def test_unknown_platform(image_file) -> None:
    runner = FakeProcessRunner()

    with pytest.raises(PlatformNotSupportedError):
        copy_file_to_clipboard(image_file, runner, Platform.UNKNOWN)

    assert runner.calls == []


def test_helpers_run_without_output_capture(wayland, image_file) -> None:
    runner = FakeProcessRunner({"wl-copy": 1})

    copy_file_to_clipboard(image_file, runner, Platform.LINUX)

    assert runner.programs == ["wl-copy", "xclip"]
    assert runner.capture_flags == [False, False]
