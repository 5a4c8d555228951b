"""Tests for the exception hierarchy and exit code mapping."""

import pytest

from screencap.exceptions import (
    CaptureFailedError,
    ClipboardError,
    ConfigurationError,
    ExternalCommandFailedError,
    ImageProcessingError,
    InvalidFormatError,
    InvalidQualityError,
    NoScreensFoundError,
    PermissionDeniedError,
    PlatformNotSupportedError,
    SaveError,
    ScreenNotFoundError,
    ScreenshotException,
    exit_code_for,
)


@pytest.mark.parametrize(
    "error,code",
    [
        (NoScreensFoundError(), 2),
        (ScreenNotFoundError(1), 2),
        (CaptureFailedError(), 3),
        (SaveError(), 4),
        (PlatformNotSupportedError(), 5),
        (PermissionDeniedError(), 13),
        (InvalidFormatError("bmp"), 1),
        (InvalidQualityError(0), 1),
        (ConfigurationError(), 1),
        (ImageProcessingError(), 1),
        (ClipboardError(), 1),
        (ExternalCommandFailedError("maim"), 1),
    ],
)
def test_exit_codes(error: ScreenshotException, code: int) -> None:
    assert exit_code_for(error) == code


def test_foreign_errors_map_to_one() -> None:
    assert exit_code_for(ValueError("boom")) == 1


def test_messages() -> None:
    assert str(ScreenNotFoundError(3)) == "Screen 3 not found"
    assert str(InvalidFormatError("bmp")) == "Invalid format: bmp"
    assert str(InvalidQualityError(150)) == "Invalid quality value: 150 (must be 1-100)"
    assert str(ExternalCommandFailedError("scrot")) == "External command failed: scrot"


def test_cause_is_chained() -> None:
    cause = OSError("disk full")
    error = SaveError("Failed to save image", cause)

    assert str(error) == "Failed to save image: disk full"
    assert error.__cause__ is cause


def test_all_errors_share_base() -> None:
    for cls in (SaveError, CaptureFailedError, ConfigurationError, ClipboardError):
        assert issubclass(cls, ScreenshotException)
    assert issubclass(InvalidFormatError, ConfigurationError)
