"""Model package - values flowing through the capture pipeline."""

from .capture_request import CaptureMode, CapturedArtifact, CaptureRequest, ImageFormat
from .raw_frame import BYTES_PER_PIXEL, RawFrame

__all__ = [
    "CaptureMode",
    "CaptureRequest",
    "CapturedArtifact",
    "ImageFormat",
    "RawFrame",
    "BYTES_PER_PIXEL",
]
