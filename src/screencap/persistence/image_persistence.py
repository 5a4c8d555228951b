"""Image persistence - encode a RawFrame and write it to disk.

PNG keeps the RGBA buffer as-is. JPEG has no alpha channel, so the alpha
byte of every pixel is dropped first. WebP encoding is not offered.
"""

import os
import uuid
from io import BytesIO
from pathlib import Path

from PIL import Image

from ..exceptions import (
    ImageProcessingError,
    InvalidQualityError,
    PermissionDeniedError,
    PlatformNotSupportedError,
    SaveError,
)
from ..logging import get_logger
from ..model import BYTES_PER_PIXEL, CapturedArtifact, CaptureMode, ImageFormat, RawFrame
from . import path_resolver

logger = get_logger(__name__)

RGB_BYTES_PER_PIXEL = 3


def strip_alpha(pixels: bytes) -> bytes:
    """Drop the 4th byte of every 4-byte RGBA group.

    Args:
        pixels: RGBA8 buffer

    Returns:
        RGB8 buffer
    """
    rgb = bytearray(pixels)
    del rgb[BYTES_PER_PIXEL - 1 :: BYTES_PER_PIXEL]
    return bytes(rgb)


def _encode_png(frame: RawFrame) -> bytes:
    if len(frame.pixels) != frame.expected_length:
        raise ImageProcessingError(
            f"RGBA buffer length does not match {frame.width}x{frame.height}",
            expected_length=frame.expected_length,
            actual_length=len(frame.pixels),
        )

    image = Image.frombytes("RGBA", frame.size, frame.pixels)
    buffer = BytesIO()
    image.save(buffer, format=ImageFormat.PNG.pil_format)
    return buffer.getvalue()


def _encode_jpeg(frame: RawFrame, quality: int) -> bytes:
    if not 1 <= quality <= 100:
        raise InvalidQualityError(quality)

    if len(frame.pixels) % BYTES_PER_PIXEL != 0:
        raise ImageProcessingError(
            "RGBA buffer length is not a multiple of 4",
            expected_length=frame.expected_length,
            actual_length=len(frame.pixels),
        )

    rgb = strip_alpha(frame.pixels)
    expected = frame.pixel_count * RGB_BYTES_PER_PIXEL
    if len(rgb) != expected:
        raise ImageProcessingError(
            f"RGB buffer length does not match {frame.width}x{frame.height}",
            expected_length=expected,
            actual_length=len(rgb),
        )

    image = Image.frombytes("RGB", frame.size, rgb)
    buffer = BytesIO()
    image.save(buffer, format=ImageFormat.JPEG.pil_format, quality=quality)
    return buffer.getvalue()


def encode(frame: RawFrame, image_format: ImageFormat, quality: int) -> bytes:
    """Encode a frame entirely in memory.

    Args:
        frame: Pixels to encode
        image_format: Target format
        quality: JPEG quality (ignored for PNG)

    Returns:
        Encoded file contents

    Raises:
        PlatformNotSupportedError: For WebP
        ImageProcessingError: If the buffer does not match the frame geometry
        InvalidQualityError: If a JPEG quality is out of range
    """
    if image_format == ImageFormat.WEBP:
        raise PlatformNotSupportedError("WebP format not yet supported")

    try:
        if image_format == ImageFormat.PNG:
            return _encode_png(frame)
        return _encode_jpeg(frame, quality)
    except (ValueError, OSError) as e:
        raise ImageProcessingError(f"Failed to encode {image_format.value}", e) from e


def _write_atomically(path: Path, data: bytes) -> None:
    """Write data to a hidden temp file, then rename it into place."""
    temp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
    try:
        temp_path.write_bytes(data)
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise


class ImagePersistence:
    """Writes RawFrames to disk in the requested format."""

    def persist(
        self,
        frame: RawFrame,
        image_format: ImageFormat,
        quality: int,
        destination: Path,
        mode: CaptureMode = CaptureMode.FULLSCREEN,
        screen_index: int | None = None,
    ) -> CapturedArtifact:
        """Encode a frame and write exactly one file.

        The frame is encoded first; only then is the destination validated
        and made unique through the path resolver, so a failed encode
        leaves the filesystem untouched.

        Args:
            frame: Pixels to write
            image_format: Target format
            quality: JPEG quality, 1-100
            destination: Preferred file path
            mode: Capture mode recorded on the artifact
            screen_index: Screen recorded on the artifact

        Returns:
            Artifact for the written file

        Raises:
            PlatformNotSupportedError: For WebP
            ImageProcessingError: On buffer/geometry mismatch
            PermissionDeniedError: On traversal or permission problems
            SaveError: On any other write failure
        """
        data = encode(frame, image_format, quality)

        path_resolver.validate_destination(destination)
        path = path_resolver.ensure_unique(destination)

        logger.debug("saving_image", path=str(path), format=image_format.value, size=frame.size)

        try:
            _write_atomically(path, data)
        except PermissionError as e:
            raise PermissionDeniedError(f"Cannot write {path}", e) from e
        except OSError as e:
            raise SaveError(f"Failed to save image {path}", e) from e

        logger.info("image_saved", path=str(path), format=image_format.value, bytes=len(data))

        return CapturedArtifact(path=path.absolute(), mode=mode, screen_index=screen_index)
