"""Raw frame - an unencoded RGBA8 screen grab."""

from dataclasses import dataclass

from ..exceptions import ImageProcessingError

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class RawFrame:
    """Tightly packed RGBA8 pixel buffer plus its geometry.

    A frame belongs to the capture call that produced it and is consumed
    once by ImagePersistence. The buffer length is checked at encoding time
    so a mismatch is reported as an encoding error with no file written.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: RGBA8 bytes, row-major, no padding
    """

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ImageProcessingError(
                f"Frame dimensions must be positive, got {self.width}x{self.height}"
            )

    @property
    def size(self) -> tuple[int, int]:
        """Get (width, height)."""
        return (self.width, self.height)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def expected_length(self) -> int:
        """Buffer length an RGBA8 frame of this geometry must have."""
        return self.pixel_count * BYTES_PER_PIXEL

    def __repr__(self) -> str:
        return f"RawFrame({self.width}x{self.height}, {len(self.pixels)} bytes)"
