"""Retention cleanup for old captures."""

import time
from pathlib import Path

from ..exceptions import ConfigurationError, SaveError
from ..logging import get_logger

logger = get_logger(__name__)

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".webp"})
SECONDS_PER_DAY = 86400


def prune_old_captures(
    directory: Path, max_age_days: int, now: float | None = None
) -> list[Path]:
    """Delete image files older than ``max_age_days`` from a directory.

    Only regular files with an image extension directly inside the
    directory are considered.

    Args:
        directory: Capture output directory
        max_age_days: Age threshold in days, must be positive
        now: Reference time (epoch seconds), defaults to the current time

    Returns:
        Paths that were deleted
    """
    if max_age_days < 1:
        raise ConfigurationError(
            f"Retention must be at least one day, got {max_age_days}",
            config_key="cleanup_after_days",
        )

    if not directory.is_dir():
        logger.debug("cleanup_directory_missing", path=str(directory))
        return []

    cutoff = (now if now is not None else time.time()) - max_age_days * SECONDS_PER_DAY
    removed: list[Path] = []

    for entry in sorted(directory.iterdir()):
        if not entry.is_file() or entry.suffix.lower() not in IMAGE_EXTENSIONS:
            continue
        if entry.stat().st_mtime >= cutoff:
            continue
        try:
            entry.unlink()
        except OSError as e:
            raise SaveError(f"Failed to delete {entry}", e) from e
        removed.append(entry)
        logger.info("capture_pruned", path=str(entry))

    return removed
