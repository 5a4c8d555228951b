"""Destination path building and validation.

Filename templating, sanitization, traversal rejection and collision
avoidance for capture files.
"""

import re
import uuid
from datetime import datetime
from pathlib import Path

from ..exceptions import PermissionDeniedError, SaveError
from ..logging import get_logger

logger = get_logger(__name__)

# Characters invalid in filenames on at least one supported platform
_FORBIDDEN_CHARS = re.compile(r'[<>:"|?*/\\]')

MAX_COLLISION_COUNTER = 9999


def _is_control(char: str) -> bool:
    code = ord(char)
    return code < 0x20 or 0x7F <= code <= 0x9F


def sanitize(name: str) -> str:
    """Replace forbidden and control characters with underscores.

    Every other character is kept, so the length never changes.

    Args:
        name: Raw filename

    Returns:
        Sanitized filename
    """
    cleaned = _FORBIDDEN_CHARS.sub("_", name)
    return "".join("_" if _is_control(c) else c for c in cleaned)


def generate_filename(
    template: str,
    timestamp: datetime,
    prefix: str,
    extension: str,
    custom: str | None = None,
) -> str:
    """Build a capture filename.

    A custom name bypasses template and timestamp entirely and is
    sanitized. Otherwise the template is expanded with strftime and
    prefixed with ``prefix_`` when a prefix is given.

    Args:
        template: strftime pattern
        timestamp: Time the template is expanded against
        prefix: Optional prefix such as ``screen_0``
        extension: File extension without the dot
        custom: Fixed name overriding the template

    Returns:
        Filename ending in ``.extension``
    """
    if custom is not None:
        return f"{sanitize(custom)}.{extension}"

    formatted = timestamp.strftime(template)
    name = f"{prefix}_{formatted}" if prefix else formatted
    return f"{name}.{extension}"


def validate_destination(path: Path) -> None:
    """Reject traversal attempts and create missing parent directories.

    The check is textual: any ``..`` in the path string is refused before
    anything touches the filesystem. Symlinks are not resolved.

    Args:
        path: Destination file path

    Raises:
        PermissionDeniedError: On ``..`` in the path or if the parent cannot be created
        SaveError: If creating the parent fails for another reason
    """
    if ".." in str(path):
        raise PermissionDeniedError("Path traversal not allowed")

    parent = path.parent
    if parent.exists():
        return

    try:
        parent.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        raise PermissionDeniedError(f"Cannot create directory {parent}", e) from e
    except OSError as e:
        raise SaveError(f"Cannot create directory {parent}", e) from e

    logger.debug("directory_created", path=str(parent))


def ensure_unique(path: Path) -> Path:
    """Return a path that does not collide with an existing file.

    Probes ``stem_1.ext`` through ``stem_9999.ext``; past that a random
    token is appended. This is a check-then-act lookup: another process
    may still create the same name before it is written.

    Args:
        path: Preferred path

    Returns:
        ``path`` itself if free, otherwise the first free variant
    """
    if not path.exists():
        return path

    stem = path.stem
    suffix = path.suffix
    parent = path.parent

    for counter in range(1, MAX_COLLISION_COUNTER + 1):
        candidate = parent / f"{stem}_{counter}{suffix}"
        if not candidate.exists():
            logger.debug("filename_collision_resolved", original=str(path), resolved=str(candidate))
            return candidate

    unique = parent / f"{stem}_{MAX_COLLISION_COUNTER + 1}_{uuid.uuid4()}{suffix}"
    logger.warning("filename_counter_exhausted", original=str(path), resolved=str(unique))
    return unique
