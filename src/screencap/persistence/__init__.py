"""Persistence package - filenames, encoding and retention."""

from .image_persistence import ImagePersistence, encode, strip_alpha
from .path_resolver import ensure_unique, generate_filename, sanitize, validate_destination
from .retention import prune_old_captures

__all__ = [
    "ImagePersistence",
    "encode",
    "strip_alpha",
    "sanitize",
    "generate_filename",
    "validate_destination",
    "ensure_unique",
    "prune_old_captures",
]
