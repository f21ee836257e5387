"""Content hashing for cachebuster query strings."""

from __future__ import annotations

import hashlib
import logging
import random
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

HASH_LENGTH = 8

FileReader = Callable[[Path], bytes]


def read_file(path: Path) -> bytes:
    return path.read_bytes()


def content_hash(data: bytes) -> str:
    """MD5 hash, truncated to the first 8 hex characters."""
    return hashlib.md5(data).hexdigest()[:HASH_LENGTH]


def try_hash(path: Path, reader: FileReader = read_file, root: Path | None = None) -> str | None:
    """Hash the file at *path*, or return None if it cannot be read.

    When *root* is given, paths resolving outside it count as unreadable.
    """
    try:
        if root is not None and not path.resolve().is_relative_to(root.resolve()):
            logger.debug("refusing to hash %s outside %s", path, root)
            return None
        return content_hash(reader(path))
    except (OSError, ValueError) as e:
        logger.debug("could not hash %s: %s", path, e)
        return None


def random_marker() -> str:
    """Volatile stand-in for a hash that could not be computed."""
    return str(random.random())
