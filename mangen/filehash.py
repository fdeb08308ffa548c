"""SHA-256 checksums of files on disk."""

from __future__ import annotations

import os

from mangen.sha256 import Sha256

_CHUNK_SIZE = 4096


def compute_file_sha256(path: str | os.PathLike[str]) -> str:
    """Return the hex SHA-256 of the file at ``path``.

    Raises ``OSError`` when the file cannot be opened or read.
    """
    hasher = Sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()