"""Walk a directory tree and list each file's SHA-256 checksum."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterator
from typing import TextIO

from mangen.filehash import compute_file_sha256


def _report(label: str, exc: OSError) -> None:
    reason = exc.strerror or str(exc)
    print(f"{label}: {reason}", file=sys.stderr)


def _walk(parent: str, name: str, exclude: str | None) -> Iterator[tuple[str, str]]:
    full_path = os.path.join(parent, name)
    try:
        info = os.lstat(full_path)
    except OSError as exc:
        _report("stat error", exc)
        return

    if stat.S_ISDIR(info.st_mode):
        try:
            children = os.listdir(full_path)
        except OSError as exc:
            _report("Failed to open directory", exc)
            return
        for child in children:
            yield from _walk(full_path, child, exclude)
        return

    if exclude is not None and exclude in name:
        return

    try:
        digest = compute_file_sha256(full_path)
    except OSError:
        print(f"Error opening file: {full_path}", file=sys.stderr)
        digest = ""
    yield name, digest


def iter_manifest(
    base_dir: str | os.PathLike[str], exclude_pattern: str | None = None
) -> Iterator[tuple[str, str]]:
    """Yield ``(file name, hex digest)`` for every file below ``base_dir``.

    Directories are descended into; files whose name contains
    ``exclude_pattern`` are skipped. A file that cannot be read is
    reported on stderr and yielded with an empty digest.
    """
    yield from _walk(os.fspath(base_dir), "", exclude_pattern)


def generate_manifest(
    base_dir: str | os.PathLike[str],
    exclude_pattern: str | None = None,
    out: TextIO | None = None,
) -> None:
    """Write one ``name : digest`` line per file below ``base_dir`` to ``out``."""
    stream = out if out is not None else sys.stdout
    for name, digest in iter_manifest(base_dir, exclude_pattern):
        stream.write(f"{name} : {digest}\n")