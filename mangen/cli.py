"""Command-line entry point for the manifest generator."""

from __future__ import annotations

import io
import os
import sys
from typing import TextIO

from mangen.manifest import generate_manifest
from mangen.sha256 import Sha256

VERSION = "1.0"
GIT_HASH = "unknown"

_HELP = (
    "Usage: mangen [DIR_PATH] [OPTIONS]\n"
    "Generate a manifest of files with SHA-256 checksums.\n\n"
    "Options:\n"
    "  -h          Show this help message\n"
    "  -v          Show version and Git commit hash\n"
    "  -e PATTERN  Exclude files matching PATTERN (wildcards: * and ?)\n"
    "  -c          Generate manifest integrity checksum\n"
)


def print_help(out: TextIO | None = None) -> None:
    """Write the usage text."""
    stream = out if out is not None else sys.stdout
    stream.write(_HELP)


def generate_manifest_with_checksum(
    base_dir: str | os.PathLike[str],
    exclude: str | None = None,
    out: TextIO | None = None,
) -> str:
    """Build the manifest, write its SHA-256 to ``out`` and return that digest."""
    stream = out if out is not None else sys.stdout
    buffer = io.StringIO()
    generate_manifest(base_dir, exclude, buffer)
    checksum = Sha256(buffer.getvalue().encode("utf-8", "surrogateescape")).hexdigest()
    stream.write(f"Контрольная сумма: {checksum}\n")
    return checksum


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    directory = "."
    exclude: str | None = None
    want_checksum = want_version = want_help = False

    remaining = iter(args)
    for arg in remaining:
        if arg == "-h":
            want_help = True
        elif arg == "-v":
            want_version = True
        elif arg == "-c":
            want_checksum = True
        elif arg == "-e":
            pattern = next(remaining, None)
            if pattern is None:
                print("Error: -e requires a pattern argument", file=sys.stderr)
                return 1
            exclude = pattern
        elif not arg.startswith("-"):
            directory = arg
        else:
            print(f"Error: Unknown option '{arg}'", file=sys.stderr)
            return 1

    if want_help:
        print_help()
        return 0

    if want_version:
        print(f"mangen {VERSION} (Git commit: {GIT_HASH})")
        return 0

    if not os.path.exists(directory):
        print(f"Error: Directory '{directory}' does not exist", file=sys.stderr)
        return 1

    if want_checksum:
        generate_manifest_with_checksum(directory, exclude)
    else:
        generate_manifest(directory, exclude)
    return 0


if __name__ == "__main__":
    sys.exit(main())