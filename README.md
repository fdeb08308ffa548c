# mangen

`mangen` walks a directory tree and prints one line for every file it
finds. Each line holds the file's name and its SHA-256 checksum.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
mangen [DIR_PATH] [OPTIONS]
```

`DIR_PATH` defaults to the current directory.

| Option       | Meaning                                                        |
|--------------|----------------------------------------------------------------|
| `-h`         | Print the help text and exit                                   |
| `-v`         | Print `mangen 1.0 (Git commit: unknown)` and exit              |
| `-e PATTERN` | Skip files whose name contains `PATTERN` as a plain substring  |
| `-c`         | Print one checksum of the whole manifest instead of the manifest |

If both `-h` and `-v` are given, `-h` wins.

Each manifest line has this form:

```
<file name> : <64 lower-case hex digits>
```

Only the file's own name is printed, not its path below `DIR_PATH`.
Subdirectories are descended into and do not get a line of their own.
Symbolic links are not followed; a link is hashed as if it were a file.
Files are listed in the order the file system returns them.

With `-c`, the manifest is built in memory and only its checksum is
printed:

```
Контрольная сумма: <64 hex digits>
```

Note that the help text mentions `*` and `?` wildcards for `-e`; the
option in fact matches by substring, so `-e .log` skips every file whose
name contains `.log`.

Examples:

```
mangen ./project
mangen ./project -e .log
mangen ./project -c
```

Exit status is 1, with a message on standard error, for an unknown
option, for `-e` without a pattern, or for a `DIR_PATH` that does not
exist. A file that cannot be read is reported on standard error and
listed with an empty checksum; a directory that cannot be opened is
reported on standard error and skipped.

## Library use

```python
import sys

from mangen.sha256 import Sha256, sha256, to_hex
from mangen.filehash import compute_file_sha256
from mangen.utils import matches_pattern
from mangen.manifest import iter_manifest, generate_manifest
from mangen.cli import generate_manifest_with_checksum

print(to_hex(sha256(b"abc")))            # sha256() returns 32 raw bytes
h = Sha256(b"ab")
h.update(b"c")
print(h.hexdigest())                     # same digest, as hex

print(compute_file_sha256("notes.txt"))  # hex digest; raises OSError if unreadable

print(matches_pattern("report.txt", "*.txt"))   # True: * is any run, ? any one character

for name, digest in iter_manifest("project", None):
    print(name, digest)

generate_manifest("project", ".tmp", sys.stdout)

checksum = generate_manifest_with_checksum("project", None, sys.stdout)
```

- `mangen.sha256` holds its own SHA-256 implementation; its results
  match those of `hashlib.sha256`.
- `iter_manifest` yields `(file name, hex digest)` pairs.
- `generate_manifest` writes the `name : digest` lines to the given
  stream, or to standard output when it is `None`.
- `generate_manifest_with_checksum` writes the manifest's checksum line
  and returns the checksum.
- `matches_pattern` is a standalone wildcard matcher; the manifest
  functions do not use it.
- `mangen.cli.main(argv)` runs the command and returns its exit status.

## What it does not do

`mangen` only produces manifests. It does not read a manifest back or
check files against one.