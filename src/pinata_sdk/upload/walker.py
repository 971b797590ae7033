"""Directory walker - enumerates regular files under a root directory.

Traversal policy:
- symlinks are followed, to files and to directories;
- a directory already visited (same device and inode) is skipped, which
  breaks symlink cycles;
- dangling symlinks raise IoError;
- FIFOs, sockets and device files are skipped;
- empty directories produce no entries.

Entries are yielded in sorted order: the files of a directory by name,
then each subdirectory by name.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from pinata_sdk.errors import IoError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """A regular file found under the walk root."""

    relative_path: str  # forward-slash separated, relative to the root
    path: Path

    def read(self) -> bytes:
        """Read the whole file. The handle is closed on success and failure."""
        try:
            with open(self.path, "rb") as f:
                return f.read()
        except OSError as exc:
            raise IoError(f"cannot read {self.path}: {exc}", str(self.path)) from exc


def walk_directory(root: str | Path) -> Iterator[FileEntry]:
    """Yield every regular file reachable from ``root``.

    Raises IoError if ``root`` is missing, is not a directory, or an entry
    cannot be inspected. The generator is not resumable after an error;
    call it again with the same root.
    """
    root = Path(root)
    try:
        root_stat = root.stat()
    except OSError as exc:
        raise IoError(f"cannot access {root}: {exc}", str(root)) from exc
    if not stat.S_ISDIR(root_stat.st_mode):
        raise IoError(f"not a directory: {root}", str(root))

    visited: set[tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}
    # Each item: (directory path, its path parts relative to root)
    stack: list[tuple[Path, tuple[str, ...]]] = [(root, ())]

    while stack:
        directory, rel_parts = stack.pop()
        try:
            names = sorted(os.listdir(directory))
        except OSError as exc:
            raise IoError(f"cannot list {directory}: {exc}", str(directory)) from exc

        subdirs: list[tuple[Path, tuple[str, ...]]] = []
        for name in names:
            path = directory / name
            try:
                st = path.stat()
            except OSError as exc:
                raise IoError(f"cannot access {path}: {exc}", str(path)) from exc

            if stat.S_ISDIR(st.st_mode):
                key = (st.st_dev, st.st_ino)
                if key in visited:
                    log.debug("Skipping already visited directory %s", path)
                    continue
                visited.add(key)
                subdirs.append((path, rel_parts + (name,)))
            elif stat.S_ISREG(st.st_mode):
                yield FileEntry(relative_path="/".join(rel_parts + (name,)), path=path)
            else:
                log.debug("Skipping special file %s", path)

        # Reversed so the smallest name is popped first
        stack.extend(reversed(subdirs))
