"""Helpers for locating files and unpacking tar archives."""

from __future__ import annotations

import fnmatch
import os
import shutil
import stat
import tarfile
from typing import BinaryIO


def from_path(path: str, pattern: str = "") -> list[str]:
    """Return the files at ``path``.

    A directory yields its direct, non-directory entries whose names match
    the glob ``pattern`` (all entries when the pattern is empty); any other
    path yields itself.
    """
    if not pattern:
        pattern = "*"

    info = os.stat(path)
    if not stat.S_ISDIR(info.st_mode):
        return [path]

    with os.scandir(path) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    return [
        os.path.join(path, entry.name)
        for entry in ordered
        if not entry.is_dir() and fnmatch.fnmatchcase(entry.name, pattern)
    ]


def _ext(path: str) -> str:
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def trim_ext(path: str) -> str:
    """Remove the final extension of a path: ``foo.tar`` becomes ``foo``."""
    ext = _ext(path)
    return path[: -len(ext)] if ext else path


def untar_in_place(path: str) -> None:
    """Unpack a .tar or .tgz file into a sibling folder named after it."""
    folder = trim_ext(path)
    with open(path, "rb") as archive:
        untar(folder, archive, _ext(path) == ".tgz")


def untar(dest: str, stream: BinaryIO, compressed: bool) -> None:
    """Unpack a tar stream (gzip-compressed if ``compressed``) into ``dest``."""
    mode = "r|gz" if compressed else "r|"
    with tarfile.open(fileobj=stream, mode=mode) as archive:
        for member in archive:
            target = os.path.normpath(os.path.join(dest, member.name))
            if member.isdir():
                if not os.path.exists(target):
                    os.makedirs(target, 0o755, exist_ok=True)
            elif member.isreg():
                source = archive.extractfile(member)
                if source is None:
                    continue
                descriptor = os.open(target, os.O_CREAT | os.O_RDWR, member.mode)
                with os.fdopen(descriptor, "wb") as out, source:
                    shutil.copyfileobj(source, out)