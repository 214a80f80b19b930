"""A small HTTP client for fetching manifests and test tarballs."""

from __future__ import annotations

import errno
import math
import os
import urllib.error
import urllib.parse
import urllib.request
from typing import Any

from .version import get as get_version

_CHUNK_SIZE = 32 * 1024
_SIZE_SUFFIXES = ("B", "kB", "MB", "GB", "TB", "PB", "EB")


def is_url(text: str) -> bool:
    """Return True if ``text`` is a URL with a scheme and a host."""
    try:
        parts = urllib.parse.urlsplit(text)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def _humanize_bytes(size: int) -> str:
    if size < 10:
        return f"{size} B"
    exponent = int(math.floor(math.log(size) / math.log(1000)))
    suffix = _SIZE_SUFFIXES[exponent]
    value = math.floor(size / 1000**exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {suffix}"
    return f"{value:.0f} {suffix}"


def _print_progress(name: str, total: int) -> None:
    print("\r" + " " * 100, end="")
    print(f"\rDownloading ({name}) {_humanize_bytes(total)} complete", end="", flush=True)


def _base_name(url: str) -> str:
    stripped = url.rstrip("/")
    if not stripped:
        return "/" if url else "."
    return stripped.rsplit("/", 1)[-1]


class Client:
    """HTTP client that identifies itself with a KUTTL user agent."""

    def __init__(self, user_agent: str | None = None) -> None:
        self.user_agent = user_agent or f"KUTTL/{get_version().git_version.removeprefix('v')}"
        self._opener = urllib.request.build_opener()

    def get(self, url: str) -> Any:
        """Perform a GET and return the response, whatever its status.

        The caller is responsible for closing the response.
        """
        request = urllib.request.Request(
            url, headers={"User-Agent": self.user_agent}, method="GET"
        )
        try:
            return self._opener.open(request)
        except urllib.error.HTTPError as error:
            return error

    def get_bytes(self, url: str) -> bytes:
        """Fetch the whole body of ``url``; a non-200 status raises OSError."""
        with self.get(url) as response:
            if response.status != 200:
                raise OSError(
                    f"failed to fetch {url} : {response.status} {response.reason}"
                )
            return response.read()

    def download_file(self, url: str, path: str) -> str:
        """Download ``url`` into the folder ``path``, keeping its file name."""
        file_path = os.path.join(path, _base_name(url))
        self.download(url, file_path)
        return file_path

    def download(self, url: str, path: str) -> None:
        """Write the response body of ``url`` to ``path``, which must not exist."""
        with self.get(url) as response:
            try:
                os.stat(path)
            except FileNotFoundError:
                pass
            else:
                raise FileExistsError(errno.EEXIST, "file already exists", path)

            temp_path = path + ".tmp"
            name = os.path.basename(path)
            total = 0
            with open(temp_path, "wb") as out:
                while chunk := response.read(_CHUNK_SIZE):
                    out.write(chunk)
                    total += len(chunk)
                    _print_progress(name, total)

            print()
            os.replace(temp_path, path)


def read(url: str) -> bytes:
    """Return the contents found at ``url``."""
    return Client().get_bytes(url)