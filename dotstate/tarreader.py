"""A read-only system built from the contents of a tar archive."""

from __future__ import annotations

import errno
import posixpath
import tarfile
from typing import BinaryIO

__all__ = ["InvalidEntryError", "TarReaderSystem"]


class InvalidEntryError(OSError):
    """An entry exists but is of the wrong kind for the operation."""


class TarReaderSystem:
    """Files, directories and symlinks read from a tar archive."""

    def __init__(self, fileobj: BinaryIO, root: str = "/", strip_components: int = 0) -> None:
        self._file_infos: dict[str, tarfile.TarInfo] = {}
        self._contents: dict[str, bytes] = {}
        self._linknames: dict[str, str] = {}
        with tarfile.open(fileobj=fileobj, mode="r|*") as archive:
            for member in archive:
                name = member.name.removesuffix("/")
                if strip_components > 0:
                    components = name.split("/")
                    if len(components) <= strip_components:
                        continue
                    name = "/".join(components[strip_components:])
                path = posixpath.normpath(root.rstrip("/") + "/" + name)
                if member.isdir():
                    self._file_infos[path] = member
                elif member.type in (tarfile.REGTYPE, tarfile.AREGTYPE):
                    self._file_infos[path] = member
                    extracted = archive.extractfile(member)
                    self._contents[path] = extracted.read() if extracted else b""
                elif member.issym():
                    self._file_infos[path] = member
                    self._linknames[path] = member.linkname
                else:
                    flag = member.type.decode("latin-1")
                    raise ValueError(f"unsupported typeflag '{flag}'")

    def file_infos(self) -> dict[str, tarfile.TarInfo]:
        """Return the archive entries keyed by absolute path."""
        return dict(self._file_infos)

    def _missing(self, name: str) -> FileNotFoundError:
        return FileNotFoundError(errno.ENOENT, "file does not exist", name)

    def _invalid(self, name: str) -> InvalidEntryError:
        return InvalidEntryError(errno.EINVAL, "invalid argument", name)

    def lstat(self, name: str) -> tarfile.TarInfo:
        """Return the entry for name."""
        try:
            return self._file_infos[name]
        except KeyError:
            raise self._missing(name) from None

    def read_file(self, name: str) -> bytes:
        """Return the contents of the regular file name."""
        if name in self._contents:
            return self._contents[name]
        if name in self._file_infos:
            raise self._invalid(name)
        raise self._missing(name)

    def readlink(self, name: str) -> str:
        """Return the target of the symlink name."""
        if name in self._linknames:
            return self._linknames[name]
        if name in self._file_infos:
            raise self._invalid(name)
        raise self._missing(name)