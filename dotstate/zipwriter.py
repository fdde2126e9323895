"""A system whose changes are written to a zip archive."""

from __future__ import annotations

import stat
import zipfile
from datetime import datetime
from typing import BinaryIO

__all__ = ["ZipWriterSystem"]

_CREATOR_UNIX = 3
_MSDOS_DIR = 0x10
_MSDOS_READONLY = 0x01


class ZipWriterSystem:
    """Record directories, files, scripts and symlinks as zip entries."""

    def __init__(self, fileobj: BinaryIO, modified: datetime) -> None:
        self._archive = zipfile.ZipFile(fileobj, mode="w")
        self._modified = modified

    def close(self) -> None:
        """Finish the archive; the underlying file is left open."""
        self._archive.close()

    def __enter__(self) -> ZipWriterSystem:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _info(self, name: str, unix_mode: int, compress_type: int) -> zipfile.ZipInfo:
        info = zipfile.ZipInfo(str(name), date_time=self._modified.timetuple()[:6])
        info.compress_type = compress_type
        info.create_system = _CREATOR_UNIX
        msdos = 0
        if stat.S_ISDIR(unix_mode):
            msdos |= _MSDOS_DIR
        if not unix_mode & stat.S_IWUSR:
            msdos |= _MSDOS_READONLY
        info.external_attr = (unix_mode << 16) | msdos
        return info

    def mkdir(self, name: str, perm: int) -> None:
        """Add a directory entry."""
        info = self._info(name, stat.S_IFDIR | perm, zipfile.ZIP_STORED)
        self._archive.writestr(info, b"")

    def run_script(self, scriptname: str, dir: str, data: bytes) -> None:
        """Add the script as an executable file instead of running it."""
        self.write_file(str(scriptname), data, 0o700)

    def write_file(self, filename: str, data: bytes, perm: int) -> None:
        """Add a deflated regular file entry."""
        info = self._info(filename, stat.S_IFREG | perm, zipfile.ZIP_DEFLATED)
        self._archive.writestr(info, data)

    def write_symlink(self, oldname: str, newname: str) -> None:
        """Add a symlink entry whose contents are its target."""
        info = self._info(newname, stat.S_IFLNK, zipfile.ZIP_STORED)
        self._archive.writestr(info, oldname.encode())