"""A system whose changes are written to a tar archive."""

from __future__ import annotations

import copy
import io
import tarfile
from typing import BinaryIO

__all__ = ["TarWriterSystem"]


class TarWriterSystem:
    """Record directories, files, scripts and symlinks as tar entries."""

    def __init__(self, fileobj: BinaryIO, header_template: tarfile.TarInfo | None = None) -> None:
        self._archive = tarfile.open(fileobj=fileobj, mode="w")
        self._template = header_template if header_template is not None else tarfile.TarInfo()

    def close(self) -> None:
        """Finish the archive; the underlying file is left open."""
        self._archive.close()

    def __enter__(self) -> TarWriterSystem:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _header(self, name: str, type_: bytes) -> tarfile.TarInfo:
        header = copy.copy(self._template)
        header.pax_headers = dict(self._template.pax_headers)
        header.name = name
        header.type = type_
        header.size = 0
        return header

    def mkdir(self, name: str, perm: int) -> None:
        """Add a directory entry."""
        header = self._header(str(name) + "/", tarfile.DIRTYPE)
        header.mode = perm
        self._archive.addfile(header)

    def run_script(self, scriptname: str, dir: str, data: bytes) -> None:
        """Add the script as an executable file instead of running it."""
        self.write_file(str(scriptname), data, 0o700)

    def write_file(self, filename: str, data: bytes, perm: int) -> None:
        """Add a regular file entry."""
        header = self._header(str(filename), tarfile.REGTYPE)
        header.size = len(data)
        header.mode = perm
        self._archive.addfile(header, io.BytesIO(data))

    def write_symlink(self, oldname: str, newname: str) -> None:
        """Add a symlink entry named newname pointing at oldname."""
        header = self._header(str(newname), tarfile.SYMTYPE)
        header.linkname = oldname
        self._archive.addfile(header)