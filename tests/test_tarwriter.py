import io
import tarfile

from dotstate.tarwriter import TarWriterSystem


def _write(template=None):
    buf = io.BytesIO()
    with TarWriterSystem(buf, template) as system:
        system.mkdir(".dir", 0o755)
        system.write_file(".dir/file", b"# contents of .dir/file\n", 0o644)
        system.run_script("script", "/home/user", b"# contents of script\n")
        system.write_symlink(".dir/subdir/file", "symlink")
    buf.seek(0)
    return buf


def test_entries():
    buf = _write()
    with tarfile.open(fileobj=buf, mode="r") as archive:
        members = archive.getmembers()
        assert [m.name for m in members] == [".dir", ".dir/file", "script", "symlink"]

        directory, regular, script, symlink = members
        assert directory.type == tarfile.DIRTYPE
        assert directory.mode == 0o755
        assert directory.size == 0

        assert regular.type == tarfile.REGTYPE
        assert regular.mode == 0o644
        assert archive.extractfile(regular).read() == b"# contents of .dir/file\n"
        assert regular.size == len(b"# contents of .dir/file\n")

        assert script.type == tarfile.REGTYPE
        assert script.mode == 0o700
        assert archive.extractfile(script).read() == b"# contents of script\n"

        assert symlink.type == tarfile.SYMTYPE
        assert symlink.linkname == ".dir/subdir/file"
        assert symlink.size == 0


def test_directory_name_has_trailing_slash_on_the_wire():
    buf = _write()
    raw_name = buf.getvalue()[:100].rstrip(b"\0")
    assert raw_name == b".dir/"


def test_header_template_is_applied():
    template = tarfile.TarInfo()
    template.uname = "user"
    template.mtime = 1600000000
    buf = _write(template)
    with tarfile.open(fileobj=buf, mode="r") as archive:
        members = archive.getmembers()
    assert {m.uname for m in members} == {"user"}
    assert {m.mtime for m in members} == {1600000000}
    assert template.name == ""


def test_empty_archive_round_trip():
    buf = io.BytesIO()
    TarWriterSystem(buf).close()
    buf.seek(0)
    with tarfile.open(fileobj=buf, mode="r") as archive:
        assert archive.getmembers() == []