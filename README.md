# dotstate

Building blocks for tools that manage dotfiles. The package provides:

- `dotstate.tarreader`: `TarReaderSystem` is a read-only view of a tar
  archive. Entries are re-rooted under `root`, and `strip_components`
  leading path components can be dropped. `lstat` returns the entry's
  `tarfile.TarInfo`, `read_file` returns a regular file's contents and
  `readlink` a symlink's target. A missing path raises `FileNotFoundError`;
  asking for the contents of a non-file or the target of a non-symlink
  raises `InvalidEntryError` (an `OSError`). Archives holding entry types
  other than directories, regular files and symlinks raise `ValueError`.
- `dotstate.tarwriter` and `dotstate.zipwriter`: `TarWriterSystem` and
  `ZipWriterSystem` record directories (`mkdir`), files (`write_file`),
  symlinks (`write_symlink`) and scripts (`run_script`) as archive entries.
  Scripts are stored as files with mode `0o700`, not run. Both are context
  managers; closing finishes the archive but leaves the underlying file open.
  `TarWriterSystem` copies every header from an optional `tarfile.TarInfo`
  template; `ZipWriterSystem` stamps every entry with the given `datetime`
  and deflates regular files.
- `dotstate.git_status`: `parse_status_porcelain_v2` parses the output of
  `git status --ignored --porcelain=v2` into a `Status` holding ordinary,
  renamed-or-copied, unmerged, untracked and ignored entries. It returns
  `None` when there are no entries and raises `ParseError` on a line it does
  not understand.
- `dotstate.cmdlog`: `log_cmd_run`, `log_cmd_output` and
  `log_cmd_combined_output` run a command through `subprocess`, log it to a
  `logging.Logger` at debug level on success or error level on failure (the
  structured fields are passed as `extra={"fields": ...}`), and re-raise
  `subprocess.CalledProcessError` or `OSError`. Logged output on success is
  shortened by `first_few_bytes`. `cmd_fields` and `error_fields` build the
  field dictionaries.
- `dotstate.lintwhitespace`: `lint_file` and `lint_tree` report CRLF line
  endings, trailing whitespace and missing final newlines in text files.
- `dotstate.contentdocs`: `convert` and `rewrite_links` turn a Markdown
  documentation page into a website content page.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Parse git status output:

```python
from dotstate.git_status import parse_status_porcelain_v2

status = parse_status_porcelain_v2(b"? notes.txt\n")
print(status.untracked[0].path)  # notes.txt
```

Write an archive of entries and read it back:

```python
import io
from dotstate.tarreader import TarReaderSystem
from dotstate.tarwriter import TarWriterSystem

buffer = io.BytesIO()
with TarWriterSystem(buffer, None) as system:
    system.mkdir(".dir", 0o755)
    system.write_file(".dir/file", b"contents\n", 0o644)
    system.write_symlink(".dir/file", "link")

buffer.seek(0)
reader = TarReaderSystem(buffer, "/home/user")
print(reader.read_file("/home/user/.dir/file"))  # b'contents\n'
print(reader.readlink("/home/user/link"))        # .dir/file
```

## Commands

Check every text file under a directory (the current one by default) for
CRLF line endings, trailing whitespace and a missing final newline. Binary
files, `.git`, `.svg` files and a few other fixed paths are skipped:

```
dotstate-lint-whitespace [root]
```

Each problem is printed on its own line, with its path relative to the
directory, and the command exits with status 1 if any were found.

Convert a Markdown document read from standard input into a website content
page on standard output. Front matter with the short title is added, the
first line is replaced by the long title, everything up to the
`<!--- toc --->` marker and the blank line after it is dropped, and links to
other documentation pages are rewritten to `/docs/<page>/`:

```
dotstate-content-docs --shorttitle "Guide" --longtitle "User guide" < GUIDE.md
```

`--debug` logs each input line and the state it was read in.

## What this package does not do

There is no system that works on the real filesystem, and nothing that
computes the desired state of dotfiles or compares it with what is on disk.
The archive systems only record entries into, or read them from, tar and zip
archives; they never run scripts or change files outside the archive.