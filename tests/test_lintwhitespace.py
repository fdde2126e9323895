from dotstate.lintwhitespace import lint_file, lint_tree, main


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def test_clean_file_has_no_problems(tmp_path):
    path = _write(tmp_path / "ok.txt", b"line one\nline two\n")
    assert lint_file(path) == []


def test_empty_file_has_no_problems(tmp_path):
    assert lint_file(_write(tmp_path / "empty.txt", b"")) == []


def test_crlf_line_ending(tmp_path):
    path = _write(tmp_path / "crlf.txt", b"first\r\nsecond\n")
    assert lint_file(path) == [f"{path}:1: CRLF line ending"]


def test_crlf_takes_precedence_over_trailing_whitespace(tmp_path):
    path = _write(tmp_path / "both.txt", b"first  \r\n")
    assert lint_file(path) == [f"{path}:1: CRLF line ending"]


def test_trailing_whitespace(tmp_path):
    path = _write(tmp_path / "ws.txt", b"first\nsecond \t\nthird\n")
    assert lint_file(path) == [f"{path}:2: trailing whitespace"]


def test_no_newline_at_end_of_file(tmp_path):
    path = _write(tmp_path / "nonl.txt", b"first\nsecond")
    assert lint_file(path) == [f"{path}: no newline at end of file"]


def test_binary_files_are_skipped(tmp_path):
    path = _write(tmp_path / "bin.dat", b"\x00\x01 trailing \r\nno newline")
    assert lint_file(path) == []


def test_png_signature_is_skipped(tmp_path):
    path = _write(tmp_path / "image.png", b"\x89PNG\r\n\x1a\nrest ")
    assert lint_file(path) == []


def test_lint_tree_ignores_and_sorts(tmp_path):
    _write(tmp_path / "b.txt", b"bad \n")
    _write(tmp_path / "a" / "c.txt", b"no newline")
    _write(tmp_path / ".git" / "config", b"bad \n")
    _write(tmp_path / "icon.svg", b"bad ")
    _write(tmp_path / "good.txt", b"fine\n")
    assert lint_tree(tmp_path) == [
        "a/c.txt: no newline at end of file",
        "b.txt:1: trailing whitespace",
    ]


def test_main_reports_problems(tmp_path, capsys):
    _write(tmp_path / "b.txt", b"bad \n")
    assert main([str(tmp_path)]) == 1
    assert capsys.readouterr().out.splitlines() == ["b.txt:1: trailing whitespace"]


def test_main_clean_tree(tmp_path, capsys):
    _write(tmp_path / "good.txt", b"fine\n")
    assert main([str(tmp_path)]) == 0
    assert capsys.readouterr().out == ""