import errno
import io
import os

from jshell.diagnostics import check_file, describe_error, main, report_error


def test_describe_error_from_exception():
    error = FileNotFoundError(errno.ENOENT, "missing")
    assert describe_error(error) == os.strerror(errno.ENOENT)


def test_describe_error_from_number():
    assert describe_error(errno.EACCES) == os.strerror(errno.EACCES)


def test_report_error_with_label():
    err = io.StringIO()
    report_error("open", errno.ENOENT, err)
    assert err.getvalue() == f"open: {os.strerror(errno.ENOENT)}\n"


def test_report_error_without_label():
    err = io.StringIO()
    report_error(None, errno.ENOENT, err)
    assert err.getvalue() == os.strerror(errno.ENOENT) + "\n"


def test_check_file_missing(tmp_path):
    err = io.StringIO()
    assert check_file(str(tmp_path / "absent"), err) == 1
    assert err.getvalue() == f"open: {os.strerror(errno.ENOENT)}\n"


def test_check_file_present(tmp_path):
    present = tmp_path / "here"
    present.write_text("x")
    err = io.StringIO()
    assert check_file(str(present), err) == 0
    assert err.getvalue() == ""


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 1
    assert capsys.readouterr().err.startswith("open: ")