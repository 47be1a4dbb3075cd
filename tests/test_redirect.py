import os

import pytest

from soshell.redirect import Redirection, redirected, split_redirects


def test_no_redirection():
    assert split_redirects(["ls", "-l"]) == (["ls", "-l"], [])


def test_too_few_words():
    assert split_redirects([">", "out"]) == ([">", "out"], [])


def test_stdout_overwrite():
    assert split_redirects(["ls", ">", "out"]) == (["ls"], [Redirection(1, "out")])


def test_stdout_append():
    assert split_redirects(["ls", ">>", "log"]) == (
        ["ls"],
        [Redirection(1, "log", append=True)],
    )


def test_stderr():
    assert split_redirects(["cc", "x.c", "2>", "err"]) == (
        ["cc", "x.c"],
        [Redirection(2, "err")],
    )


def test_stdin_after_stdout():
    assert split_redirects(["sort", "<", "in", ">", "out"]) == (
        ["sort"],
        [Redirection(1, "out"), Redirection(0, "in")],
    )


def test_stdout_before_stdin_is_left_alone():
    assert split_redirects(["sort", ">", "out", "<", "in"]) == (
        ["sort", ">", "out"],
        [Redirection(0, "in")],
    )


def test_input_is_not_modified():
    args = ["ls", ">", "out"]
    split_redirects(args)
    assert args == ["ls", ">", "out"]


def test_redirect_stdout_to_file(tmp_path):
    path = tmp_path / "out"
    with redirected([Redirection(1, str(path))]):
        os.write(1, b"hello")
    os.write(1, b"after")
    assert path.read_bytes() == b"hello"


def test_redirect_stdout_append(tmp_path):
    path = tmp_path / "out"
    path.write_bytes(b"first-")
    with redirected([Redirection(1, str(path), append=True)]):
        os.write(1, b"second")
    assert path.read_bytes() == b"first-second"


def test_redirect_stdout_truncates(tmp_path):
    path = tmp_path / "out"
    path.write_bytes(b"old content here")
    with redirected([Redirection(1, str(path))]):
        os.write(1, b"new")
    assert path.read_bytes() == b"new"


def test_redirect_stdin(tmp_path):
    path = tmp_path / "in"
    path.write_bytes(b"data")
    args, redirections = split_redirects(["cat", "<", str(path)])
    assert args == ["cat"]
    assert redirections == [Redirection(0, str(path))]
    with redirected(redirections):
        data = os.read(0, 100)
    assert data == b"data"


def test_missing_input_restores_descriptors(tmp_path):
    out = tmp_path / "out"
    before = os.fstat(1).st_ino
    with pytest.raises(FileNotFoundError):
        with redirected([Redirection(1, str(out)), Redirection(0, str(tmp_path / "no"))]):
            pass
    assert os.fstat(1).st_ino == before