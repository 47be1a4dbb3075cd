import io
import time
from unittest import mock

from soshell.threads import (
    CopyLog,
    copy_and_log,
    copy_in_background,
    start_warning,
    warn,
)


def test_record_format():
    log = CopyLog(clock=lambda: 0.0)
    entry = log.record("bigfile", True)
    assert entry == f"{time.ctime(0.0)} bigfile - SUCCESS"
    log.record("other", False)
    assert log.entries() == [entry, f"{time.ctime(0.0)} other - FAILED"]


def test_log_keeps_last_hundred_in_order():
    log = CopyLog(clock=lambda: 0.0)
    for i in range(105):
        log.record(f"f{i}", True)
    entries = log.entries()
    assert len(entries) == 100
    assert entries[0].endswith(" f5 - SUCCESS")
    assert entries[-1].endswith(" f104 - SUCCESS")


def test_long_entry_is_truncated():
    log = CopyLog(clock=lambda: 0.0)
    entry = log.record("n" * 300, True)
    assert len(entry.encode("utf-8")) == 129
    assert log.entries() == [entry]


def test_warn_immediate():
    out = io.StringIO()
    warn("hi", 0, out)
    assert out.getvalue() == "Aviso : hi\n"


def test_warn_sleeps_once_per_second():
    out = io.StringIO()
    with mock.patch("time.sleep") as sleep:
        warn("later", 3, out)
    assert sleep.call_count == 3
    assert out.getvalue() == "Aviso : later\n"


def test_start_warning_runs_in_thread():
    out = io.StringIO()
    thread = start_warning("bg", 0, out)
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert out.getvalue() == "Aviso : bg\n"


def test_copy_and_log_success(tmp_path):
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    src.write_bytes(b"content")
    log = CopyLog()
    assert copy_and_log(str(src), str(dst), log) is True
    assert dst.read_bytes() == b"content"
    [entry] = log.entries()
    assert entry.endswith(f" {src} - SUCCESS")


def test_copy_and_log_missing_source(tmp_path):
    log = CopyLog()
    missing = str(tmp_path / "missing")
    assert copy_and_log(missing, str(tmp_path / "dst"), log) is False
    [entry] = log.entries()
    assert entry.endswith(f" {missing} - FAILED")


def test_copy_in_background(tmp_path):
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    src.write_bytes(b"x" * 5000)
    log = CopyLog()
    thread = copy_in_background(str(src), str(dst), log)
    thread.join(timeout=5)
    assert dst.read_bytes() == src.read_bytes()
    assert len(log.entries()) == 1