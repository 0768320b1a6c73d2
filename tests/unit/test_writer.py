import inspect
import io
import os
import threading
from datetime import datetime, timedelta, timezone

import pytest

from core.writer import Decoration, LineWriter, parse_flags
from logger import new_logger

FIXED = datetime(2009, 1, 23, 1, 23, 23, 123123)


def _writer(flags: Decoration, prefix: str = "", clock=lambda: FIXED) -> tuple[LineWriter, io.BytesIO]:
    buf = io.BytesIO()
    return LineWriter(buf, prefix, flags, clock=clock), buf


def test_no_flags_writes_message_with_newline() -> None:
    writer, buf = _writer(Decoration.NONE)

    writer.output("hello")
    writer.output("already terminated\n")

    assert buf.getvalue() == b"hello\nalready terminated\n"


def test_std_flags_add_date_and_time() -> None:
    writer, buf = _writer(Decoration.STD, prefix="pfx ")

    writer.output("msg")

    assert buf.getvalue() == b"pfx 2009/01/23 01:23:23 msg\n"


def test_microseconds_imply_time() -> None:
    writer, buf = _writer(Decoration.MICROSECONDS)

    writer.output("msg")

    assert buf.getvalue() == b"01:23:23.123123 msg\n"


def test_utc_converts_timestamp() -> None:
    local = datetime(2009, 1, 23, 1, 23, 23, tzinfo=timezone(timedelta(hours=2)))
    writer, buf = _writer(Decoration.STD | Decoration.UTC, clock=lambda: local)

    writer.output("msg")

    assert buf.getvalue() == b"2009/01/22 23:23:23 msg\n"


def test_msgprefix_moves_prefix_after_header() -> None:
    writer, buf = _writer(Decoration.STD | Decoration.MSGPREFIX, prefix="[app] ")

    writer.output("msg")

    assert buf.getvalue() == b"2009/01/23 01:23:23 [app] msg\n"


def test_shortfile_reports_direct_caller() -> None:
    writer, buf = _writer(Decoration.SHORTFILE)

    expected_line = inspect.currentframe().f_lineno + 1
    writer.output("msg")

    assert buf.getvalue().decode() == f"test_writer.py:{expected_line}: msg\n"


def test_shortfile_through_logger_reports_logger_caller() -> None:
    buf = io.BytesIO()
    log = new_logger(buf, "", Decoration.SHORTFILE)

    expected_line = inspect.currentframe().f_lineno + 1
    log.info("test")
    log.print("plain")

    lines = buf.getvalue().decode().splitlines()
    assert lines[0] == f"test_writer.py:{expected_line}: INFO test"
    assert lines[1] == f"test_writer.py:{expected_line + 1}: plain"


def test_longfile_reports_full_path() -> None:
    writer, buf = _writer(Decoration.LONGFILE)

    writer.output("msg")

    filename = buf.getvalue().decode().split(":", 1)[0]
    assert os.path.basename(filename) == "test_writer.py"
    assert os.path.dirname(filename)


def test_text_streams_receive_str() -> None:
    out = io.StringIO()
    writer = LineWriter(out)

    writer.output("msg")

    assert out.getvalue() == "msg\n"


def test_accessors_update_configuration() -> None:
    writer, buf = _writer(Decoration.NONE)

    writer.set_prefix("> ")
    writer.set_flags(Decoration.DATE)
    writer.output("msg")

    assert writer.prefix() == "> "
    assert writer.flags() == Decoration.DATE
    assert buf.getvalue() == b"> 2009/01/23 msg\n"


def test_writer_defaults_to_current_stderr(capsys) -> None:
    writer = LineWriter()

    writer.output("to stderr")

    assert writer.writer() is not None
    assert capsys.readouterr().err == "to stderr\n"


def test_concurrent_lines_do_not_interleave() -> None:
    buf = io.BytesIO()
    log = new_logger(buf, "", Decoration.NONE)
    log_lines = 200

    def worker(n: int) -> None:
        payload = str(n) * 50
        for i in range(log_lines):
            log.info(payload, i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = buf.getvalue().decode().splitlines()
    assert len(lines) == 8 * log_lines
    for line in lines:
        tag, payload, counter = line.split(" ")
        assert tag == "INFO"
        assert payload == payload[0] * 50
        assert 0 <= int(counter) < log_lines


def test_parse_flags() -> None:
    assert parse_flags(["date", "time"]) == Decoration.STD
    assert parse_flags(["STD", "shortfile"]) == Decoration.STD | Decoration.SHORTFILE
    assert parse_flags([]) == Decoration.NONE
    assert parse_flags(["", "none"]) == Decoration.NONE


def test_parse_flags_rejects_unknown_name() -> None:
    with pytest.raises(ValueError):
        parse_flags(["timestamp"])


def test_duck_typed_text_writer_receives_str() -> None:
    class TextCollector:
        encoding = "utf-8"

        def __init__(self) -> None:
            self.chunks: list[str] = []

        def write(self, data: str) -> int:
            assert isinstance(data, str)
            self.chunks.append(data)
            return len(data)

    out = TextCollector()
    LineWriter(out).output("msg")

    assert out.chunks == ["msg\n"]
