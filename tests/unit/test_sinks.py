import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from core.sinks import HTTPSink, is_http_target, open_sink
from core.writer import Decoration
from logger import new_logger


def test_open_sink_resolves_process_streams() -> None:
    assert open_sink(None) == (sys.stderr, False)
    assert open_sink("stderr") == (sys.stderr, False)
    assert open_sink("stdout") == (sys.stdout, False)
    assert open_sink("-") == (sys.stdout, False)


def test_open_sink_appends_to_file(tmp_path: Path) -> None:
    target = tmp_path / "logs" / "app.log"
    target.parent.mkdir()
    target.write_bytes(b"existing\n")

    sink, owned = open_sink(str(target))
    try:
        new_logger(sink, "", Decoration.NONE).info("appended")
    finally:
        sink.close()

    assert owned is True
    assert target.read_bytes() == b"existing\nINFO appended\n"


def test_open_sink_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "app.log"

    sink, owned = open_sink(target)
    sink.close()

    assert owned is True
    assert target.exists()


def test_open_sink_returns_http_sink_for_urls() -> None:
    sink, owned = open_sink("https://collector.example/logs", http_timeout=3.0)

    assert isinstance(sink, HTTPSink)
    assert owned is True
    assert sink.timeout == 3.0
    sink.close()


def test_is_http_target() -> None:
    assert is_http_target("http://x")
    assert is_http_target("HTTPS://x")
    assert not is_http_target("/var/log/http.log")


def test_http_sink_posts_each_line() -> None:
    session = Mock()
    session.post.return_value = Mock(raise_for_status=Mock(return_value=None))
    sink = HTTPSink("http://collector:8080/ingest", timeout=5, session=session)
    log = new_logger(sink, "svc ", Decoration.NONE)

    log.warn("disk", "low")
    log.debug("not sent")

    session.post.assert_called_once_with(
        "http://collector:8080/ingest",
        data=b"svc WARN disk low\n",
        headers={"Content-Type": "text/plain; charset=utf-8"},
        timeout=5,
    )


def test_http_sink_propagates_http_errors() -> None:
    session = Mock()
    session.post.return_value = Mock(raise_for_status=Mock(side_effect=requests.HTTPError("503")))
    log = new_logger(HTTPSink("http://collector/ingest", session=session))

    with pytest.raises(requests.HTTPError):
        log.error("lost")


def test_http_sink_close_closes_session() -> None:
    session = Mock()
    HTTPSink("http://collector/ingest", session=session).close()

    session.close.assert_called_once()
