"""Output destinations for LineWriter."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import IO

import requests


class HTTPSink:
    """Byte sink that POSTs every written line to a collector URL.

    Each ``write`` call sends one request whose body is the line. Failed
    requests raise ``requests.HTTPError`` to the writing caller; nothing is
    retried or buffered.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        content_type: str = "text/plain; charset=utf-8",
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.content_type = content_type
        self._session = session or requests.Session()

    def write(self, data: bytes) -> int:
        resp = self._session.post(
            self.url,
            data=data,
            headers={"Content-Type": self.content_type},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return len(data)

    def flush(self) -> None:
        return None

    def close(self) -> None:
        self._session.close()


def is_http_target(target: str) -> bool:
    lowered = target.lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


def open_sink(target: str | Path | None, http_timeout: float = 10.0) -> tuple[IO | HTTPSink, bool]:
    """Resolve an output target to a writable sink.

    Args:
        target: ``"stderr"``, ``"stdout"``, ``"-"`` (stdout), an http(s) URL,
            or a file path. None means stderr.
        http_timeout: Request timeout for URL targets.

    Returns:
        Tuple of (sink, owned). ``owned`` is True when the caller opened the
        sink and must close it.
    """
    if target is None:
        return sys.stderr, False
    raw = str(target).strip()
    if raw in ("", "stderr"):
        return sys.stderr, False
    if raw in ("-", "stdout"):
        return sys.stdout, False
    if is_http_target(raw):
        return HTTPSink(raw, timeout=http_timeout), True
    path = Path(raw).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("ab"), True
