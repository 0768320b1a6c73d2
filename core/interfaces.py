"""Logger capability protocols for callers that accept any compatible logger."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LeveledLogger(Protocol):
    """Debug/info/warning/error write operations."""

    def debug(self, *values: Any) -> None: ...

    def debugf(self, template: str, *args: Any) -> None: ...

    def info(self, *values: Any) -> None: ...

    def infof(self, template: str, *args: Any) -> None: ...

    def warning(self, *values: Any) -> None: ...

    def warningf(self, template: str, *args: Any) -> None: ...

    def error(self, *values: Any) -> None: ...

    def errorf(self, template: str, *args: Any) -> None: ...


@runtime_checkable
class UnleveledLogger(Protocol):
    """Single always-on write, as expected by generic logging adapters."""

    def log(self, *values: Any) -> None: ...


@runtime_checkable
class StdLogger(Protocol):
    """Print, fatal and panic families of a conventional process logger."""

    def fatal(self, *values: Any) -> None: ...

    def fatalf(self, template: str, *args: Any) -> None: ...

    def fatalln(self, *values: Any) -> None: ...

    def panic(self, *values: Any) -> None: ...

    def panicf(self, template: str, *args: Any) -> None: ...

    def panicln(self, *values: Any) -> None: ...

    def print(self, *values: Any) -> None: ...

    def printf(self, template: str, *args: Any) -> None: ...

    def println(self, *values: Any) -> None: ...
