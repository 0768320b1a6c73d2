"""Exception types raised by the logger."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.levels import Level


class InvalidLevelError(ValueError):
    """Raised when a name does not match any log level."""

    def __init__(self, name: str, suggestion: "Level | None" = None) -> None:
        self.name = name
        self.suggestion = suggestion
        message = f"invalid log level '{name}'"
        if suggestion is not None:
            message += f" (did you mean '{suggestion.label}'?)"
        super().__init__(message)


class LoggerPanic(RuntimeError):
    """Raised by the panic family after the message has been written.

    The rendered message is kept on ``message`` so a recovery block can
    inspect what was logged.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
