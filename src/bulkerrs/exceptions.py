"""Exception hierarchy for bulkerrs."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

ERROR_SEPARATOR = "\n"
"""Separator placed between stored error messages in a folded ``MultiError``."""


def error_message(err: BaseException) -> str:
    """Return the text of *err*, falling back to its class name when blank."""
    return str(err) or type(err).__name__


class BulkErrsError(Exception):
    """Root exception for every error raised or built by bulkerrs."""


class MultiError(BulkErrsError):
    """Composite of one or more accumulated errors.

    The message is the stored messages joined with :data:`ERROR_SEPARATOR`
    in insertion order. Only the texts are kept: the original exception
    objects and their cause chains stay with the accumulator that produced
    this error.
    """

    def __init__(self, messages: Iterable[str]) -> None:
        self.messages: tuple[str, ...] = tuple(messages)
        super().__init__(ERROR_SEPARATOR.join(self.messages))


class AnnotatedError(BulkErrsError):
    """An error that adds context to an optional underlying cause.

    The text is the annotation joined to the cause's text with a colon,
    so nested annotations read ``"outer: inner: original"``.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        if cause is None:
            text = message
        elif message:
            text = f"{message}: {error_message(cause)}"
        else:
            text = error_message(cause)
        super().__init__(text)
        self.__cause__ = cause


# ── Typed errors ─────────────────────────────────────────────────────


class NotValidError(AnnotatedError):
    """Raised or accumulated when a value fails validation."""


class NotFoundError(AnnotatedError):
    """Raised or accumulated when an expected resource is missing."""


class AlreadyExistsError(AnnotatedError):
    """Raised or accumulated when a resource unexpectedly exists."""


class NotSupportedError(AnnotatedError):
    """Raised or accumulated when an operation is not supported."""


class UnauthorizedError(AnnotatedError):
    """Raised or accumulated when the caller lacks permission."""
