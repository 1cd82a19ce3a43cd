"""Ready-made wrap functions for :meth:`Errs.append_if`.

Each takes ``(context, err)`` and returns the error to accumulate. They
rely on native exception chaining: the wrapped error becomes the
``__cause__`` of the returned one.
"""

from __future__ import annotations

from .exceptions import (
    AlreadyExistsError,
    AnnotatedError,
    NotFoundError,
    NotSupportedError,
    NotValidError,
    UnauthorizedError,
)


def annotate(message: str, err: BaseException | None) -> AnnotatedError:
    """Add *message* in front of *err*'s text.

    ``annotate("loading config", FileNotFoundError("app.toml"))`` reads
    ``"loading config: app.toml"``. With ``err=None`` the result carries
    only *message*.
    """
    return AnnotatedError(message, err)


def trace(_context: object, err: BaseException | None) -> BaseException | None:
    """Return *err* unchanged."""
    return err


def not_valid(context: str, err: BaseException | None) -> NotValidError:
    return NotValidError(context, err)


def not_found(context: str, err: BaseException | None) -> NotFoundError:
    return NotFoundError(context, err)


def already_exists(context: str, err: BaseException | None) -> AlreadyExistsError:
    return AlreadyExistsError(context, err)


def not_supported(context: str, err: BaseException | None) -> NotSupportedError:
    return NotSupportedError(context, err)


def unauthorized(context: str, err: BaseException | None) -> UnauthorizedError:
    return UnauthorizedError(context, err)
