"""bulkerrs — collect errors from sequential checks into a single error.

Replaces repeated ``if err is not None`` bookkeeping with an accumulator
whose append calls double as branch conditions, folded at the end into
``None`` or one :class:`MultiError`.
"""

from __future__ import annotations

from .accumulator import Errs
from .exceptions import (
    ERROR_SEPARATOR,
    AlreadyExistsError,
    AnnotatedError,
    BulkErrsError,
    MultiError,
    NotFoundError,
    NotSupportedError,
    NotValidError,
    UnauthorizedError,
    error_message,
)
from .inspection import cause, error_stack, is_kind, iter_chain
from .ports import WrapFunc
from .wrappers import (
    already_exists,
    annotate,
    not_found,
    not_supported,
    not_valid,
    trace,
    unauthorized,
)

__all__ = [
    "ERROR_SEPARATOR",
    "AlreadyExistsError",
    "AnnotatedError",
    "BulkErrsError",
    "Errs",
    "MultiError",
    "NotFoundError",
    "NotSupportedError",
    "NotValidError",
    "UnauthorizedError",
    "WrapFunc",
    "already_exists",
    "annotate",
    "cause",
    "error_message",
    "error_stack",
    "is_kind",
    "iter_chain",
    "not_found",
    "not_supported",
    "not_valid",
    "trace",
    "unauthorized",
]
