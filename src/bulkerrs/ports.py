"""WrapFunc — pluggable error-decoration protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from typing_extensions import TypeVar

ContextT = TypeVar("ContextT", contravariant=True, default=str)


@runtime_checkable
class WrapFunc(Protocol[ContextT]):
    """Protocol for functions that decorate an error with caller context.

    Used by :meth:`~bulkerrs.accumulator.Errs.append_if`. *err* is ``None``
    when the caller synthesizes an error for a check that unexpectedly
    succeeded. Returning ``None`` means there is nothing to record.

    Any plain function with this shape qualifies, for example
    :func:`~bulkerrs.wrappers.annotate` or a typed error constructor.
    """

    def __call__(
        self, context: ContextT, err: BaseException | None, /
    ) -> BaseException | None: ...
