"""Errs — collects errors from a sequence of checks into one composite."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import BulkErrsError, MultiError, error_message
from .wrappers import annotate

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .ports import WrapFunc

logger = logging.getLogger("bulkerrs.accumulator")


def _ensure_exception(err: object) -> None:
    if not isinstance(err, BaseException):
        raise TypeError(f"Errs only stores exceptions, got {type(err).__name__}")


class Errs:
    """Ordered accumulator of errors found by independent checks.

    ``None`` is never stored, so every append can take a check result
    directly and its return value can drive the control flow::

        errs = Errs()
        if errs.append(check_name(data)):
            errs.append(check_name_length(data))
        elif errs.append(check_email(data)):
            errs.append(check_email_domain(data))
        return errs.to_error()

    The accumulator is short-lived and not thread-safe. Guard concurrent
    appends with an external lock.
    """

    def __init__(self) -> None:
        self._errors: list[BaseException] = []

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def from_error(cls, err: BaseException | None) -> Errs:
        """Create an accumulator seeded with *err* unless it is ``None``."""
        errs = cls()
        errs.append(err)
        return errs

    # ── Appending ────────────────────────────────────────────────

    def append(self, *errs: BaseException | None) -> bool:
        """Append every non-``None`` error in *errs*.

        All arguments are checked before any is stored, so a rejected call
        leaves the accumulator unchanged. Returns ``True`` when at least one
        error was appended.
        """
        present = [err for err in errs if err is not None]
        for err in present:
            _ensure_exception(err)
        for err in present:
            self._store(err)
        return bool(present)

    def append_if(
        self,
        condition: bool,
        wrap: WrapFunc[Any],
        context: Any,
        err: BaseException | None,
    ) -> bool:
        """Append ``wrap(context, err)`` when *condition* holds.

        *condition* is evaluated by the caller, so this works both for
        failed checks (``err is not None``) and for checks that should have
        failed but did not (``err is None``, *wrap* synthesizes the error).
        *wrap* is not called when *condition* is false. A ``None`` result
        from *wrap* is not stored. Returns *condition*.
        """
        if not condition:
            return False
        decorated = wrap(context, err)
        if decorated is not None:
            self._store(decorated)
        return True

    def new_err(self, message: str) -> bool:
        """Append a new :class:`BulkErrsError` carrying *message*."""
        self._store(BulkErrsError(message))
        return True

    def new_err_with_cause(self, cause: BaseException | None, message: str) -> bool:
        """Append *cause* annotated with *message*, unless *cause* is ``None``."""
        if cause is None:
            return False
        self._store(annotate(message, cause))
        return True

    def _store(self, err: BaseException) -> None:
        _ensure_exception(err)
        self._errors.append(err)
        logger.debug(
            "Accumulated %s (%d total)", type(err).__name__, len(self._errors)
        )

    # ── Reading ──────────────────────────────────────────────────

    @property
    def errors(self) -> tuple[BaseException, ...]:
        """Snapshot of the stored errors in insertion order."""
        return tuple(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(tuple(self._errors))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._errors)} errors)"

    # ── Folding ──────────────────────────────────────────────────

    def to_error(self) -> MultiError | None:
        """Fold the stored errors into a single :class:`MultiError`.

        Returns ``None`` when nothing was accumulated. Each call builds a
        new error from the current contents; the accumulator is not
        modified.
        """
        if not self._errors:
            return None
        logger.debug("Folding %d accumulated errors", len(self._errors))
        return MultiError(error_message(err) for err in self._errors)

    def raise_if_any(self) -> None:
        """Raise the folded :class:`MultiError` if any error was accumulated."""
        error = self.to_error()
        if error is not None:
            raise error
