"""Helpers for examining errors and their ``__cause__`` chains."""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from .exceptions import error_message

if TYPE_CHECKING:
    from collections.abc import Iterator


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield *err* followed by each explicit cause, outermost first.

    Stops on a cycle in the chain.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__


@overload
def cause(err: BaseException) -> BaseException: ...


@overload
def cause(err: None) -> None: ...


def cause(err: BaseException | None) -> BaseException | None:
    """Return the innermost cause of *err*.

    An error without a ``__cause__`` is its own cause.
    """
    innermost: BaseException | None = None
    for innermost in iter_chain(err):
        pass
    return innermost


def is_kind(err: BaseException | None, *kinds: type[BaseException]) -> bool:
    """Whether *err* or any error in its cause chain is one of *kinds*."""
    return any(isinstance(link, kinds) for link in iter_chain(err))


def error_stack(err: BaseException | None) -> list[str]:
    """Return the text of each error along the cause chain, outermost first."""
    return [error_message(link) for link in iter_chain(err)]
