from __future__ import annotations

import pytest

from bulkerrs.exceptions import (
    AlreadyExistsError,
    AnnotatedError,
    BulkErrsError,
    NotFoundError,
    NotSupportedError,
    NotValidError,
    UnauthorizedError,
)
from bulkerrs.ports import WrapFunc
from bulkerrs.wrappers import (
    already_exists,
    annotate,
    not_found,
    not_supported,
    not_valid,
    trace,
    unauthorized,
)


def test_annotate_joins_with_colon() -> None:
    original = ValueError("original")

    err = annotate("more context", annotate("context", original))

    assert str(err) == "more context: context: original"
    assert isinstance(err.__cause__, AnnotatedError)
    assert err.__cause__.__cause__ is original


def test_annotate_without_cause() -> None:
    err = annotate("should have failed", None)

    assert str(err) == "should have failed"
    assert err.message == "should have failed"
    assert err.__cause__ is None


def test_annotate_with_empty_message_keeps_cause_text() -> None:
    err = annotate("", KeyError("user_id"))

    assert str(err) == "'user_id'"


def test_trace_returns_error_unchanged() -> None:
    original = RuntimeError("boom")

    assert trace("ignored", original) is original
    assert trace("ignored", None) is None


@pytest.mark.parametrize(
    ("wrap", "kind"),
    [
        (not_valid, NotValidError),
        (not_found, NotFoundError),
        (already_exists, AlreadyExistsError),
        (not_supported, NotSupportedError),
        (unauthorized, UnauthorizedError),
    ],
)
def test_typed_constructors(wrap: WrapFunc[str], kind: type[BulkErrsError]) -> None:
    cause = LookupError("lookup failed")

    with_cause = wrap("user 42", cause)
    without_cause = wrap("user 42", None)

    assert isinstance(with_cause, kind)
    assert isinstance(with_cause, AnnotatedError)
    assert str(with_cause) == "user 42: lookup failed"
    assert with_cause.__cause__ is cause
    assert str(without_cause) == "user 42"


def test_wrappers_satisfy_protocol() -> None:
    assert isinstance(annotate, WrapFunc)
    assert isinstance(not_found, WrapFunc)
