"""Tests for structural pattern matching on lemonad containers."""

import lemonad as lm


def _describe_result(result: lm.Result[int, str]) -> str:
    match result:
        case lm.Success(value):
            return f"ok: {value}"
        case lm.Failure(error):
            return f"error: {error}"
        case _:
            raise AssertionError


def _describe_optional(opt: lm.Optional[str]) -> str:
    match opt:
        case lm.Present(value):
            return value
        case lm.Absent():
            return "<absent>"
        case _:
            raise AssertionError


def _describe_maybe(maybe: lm.Maybe[int]) -> str:
    match maybe:
        case lm.Known(value) if value > 0:
            return "positive"
        case lm.Known():
            return "not positive"
        case _:
            return "unknown"


def test_result_pattern_matching() -> None:
    """Test Result pattern matching."""
    assert _describe_result(lm.Result.successful(42)) == "ok: 42"
    assert _describe_result(lm.Result.failure("Something went wrong")) == (
        "error: Something went wrong"
    )


def test_optional_pattern_matching() -> None:
    """Test Optional pattern matching."""
    assert _describe_optional(lm.optional("hello")) == "hello"
    assert _describe_optional(lm.optional(None)) == "<absent>"


def test_maybe_pattern_matching() -> None:
    """Test Maybe pattern matching."""
    assert _describe_maybe(lm.maybe(3)) == "positive"
    assert _describe_maybe(lm.maybe(-3)) == "not positive"
    assert _describe_maybe(lm.maybe(None)) == "unknown"
