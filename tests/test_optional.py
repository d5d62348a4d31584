"""Tests for the Optional container."""

import pytest

import lemonad as lm


def test_of_rejects_none() -> None:
    """Test that of refuses to wrap None."""
    with pytest.raises(lm.NullValueError):
        lm.Optional.of(None)


def test_of_returns_new_instances() -> None:
    """Test that each of call builds a distinct but equal Optional."""
    first = lm.Optional.of(42)
    second = lm.Optional.of(42)
    assert first is not second
    assert second.equals(first)
    assert first == second


def test_of_nullable() -> None:
    """Test of_nullable on None and on values."""
    assert lm.Optional.of_nullable(None).is_absent()
    assert not lm.Optional.of_nullable(None).is_present()
    assert lm.Optional.of_nullable(42).is_present()
    assert not lm.Optional.of_nullable(42).is_absent()


def test_falsy_values_are_present() -> None:
    """Test that only None counts as absence."""
    for value in (0, "", [], False):
        assert lm.Optional.of(value).is_present()


def test_empty_equals_empty() -> None:
    """Test that two empty Optionals are equal without being the same object."""
    assert lm.Optional.empty() is not lm.Optional.empty()
    assert lm.Optional.empty() == lm.Optional.empty()
    assert lm.Optional.empty() != lm.Optional.of(42)
    assert lm.Optional.of(42) != lm.Optional.of(43)


def test_equality_with_other_types() -> None:
    """Test that an Optional never equals a bare value."""
    assert lm.Optional.of(42) != 42
    assert lm.Optional.empty() != None  # noqa: E711


def test_hash_follows_equality() -> None:
    """Test that equal Optionals hash alike."""
    assert hash(lm.Optional.of("a")) == hash(lm.Optional.of("a"))
    assert len({lm.Optional.empty(), lm.Optional.empty(), lm.Optional.of(1)}) == 2


@pytest.mark.parametrize(
    ("value", "predicate"),
    [(None, lm.noop), (42, lambda x: x == 43)],
)
def test_filter_returns_empty(value: object, predicate: object) -> None:
    """Test filter on an empty Optional and on a rejected value."""
    assert lm.Optional.of_nullable(value).filter(predicate).is_absent()  # type: ignore[arg-type]


def test_filter_keeps_same_instance() -> None:
    """Test that a satisfied filter returns the very same Optional."""
    opt = lm.Optional.of(42)
    assert opt.filter(lambda x: x == 42) is opt


def test_filter_does_not_call_predicate_when_empty() -> None:
    """Test that filter skips the predicate on an empty Optional."""
    calls: list[object] = []
    lm.Optional.empty().filter(calls.append)
    assert calls == []


def test_map() -> None:
    """Test map on present and empty Optionals."""
    assert lm.Optional.of(42).map(lambda x: x + 1) == lm.Optional.of(43)
    assert lm.Optional.of(42).map(lm.noop).is_absent()
    assert lm.Optional.empty().map(lambda x: x + 1).is_absent()


def test_map_composition() -> None:
    """Test that mapping twice equals mapping the composition."""

    def f(x: int) -> int:
        return x * 3

    def g(x: int) -> str:
        return f"<{x}>"

    opt = lm.Optional.of(7)
    assert opt.map(f).map(g) == opt.map(lambda x: g(f(x)))


def test_flat_map() -> None:
    """Test flat_map returns the mapper result as is."""
    other = lm.Optional.of(43)
    assert lm.Optional.of(42).flat_map(lambda _: other) is other
    assert lm.Optional.empty().flat_map(lambda _: other).is_absent()


def test_get() -> None:
    """Test get on present and empty Optionals."""
    assert lm.Optional.of(42).get() == 42  # noqa: PLR2004
    with pytest.raises(lm.NoSuchValueError, match="Optional is empty"):
        lm.Optional.empty().get()


@pytest.mark.parametrize(("value", "expected"), [(None, 43), (42, 42)])
def test_if_present(value: int | None, expected: int) -> None:
    """Test that if_present only calls the consumer with a value."""
    seen = [43]
    lm.Optional.of_nullable(value).if_present(lambda x: seen.append(x))
    assert seen[-1] == expected


@pytest.mark.parametrize(("value", "expected"), [(None, 43), (42, 42)])
def test_if_present_or_else(value: int | None, expected: int) -> None:
    """Test that exactly one of consumer or action is called."""
    seen: list[int] = []
    lm.Optional.of_nullable(value).if_present_or_else(
        seen.append, lambda: seen.append(43)
    )
    assert seen == [expected]


def test_is_present_or_else_is_deprecated() -> None:
    """Test the deprecated alias still works and warns."""
    seen: list[int] = []
    with pytest.warns(DeprecationWarning, match="if_present_or_else"):
        lm.Optional.of(1).is_present_or_else(seen.append, lm.noop)
    assert seen == [1]


@pytest.mark.parametrize(("value", "expected"), [(None, 42), (999, 999)])
def test_or(value: int | None, expected: int) -> None:
    """Test or_ falls back on the supplied Optional."""
    result = lm.Optional.of_nullable(value).or_(lambda: lm.Optional.of(42))
    assert result.get() == expected


def test_or_keeps_same_instance() -> None:
    """Test that or_ returns self when present and never calls the supplier."""
    opt = lm.Optional.of(1)
    assert opt.or_(lambda: pytest.fail("supplier called")) is opt


@pytest.mark.parametrize(("value", "expected"), [(None, 42), (84, 84)])
def test_or_else(value: int | None, expected: int) -> None:
    """Test or_else returns the literal fallback."""
    assert lm.Optional.of_nullable(value).or_else(42) == expected


@pytest.mark.parametrize(("value", "expected"), [(None, 42), (84, 84)])
def test_or_else_get(value: int | None, expected: int) -> None:
    """Test or_else_get calls the supplier only when empty."""
    assert lm.Optional.of_nullable(value).or_else_get(lambda: 42) == expected


def test_or_else_raise_returns_value() -> None:
    """Test or_else_raise on a present Optional."""
    assert lm.Optional.of(42).or_else_raise(lambda: RuntimeError("Argh!")) == 42  # noqa: PLR2004


def test_or_else_raise_raises_supplied_error() -> None:
    """Test or_else_raise raises exactly the supplied exception."""
    with pytest.raises(RuntimeError, match="Argh!"):
        lm.Optional.empty().or_else_raise(lambda: RuntimeError("Argh!"))


def test_optional_helper() -> None:
    """Test the optional shortcut."""
    assert lm.optional(None).is_absent()
    assert lm.optional(42) == lm.Optional.of(42)


def test_repr() -> None:
    """Test that repr reads like the factory calls."""
    assert repr(lm.Optional.of("a")) == "Optional.of('a')"
    assert repr(lm.Optional.empty()) == "Optional.empty()"
