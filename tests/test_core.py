"""Tests for the helpers shared by every container."""

import warnings

import pytest

import lemonad as lm
from lemonad._core import deprecated


def test_identity() -> None:
    """Test that identity returns its argument itself."""
    value = object()
    assert lm.identity(value) is value


def test_noop() -> None:
    """Test that noop accepts anything and returns None."""
    assert lm.noop() is None
    assert lm.noop(1, "a", key=[]) is None


def test_into() -> None:
    """Test piping a container into a function."""
    assert lm.Optional.of(2).into(lambda opt, n: opt.get() * n, 21) == 42  # noqa: PLR2004


def test_inspect_returns_same_instance() -> None:
    """Test that inspect runs the side effect and returns self."""
    seen: list[object] = []
    result = lm.Result.successful(1)
    assert result.inspect(seen.append) is result
    assert seen == [result]


def test_deprecated_warns_with_replacement() -> None:
    """Test the deprecation decorator message and passthrough."""

    @deprecated("new_name")
    def old_name(x: int) -> int:
        return x + 1

    with pytest.warns(DeprecationWarning, match="`old_name` is deprecated, use `new_name` instead"):
        assert old_name(1) == 2  # noqa: PLR2004
    assert old_name.__name__ == "old_name"


def test_deprecated_alias_not_warning_on_replacement() -> None:
    """Test that the replacement operation itself does not warn."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        lm.Optional.of(1).if_present_or_else(lm.noop, lm.noop)


def test_config_controls_repr() -> None:
    """Test that set_config changes how values are rendered."""
    previous = lm.get_config()
    try:
        config = lm.set_config(max_items=3)
        assert config is lm.get_config()
        assert config.max_items == 3  # noqa: PLR2004
        assert repr(lm.Optional.of(list(range(10)))) == "Optional.of([0, 1, 2]...)"
        assert repr(lm.Result.successful({"a": 1})) == "Result.successful({'a': 1})"
    finally:
        lm.set_config(
            max_width=previous.max_width,
            max_depth=previous.max_depth,
            max_items=previous.max_items,
        )
    assert lm.get_config() == previous


def test_config_depth() -> None:
    """Test that nested values are elided past the configured depth."""
    previous = lm.get_config()
    try:
        lm.set_config(max_depth=1)
        assert repr(lm.Maybe.definitely([[1], [2]])) == "Maybe.definitely([[...], [...]])"
    finally:
        lm.set_config(max_depth=previous.max_depth)


def test_config_rejects_unknown_settings() -> None:
    """Test that set_config only accepts known settings."""
    with pytest.raises(TypeError):
        lm.set_config(colour=1)


def test_long_values_stay_on_one_line() -> None:
    """Test that a wide value does not spread over several lines."""
    previous = lm.get_config()
    try:
        lm.set_config(max_width=10)
        assert "\n" not in repr(lm.Optional.of(list(range(8))))
    finally:
        lm.set_config(max_width=previous.max_width)
