from collections.abc import Callable

from ._containers import Maybe, Optional, Result


def optional[T](value: T | None) -> Optional[T]:
    """
    Shortcut for `Optional.of_nullable`.

    Example:
    ```python
    >>> import lemonad as lm
    >>> lm.optional({"a": 1}.get("a")).map(lambda x: x * 2).or_else(0)
    2

    ```
    """
    return Optional.of_nullable(value)


def maybe[T](value: T | None) -> Maybe[T]:
    """Shortcut for `Maybe.of`."""
    return Maybe.of(value)


def lets_try[T](action: Callable[[], T]) -> Result[T, Exception]:
    """
    Shortcut for `Result.perform`.

    Example:
    ```python
    >>> import lemonad as lm
    >>> lm.lets_try(lambda: [1, 2, 3][5]).is_failure()
    True

    ```
    """
    return Result.perform(action)
