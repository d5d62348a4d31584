from typing import Any

from cytoolz.functoolz import identity

__all__ = ["identity", "noop"]


def noop(*args: Any, **kwargs: Any) -> None:  # noqa: ANN401, ARG001
    """Accept anything, do nothing and return `None`.

    Handy as a default handler wherever a callable is required but no effect is wanted.

    Example:
    ```python
    >>> import lemonad as lm
    >>> lm.noop(1, 2, key="value") is None
    True
    >>> lm.Result.failure(ValueError("boom")).fold(lm.noop, lm.identity) is None
    True

    ```
    """
