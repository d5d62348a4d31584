from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, cast, final

from .._core import Pipeable, get_config
from ._errors import NullValueError


class Maybe[T](Pipeable, ABC):
    """A value which is either definitely known, or unknown for good.

    Unlike `Optional`, nothing can be extracted from an unknown `Maybe` without
    providing a fallback, and an unknown `Maybe` never compares equal to anything,
    itself included.

    Example:
    ```python
    >>> from lemonad import Maybe
    >>> age = Maybe.of({"name": "Ada"}.get("age"))
    >>> age.to(lambda x: x + 1).or_("n/a")
    'n/a'
    >>> age == age
    False

    ```
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:  # noqa: ANN401
        if not cls.__module__.startswith("lemonad."):
            msg = f"{cls.__name__}: Maybe variants are closed to extension"
            raise TypeError(msg)
        super().__init_subclass__(**kwargs)

    @staticmethod
    def unknown() -> Maybe[Any]:
        """Returns a new unknown `Maybe`."""
        return Unknown()

    @staticmethod
    def definitely[V](value: V) -> Maybe[V]:
        """
        Returns a known `Maybe` holding the given value.

        Raises:
            NullValueError: If `value` is `None`.
        """
        return Known(value)

    @staticmethod
    def of[V](value: V | None) -> Maybe[V]:
        """
        Returns an unknown `Maybe` for `None`, a known one otherwise.

        Example:
            ```python
            >>> from lemonad import Maybe
            >>> Maybe.of(None)
            Maybe.unknown()
            >>> Maybe.of(42)
            Maybe.definitely(42)

            ```
        """
        return Maybe.unknown() if value is None else Maybe.definitely(value)

    @abstractmethod
    def is_known(self) -> bool: ...

    @abstractmethod
    def or_[U](self, other: U | Callable[[], U]) -> T | U:
        """
        Returns the known value, otherwise the fallback.

        The fallback is either a plain value, or a zero-argument callable
        which is only called when the `Maybe` is unknown.

        Example:
            ```python
            >>> from lemonad import Maybe
            >>> Maybe.definitely(1).or_(42)
            1
            >>> Maybe.unknown().or_(42)
            42
            >>> Maybe.unknown().or_(lambda: 42)
            42

            ```
        """
        ...

    def or_else(self, other: Maybe[T]) -> Maybe[T]:
        """Returns this instance if known, otherwise `other`."""
        return self if self.is_known() else other

    def to[U](self, mapper: Callable[[T], U]) -> Maybe[U]:
        """
        Applies the mapper to a known value and returns it as a new known `Maybe`.

        The mapper must not return `None`, an unknown `Maybe` stays unknown.

        Example:
            ```python
            >>> from lemonad import Maybe
            >>> Maybe.definitely(41).to(lambda x: x + 1)
            Maybe.definitely(42)
            >>> Maybe.unknown().to(lambda x: x + 1)
            Maybe.unknown()

            ```
        """
        if self.is_known():
            return Maybe.definitely(mapper(cast(Known[T], self).value))
        return Maybe.unknown()

    def query(self, predicate: Callable[[T], object]) -> Maybe[bool]:
        """
        Returns a known `Maybe` holding the truth of the predicate for a known value.

        Example:
            ```python
            >>> from lemonad import Maybe
            >>> Maybe.definitely("abc").query(str.isalpha)
            Maybe.definitely(True)
            >>> Maybe.definitely([]).query(len)
            Maybe.definitely(False)

            ```
        """
        if self.is_known():
            return Maybe.definitely(bool(predicate(cast(Known[T], self).value)))
        return Maybe.unknown()

    def equals(self, other: Maybe[Any]) -> bool:
        """
        Returns `True` only when both are known and hold equal values.

        Example:
            ```python
            >>> from lemonad import Maybe
            >>> Maybe.definitely(42).equals(Maybe.definitely(42))
            True
            >>> unknown = Maybe.unknown()
            >>> unknown.equals(unknown)
            False

            ```
        """
        if not (self.is_known() and other.is_known()):
            return False
        mine = cast(Known[T], self).value
        return self is other or mine == other.or_(mine)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if self.is_known():
            return hash(cast(Known[T], self).value)
        return object.__hash__(self)


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Known[T](Maybe[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullValueError

    def __repr__(self) -> str:
        return f"Maybe.definitely({get_config().value_repr(self.value)})"

    def __str__(self) -> str:
        return str(self.value)

    def is_known(self) -> bool:
        return True

    def or_[U](self, other: U | Callable[[], U]) -> T | U:  # noqa: ARG002
        return self.value


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Unknown(Maybe[Any]):
    def __repr__(self) -> str:
        return "Maybe.unknown()"

    def __str__(self) -> str:
        return "unknown"

    def is_known(self) -> bool:
        return False

    def or_[U](self, other: U | Callable[[], U]) -> U:
        return other() if callable(other) else other
