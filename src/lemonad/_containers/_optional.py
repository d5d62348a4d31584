from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, final

from .._core import Pipeable, deprecated, get_config
from ._errors import NoSuchValueError, NullValueError


class Optional[T](Pipeable, ABC):
    """A container which may or may not hold a non-`None` value.

    Build one with `Optional.empty()`, `Optional.of(value)` or `Optional.of_nullable(value)`.
    The two variants, `Present` and `Absent`, can be used in `match` statements.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:  # noqa: ANN401
        if not cls.__module__.startswith("lemonad."):
            msg = f"{cls.__name__}: Optional variants are closed to extension"
            raise TypeError(msg)
        super().__init_subclass__(**kwargs)

    @staticmethod
    def empty() -> Optional[Any]:
        """
        Returns an empty `Optional`.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.empty().is_absent()
            True

            ```
        """
        return Absent()

    @staticmethod
    def of[V](value: V) -> Optional[V]:
        """
        Returns an `Optional` holding the given value.

        Args:
            value: The value to wrap, must not be `None`.

        Returns:
            A present `Optional`.

        Raises:
            NullValueError: If `value` is `None`.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.of(42)
            Optional.of(42)
            >>> Optional.of(None)
            Traceback (most recent call last):
                ...
            lemonad._containers._errors.NullValueError: Value must not be None.

            ```
        """
        return Present(value)

    @staticmethod
    def of_nullable[V](value: V | None) -> Optional[V]:
        """
        Returns an empty `Optional` for `None`, a present one otherwise.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.of_nullable(None)
            Optional.empty()
            >>> Optional.of_nullable(0)
            Optional.of(0)

            ```
        """
        return Optional.empty() if value is None else Optional.of(value)

    @abstractmethod
    def is_present(self) -> bool:
        """Returns `True` if a value is present."""
        ...

    def is_absent(self) -> bool:
        """Returns `True` if no value is present."""
        return not self.is_present()

    @abstractmethod
    def get(self) -> T:
        """
        Returns the contained value.

        Raises:
            NoSuchValueError: If the `Optional` is empty.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.of("car").get()
            'car'
            >>> Optional.empty().get()
            Traceback (most recent call last):
                ...
            lemonad._containers._errors.NoSuchValueError: Optional is empty.

            ```
        """
        ...

    def equals(self, other: Optional[Any]) -> bool:
        """
        Returns `True` if both hold equal values, or if both are empty.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.of(42).equals(Optional.of(42))
            True
            >>> Optional.empty().equals(Optional.empty())
            True
            >>> Optional.of(42).equals(Optional.empty())
            False

            ```
        """
        if self is other:
            return True
        return self.or_else(None) == other.or_else(None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.or_else(None))

    def filter(self, predicate: Callable[[T], object]) -> Optional[T]:
        """
        Returns this very instance if a value is present and satisfies the predicate,
        otherwise an empty `Optional`.

        Args:
            predicate: Function called with the contained value, its result is used for its truthiness.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> opt = Optional.of(4)
            >>> opt.filter(lambda x: x % 2 == 0) is opt
            True
            >>> opt.filter(lambda x: x > 10)
            Optional.empty()

            ```
        """
        if self.is_absent() or not predicate(self.get()):
            return Optional.empty()
        return self

    def map[U](self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """
        Applies the mapper to a present value and wraps the result with `of_nullable`.

        A mapper returning `None` therefore yields an empty `Optional`.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.of("Hello, World!").map(len)
            Optional.of(13)
            >>> Optional.of({"a": 1}).map(lambda d: d.get("b"))
            Optional.empty()
            >>> Optional.empty().map(len)
            Optional.empty()

            ```
        """
        if self.is_absent():
            return Optional.empty()
        return Optional.of_nullable(mapper(self.get()))

    def flat_map[U](self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        """
        Returns the `Optional` produced by the mapper for a present value, unchanged.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> def half(x: int) -> Optional[int]:
            ...     return Optional.of(x // 2) if x % 2 == 0 else Optional.empty()
            >>> Optional.of(8).flat_map(half).flat_map(half)
            Optional.of(2)
            >>> Optional.of(6).flat_map(half).flat_map(half)
            Optional.empty()

            ```
        """
        if self.is_absent():
            return Optional.empty()
        return mapper(self.get())

    def if_present(self, consumer: Callable[[T], object]) -> None:
        """Calls the consumer with the value if one is present."""
        if self.is_present():
            consumer(self.get())

    def if_present_or_else(
        self, consumer: Callable[[T], object], action: Callable[[], object]
    ) -> None:
        """
        Calls the consumer with the value if one is present, otherwise calls the action.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.of(1).if_present_or_else(print, lambda: print("nothing"))
            1
            >>> Optional.empty().if_present_or_else(print, lambda: print("nothing"))
            nothing

            ```
        """
        if self.is_present():
            consumer(self.get())
        else:
            action()

    @deprecated("if_present_or_else")
    def is_present_or_else(
        self, consumer: Callable[[T], object], action: Callable[[], object]
    ) -> None:
        return self.if_present_or_else(consumer, action)

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """
        Returns this instance if a value is present, otherwise the `Optional` given by the supplier.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.of("barbarians").or_(lambda: Optional.of("vikings"))
            Optional.of('barbarians')
            >>> Optional.empty().or_(lambda: Optional.of("vikings"))
            Optional.of('vikings')

            ```
        """
        return self if self.is_present() else supplier()

    def or_else[U](self, other: U) -> T | U:
        """
        Returns the value if present, otherwise `other`.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.of("car").or_else("bike")
            'car'
            >>> Optional.empty().or_else("bike")
            'bike'

            ```
        """
        return self.get() if self.is_present() else other

    def or_else_get[U](self, supplier: Callable[[], U]) -> T | U:
        """
        Returns the value if present, otherwise the result of the supplier.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> k = 10
            >>> Optional.of(4).or_else_get(lambda: 2 * k)
            4
            >>> Optional.empty().or_else_get(lambda: 2 * k)
            20

            ```
        """
        return self.get() if self.is_present() else supplier()

    def or_else_raise(self, error_supplier: Callable[[], BaseException]) -> T:
        """
        Returns the value if present, otherwise raises the exception built by the supplier.

        Example:
            ```python
            >>> from lemonad import Optional
            >>> Optional.empty().or_else_raise(lambda: KeyError("user"))
            Traceback (most recent call last):
                ...
            KeyError: 'user'

            ```
        """
        if self.is_present():
            return self.get()
        raise error_supplier()


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Present[T](Optional[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullValueError

    def __repr__(self) -> str:
        return f"Optional.of({get_config().value_repr(self.value)})"

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self.value


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Absent(Optional[Any]):
    def __repr__(self) -> str:
        return "Optional.empty()"

    def is_present(self) -> bool:
        return False

    def get(self) -> Never:
        raise NoSuchValueError
