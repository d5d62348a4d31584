from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
from typing import Any, final

from .._core import Pipeable, get_config, identity, noop
from ._errors import NullValueError
from ._optional import Optional


def _loosely_equal(left: object, right: object) -> bool:
    """Exceptions only compare by identity, so two of them are equal when type and args match."""
    if left == right:
        return True
    if isinstance(left, BaseException) and isinstance(right, BaseException):
        return type(left) is type(right) and left.args == right.args
    return False


class Result[T, E](Pipeable, ABC):
    """The outcome of a computation which either produced a value or failed with an error.

    A `Success` wraps the value, a `Failure` wraps the error.
    `Result.perform` is the bridge between code that raises and code that returns results.

    Example:
    ```python
    >>> from lemonad import Result
    >>> def parse(raw: str) -> Result[int, Exception]:
    ...     return Result.perform(lambda: int(raw))
    >>> parse("41").map(lambda x: x + 1)
    Result.successful(42)
    >>> parse("forty-one").map(lambda x: x + 1)
    Result.failure(ValueError("invalid literal for int() with base 10: 'forty-one'"))
    >>> parse("forty-one").recover(lambda e: -1).get_or_else(lambda: 0)
    -1

    ```
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:  # noqa: ANN401
        if not cls.__module__.startswith("lemonad."):
            msg = f"{cls.__name__}: Result variants are closed to extension"
            raise TypeError(msg)
        super().__init_subclass__(**kwargs)

    @staticmethod
    def successful[V](value: V) -> Result[V, Any]:
        """
        Creates a new `Success`.

        Raises:
            NullValueError: If `value` is `None`.
        """
        return Success(value)

    @staticmethod
    def failure[F](error: F) -> Result[Any, F]:
        """
        Creates a new `Failure` wrapping the given error, usually an exception.

        Raises:
            NullValueError: If `error` is `None`.
        """
        return Failure(error)

    @staticmethod
    def perform[V](action: Callable[[], V]) -> Result[V, Exception]:
        """
        Calls the action and wraps its return value in a `Success`.

        Any `Exception` raised by the action is caught and wrapped in a `Failure`.
        An action returning `None` yields a `Failure` of `NullValueError`.

        Args:
            action: A zero-argument callable.

        Returns:
            The `Success` of the returned value, or the `Failure` of the raised exception.

        Example:
            ```python
            >>> from lemonad import Result
            >>> Result.perform(lambda: 42)
            Result.successful(42)
            >>> Result.perform(lambda: 1 / 0)
            Result.failure(ZeroDivisionError('division by zero'))

            ```
        """
        try:
            return Result.successful(action())
        except Exception as exc:  # noqa: BLE001
            return Result.failure(exc)

    @staticmethod
    def sequence[V, F](results: Iterable[Result[V, F]]) -> Result[list[V], F]:
        """
        Turns an iterable of results into a result of a list.

        Results are consumed in order. The first `Failure` stops the iteration and its
        error is returned in a new `Failure`, the remaining results are never pulled.
        Otherwise, all the values are collected in order in a `Success`.

        Args:
            results: Any iterable of `Result`, lazy ones included.

        Returns:
            A `Success` of the list of values, or a `Failure` of the first error.

        Example:
            ```python
            >>> from lemonad import Result
            >>> Result.sequence([Result.successful(1), Result.successful(2)])
            Result.successful([1, 2])
            >>> Result.sequence([
            ...     Result.successful(1),
            ...     Result.failure("foo"),
            ...     Result.failure("bar"),
            ... ])
            Result.failure('foo')
            >>> Result.sequence([])
            Result.successful([])

            ```
        """
        values: list[V] = []
        for result in results:
            match result:
                case Failure(error):
                    return Result.failure(error)
                case Success(value):
                    values.append(value)
                case _:
                    msg = f"expected a Result, got {type(result).__name__}"
                    raise TypeError(msg)
        return Result.successful(values)

    @abstractmethod
    def is_success(self) -> bool: ...

    def is_failure(self) -> bool:
        return not self.is_success()

    @abstractmethod
    def fold[U](self, on_failure: Callable[[E], U], on_success: Callable[[T], U]) -> U:
        """
        Applies `on_failure` to the error of a `Failure`, or `on_success` to the value of a `Success`.

        The result of the applied function is returned as is.

        Example:
            ```python
            >>> from lemonad import Result
            >>> Result.successful(2).fold(str, lambda x: x * 2)
            4
            >>> Result.failure(KeyError("id")).fold(repr, lambda x: x * 2)
            "KeyError('id')"

            ```
        """
        ...

    def map[U](self, mapper: Callable[[T], U]) -> Result[U, E | Exception]:
        """
        Applies the mapper to the value of a `Success` within `Result.perform`.

        A raising mapper therefore gives a `Failure`, a `Failure` is passed along untouched.

        Example:
            ```python
            >>> from lemonad import Result
            >>> Result.successful(42).map(lambda x: x + 1)
            Result.successful(43)
            >>> Result.successful(42).map(lambda x: x / 0)
            Result.failure(ZeroDivisionError('division by zero'))

            ```
        """
        return self.fold(Result.failure, lambda value: Result.perform(partial(mapper, value)))

    def flat_map[U](self, mapper: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Returns the `Result` given by the mapper for the value of a `Success`.

        Unlike `map`, exceptions raised by the mapper are not caught.
        """
        return self.fold(Result.failure, mapper)

    def recover(self, supplier: Callable[[E], T]) -> Result[T, Exception]:
        """
        Computes a value from the error of a `Failure` within `Result.perform`.

        A `Success` is returned unchanged.

        Example:
            ```python
            >>> from lemonad import Result
            >>> Result.failure(KeyError("id")).recover(lambda e: 0)
            Result.successful(0)

            ```
        """
        return self.fold(lambda error: Result.perform(partial(supplier, error)), lambda _: self)

    def recover_with(self, supplier: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Returns the `Result` given by the supplier for the error of a `Failure`, or this `Success` unchanged."""
        return self.fold(supplier, lambda _: self)

    def get_or_else[U](self, supplier: Callable[[], U]) -> T | U:
        """Returns the value of a `Success`, or the result of the supplier."""
        return self.fold(lambda _: supplier(), identity)

    def or_else(self, try_supplier: Callable[[], Result[T, E]]) -> Result[T, E]:
        """Returns this `Success`, or the `Result` given by the supplier."""
        return self if self.is_success() else try_supplier()

    def filter_or_else(
        self,
        predicate: Callable[[T], object],
        error_supplier: Callable[[], BaseException],
    ) -> Result[T, E | Exception]:
        """
        Keeps a `Success` whose value satisfies the predicate.

        Otherwise the exception built by `error_supplier` is raised within `Result.perform`
        and a `Failure` of it is returned. A `Failure` is passed along untouched.

        Example:
            ```python
            >>> from lemonad import Result
            >>> Result.successful(42).filter_or_else(lambda x: x > 0, lambda: ValueError("negative"))
            Result.successful(42)
            >>> Result.successful(-1).filter_or_else(lambda x: x > 0, lambda: ValueError("negative"))
            Result.failure(ValueError('negative'))

            ```
        """

        def _check(value: T) -> T:
            if predicate(value):
                return value
            raise error_supplier()

        return self.fold(Result.failure, lambda value: Result.perform(partial(_check, value)))

    def to_optional(self) -> Optional[T]:
        """
        Converts a `Success` to a present `Optional`, and a `Failure` to an empty one.

        Example:
            ```python
            >>> from lemonad import Result
            >>> Result.successful(42).to_optional()
            Optional.of(42)
            >>> Result.failure(KeyError("id")).to_optional()
            Optional.empty()

            ```
        """
        return self.fold(lambda _: Optional.empty(), Optional.of)

    def for_each(self, consumer: Callable[[T], object]) -> None:
        """Calls the consumer with the value of a `Success`."""
        self.fold(noop, consumer)

    def equals(self, other: Result[Any, Any]) -> bool:
        """
        Compares two results.

        Two successes are equal when their values are. Two failures are equal when their
        errors are, exceptions of the same type with the same arguments being considered equal.

        Example:
            ```python
            >>> from lemonad import Result
            >>> Result.successful(42).equals(Result.successful(42))
            True
            >>> Result.failure(RuntimeError("")).equals(Result.failure(RuntimeError("")))
            True
            >>> Result.successful(42).equals(Result.failure(RuntimeError("")))
            False

            ```
        """
        if self is other:
            return True
        if self.is_success():
            return self.fold(noop, lambda value: value == other.get_or_else(noop))
        return other.is_failure() and _loosely_equal(
            self.fold(identity, noop),
            other.fold(identity, noop),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.fold(
            lambda error: hash(type(error))
            if isinstance(error, BaseException)
            else hash(error),
            hash,
        )


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Success[T, E](Result[T, E]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullValueError

    def __repr__(self) -> str:
        return f"Result.successful({get_config().value_repr(self.value)})"

    def is_success(self) -> bool:
        return True

    def fold[U](self, on_failure: Callable[[E], U], on_success: Callable[[T], U]) -> U:  # noqa: ARG002
        return on_success(self.value)


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Failure[T, E](Result[T, E]):
    error: E

    def __post_init__(self) -> None:
        if self.error is None:
            raise NullValueError

    def __repr__(self) -> str:
        return f"Result.failure({get_config().value_repr(self.error)})"

    def is_success(self) -> bool:
        return False

    def fold[U](self, on_failure: Callable[[E], U], on_success: Callable[[T], U]) -> U:  # noqa: ARG002
        return on_failure(self.error)
