from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This allows to write x.into(f) instead of f(x), hence keeping a chaining style
        when a container has to be handed over to a plain function.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import lemonad as lm
        >>> def describe(opt: lm.Optional[int]) -> str:
        ...     return opt.map(str).or_else("nothing")
        >>>
        >>> lm.Optional.of(42).into(describe)
        '42'
        >>> lm.Optional.empty().into(describe)
        'nothing'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the instance to a function to perform side effects without altering it.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import lemonad as lm
        >>> lm.Result.successful(2).inspect(print).map(lambda x: x * 10)
        Result.successful(2)
        Result.successful(20)

        ```
        """
        func(self, *args, **kwargs)
        return self
