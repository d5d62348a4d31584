from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ._format import value_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by every container `repr`.

    Args:
        max_width (int): Line width handed to the pretty printer.
        max_depth (int): Nesting depth after which values are elided.
        max_items (int): Number of items shown for lists, tuples and mappings.
    """

    max_width: int = 80
    max_depth: int = 3
    max_items: int = 20

    def value_repr(self, value: Any) -> str:  # noqa: ANN401
        return value_repr(
            value, self.max_items, depth=self.max_depth, width=self.max_width
        )


_CONFIG = Config()


def get_config() -> Config:
    """Return the active display configuration."""
    return _CONFIG


def set_config(**changes: int) -> Config:
    """Replace the active configuration with an updated copy of it.

    Unknown keys raise a `TypeError`.

    Example:
    ```python
    >>> import lemonad as lm
    >>> lm.set_config(max_items=2).max_items
    2
    >>> lm.Optional.of([1, 2, 3])
    Optional.of([1, 2]...)
    >>> lm.set_config(max_items=20).max_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
