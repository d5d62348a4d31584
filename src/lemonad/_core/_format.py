from collections.abc import Mapping
from pprint import pformat
from typing import Any


def value_repr(
    v: Any,  # noqa: ANN401
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    suffix = ""
    match v:
        case Mapping() if len(v) > max_items:
            v = dict(list(v.items())[:max_items])
            suffix = "..."
        case list() | tuple() if len(v) > max_items:
            v = v[:max_items]
            suffix = "..."
        case _:
            pass
    text = pformat(v, depth=depth, width=width, compact=compact)
    # pformat may spread a value over several lines, a repr stays on one
    return " ".join(line.strip() for line in text.splitlines()) + suffix
