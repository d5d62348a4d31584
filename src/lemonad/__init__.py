from ._containers import (
    Absent,
    Failure,
    Known,
    Maybe,
    NoSuchValueError,
    NullValueError,
    Optional,
    Present,
    Result,
    Success,
    Unknown,
)
from ._core import Config, get_config, identity, noop, set_config
from ._functions import lets_try, maybe, optional

__all__ = [
    "Absent",
    "Config",
    "Failure",
    "Known",
    "Maybe",
    "NoSuchValueError",
    "NullValueError",
    "Optional",
    "Present",
    "Result",
    "Success",
    "Unknown",
    "get_config",
    "identity",
    "lets_try",
    "maybe",
    "noop",
    "optional",
    "set_config",
]
