from ._errors import NoSuchValueError, NullValueError
from ._maybe import Known, Maybe, Unknown
from ._optional import Absent, Optional, Present
from ._result import Failure, Result, Success

__all__ = [
    "Absent",
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
]
