class NullValueError(ValueError):
    """Raised when `None` is given where a container requires a value."""

    def __init__(self, msg: str = "Value must not be None.") -> None:
        super().__init__(msg)


class NoSuchValueError(RuntimeError):
    """Raised when reading the value of an absent `Optional`."""

    def __init__(self, msg: str = "Optional is empty.") -> None:
        super().__init__(msg)
