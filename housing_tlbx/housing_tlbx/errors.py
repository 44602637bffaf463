"""Exceptions raised by dataset handling and the plot builders."""


class InvalidColumnError(ValueError):
    """A column reference does not name a usable column.

    Raised when a requested column is missing from the dataset, when the
    dependent variable is passed as the independent variable, or when the
    dependent variable itself is missing or non-numeric. Column labels that
    are not strings are rejected the same way.
    """

    def __init__(self, column: str, message: str | None = None) -> None:
        self.column = column
        super().__init__(message or f"Column '{column}' not found in dataset.")


class UnsupportedColumnKindError(TypeError):
    """A column is neither numeric nor categorical."""

    def __init__(self, column: str, dtype: object) -> None:
        self.column = column
        self.dtype = dtype
        super().__init__(
            f"Column '{column}' has dtype '{dtype}', which is neither numeric nor categorical.",
        )


__all__ = ["InvalidColumnError", "UnsupportedColumnKindError"]
