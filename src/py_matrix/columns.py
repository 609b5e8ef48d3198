"""
Column metadata for Matrix.

Pure metadata design:
  - ColumnAttributes describes a column (name + type), never its values
  - Attributes are immutable; a matrix copies its attribute list, never shares it
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import PyMatrixTypeError


class ColumnType(Enum):
    """Kind of data held by a column."""
    CATEGORICAL = "categorical"
    CONTINUOUS = "continuous"


def coerce_column_type(value: Any) -> ColumnType:
    """
    Convert a ColumnType or its string value to ColumnType.

    Raises
    ------
    PyMatrixTypeError
        If value names no known column type
    """
    if isinstance(value, ColumnType):
        return value
    if isinstance(value, str):
        try:
            return ColumnType(value.strip().lower())
        except ValueError:
            pass
    raise PyMatrixTypeError(
        f"Unknown column type {value!r}; expected one of "
        f"{', '.join(t.value for t in ColumnType)}"
    )


@dataclass(frozen=True)
class ColumnAttributes:
    """
    Describes one column of a Matrix.

    Attributes
    ----------
    name : str
        Column label
    column_type : ColumnType
        Categorical (label-like) or Continuous (supports mean/min/max)

    Examples
    --------
    >>> ColumnAttributes("age", ColumnType.CONTINUOUS)
    <age continuous>
    >>> ColumnAttributes("color", "categorical").is_categorical
    True
    """

    name: str
    column_type: ColumnType

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ to store the normalized type
        object.__setattr__(self, "column_type", coerce_column_type(self.column_type))

    def __repr__(self):
        return f"<{self.name} {self.column_type.value}>"

    @property
    def is_categorical(self) -> bool:
        return self.column_type is ColumnType.CATEGORICAL

    @property
    def is_continuous(self) -> bool:
        return self.column_type is ColumnType.CONTINUOUS
