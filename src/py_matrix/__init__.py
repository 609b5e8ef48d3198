"""
py-matrix: a small typed-column matrix and vector toolkit

Prepares tabular data for machine-learning routines: declare columns,
append rows of real numbers, then query column statistics or run
vector arithmetic over the rows.

Main classes:
    - Matrix: row-major table of real numbers with typed columns
    - ColumnAttributes: name + ColumnType of one column
    - RandomSource: seedable random draws for bootstrap sampling

Vector operations live in py_matrix.vectorops.

Zero external dependencies - pure Python stdlib only.
"""

from .columns import ColumnAttributes, ColumnType
from .matrix import Matrix, UNKNOWN_VALUE
from .random_source import RandomSource
from . import vectorops
from .errors import (
	PyMatrixError,
	PyMatrixSchemaError,
	PyMatrixShapeError,
	PyMatrixDimensionMismatchError,
	PyMatrixValueError,
	PyMatrixTypeError,
	PyMatrixIndexError,
	PyMatrixEmptyInputError,
	PyMatrixArgumentError,
)

__version__ = "0.1.0"
__all__ = [
	"Matrix",
	"ColumnAttributes",
	"ColumnType",
	"RandomSource",
	"UNKNOWN_VALUE",
	"vectorops",
	"PyMatrixError",
	"PyMatrixSchemaError",
	"PyMatrixShapeError",
	"PyMatrixDimensionMismatchError",
	"PyMatrixValueError",
	"PyMatrixTypeError",
	"PyMatrixIndexError",
	"PyMatrixEmptyInputError",
	"PyMatrixArgumentError",
]
