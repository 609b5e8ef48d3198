class PyMatrixError(Exception):
    """Base exception for py-matrix library."""
    pass


class PyMatrixSchemaError(PyMatrixError, RuntimeError):
    """Raised when the column schema is changed after rows exist."""
    pass


class PyMatrixShapeError(PyMatrixError, ValueError):
    """Raised when a row length does not match the column count."""
    pass


class PyMatrixDimensionMismatchError(PyMatrixShapeError):
    """Raised when two vectors of different lengths are combined."""
    pass


class PyMatrixValueError(PyMatrixError, ValueError):
    """Raised for missing or malformed entries in a row."""
    pass


class PyMatrixTypeError(PyMatrixError, TypeError):
    """Raised for a statistic the column type does not support, or invalid types in API calls."""
    pass


class PyMatrixIndexError(PyMatrixError, IndexError):
    """Raised for row or column indices out of bounds."""
    pass


class PyMatrixEmptyInputError(PyMatrixError, ValueError):
    """Raised when no eligible row exists to answer a query."""
    pass


class PyMatrixArgumentError(PyMatrixError, ValueError):
    """Raised for invalid combinations of arguments."""
    pass
