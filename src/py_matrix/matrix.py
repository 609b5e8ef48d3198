import math
import numbers
import operator
import warnings

from .columns import ColumnAttributes
from .columns import ColumnType
from .errors import PyMatrixIndexError
from .errors import PyMatrixSchemaError
from .errors import PyMatrixShapeError
from .errors import PyMatrixTypeError
from .errors import PyMatrixValueError


# Reserved "missing" marker; no observed value may equal it
UNKNOWN_VALUE = float("-inf")


def _validate_entry(value, position):
	"""Coerce one row entry to float, rejecting anything that is not a real number."""
	# bool is an Integral, but never a measurement
	if value is None or isinstance(value, bool) or not isinstance(value, numbers.Real):
		raise PyMatrixValueError(
			f"Row entry {position} must be a real number or UNKNOWN_VALUE, got {value!r}")
	value = float(value)
	if math.isnan(value):
		raise PyMatrixValueError(
			f"Row entry {position} is NaN; use UNKNOWN_VALUE to mark a missing value")
	return value


def _check_index(index, length, what):
	message = f"{what.capitalize()} index must be an int, not {type(index).__name__}"
	if isinstance(index, bool):
		raise PyMatrixTypeError(message)
	# anything with __index__ counts, numpy integers included
	try:
		index = operator.index(index)
	except TypeError:
		raise PyMatrixTypeError(message) from None
	if not 0 <= index < length:
		raise PyMatrixIndexError(f"{what.capitalize()} index {index} out of range [0, {length})")
	return index


class Matrix():
	""" Row-major table of real numbers with typed columns """

	def __init__(self, columns=None):
		self._columns = []
		self._rows = []
		# rows handed out by add_empty_row and not yet validated
		self._staged = []
		if columns is not None:
			for attrs in columns:
				self.add_column(attrs)

	def num_rows(self):
		return len(self._rows)

	def num_cols(self):
		return len(self._columns)

	def __len__(self):
		return len(self._rows)

	def __repr__(self):
		names = ', '.join(repr(attrs) for attrs in self._columns)
		return f"Matrix({self.num_rows()}x{self.num_cols()}: {names})"

	#-----------------------------------------------------
	# Schema
	#-----------------------------------------------------

	def add_column(self, attributes):
		"""
		Declare the next column. Only allowed while the matrix has no rows.
		Returns the new column's index.
		"""
		if self._rows:
			raise PyMatrixSchemaError("Cannot add a column to a matrix that contains rows")
		if not isinstance(attributes, ColumnAttributes):
			raise PyMatrixTypeError(
				f"Expected ColumnAttributes, got {type(attributes).__name__}")
		self._columns.append(attributes)
		return len(self._columns) - 1

	def columns(self):
		return tuple(self._columns)

	def get_column_attributes(self, col):
		return self._columns[_check_index(col, len(self._columns), "column")]

	def get_column_type(self, col):
		return self.get_column_attributes(col).column_type

	def is_categorical(self, col):
		return self.get_column_type(col) is ColumnType.CATEGORICAL

	def is_continuous(self, col):
		return self.get_column_type(col) is ColumnType.CONTINUOUS

	#-----------------------------------------------------
	# Rows
	#-----------------------------------------------------

	def add_row(self, row):
		"""
		Append a copy of row. Every entry must be a real number (UNKNOWN_VALUE allowed)
		and the length must equal num_cols().
		"""
		row = list(row)
		if len(row) != len(self._columns):
			raise PyMatrixShapeError(
				f"Cannot add a row of length {len(row)} to a matrix with {len(self._columns)} columns")
		self._rows.append([_validate_entry(value, i) for i, value in enumerate(row)])

	def add_empty_row(self):
		"""
		Append a zero-length row without any shape check and return it for in-place filling.

		Staging helper only: statistics over the matrix raise PyMatrixShapeError until
		the row holds num_cols() entries, and PyMatrixValueError if any of them is not
		a real number. Valid entries are coerced to float in place on first use.
		Prefer add_row().
		"""
		if self._columns:
			warnings.warn(
				f"add_empty_row() on a matrix with {len(self._columns)} declared columns; "
				"fill the row before use or call add_row() instead",
				stacklevel=2,
			)
		row = []
		self._rows.append(row)
		self._staged.append(row)
		return row

	def get_row(self, row):
		return tuple(self._rows[_check_index(row, len(self._rows), "row")])

	def rows(self):
		for row in self._rows:
			yield tuple(row)

	def __iter__(self):
		return self.rows()

	def swap_rows(self, row1, row2):
		"""Exchange two rows in place."""
		_check_index(row1, len(self._rows), "row")
		_check_index(row2, len(self._rows), "row")
		if row1 != row2:
			self._rows[row1], self._rows[row2] = self._rows[row2], self._rows[row1]

	def get_column(self, col):
		"""All values of column col in row order, UNKNOWN_VALUE included."""
		return tuple(self._column_values(col))

	def _settle_staged(self):
		"""Validate staged rows in place; they only count once every one of them is complete."""
		num_cols = len(self._columns)
		for row in self._staged:
			index = next(i for i, r in enumerate(self._rows) if r is row)
			if len(row) != num_cols:
				raise PyMatrixShapeError(
					f"Row {index} holds {len(row)} of {num_cols} values; finish staging it first")
			try:
				row[:] = [_validate_entry(value, i) for i, value in enumerate(row)]
			except PyMatrixValueError as e:
				raise PyMatrixValueError(f"Staged row {index}: {e}") from None
		self._staged = []

	def _column_values(self, col):
		_check_index(col, len(self._columns), "column")
		self._settle_staged()
		for row in self._rows:
			yield row[col]

	def _known_values(self, col):
		return [v for v in self._column_values(col) if v != UNKNOWN_VALUE]

	def _require_continuous(self, col, statistic):
		if not self.is_continuous(col):
			name = self._columns[col].name
			raise PyMatrixTypeError(
				f"Cannot calculate the {statistic} of non-continuous column {col} ({name!r})")

	#-----------------------------------------------------
	# Column statistics (UNKNOWN_VALUE entries are ignored)
	#-----------------------------------------------------

	def column_mean(self, col):
		"""
		Arithmetic mean of the known values in a continuous column.

		Returns nan, with a RuntimeWarning, when the column has no known values.
		"""
		self._require_continuous(col, "mean")
		known = self._known_values(col)
		if not known:
			warnings.warn(
				f"Mean of column {col} ({self._columns[col].name!r}) has no known values",
				RuntimeWarning,
				stacklevel=2,
			)
			return math.nan
		return sum(known) / len(known)

	def column_min(self, col):
		"""Smallest known value of a continuous column, or UNKNOWN_VALUE if there is none."""
		self._require_continuous(col, "min")
		known = self._known_values(col)
		return min(known) if known else UNKNOWN_VALUE

	def column_max(self, col):
		"""Largest known value of a continuous column, or UNKNOWN_VALUE if there is none."""
		self._require_continuous(col, "max")
		known = self._known_values(col)
		return max(known) if known else UNKNOWN_VALUE

	def most_common_value(self, col):
		"""
		Most frequent known value in any column, or UNKNOWN_VALUE if there is none.
		Ties go to the value seen first in row order.
		"""
		# dicts keep insertion order, so iteration follows first appearance
		frequencies = {}
		for value in self._known_values(col):
			frequencies[value] = frequencies.get(value, 0) + 1

		best_value = UNKNOWN_VALUE
		best_count = 0
		for value, count in frequencies.items():
			if count > best_count:
				best_value = value
				best_count = count
		return best_value

	#-----------------------------------------------------
	# Copies
	#-----------------------------------------------------

	def copy_schema(self):
		"""New empty matrix declaring the same columns."""
		return Matrix(self._columns)

	def copy(self):
		"""Deep copy: same columns, independent copies of every row."""
		new = self.copy_schema()
		new._rows = [list(row) for row in self._rows]
		staged = {id(row) for row in self._staged}
		new._staged = [c for row, c in zip(self._rows, new._rows) if id(row) in staged]
		return new
