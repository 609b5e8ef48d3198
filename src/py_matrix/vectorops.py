"""
Vector arithmetic over points (sequences of real numbers) and matrix rows.

Every binary operation requires equal lengths and never truncates or pads.
Results are tuples of floats.
"""

import math

from .errors import PyMatrixArgumentError
from .errors import PyMatrixDimensionMismatchError
from .errors import PyMatrixEmptyInputError
from .matrix import _validate_entry
from .random_source import RandomSource


def _check_same_length(point_a, point_b):
	if len(point_a) != len(point_b):
		raise PyMatrixDimensionMismatchError(
			f"Vector sizes mismatch. |A|={len(point_a)}, |B|={len(point_b)}")


def squared_magnitude(point):
	return sum(x * x for x in point)


def magnitude(point):
	"""
	Euclidean length of a vector.

	||X|| = sqrt(x1^2 + x2^2 + ... + xn^2)
	"""
	return math.sqrt(squared_magnitude(point))


def squared_distance(point_a, point_b):
	return squared_magnitude(subtract(point_a, point_b))


def distance(point_a, point_b):
	"""
	Euclidean distance between two vectors.

	d(p, q) = d(q, p) = sqrt(sum((pi - qi)^2))
	"""
	return magnitude(subtract(point_a, point_b))


def combine(point_a, coef_a, point_b, coef_b, scalar=1.0):
	"""scalar * (coef_a * a + coef_b * b), elementwise. All other arithmetic here reduces to this."""
	_check_same_length(point_a, point_b)
	return tuple(scalar * (coef_a * a + coef_b * b) for a, b in zip(point_a, point_b))


def add(point_a, point_b):
	return combine(point_a, 1, point_b, 1)


def subtract(point_a, point_b):
	return combine(point_a, 1, point_b, -1)


def add_and_multiply(point_a, point_b, scalar):
	return combine(point_a, 1, point_b, 1, scalar)


def subtract_and_multiply(point_a, point_b, scalar):
	return combine(point_a, 1, point_b, -1, scalar)


def _as_point(point):
	"""Query point as a tuple of floats, validated like a matrix row."""
	return tuple(_validate_entry(x, i) for i, x in enumerate(point))


def furthest_point(points, point):
	"""
	Row of points furthest (Euclidean) from point. The point itself is a candidate;
	the first row wins ties. Rows sharing an UNKNOWN_VALUE coordinate with point
	have no defined distance and are skipped.
	"""
	target = _as_point(point)
	if points.num_rows() == 0:
		raise PyMatrixEmptyInputError("Cannot find the furthest point in a matrix with no rows")

	furthest_row = None
	furthest_distance = -math.inf
	for row in points.rows():
		dist = squared_distance(target, row)
		# -inf minus -inf
		if math.isnan(dist):
			continue
		if furthest_row is None or dist > furthest_distance:
			furthest_distance = dist
			furthest_row = row

	if furthest_row is None:
		raise PyMatrixEmptyInputError(
			f"No row at a defined distance from the given point among {points.num_rows()} rows")
	return furthest_row


def closest_point(points, point):
	"""
	Row of points closest (Euclidean) to point, skipping rows equal to point itself,
	so the nearest distinct neighbour is returned. The first row wins ties. Rows
	sharing an UNKNOWN_VALUE coordinate with point are skipped, as in furthest_point.
	"""
	target = _as_point(point)

	closest_row = None
	closest_distance = math.inf
	for row in points.rows():
		# Ignore the same point
		if row == target:
			continue
		dist = squared_distance(target, row)
		if math.isnan(dist):
			continue
		if closest_row is None or dist < closest_distance:
			closest_distance = dist
			closest_row = row

	if closest_row is None:
		raise PyMatrixEmptyInputError(
			f"No row distinct from, and at a defined distance to, the given point among {points.num_rows()} rows")
	return closest_row


def sample_with_replacement(features, labels, n, rng=None):
	"""
	Bootstrap sample: draw n row indices uniformly with replacement and copy the
	matching rows of features and labels into two new matrices.

	Returns (sampled_features, sampled_labels); row k of both comes from the same
	original row. A fresh unseeded RandomSource is used when rng is None.
	"""
	if features is None or labels is None:
		raise PyMatrixArgumentError("No training data: features and labels are required")
	size = features.num_rows()
	if size != labels.num_rows():
		raise PyMatrixArgumentError(
			f"Size mismatch: {size} feature rows but {labels.num_rows()} label rows")
	if isinstance(n, bool) or not isinstance(n, int) or n < 0:
		raise PyMatrixArgumentError(f"Sample size must be a non-negative int, got {n!r}")
	if n and not size:
		raise PyMatrixArgumentError(f"Cannot draw {n} rows from empty matrices")

	if rng is None:
		rng = RandomSource()

	sampled_features = features.copy_schema()
	sampled_labels = labels.copy_schema()
	for _ in range(n):
		index = rng.next_int(size)
		sampled_features.add_row(features.get_row(index))
		sampled_labels.add_row(labels.get_row(index))
	return sampled_features, sampled_labels
