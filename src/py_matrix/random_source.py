# py_matrix/random_source.py

import random

from .errors import PyMatrixArgumentError


class RandomSource:
    """
    Seedable source of random draws, passed explicitly to whatever needs it.

    Key design points:
    - Each instance owns its own random.Random (no module-level generator)
    - Same seed, same sequence of draws
    - Not thread-safe; share across threads only with external locking
    """

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def seed(self, value=None):
        """Reset the generator state from value (None reseeds from the OS)."""
        self._random.seed(value)

    def next_int(self, n=None):
        """
        Uniform integer in [0, n). Without a bound, any 32-bit signed integer
        is equally likely.
        """
        if n is None:
            return self._random.getrandbits(32) - (1 << 31)
        if isinstance(n, bool) or not isinstance(n, int):
            raise PyMatrixArgumentError(f"Bound must be an int, got {type(n).__name__}")
        if n <= 0:
            raise PyMatrixArgumentError(f"Bound must be positive, got {n}")
        return self._random.randrange(n)

    def next_long(self):
        """Uniform 64-bit signed integer."""
        return self._random.getrandbits(64) - (1 << 63)

    def next_double(self):
        """Uniform float in [0.0, 1.0)."""
        return self._random.random()

    def next_boolean(self):
        return self._random.random() < 0.5

    def next_gaussian(self):
        """Normally distributed float with mean 0 and standard deviation 1."""
        return self._random.gauss(0.0, 1.0)

    def __repr__(self):
        return f"{self.__class__.__name__}()"
