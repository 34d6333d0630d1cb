"""Inclusive integer ranges drawn from a uniform float source."""

import math
import random
from numbers import Integral

from core.errors import InvalidRange


def _is_integer(value):
    return isinstance(value, Integral) and not isinstance(value, bool)


def random_range(min_value, max_value, rng=None):
    """Return an integer in [min_value, max_value], each value equally likely.

    Both bounds must be integers with min_value <= max_value.
    `rng` is anything with a ``random()`` method returning a float in [0, 1),
    e.g. a seeded ``random.Random``. Defaults to the module-level generator.
    """
    if not (_is_integer(min_value) and _is_integer(max_value)):
        raise InvalidRange(min_value, max_value, reason="bounds must be integers")
    if min_value > max_value:
        raise InvalidRange(min_value, max_value)
    source = rng if rng is not None else random
    span = max_value - min_value + 1
    return math.floor(source.random() * span) + min_value
