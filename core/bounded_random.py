"""
Bounded Random Generator.

Responsibility boundaries:
- Maps one uniform [0, 1) draw onto the half-open integer range
  [lower_bound, upper_bound).
- Validates bounds before touching the random source.
- Batch generation is a plain repetition of single draws.

Mutation constraints:
- The generator holds no state of its own; only its source advances.
"""

import logging
import sys
from typing import List, Optional

from config.config import GeneratorConfig
from core.errors import InvalidRangeError
from utils.logger import AuditLogger
from utils.rng import RandomSource, SeededRandomSource

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
_FLOAT_SPAN_LIMIT = int(sys.float_info.max)
_MANTISSA_SCALE = 2 ** 53


class BoundedRandomGenerator:
    """
    Produces uniformly distributed integers in [lower_bound, upper_bound).
    """

    def __init__(
        self,
        source: Optional[RandomSource] = None,
        config: Optional[GeneratorConfig] = None,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.source = source if source is not None else SeededRandomSource(self.config.seed)
        self._audit = logger or AuditLogger(__name__)

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "BoundedRandomGenerator":
        """Build a generator with a source seeded from `config.seed`."""
        return cls(SeededRandomSource(config.seed), config)

    def get_random(self, upper_bound: int, lower_bound: int = 0) -> int:
        """
        Return a random integer x with lower_bound <= x < upper_bound.

        Exactly one value is drawn from the source per call. Invalid bounds
        are rejected before any draw.

        Raises:
            InvalidRangeError: lower_bound is not strictly below upper_bound.
            TypeError: a bound is not an integer.
            OverflowError: a bound does not fit a signed 64-bit integer
                while `enforce_int64` is set.
            ValueError: the source returned a value outside [0, 1).
        """
        self._check_bound("upper_bound", upper_bound)
        self._check_bound("lower_bound", lower_bound)
        if lower_bound >= upper_bound:
            self._audit.log_event(
                "range_rejected",
                {"lower_bound": lower_bound, "upper_bound": upper_bound},
                level=logging.WARNING,
            )
            raise InvalidRangeError(lower_bound, upper_bound)

        sample = self.source.next_double()
        if not 0.0 <= sample < 1.0:
            raise ValueError(f"Random source returned {sample!r}, expected a value in [0, 1)")

        span = upper_bound - lower_bound
        if span > _FLOAT_SPAN_LIMIT:
            # span has no float form; scale the 53-bit mantissa with integer math
            offset = (span * int(sample * _MANTISSA_SCALE)) >> 53
        else:
            offset = int(sample * span)
        # float rounding can land exactly on span for samples just below 1.0
        if offset >= span:
            offset = span - 1
        result = lower_bound + offset

        if self.config.log_draws:
            self._audit.log_event(
                "draw",
                {"lower_bound": lower_bound, "upper_bound": upper_bound, "sample": sample, "result": result},
            )
        return result

    def get_random_long_values(self, count: int, upper_bound: int, lower_bound: int = 0) -> List[int]:
        """
        Return `count` independent draws sharing the same bounds.

        A non-positive count yields an empty list without drawing.
        """
        if count <= 0:
            return []
        values = [self.get_random(upper_bound, lower_bound) for _ in range(count)]
        self._audit.log_event(
            "batch",
            {"count": count, "lower_bound": lower_bound, "upper_bound": upper_bound},
        )
        return values

    def _check_bound(self, name: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if self.config.enforce_int64 and not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"{name}={value} does not fit a signed 64-bit integer")

    def __repr__(self) -> str:
        return f"BoundedRandomGenerator(source={self.source!r}, config={self.config!r})"


# Process-wide default, replaceable for deterministic tests.
_default_generator = BoundedRandomGenerator()


def set_default_source(source: RandomSource) -> None:
    """Replace the random source used by the module-level helpers."""
    _default_generator.source = source


def reset_default_source() -> None:
    """Restore a freshly seeded source for the module-level helpers."""
    _default_generator.source = SeededRandomSource()


def get_default_generator() -> BoundedRandomGenerator:
    """Return the generator behind the module-level helpers."""
    return _default_generator


def get_random(upper_bound: int, lower_bound: int = 0) -> int:
    """Draw from the process-wide default generator."""
    return _default_generator.get_random(upper_bound, lower_bound)


def get_random_long_values(count: int, upper_bound: int, lower_bound: int = 0) -> List[int]:
    """Batch draw from the process-wide default generator."""
    return _default_generator.get_random_long_values(count, upper_bound, lower_bound)
