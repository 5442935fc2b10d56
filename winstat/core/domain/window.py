from __future__ import annotations
import logging
import operator
from typing import Optional

import numpy as np

from winstat.core.domain.stat import InstantStat
from winstat.core.services.phases import growing_phase, sliding_phase, sample_stddev

logger = logging.getLogger(__name__)

MIN_WINDOW_SIZE = 2


class InvalidWindowSizeError(ValueError):
    """Raised when a window cannot hold at least two samples."""


class StatWindow:
    """Mean and sample standard deviation over a fixed size sliding window.

    Values are kept in a preallocated ring buffer. While the buffer is filling up
    statistics follow Welford's algorithm (growing phase); once it is full every push
    replaces the oldest value and the statistics are shifted in place (sliding phase).
    Both cost O(1) per push.

    Args:
        window_size: Number of most recent samples the statistics cover (>= 2).

    Raises:
        InvalidWindowSizeError: window_size is not an integer or is below 2.

    NOTES:
      Not synchronized. Confine an instance to one thread or guard it externally.
    """

    def __init__(self, window_size: int):
        try:
            size = operator.index(window_size)
        except TypeError:
            raise InvalidWindowSizeError(
                f"Window size must be an integer, got {type(window_size).__name__}"
            )
        # windows lesser than 2 elements are nonsense
        if size < MIN_WINDOW_SIZE:
            raise InvalidWindowSizeError(
                f"Window size must be at least {MIN_WINDOW_SIZE}, got {size}"
            )

        self.values = np.zeros(size, dtype=np.float64)
        self.idx = 0
        self.count = 0
        self._mean = 0.0
        self.var_sum = 0.0
        logger.debug("Created stat window of %d samples", size)

    @classmethod
    def new(cls, window_size: int) -> Optional[StatWindow]:
        """Same as the constructor, but returns None for an invalid window size."""
        try:
            return cls(window_size)
        except InvalidWindowSizeError:
            return None

    def push(self, value: float) -> InstantStat:
        """Add a new value and return the statistics of the updated window."""
        value = float(value)

        ejected_value = float(self.values[self.idx])
        self.values[self.idx] = value
        self._move_idx()

        if self.count < self.capacity:
            self.count += 1
            new_mean, new_var_sum, stddev = growing_phase(
                self._mean, self.var_sum, value, self.count
            )
            if self.count == self.capacity:
                logger.debug("Stat window full, sliding from now on")
        else:
            new_mean, new_var_sum, stddev = sliding_phase(
                self._mean, self.var_sum, value, ejected_value, self.count
            )

        self._mean = new_mean
        self.var_sum = new_var_sum

        return InstantStat(mean=new_mean, stddev=stddev)

    def _move_idx(self):
        self.idx = (self.idx + 1) % self.capacity

    @property
    def capacity(self) -> int:
        return len(self.values)

    @property
    def is_full(self) -> bool:
        return self.count == self.capacity

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        if self.count < 2:
            return 0.0
        return self.stddev**2

    @property
    def stddev(self) -> float:
        if self.count < 2:
            return 0.0
        return sample_stddev(self.var_sum, self.count)

    def window(self) -> np.ndarray:
        """Return a copy of the current window contents, oldest first."""
        if not self.is_full:
            return self.values[: self.count].copy()
        return np.roll(self.values, -self.idx)

    def __len__(self):
        return self.count

    def __repr__(self):
        return (
            f"StatWindow(capacity={self.capacity}, count={self.count}, "
            f"mean={self._mean}, stddev={self.stddev})"
        )
