from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class InstantStat:
    """Window statistics right after a value was pushed."""

    mean: float
    stddev: float

    def __iter__(self) -> Iterator[float]:
        # allows `mean, stddev = window.push(v)`
        yield self.mean
        yield self.stddev
