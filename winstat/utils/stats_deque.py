from collections import deque
from operator import attrgetter
from typing import Dict, Generic, Iterator, List, Optional, TypeVar
from enum import Enum, auto
from dataclasses import dataclass

from winstat.core.domain.stat import InstantStat
from winstat.core.domain.window import StatWindow

""" Use example

    class Sample:
      def __init__(self, timestamp, x):
          self.timestamp = timestamp
          self.x = x

    buf = StatsQueue(
        maxlen=100,
        window=20,
        stats=[
            StatSpec.raw("x", "x"),
            StatSpec.diff("timestamp_diff", "timestamp")
        ]
    )

    for i in range(25):
        buf.put(Sample(i, i * 2))

    print("Mean x:", buf.mean("x"))
    print("Stdev ts:", buf.stdev("timestamp_diff"))
"""


class StatOp(Enum):
    RAW = auto()
    DIFF = auto()


@dataclass(frozen=True)
class StatSpec:
    name: str
    field: str
    op: StatOp

    @staticmethod
    def raw(name: str, field: str) -> "StatSpec":
        return StatSpec(name, field, StatOp.RAW)

    @staticmethod
    def diff(name: str, field: str) -> "StatSpec":
        return StatSpec(name, field, StatOp.DIFF)


TIMESTAMP_DIFF = StatSpec.diff("timestamp_diff", "timestamp")


T = TypeVar("T")


class StatsQueue(Generic[T]):
    """Queue of samples T + sliding window stats on selected attributes.

    Args:
        maxlen: Maximum total samples stored (the raw buffer).
        window: Sliding window size for statistics.
        stats: Attributes of T for which stats are computed.

    NOTES:
      Stats are kept apart from the stored samples, so popping samples does not
      change them. Not synchronized.
    """

    def __init__(self, maxlen: int, window: int, stats: List[StatSpec]):
        self.data: deque[T] = deque(maxlen=maxlen)

        self.stats_config: Dict[str, StatSpec] = {}
        for spec in stats:
            if spec.name in self.stats_config:
                raise ValueError(f"Duplicate stat name: {spec.name}")
            self.stats_config[spec.name] = spec

        self.accessors = {
            name: attrgetter(spec.field) for name, spec in self.stats_config.items()
        }
        self.windows = {name: StatWindow(window) for name in self.stats_config}
        self.latest: Dict[str, Optional[InstantStat]] = {
            name: None for name in self.stats_config
        }
        self._prev: Optional[T] = None

    def put(self, sample: T) -> Dict[str, InstantStat]:
        result: Dict[str, InstantStat] = {}

        for name, spec in self.stats_config.items():
            accessor = self.accessors[name]

            if spec.op == StatOp.RAW:
                value = accessor(sample)
            elif spec.op == StatOp.DIFF:
                value = 0.0 if self._prev is None else accessor(sample) - accessor(self._prev)
            else:
                raise ValueError(f"Unknown StatOp: {spec.op}")

            result[name] = self.windows[name].push(value)

        self.latest.update(result)
        self._prev = sample
        self.data.append(sample)
        return result

    def get(self) -> Optional[T]:
        if not self.data:
            return None
        return self.data.popleft()

    def last(self, name: str) -> Optional[InstantStat]:
        return self.latest[name]

    def mean(self, name: str) -> float:
        return self.windows[name].mean

    def stdev(self, name: str) -> float:
        return self.windows[name].stddev

    def __len__(self):
        return len(self.data)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self.data))
