"""Second-order statistics computed online over a sliding window.

    from winstat import StatWindow

    sw = StatWindow(5)
    for v in [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]:
        mean, stddev = sw.push(v)

Each push is O(1) and memory is fixed by the window size. The statistics are
computed with Welford's algorithm while the window fills up and with a modified
update that removes the ejected sample once the window slides.
"""

from winstat.core.domain.stat import InstantStat
from winstat.core.domain.window import StatWindow, InvalidWindowSizeError
from winstat.utils.stats_deque import StatsQueue, StatSpec, StatOp

__version__ = "0.1.0"

__all__ = [
    "InstantStat",
    "StatWindow",
    "InvalidWindowSizeError",
    "StatsQueue",
    "StatSpec",
    "StatOp",
]
