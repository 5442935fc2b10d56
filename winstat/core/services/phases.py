import math
from typing import Tuple


def sample_stddev(var_sum: float, count: int) -> float:
    variance = var_sum / (count - 1)
    if variance < 0.0:
        # rounding can leave a tiny negative residue once the window turns constant
        return 0.0 if math.isfinite(variance) else math.nan
    return math.sqrt(variance)


def growing_phase(
    mean: float, var_sum: float, new_element: float, count: int
) -> Tuple[float, float, float]:
    """Welford's online update for a window that is still filling up.

    Args:
        mean: Mean before `new_element` was added.
        var_sum: Sum of squared deviations before `new_element` was added.
        new_element: The pushed value.
        count: Number of elements including `new_element`.

    Returns:
        (new_mean, new_var_sum, stddev)
    """
    if count < 2:
        return new_element, 0.0, 0.0

    new_mean = mean + (new_element - mean) / count
    new_var_sum = var_sum + (new_element - mean) * (new_element - new_mean)

    return new_mean, new_var_sum, sample_stddev(new_var_sum, count)


def sliding_phase(
    mean: float,
    var_sum: float,
    new_element: float,
    ejected_element: float,
    count: int,
) -> Tuple[float, float, float]:
    """Replace `ejected_element` by `new_element` in a full window of `count` values.

    The mean shift and the change of the squared deviations are applied in one step,
    so the remaining window members are never revisited.
    """
    new_mean = mean + (new_element - ejected_element) / count
    new_var_sum = var_sum + (new_element - ejected_element) * (
        new_element + ejected_element - mean - new_mean
    )

    return new_mean, new_var_sum, sample_stddev(new_var_sum, count)
