from dataclasses import dataclass

from winstat.core.domain.window import MIN_WINDOW_SIZE

DEFAULT_WINDOW_SIZE = 20
DEFAULT_PRECISION = 6


@dataclass
class WindowParams:
    size: int = DEFAULT_WINDOW_SIZE
    precision: int = DEFAULT_PRECISION

    @staticmethod
    def from_dict(window_props: dict, output_props: dict) -> "WindowParams":
        size = window_props.get("size", DEFAULT_WINDOW_SIZE)
        precision = output_props.get("precision", DEFAULT_PRECISION)

        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"window size must be an integer, got {type(size).__name__}")
        if size < MIN_WINDOW_SIZE:
            raise ValueError(f"window size must be at least {MIN_WINDOW_SIZE}, got {size}")

        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {precision!r}")

        return WindowParams(size=size, precision=precision)
