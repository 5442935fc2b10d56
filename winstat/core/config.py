import logging
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from winstat.core.domain.params.window_params import WindowParams

DEFAULT_LOG_LEVEL = logging.ERROR
DEFAULT_INPUT_FILENAME: Optional[str] = None
DEFAULT_STRICT_INPUT = True


class Config:
    def __init__(self, path: str):
        """
        Load YAML configuration from the given path.

        Args:
            path: Path to config.yaml, usually 'configs/config.yaml' in project root.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")

        with open(self.path, "r") as f:
            try:
                self._data: Dict[str, Any] = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Config file {self.path} is not valid YAML: {e}")

        if not isinstance(self._data, dict):
            raise ValueError(f"Config file {self.path} must hold a mapping")

    def get(self, key: str, default=None):
        """Get a config value by key."""
        return self._data.get(key, default)

    def _section(self, key: str) -> Dict[str, Any]:
        props = self._data.get(key) or {}
        if not isinstance(props, dict):
            raise ValueError(f"Config section '{key}' must be a mapping")
        return props

    def window_params(self) -> WindowParams:
        return WindowParams.from_dict(self._section("window"), self._section("output"))

    @property
    def window_size(self) -> int:
        return self.window_params().size

    @property
    def precision(self) -> int:
        return self.window_params().precision

    @property
    def input_filename(self) -> Optional[str]:
        return self._section("input").get("filename", DEFAULT_INPUT_FILENAME)

    @property
    def strict_input(self) -> bool:
        strict = self._section("input").get("strict", DEFAULT_STRICT_INPUT)
        if not isinstance(strict, bool):
            raise ValueError(f"input.strict must be true or false, got {strict!r}")
        return strict

    @property
    def log_level(self) -> int:
        raw = self._data.get("log_level", logging.getLevelName(DEFAULT_LOG_LEVEL))
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        level = logging.getLevelName(str(raw).upper())
        if not isinstance(level, int):
            return DEFAULT_LOG_LEVEL
        return level
