from abc import ABC, abstractmethod
from typing import Iterator


class ReaderPort(ABC):
    @abstractmethod
    def read(self) -> Iterator[float]:
        """yield samples"""
        pass

    @abstractmethod
    def close(self):
        """close reader."""
        pass
