import logging
import os
from typing import Iterator, Optional, TextIO

from winstat.core.ports.reader import ReaderPort

logger = logging.getLogger(__name__)


class SampleParseError(ValueError):
    """Raised when an input line does not hold a single float sample."""


def parse_line(line: str, source: str, lineno: int) -> Optional[float]:
    """Parse one input line. Blank lines and `#` comments yield None."""
    text = line.split("#", 1)[0].strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        raise SampleParseError(f"{source}:{lineno}: not a number: {text!r}")


class StreamReader(ReaderPort):
    def __init__(self, stream: TextIO, name: str = "<stream>", strict: bool = True):
        """
        Text stream reader adapter, one sample per line.
            :param stream: Open text stream (e.g. sys.stdin)
            :param name: Source name used in error messages
            :param strict: Raise on malformed lines instead of skipping them
        """
        self.stream = stream
        self.name = name
        self.strict = strict

    def read(self) -> Iterator[float]:
        for lineno, line in enumerate(self.stream, start=1):
            try:
                value = parse_line(line, self.name, lineno)
            except SampleParseError as e:
                if self.strict:
                    raise
                logger.warning("Skipping line: %s", e)
                continue
            if value is not None:
                yield value

    def close(self):
        self.stream.close()


class FileReader(StreamReader):
    def __init__(self, filename: str, strict: bool = True):
        """
        File reader adapter.
            :param filename: Path to the samples file
            :param strict: Raise on malformed lines instead of skipping them
        """
        if not os.path.exists(filename):
            raise FileNotFoundError(f"File {filename} does not exist")
        super().__init__(open(filename, "r"), name=filename, strict=strict)
