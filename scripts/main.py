import argparse
import logging
import sys

from winstat.adapters.readers import FileReader, StreamReader
from winstat.core.config import Config
from winstat.core.domain.window import StatWindow
from winstat.core.ports.reader import ReaderPort

logger = logging.getLogger(__name__)


def run(cfg: Config, filename=None, out=None) -> int:
    out = out or sys.stdout
    params = cfg.window_params()
    filename = filename or cfg.input_filename

    reader: ReaderPort = (
        FileReader(filename, strict=cfg.strict_input)
        if filename
        else StreamReader(sys.stdin, name="<stdin>", strict=cfg.strict_input)
    )
    window = StatWindow(params.size)

    try:
        for value in reader.read():
            mean, stddev = window.push(value)
            out.write(f"{value} {mean:.{params.precision}f} {stddev:.{params.precision}f}\n")
    finally:
        if filename:
            reader.close()
    return 0


def main():
    parser = argparse.ArgumentParser(description="Sliding window mean and standard deviation")
    parser.add_argument("samples", nargs="?", help="samples file, one value per line")
    parser.add_argument("--config", default="./configs/config.yaml")
    args = parser.parse_args()

    try:
        cfg = Config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid configuration: %s", e)
        return 1

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        return run(cfg, args.samples)
    except (FileNotFoundError, ValueError, TypeError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
