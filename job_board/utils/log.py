"""Logging setup for the command line entry point."""

import logging
import sys

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(numeric_level)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    root.addHandler(handler)
