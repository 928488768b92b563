"""Logger hierarchy for noxdoc.

Every module logs below ``noxdoc``: the parser stages use ``noxdoc.parser``
and ``noxdoc.parser.tags`` (region and malformed-tag diagnostics at DEBUG),
source discovery uses ``noxdoc.discovery``, rendering ``noxdoc.render`` and
the command line ``noxdoc.cli``. Nothing is emitted until the CLI, or an
embedding application, calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "noxdoc"

_CONSOLE_FORMAT = "[noxdoc] %(levelname)s %(message)s"
# parse_files runs on a thread pool, so file records name the worker
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install console and optional file handlers on the ``noxdoc`` logger.

    Console output goes to stderr so rendered JSON on stdout stays clean.
    ``verbose`` wins over ``quiet``. The file sink, when given, always records
    DEBUG regardless of the console level.
    """
    console_level = _console_level(verbose, quiet)
    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.propagate = False

    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    package_logger.addHandler(console)

    if log_file is None:
        package_logger.setLevel(console_level)
        return package_logger

    sink = logging.FileHandler(log_file, encoding="utf-8")
    sink.setLevel(logging.DEBUG)
    sink.setFormatter(logging.Formatter(_FILE_FORMAT))
    package_logger.addHandler(sink)
    package_logger.setLevel(logging.DEBUG)
    return package_logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
