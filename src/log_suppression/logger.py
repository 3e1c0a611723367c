import logging
import sys
from typing import Optional, Union

from .config import SuppressionConfig, get_default_config
from .filtering import RecordFilter
from .formatter import PlainTextFormatter

FilterTarget = Union[logging.Logger, logging.Handler]

_logger = logging.getLogger(__name__)


def _resolve_filter(
    config: Optional[SuppressionConfig], record_filter: Optional[RecordFilter]
) -> Optional[RecordFilter]:
    """Injected filter wins, then the config, then the process default"""
    if record_filter is not None:
        return record_filter
    config = config or get_default_config()
    if not config.enabled:
        return None
    return RecordFilter.from_config(config)


def install(
    target: Optional[FilterTarget] = None,
    config: Optional[SuppressionConfig] = None,
    record_filter: Optional[RecordFilter] = None,
) -> Optional[RecordFilter]:
    """Register the suppression filter on a logger or handler.

    ``target`` defaults to the root logger. A logger-level filter only sees
    records logged through that logger; install on a handler to also cover
    records propagated from child loggers. Previously installed
    ``RecordFilter`` instances on the target are replaced.

    Returns the installed filter, or ``None`` when the configuration is
    disabled.
    """
    if target is None:
        target = logging.getLogger()

    record_filter = _resolve_filter(config, record_filter)
    if record_filter is None:
        _logger.debug("Suppression filter disabled, nothing installed on %r", target)
        return None

    uninstall(target)
    target.addFilter(record_filter)
    _logger.debug("Installed %r on %r", record_filter, target)
    return record_filter


def uninstall(target: Optional[FilterTarget] = None) -> int:
    """Remove every ``RecordFilter`` from the target, returning how many"""
    if target is None:
        target = logging.getLogger()

    installed = [f for f in target.filters if isinstance(f, RecordFilter)]
    for record_filter in installed:
        target.removeFilter(record_filter)

    if installed:
        _logger.debug("Removed %d suppression filter(s) from %r", len(installed), target)
    return len(installed)


def get_logger(
    name: str,
    config: Optional[SuppressionConfig] = None,
    record_filter: Optional[RecordFilter] = None,
) -> logging.Logger:
    """Create a console logger whose handler carries the suppression filter"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        config = config or get_default_config()
        logger.setLevel(getattr(logging, config.log_level.upper()))

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(PlainTextFormatter(config))
        install(console_handler, config, record_filter)
        logger.addHandler(console_handler)

        logger.propagate = True

    return logger
