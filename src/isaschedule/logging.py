"""
Custom logging configuration for isaschedule.

Extends Python's standard logging with a custom DEEP_DEBUG level (5)
for very verbose debugging output, such as the per-year CPI factors
applied while compounding the repayment threshold.

Log Levels
----------
- CRITICAL (50): Critical errors
- ERROR (40): Errors
- WARNING (30): Warnings
- INFO (20): Informational messages (default)
- DEBUG (10): Debug messages
- DEEP_DEBUG (5): Very verbose debug messages

Examples
--------
Use logger in a module:

>>> from isaschedule import logging
>>> logger = logging.getLogger("isaschedule.scheduler")
>>> logger.info("Building schedule")
>>> logger.deep("Very verbose output")

Configure levels through the projection config:

>>> from isaschedule import Projection
>>> log_config = {
...     "default_level": "INFO",
...     "modules": {"threshold": "DEEP_DEBUG"},
... }
>>> proj = Projection.init("contract.yml", logging=log_config)

See Also
--------
isaschedule.config.InputValidator : Validates the logging section
"""

import logging
from typing import Any

(CRITICAL, ERROR, WARNING, INFO, DEBUG) = (
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)
DEEP_DEBUG = 5
logging.addLevelName(DEEP_DEBUG, "DEEP")

LEVELS = {
    "DEEP_DEBUG": DEEP_DEBUG,
    "DEBUG": DEBUG,
    "INFO": INFO,
    "WARNING": WARNING,
    "ERROR": ERROR,
    "CRITICAL": CRITICAL,
}


class IsaLogger(logging.Logger):
    """
    Custom logger with DEEP_DEBUG level support.

    Extends Python's Logger to add the `deep()` method for very verbose
    debugging output (level 5).

    Examples
    --------
    >>> logger = IsaLogger("test")
    >>> logger.setLevel(5)  # DEEP_DEBUG
    >>> logger.deep("Very verbose message")
    """

    def deep(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log message at DEEP_DEBUG level (5).

        Parameters
        ----------
        msg : str
            Message format string.
        *args : Any
            Arguments for message formatting.
        **kwargs : Any
            Additional logging kwargs.
        """
        if self.isEnabledFor(DEEP_DEBUG):
            self._log(DEEP_DEBUG, msg, args, **kwargs)


# Make the logging module hand out our subclass from now on
logging.setLoggerClass(IsaLogger)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)


def getLogger(name: str | None = None) -> IsaLogger:
    """
    Get an IsaLogger instance.

    Convenience wrapper around logging.getLogger() that returns
    an IsaLogger instance with DEEP_DEBUG support.

    Parameters
    ----------
    name : str, optional
        Logger name. If None, returns root logger.

    Returns
    -------
    IsaLogger
        Logger instance with deep() method.
    """
    return logging.getLogger(name)  # type: ignore[return-value]


def configure(log_config: dict[str, Any]) -> None:
    """
    Apply a logging section to the ``isaschedule`` loggers.

    Parameters
    ----------
    log_config : dict
        Logging configuration with keys:
        - default_level: str (e.g., 'INFO', 'DEBUG')
        - modules: dict[str, str] (per-module overrides, e.g.
          ``{"scheduler": "DEBUG"}`` for ``isaschedule.scheduler``)
    """
    default_level = log_config.get("default_level", "INFO")
    logging.getLogger("isaschedule").setLevel(LEVELS[default_level.upper()])

    module_levels = log_config.get("modules") or {}
    for module_name, level in module_levels.items():
        logger_name = f"isaschedule.{module_name}"
        logging.getLogger(logger_name).setLevel(LEVELS[level.upper()])
