"""Library loggers.

All loggers of the package belong to ``logger_group``.  The group starts at
``NOTICE`` so the per-field debug records stay silent under logbook's
default stderr handler; lower it to see them::

    import logbook
    from brace_fmt.logs import logger_group

    logger_group.level = logbook.DEBUG
"""

from __future__ import annotations

import logbook

logger_group = logbook.LoggerGroup(level=logbook.NOTICE)


def get_logger(name: str) -> logbook.Logger:
    logger = logbook.Logger(name)
    logger_group.add_logger(logger)
    return logger
