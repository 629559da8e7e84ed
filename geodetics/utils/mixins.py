"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional, Set, Tuple


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives a class a logger named after its module and class (a child of the
    package logger), plus warnings that are only emitted once per message.
    """
    logger: logging.Logger

    # (logger name, message) pairs that have already been emitted
    WARNED_ONCE: Set[Tuple[str, str]] = set()

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        module_name = _class.__module__
        classname = _class.__name__
        if logstr:
            classname += f'.{logstr}'

        logstr = f"{classname}" if module_name == "builtins" else f"{module_name}.{classname}"

        self.logger = logging.getLogger(logstr)

    @classmethod
    def reset_warnings(cls) -> None:
        """Forgets every once-only warning, so each may be emitted again"""
        cls.WARNED_ONCE.clear()

    def warn_once(self, msg, *args, **kwargs):
        """Logs a warning only once per message"""
        key = (self.logger.name, msg)
        if key in self.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        self.WARNED_ONCE.add(key)
