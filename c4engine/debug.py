"""
debug.py - Logging for the Connect Four engine

All engine modules log through the `debug` singleton defined here. Records are
tagged with the component that produced them ("board", "win", "search", "game",
"env", "cli") and can be filtered by component from the command line. The search
logs its inner loop only at TRACE level, so normal play stays quiet.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, Iterable, Optional, Set

# Ordered from quietest to noisiest
class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

# Python logging has no TRACE; NONE sits above CRITICAL so nothing gets through
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 1,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

COMPONENTS = ("board", "win", "search", "game", "env", "cli")


class DebugManager:
    """
    Wraps the "c4engine" logger with engine levels and component filtering.

    Timers are keyed by name on this shared instance, so only single-threaded
    callers (the CLI) use them. Library code measures its own durations.
    """

    def __init__(self, name: str = "c4engine"):
        self._level = DebugLevel.WARNING
        self._components: Set[str] = set()  # empty means every component
        self._timers: Dict[str, float] = {}
        self._logger = logging.getLogger(name)
        self._logger.setLevel(LEVEL_MAP[self._level])
        self._logger.propagate = False

        if not any(getattr(h, "_c4engine_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            handler._c4engine_console = True
            self._logger.addHandler(handler)

    def configure(self, level: Optional[DebugLevel] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None) -> None:
        """
        Change logging settings; arguments left as None keep their value.

        Args:
            level: Most verbose level that is emitted
            log_file: Also append records to this file ("" stops file logging)
            components: Only emit records from these components (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if log_file is not None:
            for handler in [h for h in self._logger.handlers if isinstance(h, logging.FileHandler)]:
                self._logger.removeHandler(handler)
                handler.close()
            if log_file:
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(
                    logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
                )
                self._logger.addHandler(file_handler)

        if components is not None:
            components = set(components)
            unknown = components - set(COMPONENTS)
            if unknown:
                self.warning(f"Unknown debug components: {sorted(unknown)}", "cli")
            self._components = components

    def is_enabled_for(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        """Cheap check for hot paths before building a message."""
        if self._level == DebugLevel.NONE or level.value > self._level.value:
            return False
        return not (component and self._components and component not in self._components)

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None):
        if not self.is_enabled_for(level, component):
            return
        if component:
            message = f"[{component}] {message}"
        if level == DebugLevel.TRACE:
            message = f"TRACE: {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, name: str):
        self._timers[name] = time.perf_counter()

    def end_timer(self, name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a named timer and log the elapsed time.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._timers.pop(name, None)
        if started is None:
            self.warning(f"Timer '{name}' not started", component)
            return None
        elapsed = time.perf_counter() - started
        self.debug(f"{name} took {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_name: str):
        """Set the level from a command-line name such as "debug"."""
        try:
            level = DebugLevel[level_name.upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_name}", "cli")
            return
        self.configure(level=level)
        self.info(f"Debug level set to {level.name}", "cli")


debug = DebugManager()
