"""
Logger utility.

Responsibility boundaries:
- Handles structured event logging for the generator.
- Records are plain key=value pairs on top of the `logging` module.
"""

import logging
from typing import Any, Dict, Optional


class AuditLogger:
    """
    A thin structured logger for generator events.
    """

    def __init__(self, name: str = "bounded_random", logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log_event(self, event_type: str, data: Dict[str, Any], level: int = logging.DEBUG) -> None:
        """
        Log a specific event.

        Args:
            event_type: The category of the event.
            data: The event payload.
            level: Standard `logging` level for the record.
        """
        if not self._logger.isEnabledFor(level):
            return
        payload = " ".join(f"{key}={value}" for key, value in sorted(data.items()))
        self._logger.log(level, "%s %s", event_type, payload)
