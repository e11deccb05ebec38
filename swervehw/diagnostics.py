"""
Diagnostics sink for non-fatal configuration hazards.

Resolvers only ever push to a sink. Whoever owns the sink (a dashboard,
the CLI, a test) decides when and how to surface what was raised.
"""

import logging
import threading
from enum import Enum
from typing import List, Protocol

logger = logging.getLogger(__name__)


class Diagnostic(Enum):
    """
    Categories of configuration hazards.

    Device resolution only raises CAN_ID_WARNING. The I2C and serial
    categories belong to navX style connections that are not resolved
    here; they exist so one sink can collect every hazard a drivetrain
    reports.
    """

    CAN_ID_WARNING = "can_id_warning"
    I2C_LOCKUP_WARNING = "i2c_lockup_warning"
    SERIAL_COMMS_ISSUE_WARNING = "serial_comms_issue_warning"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Diagnostic.CAN_ID_WARNING: "CAN IDs greater than 40 can cause undefined behaviour, please use a CAN ID below 40!",
    Diagnostic.I2C_LOCKUP_WARNING: "I2C is known to cause lockups on the roboRIO, use another connection method.",
    Diagnostic.SERIAL_COMMS_ISSUE_WARNING: "Serial communication is unreliable on the roboRIO, use another connection method.",
}


class DiagnosticsSink(Protocol):
    """Anything that accepts fire-and-forget hazard signals."""

    def raise_warning(self, category: Diagnostic) -> None:
        ...


class DiagnosticsLog:
    """
    Append-only, thread-safe diagnostics sink.

    Safe to share between resolvers running on different threads.
    """

    def __init__(self, log_warnings: bool = True):
        """
        Initialize diagnostics log.

        Args:
            log_warnings: Also log each raised diagnostic at WARNING level
        """
        self.log_warnings = log_warnings
        self._raised: List[Diagnostic] = []
        self._lock = threading.Lock()

    def raise_warning(self, category: Diagnostic) -> None:
        """
        Record a hazard.

        Args:
            category: Diagnostic category being raised
        """
        with self._lock:
            self._raised.append(category)
        if self.log_warnings:
            logger.warning(category.message)

    def is_raised(self, category: Diagnostic) -> bool:
        with self._lock:
            return category in self._raised

    def count(self, category: Diagnostic) -> int:
        with self._lock:
            return self._raised.count(category)

    @property
    def raised(self) -> List[Diagnostic]:
        """Snapshot of every diagnostic raised so far, in arrival order."""
        with self._lock:
            return list(self._raised)

    def clear(self) -> None:
        with self._lock:
            self._raised.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._raised)
