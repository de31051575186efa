"""
Validation sinks that report outcomes to logging or fan out to other sinks.
"""

import logging
from typing import Iterable, List, Optional

from ..core.interfaces import ValidationEvent, ValidationSink


class LoggingSink(ValidationSink):
    """Logs violations at WARNING (configurable) and passes at DEBUG."""

    def __init__(self, logger_name: str = "arg_contracts.violations",
                 level: int = logging.WARNING):
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def record(self, event: ValidationEvent) -> None:
        if event.passed:
            self.logger.debug(
                f"{event.contract_name}: {event.convention.value} arguments accepted")
            return
        self.logger.log(
            self.level,
            f"{event.error_kind} in {event.contract_name} "
            f"({event.convention.value} convention): {event.message}")


class CompositeSink(ValidationSink):
    """Sink that forwards every event to each of its sub-sinks."""

    def __init__(self, sinks: Optional[Iterable[ValidationSink]] = None):
        self.sinks: List[ValidationSink] = list(sinks or [])

    def add_sink(self, sink: ValidationSink) -> None:
        """Add a sub-sink to this composite."""
        self.sinks.append(sink)

    def record(self, event: ValidationEvent) -> None:
        for sink in self.sinks:
            sink.record(event)
