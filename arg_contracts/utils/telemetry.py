"""
OpenTelemetry integration for argument contract validation.

Provides a validation sink that counts validations and violations through
the OpenTelemetry metrics API and annotates the current span whenever a
contract is violated. Without a configured SDK the API falls back to
no-op instruments, so the sink is always safe to attach.
"""

import logging
from typing import Dict

from opentelemetry import metrics, trace

from ..core.interfaces import ValidationEvent, ValidationSink

logger = logging.getLogger(__name__)


class TelemetrySink(ValidationSink):
    """Validation sink backed by OpenTelemetry counters and span events."""

    def __init__(self, service_name: str = "arg_contracts"):
        self.service_name = service_name
        self.meter = metrics.get_meter(service_name)
        self._setup_metrics()
        logger.info(f"TelemetrySink initialized for {service_name}")

    def _setup_metrics(self) -> None:
        """Set up OpenTelemetry metrics instruments."""
        self.validation_counter = self.meter.create_counter(
            name="argument_validations_total",
            description="Total number of argument contract validations",
            unit="1"
        )
        self.violation_counter = self.meter.create_counter(
            name="argument_violations_total",
            description="Total number of argument contract violations",
            unit="1"
        )

    def _attributes(self, event: ValidationEvent) -> Dict[str, str]:
        return {
            "service.name": self.service_name,
            "contract.name": event.contract_name,
            "validation.convention": event.convention.value,
        }

    def record(self, event: ValidationEvent) -> None:
        attributes = self._attributes(event)
        self.validation_counter.add(1, attributes)
        if event.passed:
            return

        attributes["error.type"] = event.error_kind or "unknown"
        self.violation_counter.add(1, attributes)

        span = trace.get_current_span()
        if span.is_recording():
            span.add_event("argument_contract_violation", {
                **attributes,
                "error.message": event.message,
            })
