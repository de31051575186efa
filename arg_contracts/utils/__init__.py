"""
Utilities for the argument contract framework.
"""

from .telemetry import TelemetrySink

__all__ = ["TelemetrySink"]
