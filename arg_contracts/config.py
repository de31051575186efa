"""
Runtime configuration for the convenience layer (decorators and api helpers).

The core compiler and validator never read this module; configuration only
decides whether the outer layer validates at all and which sink it injects.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .core.interfaces import ValidationSink
from .validators.sinks import CompositeSink, LoggingSink

logger = logging.getLogger(__name__)

ENV_PREFIX = "ARG_CONTRACTS_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring unrecognised value {raw!r} for {ENV_PREFIX + name}")
    return default


@dataclass
class EnforceConfig:
    """Settings for the convenience layer."""
    enabled: bool = True
    log_violations: bool = True
    telemetry: bool = False
    default_label: str = "<>"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None,
                 load_env_file: bool = True) -> "EnforceConfig":
        """Build a config from ARG_CONTRACTS_* environment variables.

        When ``load_env_file`` is set, ``dotenv_path`` (or the nearest ``.env``
        above the working directory) is loaded first, without overriding
        variables already in the environment.
        """
        if load_env_file:
            load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        return cls(
            enabled=_env_flag("ENABLED", True),
            log_violations=_env_flag("LOG_VIOLATIONS", True),
            telemetry=_env_flag("TELEMETRY", False),
            default_label=os.getenv(ENV_PREFIX + "DEFAULT_LABEL") or "<>",
        )

    def build_sink(self) -> Optional[ValidationSink]:
        """Assemble the sink this configuration asks for, if any."""
        sinks: List[ValidationSink] = []
        if self.log_violations:
            sinks.append(LoggingSink())
        if self.telemetry:
            from .utils.telemetry import TelemetrySink
            sinks.append(TelemetrySink())

        if not sinks:
            return None
        if len(sinks) == 1:
            return sinks[0]
        return CompositeSink(sinks)


_config: Optional[EnforceConfig] = None
_sink: Optional[ValidationSink] = None
_sink_built = False


def get_config() -> EnforceConfig:
    """Get the process default configuration, loading it from the environment once."""
    global _config
    if _config is None:
        _config = EnforceConfig.from_env()
    return _config


def set_config(config: Optional[EnforceConfig]) -> None:
    """Replace the process default configuration (None reloads from the environment)."""
    global _config, _sink, _sink_built
    _config = config
    _sink = None
    _sink_built = False


def get_sink() -> Optional[ValidationSink]:
    """Get the sink built from the process default configuration."""
    global _sink, _sink_built
    if not _sink_built:
        _sink = get_config().build_sink()
        _sink_built = True
    return _sink
