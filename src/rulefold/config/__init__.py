"""Configuration — settings discovery, logging setup, and tracing switch."""

from __future__ import annotations

from rulefold.config.logging import configure_logging
from rulefold.config.settings import RulefoldSettings
from rulefold.engine.tracing import disable_failure_tracing, enable_failure_tracing


def configure(settings: RulefoldSettings | None = None) -> RulefoldSettings:
    """Apply *settings* (or freshly loaded ones) to logging and tracing.

    Returns the settings that were applied.
    """
    if settings is None:
        settings = RulefoldSettings.load()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    if settings.trace_failures:
        enable_failure_tracing()
    else:
        disable_failure_tracing()
    return settings


__all__ = ["RulefoldSettings", "configure", "configure_logging"]
