"""Telemetry: logging configuration."""

from access_control.shared.telemetry.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
