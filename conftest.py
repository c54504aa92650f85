"""Pytest configuration for test logging."""
from rpncalc.config import LOG_LEVEL
from rpncalc.observability.logging_config import configure_logging

configure_logging(LOG_LEVEL)
