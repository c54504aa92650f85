"""Centralized logging configuration."""
import logging


def configure_logging(level: str = "INFO"):
    """Configure logging with appropriate levels for different modules."""
    log_level = getattr(logging, level.upper())

    # Base configuration
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override any existing configuration
    )

    # LangGraph runtime chatter
    logging.getLogger("langgraph").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # Keep evaluator diagnostics and session logs visible
    logging.getLogger("rpncalc.tools").setLevel(log_level)
    logging.getLogger("rpncalc.guards").setLevel(logging.INFO)
    logging.getLogger("rpncalc.history").setLevel(logging.INFO)
    # Set root logger to the desired level
    logging.getLogger().setLevel(log_level)
