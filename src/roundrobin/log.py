"""
Shared logging configuration for all roundrobin modules.

Provides Rich-based logging with program name prefixes.
"""
import logging
from rich.logging import RichHandler


def init_logging(program_name: str, color: str = "dim cyan", level: int = logging.INFO):
    """
    Configure Rich logging with process/thread info and logger names.

    Args:
        program_name: Name of the program (e.g., "cli", "store")
        color: Rich color for PID/TID display (e.g., "dim cyan", "dim magenta")
        level: Root logging level
    """
    # Pad program name to 8 characters for alignment
    padded_name = f"{program_name:<8}"

    logging.basicConfig(
        level=level,
        format=f"[bold]{padded_name}[/bold] [{color}][PID: %(process)d TID: %(thread)d][/{color}] %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(markup=True)],
        force=True,
    )

    logger = logging.getLogger(f"roundrobin.{program_name}")
    logger.info(f"Logging initialized for {program_name}")

    return logger
