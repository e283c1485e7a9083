"""Tests for shared logging configuration."""
import logging

from rich.logging import RichHandler


def test_init_logging_returns_logger():
    """Test that init_logging returns a logger instance."""
    from roundrobin.log import init_logging

    logger = init_logging("test")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "roundrobin.test"


def test_program_name_padding():
    """Test that program names are padded to 8 characters for alignment."""
    from roundrobin.log import init_logging

    init_logging("cli")
    handler = logging.getLogger().handlers[0]
    assert "cli     " in handler.formatter._fmt

    init_logging("store")
    handler = logging.getLogger().handlers[0]
    assert "store   " in handler.formatter._fmt


def test_different_colors():
    """Test that different programs can have different colors."""
    from roundrobin.log import init_logging

    init_logging("cli", color="dim magenta")
    handler = logging.getLogger().handlers[0]
    assert "dim magenta" in handler.formatter._fmt


def test_logging_level():
    """Test that logging level defaults to INFO and can be overridden."""
    from roundrobin.log import init_logging

    init_logging("test")
    assert logging.getLogger().level == logging.INFO

    init_logging("test", level=logging.DEBUG)
    assert logging.getLogger().level == logging.DEBUG


def test_rich_handler_used():
    """Test that a single RichHandler is configured."""
    from roundrobin.log import init_logging

    init_logging("test")
    init_logging("test")
    root_logger = logging.getLogger()

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)


def test_format_includes_pid_tid_and_message():
    """Test that format string includes PID, TID and the message."""
    from roundrobin.log import init_logging

    init_logging("test")
    format_str = logging.getLogger().handlers[0].formatter._fmt

    assert "%(process)d" in format_str
    assert "%(thread)d" in format_str
    assert "%(message)s" in format_str
