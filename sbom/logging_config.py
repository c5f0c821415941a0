"""
Logging configuration for SBOM generation

Includes IndentLogger for tree-style progress output. The verbose tiers map
onto logging levels: "loud" progress is INFO, "louder" detail is DEBUG.
"""

import io
import logging
import sys
from contextlib import contextmanager


class GlobalIndent:
    """Global indentation state for hierarchical logging"""

    _level = 0
    _tree_chars = {
        "pipe": "│",
        "branch": "├──",
    }

    @classmethod
    def increase(cls) -> None:
        """Increase indentation level"""
        cls._level += 1

    @classmethod
    def decrease(cls) -> None:
        """Decrease indentation level"""
        if cls._level > 0:
            cls._level -= 1

    @classmethod
    def reset(cls) -> None:
        """Reset indentation state (useful for tests)"""
        cls._level = 0

    @classmethod
    def get_indent(cls) -> str:
        """Get current indentation string with tree characters"""
        if cls._level == 0:
            return ""
        outer = f"{cls._tree_chars['pipe']}   " * (cls._level - 1)
        return f"{outer}{cls._tree_chars['branch']}"


class IndentLogger:
    """Logger wrapper that handles indentation using global state"""

    def __init__(self, base_logger: logging.Logger) -> None:
        self._logger = base_logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        """Log debug message with indentation"""
        self._logger.debug(f"{self.indent}{msg}", *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        """Log info message with indentation"""
        self._logger.info(f"{self.indent}{msg}", *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        """Log warning message with indentation"""
        self._logger.warning(f"{self.indent}{msg}", *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        """Log error message with indentation"""
        self._logger.error(f"{self.indent}{msg}", *args, **kwargs)

    @property
    def indent(self) -> str:
        """Get current indentation string"""
        return GlobalIndent.get_indent()

    @contextmanager
    def indent_block(self, initial_message: str | None = None, loud: bool = False):
        """
        Context manager for handling indentation blocks

        Args:
            initial_message: Optional message to log at block start
            loud: Log the initial message at INFO instead of DEBUG
        """
        if initial_message:
            if loud:
                self.info(initial_message)
            else:
                self.debug(initial_message)
        GlobalIndent.increase()
        try:
            yield
        finally:
            GlobalIndent.decrease()


def verbosity_to_level(verbosity: int) -> int:
    """Map a count of -v flags to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(level=logging.WARNING):
    """
    Configure logging for SBOM generation

    Args:
        level: Logging level (default: WARNING, errors and warnings only)

    Returns:
        IndentLogger: Configured logger with indentation support
    """
    base_logger = logging.getLogger("sbom")
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    # UTF-8 stream so the tree characters survive cp1252 consoles; the
    # process stderr is reconfigured in place, never wrapped
    if isinstance(sys.stderr, io.TextIOWrapper):
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter("%(levelname)8s %(message)s")
    handler.setFormatter(formatter)

    base_logger.addHandler(handler)

    return IndentLogger(base_logger)


logger = IndentLogger(logging.getLogger("sbom"))
