import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Base logging: [TIME] [LEVEL] [LOGGER]: MESSAGE

    Goes to stderr: stdout carries the MCP stdio transport.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger("mcp").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
