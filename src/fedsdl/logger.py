"""Logging for fedsdl with Rich console output."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class FedSDLLogger(logging.Logger):
    """
    Logger that writes through a Rich console and adds a few CLI helpers.

    Standard levels (debug, info, warning, error, critical) behave as usual; the
    extra methods print straight to the console without a level prefix.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the fedsdl logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        # Diagnostics go to stderr so printed SDL on stdout stays clean
        self.console = Console(stderr=True)

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str) -> None:
        """
        Print a plain message (with Rich markup support).

        Args:
            message: Message to display
        """
        self.console.print(message)

    def success(self, message: str) -> None:
        """
        Print a success message in green with checkmark icon.

        Args:
            message: Message to display
        """
        self.print(f"[green]✓[/green] {message}")

    def hint(self, message: str) -> None:
        """Print a dimmed secondary message."""
        self.print(f"[dim]{message}[/dim]")


def get_logger(name: str = "fedsdl") -> FedSDLLogger:
    """
    Get or create a fedsdl logger instance.

    Args:
        name: Logger name (default: "fedsdl")

    Returns:
        FedSDLLogger instance
    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(FedSDLLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    return logger  # type: ignore[return-value]
