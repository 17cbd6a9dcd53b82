"""Console output for the statement CLI, backed by Rich."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme
from rich.traceback import install

install(show_locals=False)

LIBRARY_LOGGER = "statement_cli"

_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "skipped": "magenta",
        "debug": "dim",
    }
)

# Tables go to stdout; status lines go to stderr so JSON/CSV on stdout stays parseable.
# Highlighting is off, otherwise Rich colours the digits inside merchant names and amounts.
_stdout_console = Console(theme=_THEME, highlight=False)
_stderr_console = Console(stderr=True, theme=_THEME, highlight=False)


@dataclass(slots=True)
class Logger:
    """Status messages for CLI commands."""

    verbose: bool = False

    @property
    def console(self) -> Console:
        return _stdout_console

    def _emit(self, message: str, style: str) -> None:
        _stderr_console.print(message, style=style, markup=False)

    def info(self, message: str) -> None:
        self._emit(message, "info")

    def success(self, message: str) -> None:
        self._emit(message, "success")

    def warning(self, message: str) -> None:
        self._emit(message, "warning")

    def error(self, message: str) -> None:
        self._emit(message, "error")

    def skipped(self, summary: str) -> None:
        """Report rows left out of the result, e.g. ``Pominięto 3 transakcji: ...``."""

        if summary:
            self._emit(f"Pominięto {summary}", "skipped")

    def debug(self, message: str) -> None:
        if self.verbose:
            self._emit(message, "debug")


def configure_library_logging(verbose: bool = False) -> logging.Logger:
    """Send ``logging`` records from ``statement_cli.*`` modules to the stderr console.

    Warnings always show; per-row rejections logged at debug level only show
    with ``--verbose``.
    """

    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(
            RichHandler(
                console=_stderr_console,
                show_time=False,
                show_path=False,
                markup=False,
            )
        )
    return logger


def get_logger(verbose: bool = False) -> Logger:
    """Return a Logger and align library log levels with ``verbose``."""
    configure_library_logging(verbose)
    return Logger(verbose=verbose)
