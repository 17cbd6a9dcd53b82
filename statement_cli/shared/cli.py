"""Click plumbing shared by the statement CLI commands."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

import click

from .config import AppConfig, load_config
from .exceptions import ConfigurationError, InputError, StatementCLIError, UnsupportedFormatError
from .logging import Logger, get_logger

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(slots=True)
class CLIContext:
    """Loaded configuration and console logger for one invocation."""

    config: AppConfig
    verbose: bool
    logger: Logger

    def encodings(self, override: str | None = None) -> tuple[str, ...]:
        """Encodings to try for an input file; ``--encoding`` replaces the configured chain."""

        return (override,) if override else self.config.input.encodings

    @property
    def max_file_size(self) -> int:
        return self.config.input.max_file_size


pass_cli_context = click.make_pass_decorator(CLIContext)


def common_cli_options(func: F) -> F:
    """Add ``--config``/``--verbose`` and inject a :class:`CLIContext` as ``cli_ctx``."""

    @click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=str),
        help="Path to config file (default: ~/.statementcli/config.yaml).",
    )
    @click.option("--verbose", is_flag=True, help="Show debug output, including rejected rows.")
    @click.pass_context
    @functools.wraps(func)
    def wrapper(
        ctx: click.Context,
        *args: Any,
        config_path: str | None = None,
        verbose: bool = False,
        **kwargs: Any,
    ) -> Any:
        try:
            app_config = load_config(config_path)
        except ConfigurationError as exc:
            raise click.ClickException(f"Configuration error: {exc}") from exc

        ctx.obj = CLIContext(config=app_config, verbose=verbose, logger=get_logger(verbose=verbose))
        return func(*args, cli_ctx=ctx.obj, **kwargs)

    return wrapper  # type: ignore[return-value]


def handle_cli_errors(func: F) -> F:
    """Turn project exceptions into :class:`click.ClickException` with a readable prefix."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConfigurationError as exc:
            raise click.ClickException(f"Configuration error: {exc}") from exc
        except InputError as exc:
            raise click.ClickException(f"Cannot read statement: {exc}") from exc
        except UnsupportedFormatError as exc:
            raise click.ClickException(f"{exc} (drop --strict to use the generic parser)") from exc
        except StatementCLIError as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper  # type: ignore[return-value]
