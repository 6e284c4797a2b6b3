"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at the CLI
entry point and display clean error messages without stack traces.

Each command is decorated as well as `main()`, so invoking the `cli` group
directly (as CliRunner does) prints the same message and exits with 1.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from clipmotion.errors import ClipmotionError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - ClipmotionError: Build, fetch, config and install failures
        - FileExistsError: File/directory conflicts
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ClipmotionError as e:
            logger.debug("Command failed", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except FileExistsError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except FileNotFoundError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except PermissionError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
