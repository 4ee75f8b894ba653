"""Error boundary handling for CLI commands.

Catches the well-known failures of loading a bundle document and reports them
without a stack trace.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from bundle_info.errors import SchemaViolationError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - SchemaViolationError: Document does not match the schema (one line per field)
        - OSError: Missing or unreadable files
        - ValueError: Malformed TOML and invalid kit versions

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SchemaViolationError as e:
            click.echo("Error: Invalid bundle document", err=True)
            for violation in e.violations:
                click.echo(f"  {violation.path}: {violation.message}", err=True)
            raise SystemExit(1) from None
        except OSError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
