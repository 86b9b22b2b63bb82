"""
Common CLI utilities and decorators for consistent command behavior.
"""

import logging
import sys
import click
from functools import wraps

from rich.console import Console
from rich.markup import escape

from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError
)

logger = logging.getLogger(__name__)

# Diagnostics go to stderr; stdout carries only the patch block
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def report_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - The command returns its output text instead of printing it
    - Output is written to stdout only after the command succeeds
    - Errors go to stderr and map to an exit code
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            output = func(*args, **kwargs)
        except KeyboardInterrupt:
            report_error("Interrupted by user")
            sys.exit(INTERRUPTED)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except CommandError as e:
            logger.debug(f"{type(e).__name__} (exit code {e.exit_code})")
            report_error(str(e))
            sys.exit(e.exit_code)
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            report_error(f"Command failed: {e}")
            sys.exit(get_exit_code_for_exception(e))

        if output is not None:
            click.echo(output)
        sys.exit(SUCCESS)

    return wrapper


# Standard options that commands share
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                            help='Log discovery details to stderr'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose')
        def my_command(verbose):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
