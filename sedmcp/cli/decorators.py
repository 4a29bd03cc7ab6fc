# sedmcp/cli/decorators.py
# CLI decorator mapping sedmcp errors to Rich messages & exit code 1

import functools
from typing import Callable, TypeVar, Any, cast

import click
from rich.markup import escape

from ..core.exceptions import (
    SedError,
    OperationConstructionError,
    OperationValidationError,
    OperationExecutionError,
    BatchExecutionError,
    ConfigurationError,
    JSONParsingError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# most specific first
_ERROR_LABELS: list[tuple[type[SedError], str]] = [
    (OperationConstructionError, "Operation Error"),
    (OperationValidationError, "Validation Error"),
    (OperationExecutionError, "Execution Error"),
    (BatchExecutionError, "Batch Error"),
    (ConfigurationError, "Configuration Error"),
    (JSONParsingError, "JSON Parsing Error"),
    (FileOperationError, "File Error"),
]


def error_label(error: SedError) -> str:
    for error_type, label in _ERROR_LABELS:
        if isinstance(error, error_type):
            return label
    return "Error"


# * Decorator for handling sedmcp errors in CLI commands w/ Rich output
def handle_sed_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..sed_io.console import console

        try:
            return func(*args, **kwargs)
        except SedError as e:
            console.print(format_error_message(error_label(e), escape(str(e))))
            raise SystemExit(1)
        except (SystemExit, KeyboardInterrupt, click.exceptions.Exit, click.exceptions.Abort, click.ClickException):
            raise
        except Exception as e:
            console.print(format_error_message("Unexpected Error", escape(str(e))))
            raise SystemExit(1)

    return cast(F, wrapper)
