#
# Helpers for the `typer` package.
#
import logging
import sys
from collections.abc import Callable
from typing import Any, TypeVar

import typer

logger = logging.getLogger(__name__)

R = TypeVar("R")


def run_typer_app_as_main(app: typer.Typer, *args, **kwargs) -> Any | None:
    """Run a typer app as the main function.

    Exit with the app's own exit code, and log any uncaught exception
    (with its traceback) before exiting with a status of 1.
    """
    try:
        return app(*args, **kwargs)
    except typer.Exit as e:
        sys.exit(e.exit_code)
    except Exception:
        logger.exception("Uncaught exception in %s.", kwargs.get("prog_name", "app"))
        sys.exit(1)


def as_bad_parameter(
    param_hint: str, func: Callable[..., R], *args: Any, **kwargs: Any
) -> R:
    """Call `func`, reporting argument errors as a typer `BadParameter`.

    :param param_hint: The name of the parameter to blame in the error message.
    :param func: The function to call.
    :return: Whatever `func` returns.
    """
    try:
        return func(*args, **kwargs)
    except (TypeError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint=param_hint) from e
