"""CLI error handling: wrap commands to report errors instead of silent failures."""

from functools import wraps

import typer
from click.exceptions import Exit

from taskboard.errors import NotFoundError, ValidationError


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except ValidationError as e:
            typer.echo(f"Invalid input: {e.field}: {e.message}", err=True)
            raise typer.Exit(1) from e
        except NotFoundError as e:
            typer.echo(f"Not found: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
