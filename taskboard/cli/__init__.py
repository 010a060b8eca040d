import typer

from taskboard import config
from taskboard.lib import log

app = typer.Typer(invoke_without_command=True, no_args_is_help=False, add_completion=False)


@app.callback(invoke_without_command=True)
def common_options_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
):
    """Task tracking with keywords.

    Serve the JSON API or manage tasks and keywords directly."""
    from taskboard.cli import output

    output.set_flags(ctx, json_output, quiet_output)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("init")
def init():
    """Write the default config.yaml into the data directory."""
    path = config.init_config()
    typer.echo(f"Config: {path}")


@app.command("serve")
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default from config)."),
    port: int = typer.Option(None, "--port", help="Port (default from config)."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
):
    """Run the HTTP API."""
    from taskboard.api import main as api_main

    log.setup_logging(config.get("log_level"))
    api_main.main(host=host, port=port, reload=reload)


def _register_subapps() -> None:
    from taskboard.keyword.cli import app as keyword_app
    from taskboard.task.cli import app as task_app

    app.add_typer(task_app, name="task")
    app.add_typer(keyword_app, name="keyword")


_register_subapps()


def main() -> None:
    """Entry point for taskboard command."""
    try:
        app()
    except SystemExit:
        raise
    except BaseException as e:
        raise SystemExit(1) from e
