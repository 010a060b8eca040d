"""Keyword CLI."""

import typer

from taskboard.cli import output
from taskboard.cli.errors import error_feedback
from taskboard.keyword import operations
from taskboard.keyword.format import format_keyword_list, keyword_resource

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Named tags for tasks.")


@app.command("add")
@error_feedback
def add(ctx: typer.Context, name: str = typer.Argument(..., help="Keyword name")):
    """Create keyword."""
    keyword = operations.create_keyword(name)
    if output.echo_json(keyword_resource(keyword), ctx):
        return
    output.out_text(f"Added: [{keyword.id}] {keyword.name}", ctx.obj)


@app.command("list")
@error_feedback
def list_cmd(ctx: typer.Context):
    """List keywords, newest first."""
    keywords = operations.list_keywords()
    if output.echo_json([keyword_resource(k) for k in keywords], ctx):
        return
    output.out_text(format_keyword_list(keywords), ctx.obj)
