"""Task CLI."""

from typing import Annotated

import typer

from taskboard.cli import output
from taskboard.cli.errors import error_feedback
from taskboard.task import operations
from taskboard.task.format import format_task_list, task_resource

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Units of work with a done flag.")


@app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Task title"),
    keyword_ids: Annotated[
        list[int] | None, typer.Option("--keyword", "-k", help="Keyword id to attach")
    ] = None,
):
    """Create task, optionally tagged with existing keywords."""
    task = operations.create_task(title, keyword_ids)
    if output.echo_json(task_resource(task), ctx):
        return
    output.out_text(f"Added: [{task.id}] {task.title}", ctx.obj)


@app.command("list")
@error_feedback
def list_cmd(ctx: typer.Context):
    """List tasks, newest first."""
    tasks = operations.list_tasks()
    if output.echo_json([task_resource(t) for t in tasks], ctx):
        return
    output.out_text(format_task_list(tasks), ctx.obj)


@app.command("toggle")
@error_feedback
def toggle(ctx: typer.Context, task_id: int = typer.Argument(..., help="Task id")):
    """Flip task between pending and done."""
    task = operations.toggle_task(task_id)
    output.out_text(f"[{task.id}] {task.status.value}", ctx.obj)
