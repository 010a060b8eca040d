import json as json_lib

import typer


def set_flags(ctx: typer.Context, json_output: bool = False, quiet_output: bool = False) -> None:
    if ctx.obj is None or not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj.setdefault("json_output", json_output)
    ctx.obj.setdefault("quiet_output", quiet_output)
    if json_output:
        ctx.obj["json_output"] = True
    if quiet_output:
        ctx.obj["quiet_output"] = True


def is_json_mode(ctx: typer.Context) -> bool:
    return ctx.obj.get("json_output", False) if ctx.obj else False


def out_text(msg: str, ctx_obj: dict | None = None) -> None:
    if ctx_obj and ctx_obj.get("quiet_output"):
        return
    typer.echo(msg)


def echo_json(data, ctx: typer.Context) -> bool:
    """Output data as JSON if in JSON mode. Returns True if output, False otherwise."""
    if is_json_mode(ctx):
        typer.echo(json_lib.dumps(data, indent=2))
        return True
    return False
