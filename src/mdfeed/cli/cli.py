"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdfeed.cli.commands import build_cmd, list_cmd


app = typer.Typer(name="mdfeed", help="Build a post listing module and RSS feed from Markdown/MDX posts")

app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Run 'build' with configured defaults when no command is given."""
    if ctx.invoked_subcommand is None:
        build_cmd()
