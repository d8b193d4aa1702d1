"""CLI entrypoint: Typer app definition and command registration"""

import typer

from slug.cli.commands import generate_cmd, parse_cmd, truncate_cmd


app = typer.Typer(name="slug", no_args_is_help=True, help="Generate, validate and truncate URL slugs")

app.command(name="generate")(generate_cmd)
app.command(name="parse")(parse_cmd)
app.command(name="truncate")(truncate_cmd)
