"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import check_cmd, search_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="In-memory document store: load a seed file and query it")

app.command(name="check")(check_cmd)
app.command(name="search")(search_cmd)
