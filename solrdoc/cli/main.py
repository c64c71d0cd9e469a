"""Main CLI application using Cyclopts."""

import cyclopts

from solrdoc.cli.commands import config, index, types

app = cyclopts.App(
    name="solrdoc",
    help="solrdoc - map records into search documents",
)

app.command(types.app, name="types")
app.command(config.app, name="config")
app.command(index.app, name="index")


def main() -> None:
    app()
