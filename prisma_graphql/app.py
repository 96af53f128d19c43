"""
This module defines the Typer application behind the `prisma-graphql`
command.

Design Rationale:
The command is a thin shell: it validates the arguments, resolves the output
path through `ConfigManager` and hands everything else to `ConvertWorkflow`.
The input argument is optional at the Typer level so that a missing path
prints the tool's own usage text (on stdout, exit code 1) instead of Click's
generic usage error.
"""

import os
from typing import Optional

import typer

from prisma_graphql.config.manager import ConfigManager
from prisma_graphql.utils.config import DEFAULT_OUTPUT_PATH
from prisma_graphql.workflows.convert_workflow import ConvertWorkflow

app = typer.Typer(
    help="Convert a Prisma schema into GraphQL object types.",
    add_completion=False,
)

USAGE = (
    "Usage: prisma-graphql <input-schema.prisma> [output-file.graphql]\n"
    "Example: prisma-graphql libs/caramel-prisma/prisma/schema.prisma"
)


@app.command()
def convert(
    input_file: Optional[str] = typer.Argument(
        None, help="Path to the Prisma schema file."
    ),
    output_file: Optional[str] = typer.Argument(
        None,
        help=f"Destination GraphQL file. Defaults to {DEFAULT_OUTPUT_PATH}.",
        show_default=False,
    ),
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Optional YAML config file."
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Fail if the output file is not up to date instead of writing it.",
    ),
):
    """
    Converts every Prisma model in INPUT_FILE to a GraphQL type.
    """
    if not input_file:
        typer.echo(USAGE)
        raise typer.Exit(code=1)

    if not os.path.isfile(input_file):
        typer.echo(f"❌ Input file not found: {input_file}", err=True)
        raise typer.Exit(code=1)

    output_path = ConfigManager(config).get_output_path(output_file)
    ConvertWorkflow(input_file, output_path, check=check).run()
