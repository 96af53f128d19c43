"""
This module defines the `ConvertWorkflow`, the orchestrator behind the
`prisma-graphql` command.

Design Rationale:
The workflow owns the only I/O of a conversion: one blocking read of the
Prisma file and one blocking write through an injected `BaseWriter`. The
conversion itself is delegated to the pure functions in
`prisma_graphql.services.converter`. Failures are turned into a single
error line on stderr and `typer.Exit(code=1)` here, at the boundary; nothing
after a failed read or conversion is executed.
"""

from typing import Optional, Tuple

import typer

from prisma_graphql.core.exceptions import ConversionError
from prisma_graphql.core.interfaces import BaseWriter
from prisma_graphql.components.writers import GraphQLWriter
from prisma_graphql.services.converter import (
    convert_prisma_to_graphql,
    render_schema,
)
from prisma_graphql.utils.logger import get_logger

logger = get_logger(__name__)


def read_schema(input_file: str) -> str:
    """
    Reads the whole Prisma schema file.

    Raises:
        ConversionError: If the file cannot be read or decoded.
    """
    try:
        with open(input_file, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConversionError(f"Could not read '{input_file}': {e}") from e


class ConvertWorkflow:
    """
    Orchestrates a single Prisma to GraphQL conversion.
    """

    def __init__(
        self,
        input_file: str,
        output_file: str,
        writer: Optional[BaseWriter] = None,
        check: bool = False,
    ):
        """
        Initializes the workflow.

        Args:
            input_file: Path of the Prisma schema to read.
            output_file: Path of the GraphQL schema to produce.
            writer: The writer used to persist the result. Defaults to
                    `GraphQLWriter`.
            check: If True, only verify that `output_file` is up to date.
        """
        self.input_file = input_file
        self.output_file = output_file
        self.writer = writer or GraphQLWriter()
        self.check = check

    def generate(self) -> Tuple[str, int]:
        """
        Reads the input file and renders the GraphQL schema.

        Returns:
            The schema text and the number of converted models.
        """
        logger.info(f"Reading Prisma schema from '{self.input_file}'.")
        prisma_content = read_schema(self.input_file)
        type_blocks = convert_prisma_to_graphql(prisma_content)
        logger.info(f"Converted {len(type_blocks)} models.")
        return render_schema(type_blocks), len(type_blocks)

    def is_up_to_date(self, content: str) -> bool:
        try:
            with open(self.output_file, "r", encoding="utf-8") as f:
                return f.read() == content
        except FileNotFoundError:
            return False

    def run(self) -> int:
        """
        Executes the conversion and reports the outcome.

        Returns:
            The number of converted models.

        Raises:
            typer.Exit: With code 1 if the conversion or the write fails, or
                if `check` is set and the output file is stale.
        """
        try:
            content, model_count = self.generate()

            if self.check:
                if not self.is_up_to_date(content):
                    typer.echo(f"❌ {self.output_file} is out of date", err=True)
                    raise typer.Exit(code=1)
                typer.echo(f"✅ {self.output_file} is up to date")
                return model_count

            self.writer.write(content, output_filename=self.output_file)
        except typer.Exit:
            raise
        except Exception as e:
            logger.debug("Conversion failed.", exc_info=True)
            typer.echo(f"❌ Error converting schema: {e}", err=True)
            raise typer.Exit(code=1)

        typer.echo(f"✅ Converted {model_count} models to GraphQL types")
        typer.echo(f"📄 Output written to: {self.output_file}")
        return model_count


def convert_schema(input_file: str, output_file: str) -> int:
    """
    Converts a Prisma schema file into a GraphQL schema file.

    Unlike the CLI, this raises instead of exiting, so it can be called from
    other Python code.

    Returns:
        The number of converted models.

    Raises:
        ConversionError: If the input cannot be read.
        WriterError: If the output cannot be written.
    """
    workflow = ConvertWorkflow(input_file, output_file)
    content, model_count = workflow.generate()
    workflow.writer.write(content, output_filename=output_file)
    return model_count
