"""
This module provides `GraphQLWriter`, an implementation of `BaseWriter` that
writes the generated schema to a `.graphql` file.
"""

import os

from prisma_graphql.utils.logger import get_logger
from prisma_graphql.core.interfaces import BaseWriter
from prisma_graphql.core.exceptions import WriterError, ConfigError

logger = get_logger(__name__)


class GraphQLWriter(BaseWriter):
    """
    Implements `BaseWriter` to write GraphQL SDL text to a file.

    Missing parent directories of the destination are created first.
    """

    def write(self, content: str, **kwargs):
        """
        Writes the schema text to `output_filename`.

        Args:
            content: The complete GraphQL SDL text.
            **kwargs: Must contain `output_filename`.

        Raises:
            ConfigError: If the `output_filename` is not provided in kwargs.
            WriterError: If an error occurs during file writing.
        """
        output_filename = kwargs.get("output_filename")
        if not output_filename:
            raise ConfigError(
                "GraphQLWriter requires 'output_filename' in kwargs."
            )

        try:
            parent = os.path.dirname(output_filename)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(output_filename, "w", encoding="utf-8") as f:
                logger.info(f"Writing GraphQL schema to '{output_filename}'.")
                f.write(content)
        except OSError as e:
            logger.debug(
                f"Error writing GraphQL file '{output_filename}': {e}",
                exc_info=True,
            )
            raise WriterError(
                f"Could not write '{output_filename}': {e}"
            ) from e
