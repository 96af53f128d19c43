"""
Prisma to GraphQL schema conversion.

The three drivers below are the public library surface; the `prisma-graphql`
console script wraps them with file handling and status output.
"""

from prisma_graphql.services.converter import (
    convert_model_to_graphql,
    convert_prisma_to_graphql,
)
from prisma_graphql.workflows.convert_workflow import convert_schema

__all__ = [
    "convert_prisma_to_graphql",
    "convert_model_to_graphql",
    "convert_schema",
]
