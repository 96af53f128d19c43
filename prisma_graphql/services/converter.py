"""
This module ties the segmenter and the field translator together and
assembles the final GraphQL schema text.

Design Rationale:
Everything in here works on strings only; reading and writing files is left
to `ConvertWorkflow`. That keeps the conversion usable from other Python
code and trivially testable.
"""

from typing import Iterable, List

from prisma_graphql.core.models import RawModelBlock
from prisma_graphql.services.block_segmenter import segment_models
from prisma_graphql.services.field_translator import convert_model
from prisma_graphql.services.type_mapping import CUSTOM_SCALARS
from prisma_graphql.utils.logger import get_logger

logger = get_logger(__name__)


def convert_model_to_graphql(block: RawModelBlock) -> str:
    """Converts a single raw model block into a GraphQL `type` definition."""
    return convert_model(block).render()


def convert_prisma_to_graphql(prisma_content: str) -> List[str]:
    """
    Converts Prisma schema text into GraphQL type definitions.

    Args:
        prisma_content: The full text of a Prisma schema.

    Returns:
        One rendered `type` block per model, in source order.
    """
    blocks = segment_models(prisma_content)
    logger.debug(f"Converting {len(blocks)} models to GraphQL types.")
    return [convert_model_to_graphql(block) for block in blocks]


def render_schema(type_blocks: Iterable[str]) -> str:
    """
    Assembles the complete GraphQL schema document.

    The custom scalar declarations come first, followed by a blank line; every
    type block is then followed by a blank line.
    """
    scalars = "".join(f"scalar {name}\n" for name in CUSTOM_SCALARS)
    types = "".join(f"{block}\n\n" for block in type_blocks)
    return f"{scalars}\n{types}"
