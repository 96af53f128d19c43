"""
This module translates the field lines of a Prisma model into GraphQL fields.

Design Rationale:
Parsing and translation are split into two pure steps. `parse_field` turns a
single source line into a `FieldDescriptor` (or None for lines that are not
fields), and `translate_field` decides the GraphQL type and whether it is
required. `convert_model` strings them together for one `RawModelBlock`.

Nullability rules:
- a scalar field is required unless it is declared optional (`String?`);
- a field that references another model, or carries `@relation(...)`, is
  always nullable so that either side of a relation can be resolved lazily;
- list fields always render their elements as required: `[Post!]`.
"""

from typing import List, Optional

from prisma_graphql.core.models import (
    LIST_MARKER,
    OPTIONAL_MARKER,
    FieldDescriptor,
    RawModelBlock,
    RenderedField,
    RenderedType,
)
from prisma_graphql.services.type_mapping import (
    is_scalar_type,
    map_prisma_type,
    to_pascal_case,
)
from prisma_graphql.utils.logger import get_logger

logger = get_logger(__name__)

COMMENT_MARKER = "//"
ATTRIBUTE_MARKER = "@"
BLOCK_ATTRIBUTE_MARKER = "@@"
RELATION_ANNOTATION = "@relation("


def parse_field(line: str) -> Optional[FieldDescriptor]:
    """
    Parses one trimmed Prisma field line.

    Comments and field attributes are removed before the line is split, so
    `age Int @default(0) // later` parses the same as `age Int`.

    Args:
        line: A single line from inside a model block.

    Returns:
        A `FieldDescriptor`, or None if the line does not hold a name and a type.
    """
    clean_line = (
        line.split(COMMENT_MARKER, 1)[0].split(ATTRIBUTE_MARKER, 1)[0].strip()
    )
    if not clean_line:
        return None

    parts = clean_line.split()
    if len(parts) < 2:
        return None

    field_name, field_type = parts[0], parts[1]
    if ATTRIBUTE_MARKER in field_type:
        return None

    return FieldDescriptor(
        name=field_name,
        source_type=field_type,
        is_list=LIST_MARKER in field_type,
        is_nullable=OPTIONAL_MARKER in field_type,
        has_relation_annotation=RELATION_ANNOTATION in line,
    )


def translate_field(descriptor: FieldDescriptor) -> RenderedField:
    """Maps a parsed field to its GraphQL type and required flag."""
    base_type = descriptor.base_type
    is_model_reference = not is_scalar_type(base_type)

    graphql_type = map_prisma_type(base_type)
    if descriptor.is_list:
        graphql_type = f"[{graphql_type}!]"

    nullable = (
        descriptor.is_nullable
        or descriptor.has_relation_annotation
        or is_model_reference
    )
    return RenderedField(descriptor.name, graphql_type, required=not nullable)


def _is_field_candidate(line: str) -> bool:
    return bool(line) and not (
        line.startswith(BLOCK_ATTRIBUTE_MARKER) or line.startswith(COMMENT_MARKER)
    )


def convert_model(block: RawModelBlock) -> RenderedType:
    """
    Converts a raw Prisma model block into a GraphQL object type.

    The declaration line and the closing line are not fields and are skipped,
    as are blank lines, block attributes (`@@id`, `@@map`, ...) and comments.
    Lines that fail to parse are dropped without error.
    """
    fields: List[RenderedField] = []
    for raw_line in block.lines[1:-1]:
        line = raw_line.strip()
        if not _is_field_candidate(line):
            continue

        descriptor = parse_field(line)
        if descriptor is None:
            logger.debug(f"Skipping unparseable line in '{block.name}': {line!r}")
            continue
        fields.append(translate_field(descriptor))

    return RenderedType(to_pascal_case(block.name), tuple(fields))
