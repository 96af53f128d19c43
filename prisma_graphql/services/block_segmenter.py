"""
This module splits Prisma schema text into raw `model` blocks.

Design Rationale:
The Prisma files this tool consumes are line oriented, so a full grammar is
unnecessary. Blocks are found by watching for `model <name>` declarations and
counting braces until the depth returns to zero. The scan is a pure function
over the input lines; the brace counter is local state of a single call.

The segmenter is deliberately lenient:
- a declaration without a name (e.g. `model {`) opens no block;
- a block whose braces never balance is dropped;
- everything outside a block (datasource, generator, enum, comments) is ignored.
None of these raise; they are only visible in DEBUG logs.
"""

import re
from typing import List, Optional

from prisma_graphql.core.models import RawModelBlock
from prisma_graphql.utils.logger import get_logger

logger = get_logger(__name__)

MODEL_DECLARATION = re.compile(r"^model\s")


def _declared_name(stripped_line: str) -> Optional[str]:
    """
    Returns the model name of a declaration line, or None if the line is not
    a declaration. An empty string means the declaration is malformed.
    """
    if not MODEL_DECLARATION.match(stripped_line):
        return None
    tokens = stripped_line.split()
    candidate = tokens[1] if len(tokens) > 1 else ""
    return candidate.replace("{", "")


def segment_models(prisma_content: str) -> List[RawModelBlock]:
    """
    Groups the lines of every `model` declaration into a `RawModelBlock`.

    Args:
        prisma_content: The full text of a Prisma schema file.

    Returns:
        The closed model blocks, in source order.
    """
    blocks: List[RawModelBlock] = []
    current_name: Optional[str] = None
    current_lines: List[str] = []
    depth = 0

    for line_number, line in enumerate(prisma_content.split("\n"), start=1):
        stripped = line.strip()
        name = _declared_name(stripped)

        if name is not None:
            if not name:
                logger.debug(
                    f"Skipping malformed model declaration on line {line_number}."
                )
                continue
            if current_name is not None:
                logger.debug(
                    f"Model '{current_name}' was never closed; dropping it."
                )
            current_name = name
            current_lines = []
            depth = 0

        if current_name is None:
            continue

        current_lines.append(line)
        depth += stripped.count("{")
        if "}" in stripped:
            depth -= stripped.count("}")
            if depth == 0:
                blocks.append(RawModelBlock(current_name, tuple(current_lines)))
                current_name = None
                current_lines = []

    if current_name is not None:
        logger.debug(f"Model '{current_name}' was never closed; dropping it.")

    logger.debug(f"Segmented {len(blocks)} model blocks.")
    return blocks
