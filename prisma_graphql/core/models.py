"""
Value types passed between the segmenter, the field translator and the
renderer.

All of them are frozen dataclasses: a block or field is produced once by a
pure function and never mutated afterwards.
"""

from dataclasses import dataclass, field
from typing import Tuple

OPTIONAL_MARKER = "?"
LIST_MARKER = "[]"


@dataclass(frozen=True)
class RawModelBlock:
    """
    The raw lines of one `model` declaration.

    `lines` begins with the declaration line and ends with the line whose
    closing brace brought the brace depth back to zero. Lines are kept
    exactly as they appeared in the source.
    """

    name: str
    lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldDescriptor:
    """A single parsed Prisma field line."""

    name: str
    source_type: str
    is_list: bool = False
    is_nullable: bool = False
    has_relation_annotation: bool = False

    @property
    def base_type(self) -> str:
        """The source type with its optional and list markers removed."""
        return self.source_type.replace(OPTIONAL_MARKER, "", 1).replace(
            LIST_MARKER, "", 1
        )


@dataclass(frozen=True)
class RenderedField:
    name: str
    target_type: str
    required: bool

    def render(self) -> str:
        marker = "!" if self.required else ""
        return f"  {self.name}: {self.target_type}{marker}"


@dataclass(frozen=True)
class RenderedType:
    """A GraphQL object type ready to be rendered as SDL text."""

    name: str
    fields: Tuple[RenderedField, ...] = field(default_factory=tuple)

    def render(self) -> str:
        """
        Renders the type as a GraphQL `type` block.

        Returns:
            The SDL text, without a trailing newline after the closing brace.
        """
        body = "".join(f"{f.render()}\n" for f in self.fields)
        return f"type {self.name} {{\n{body}}}"
