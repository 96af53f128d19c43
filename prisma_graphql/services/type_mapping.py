"""
Prisma scalar to GraphQL scalar mapping, plus the identifier casing helper
used for type names.
"""

from types import MappingProxyType

PRISMA_SCALAR_TYPES = MappingProxyType(
    {
        "Int": "ID",
        "String": "String",
        "Boolean": "Boolean",
        "DateTime": "DateTime",
        "Float": "Float",
        "Json": "JSON",
        "Decimal": "Float",
    }
)

# Custom scalars that must be declared at the top of the generated schema.
CUSTOM_SCALARS = ("DateTime", "JSON")


def to_pascal_case(identifier: str) -> str:
    """
    Converts a snake_case identifier to PascalCase.

    Each underscore-separated segment gets its first character uppercased;
    the rest of the segment is left untouched, so `user_profile` becomes
    `UserProfile` and `UserProfile` stays `UserProfile`.
    """
    return "".join(word[:1].upper() + word[1:] for word in identifier.split("_"))


def is_scalar_type(base_type: str) -> bool:
    return base_type in PRISMA_SCALAR_TYPES


def map_prisma_type(base_type: str) -> str:
    """
    Maps a Prisma base type to its GraphQL type name.

    Scalars go through `PRISMA_SCALAR_TYPES`; anything else is treated as a
    reference to another model and Pascal-cased to match its type name.
    """
    if is_scalar_type(base_type):
        return PRISMA_SCALAR_TYPES[base_type]
    return to_pascal_case(base_type)
