"""
Unit tests for `prisma_graphql.services.type_mapping`.
"""

import pytest

from prisma_graphql.services.type_mapping import (
    PRISMA_SCALAR_TYPES,
    is_scalar_type,
    map_prisma_type,
    to_pascal_case,
)


@pytest.mark.parametrize(
    "prisma_type, graphql_type",
    [
        ("Int", "ID"),
        ("String", "String"),
        ("Boolean", "Boolean"),
        ("DateTime", "DateTime"),
        ("Float", "Float"),
        ("Json", "JSON"),
        ("Decimal", "Float"),
    ],
)
def test_scalar_mapping(prisma_type, graphql_type):
    assert is_scalar_type(prisma_type)
    assert map_prisma_type(prisma_type) == graphql_type


def test_unmapped_types_are_pascal_cased():
    assert not is_scalar_type("post_comment")
    assert map_prisma_type("post_comment") == "PostComment"
    # Scalar names are case sensitive.
    assert map_prisma_type("int") == "Int"


def test_scalar_table_is_read_only():
    with pytest.raises(TypeError):
        PRISMA_SCALAR_TYPES["BigInt"] = "String"


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("user", "User"),
        ("user_profile", "UserProfile"),
        ("post_category_link", "PostCategoryLink"),
        ("userProfile", "UserProfile"),
        ("UserProfile", "UserProfile"),
        ("v2_item", "V2Item"),
    ],
)
def test_to_pascal_case(identifier, expected):
    assert to_pascal_case(identifier) == expected


@pytest.mark.parametrize("identifier", ["User", "UserProfile", "PostComment"])
def test_to_pascal_case_is_idempotent(identifier):
    assert to_pascal_case(to_pascal_case(identifier)) == to_pascal_case(identifier)
    assert to_pascal_case(identifier) == identifier


def test_to_pascal_case_does_no_other_normalisation():
    assert to_pascal_case("user__id") == "UserId"
    assert to_pascal_case("_private") == "Private"
    assert to_pascal_case("HTTP_log") == "HTTPLog"
