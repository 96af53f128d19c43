"""
Unit tests for the string-level drivers in `prisma_graphql.services.converter`.
"""

from prisma_graphql import convert_model_to_graphql, convert_prisma_to_graphql
from prisma_graphql.core.models import RawModelBlock
from prisma_graphql.services.converter import render_schema


def test_convert_prisma_to_graphql(blog_schema):
    types = convert_prisma_to_graphql(blog_schema)

    assert types == [
        "type UserProfile {\n"
        "  id: ID!\n"
        "  name: String!\n"
        "  bio: String\n"
        "  created_at: DateTime!\n"
        "  posts: [Post!]\n"
        "}",
        "type Post {\n"
        "  id: ID!\n"
        "  title: String!\n"
        "  metadata: JSON\n"
        "  rating: Float!\n"
        "  author: UserProfile\n"
        "  author_id: ID!\n"
        "}",
    ]


def test_sibling_relations_are_nullable_in_both_directions():
    text = (
        "model A {\n  bs B[]\n}\n"
        "model B {\n  a A @relation(fields: [a_id], references: [id])\n  a_id Int\n}\n"
    )

    types = convert_prisma_to_graphql(text)

    assert types == [
        "type A {\n  bs: [B!]\n}",
        "type B {\n  a: A\n  a_id: ID!\n}",
    ]


def test_nameless_model_is_absent_from_output():
    text = "model {\n  id Int\n}\nmodel ok {\n  id Int\n}\n"

    assert convert_prisma_to_graphql(text) == ["type Ok {\n  id: ID!\n}"]


def test_convert_model_to_graphql():
    block = RawModelBlock("tag", ("model tag {", "  label String?", "}"))

    assert convert_model_to_graphql(block) == "type Tag {\n  label: String\n}"


def test_render_schema_layout():
    content = render_schema(["type A {\n}", "type B {\n}"])

    assert content == (
        "scalar DateTime\n"
        "scalar JSON\n"
        "\n"
        "type A {\n}\n"
        "\n"
        "type B {\n}\n"
        "\n"
    )


def test_render_schema_without_models():
    assert render_schema([]) == "scalar DateTime\nscalar JSON\n\n"
