from .graphql_writer import GraphQLWriter

__all__ = ["GraphQLWriter"]
