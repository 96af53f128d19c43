"""
This module defines the custom exception hierarchy for prisma-graphql.

Design Rationale:
Every error raised on purpose by the application derives from
`PrismaGraphQLError`, so the CLI boundary can tell expected failures (bad
configuration, unreadable input, unwritable output) apart from programming
errors. Note that malformed schema lines are *not* errors: the segmenter and
translator skip them silently and never raise.
"""


class PrismaGraphQLError(Exception):
    """Base class for all application-specific errors."""


class ConfigError(PrismaGraphQLError):
    """Raised when configuration is missing, malformed or references unset variables."""


class ConversionError(PrismaGraphQLError):
    """Raised when the source schema cannot be read or converted."""


class WriterError(PrismaGraphQLError):
    """Raised when the generated GraphQL schema cannot be written."""
