"""
This module defines the abstract interfaces for pluggable components.

Design Rationale:
Workflows depend on these abstractions rather than on concrete classes, so a
writer can be swapped (or mocked in tests) without touching the conversion
logic.
"""

from abc import ABC, abstractmethod


class BaseWriter(ABC):
    """
    Abstract base class for writers that persist a generated GraphQL schema.
    """

    @abstractmethod
    def write(self, content: str, **kwargs):
        """
        Writes the rendered schema to its destination.

        Args:
            content: The complete GraphQL SDL text.
            **kwargs: Writer-specific options, e.g. `output_filename`.
        """
        pass
