"""Text port - Contract for text transformations."""

from __future__ import annotations

from typing import Protocol


class TextProcessorPort(Protocol):
    """Port for a pure ``str -> str`` transformation.

    Implementations:
    - text/pipeline.py (TextProcessor)

    Implementations must be deterministic and total: any string,
    including the empty string, maps to a defined output.
    """

    def process(self, text: str) -> str:
        """Transform the given text.

        Args:
            text: Input text.

        Returns:
            The transformed text.
        """
        ...
