"""Text processing building blocks."""

from .pipeline import (
    TextProcessor,
    build_pipeline,
    identity,
    replace_spaces,
    trim,
    upper_case,
)

__all__ = [
    "TextProcessor",
    "build_pipeline",
    "identity",
    "upper_case",
    "trim",
    "replace_spaces",
]
