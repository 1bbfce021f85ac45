"""Composable text-processing pipeline.

A pipeline is a chain of stages wrapped around a base processor,
conventionally ``identity()``. Each decorator captures exactly one
inner processor when it is built; processing runs the inner processor
first and applies the decorator's own stage to its result, so the
outermost stage is the last one applied:

    >>> trim(replace_spaces(identity())).process("  a b  ")
    '__a_b__'
    >>> replace_spaces(trim(identity())).process("  a b  ")
    'a_b'

The stages are collected once, at construction, and run in a flat
loop; the chain cannot be changed afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Tuple

from ..domain.errors import PipelineConfigurationError

logger = logging.getLogger(__name__)

Stage = Callable[[str], str]


def _upper(text: str) -> str:
    # Unicode default case mapping, independent of the process locale
    return text.upper()


def _trim(text: str) -> str:
    return text.strip()


def _replace_spaces(text: str) -> str:
    # ASCII space only; tabs and newlines are left alone
    return text.replace(" ", "_")


@dataclass(frozen=True)
class TextProcessor:
    """Immutable chain of text stages.

    Attributes:
        stages: Stage names, innermost first
    """

    stages: Tuple[str, ...]
    _stages: Tuple[Stage, ...]

    def process(self, text: str) -> str:
        for stage in self._stages:
            text = stage(text)
        return text

    def __call__(self, text: str) -> str:
        return self.process(text)

    def __repr__(self) -> str:
        return f"TextProcessor(stages={self.stages!r})"


def _wrap(inner: TextProcessor, name: str, stage: Stage) -> TextProcessor:
    return TextProcessor(
        stages=inner.stages + (name,), _stages=inner._stages + (stage,)
    )


def identity() -> TextProcessor:
    """Base processor returning its input unchanged."""
    return TextProcessor(stages=(), _stages=())


def upper_case(inner: TextProcessor) -> TextProcessor:
    """Apply ``inner``, then uppercase the result."""
    return _wrap(inner, "upper", _upper)


def trim(inner: TextProcessor) -> TextProcessor:
    """Apply ``inner``, then strip leading and trailing whitespace."""
    return _wrap(inner, "trim", _trim)


def replace_spaces(inner: TextProcessor) -> TextProcessor:
    """Apply ``inner``, then replace each space with an underscore."""
    return _wrap(inner, "replace_spaces", _replace_spaces)


DECORATORS: Dict[str, Callable[[TextProcessor], TextProcessor]] = {
    "upper": upper_case,
    "trim": trim,
    "replace_spaces": replace_spaces,
}


def build_pipeline(names: Iterable[str]) -> TextProcessor:
    """Assemble a pipeline from stage names, innermost first.

    Args:
        names: Stage names, any of "upper", "trim", "replace_spaces".

    Returns:
        The assembled processor (``identity()`` when names is empty).

    Raises:
        PipelineConfigurationError: If a name is not a known stage.
    """
    processor = identity()
    for name in names:
        decorator = DECORATORS.get(name)
        if decorator is None:
            raise PipelineConfigurationError(
                f"Unknown text stage {name!r}", stage=name
            )
        processor = decorator(processor)

    logger.debug("Text pipeline built", extra={"stages": list(processor.stages)})
    return processor
