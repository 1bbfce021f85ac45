"""File conversion and copy helpers.

Two copy strategies are offered:

1. ``copy_lines``: read and write through buffered text streams, one
   line at a time.
2. ``bulk_copy``: hand the whole byte range to ``shutil.copyfile``,
   which uses kernel-level copying where the platform supports it.

``compare_copy_strategies`` runs both and reports how long each took.
"""

from __future__ import annotations

import logging
import shutil
import time
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from .config import FilesConfig, get_config
from .domain.errors import (
    ConfigurationError,
    FileOperationError,
    SourceFileNotFoundError,
)
from .domain.models import CopyTimings
from .ports.text import TextProcessorPort
from .text.pipeline import identity, upper_case

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
T = TypeVar("T")


def _guard_io(source: PathLike, action: str, fn: Callable[[], T]) -> T:
    """Run ``fn`` and translate OS and decoding errors into domain errors."""
    try:
        return fn()
    except UnicodeError as e:
        raise FileOperationError(
            f"Failed to {action}: content is not valid text",
            path=str(source),
            cause=e,
        )
    except FileNotFoundError as e:
        if not Path(source).exists():
            raise SourceFileNotFoundError(
                f"Source file not found: {source}", path=str(source), cause=e
            )
        raise FileOperationError(
            f"Failed to {action}", path=str(e.filename or source), cause=e
        )
    except OSError as e:
        raise FileOperationError(
            f"Failed to {action}", path=str(e.filename or source), cause=e
        )


def convert_file(
    input_path: PathLike,
    output_path: PathLike,
    processor: Optional[TextProcessorPort] = None,
    config: Optional[FilesConfig] = None,
) -> int:
    """Transform a text file line by line.

    Each line (without its terminator) is passed through ``processor``
    and written followed by a newline. The default processor uppercases.

    Returns:
        Number of lines written.

    Raises:
        SourceFileNotFoundError: If ``input_path`` does not exist.
        FileOperationError: On any other I/O failure.
    """
    config = config or get_config().files
    processor = processor or upper_case(identity())

    def run() -> int:
        count = 0
        with open(input_path, "r", encoding=config.encoding) as reader, open(
            output_path, "w", encoding=config.encoding, newline="\n"
        ) as writer:
            for line in reader:
                writer.write(processor.process(line.rstrip("\r\n")))
                writer.write("\n")
                count += 1
        return count

    count = _guard_io(input_path, "convert file", run)
    logger.info(
        "File converted",
        extra={"input": str(input_path), "output": str(output_path), "lines": count},
    )
    return count


def copy_lines(
    source: PathLike,
    dest: PathLike,
    config: Optional[FilesConfig] = None,
) -> int:
    """Copy a text file through buffered streams, one line at a time.

    Content is preserved byte for byte for the configured encoding.

    Returns:
        Number of lines copied.
    """
    config = config or get_config().files
    if config.buffer_size <= 0:
        raise ConfigurationError(
            f"Buffer size must be positive, got {config.buffer_size}",
            setting_name="buffer_size",
            expected_type="positive int",
        )

    def run() -> int:
        count = 0
        with open(
            source, "r", encoding=config.encoding, newline="",
            buffering=config.buffer_size,
        ) as reader, open(
            dest, "w", encoding=config.encoding, newline="",
            buffering=config.buffer_size,
        ) as writer:
            for line in reader:
                writer.write(line)
                count += 1
        return count

    return _guard_io(source, "copy file line by line", run)


def bulk_copy(source: PathLike, dest: PathLike) -> Path:
    """Copy a file's bytes in one transfer.

    The destination is created or truncated.

    Returns:
        The destination path.
    """
    result = _guard_io(source, "copy file", lambda: shutil.copyfile(source, dest))
    logger.debug("File copied", extra={"source": str(source), "dest": str(dest)})
    return Path(result)


def compare_copy_strategies(
    source: PathLike,
    line_dest: PathLike,
    bulk_dest: PathLike,
    config: Optional[FilesConfig] = None,
) -> CopyTimings:
    """Time the line-buffered copy against the bulk copy."""
    start = time.perf_counter()
    copy_lines(source, line_dest, config)
    line_ms = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    bulk_copy(source, bulk_dest)
    bulk_ms = (time.perf_counter() - start) * 1000

    timings = CopyTimings(line_copy_ms=line_ms, bulk_copy_ms=bulk_ms)
    logger.info(
        f"Line copy: {line_ms:.2f} ms, bulk copy: {bulk_ms:.2f} ms",
        extra={"line_copy_ms": line_ms, "bulk_copy_ms": bulk_ms},
    )
    return timings
