"""Typed domain errors for the snippets project.

Collaborators that touch the file system, parse dates or look up
timezones raise these instead of leaking bare library exceptions, so
callers can tell "file not found" from "malformed date string".

All errors inherit from SnippetsError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SnippetsError(Exception):
    """Base error for the snippets domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class FileOperationError(SnippetsError):
    """Reading, writing or copying a file failed.

    Attributes:
        path: Path of the file involved, if known
    """

    path: Optional[str] = None


@dataclass
class SourceFileNotFoundError(FileOperationError):
    """The file to read or copy from does not exist."""


@dataclass
class DateParseError(SnippetsError):
    """A date string or value could not be interpreted.

    Attributes:
        value: The offending input
        expected_format: The format the input was expected to follow
    """

    value: str = ""
    expected_format: Optional[str] = None


@dataclass
class UnknownTimeZoneError(SnippetsError):
    """Timezone identifier not found in the tz database.

    Attributes:
        zone: The identifier that was looked up
    """

    zone: str = ""


@dataclass
class PipelineConfigurationError(SnippetsError):
    """A text pipeline was assembled from an unknown stage name.

    Attributes:
        stage: The stage name that could not be resolved
    """

    stage: str = ""


@dataclass
class ConfigurationError(SnippetsError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
