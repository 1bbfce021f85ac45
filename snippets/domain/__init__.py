"""Domain layer - Core models and errors.

This module contains the order status guard, the season lookup, the
value objects returned by the file and date helpers, and the typed
errors used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DateParseError,
    FileOperationError,
    PipelineConfigurationError,
    SnippetsError,
    SourceFileNotFoundError,
    UnknownTimeZoneError,
)
from .models import (
    CalendarDay,
    CopyTimings,
    Order,
    OrderStatus,
    Season,
    season_name,
)

__all__ = [
    # Models
    "Order",
    "OrderStatus",
    "Season",
    "season_name",
    "CopyTimings",
    "CalendarDay",
    # Errors
    "SnippetsError",
    "FileOperationError",
    "SourceFileNotFoundError",
    "DateParseError",
    "UnknownTimeZoneError",
    "PipelineConfigurationError",
    "ConfigurationError",
]
