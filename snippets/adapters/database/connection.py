"""In-process database connection.

There is no real driver behind this connection: it records the DSN and
its connected state, and logs when it is opened and closed. One
instance is shared per container.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import DatabaseConfig, get_config


@dataclass
class DatabaseConnection:
    """Database connection opened on construction.

    Attributes:
        config: Database configuration (DSN)
    """

    config: DatabaseConfig = field(default_factory=lambda: get_config().database)

    _connected: bool = field(default=False, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.connect()

    @property
    def dsn(self) -> str:
        return self.config.dsn

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        """Open the connection. Calling it again is a no-op."""
        if self._connected:
            return
        self._connected = True
        self._logger.info("Database connection created", extra={"dsn": self.dsn})

    def close(self) -> None:
        if not self._connected:
            return
        self._connected = False
        self._logger.info("Database connection closed", extra={"dsn": self.dsn})
