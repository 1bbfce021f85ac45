"""Database adapters - Implementations of the DatabaseConnectionPort."""

from .connection import DatabaseConnection

__all__ = ["DatabaseConnection"]
