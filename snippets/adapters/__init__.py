"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Database connection (in-process)
- Message log (in-memory)
- Clocks (system, fixed)
"""
