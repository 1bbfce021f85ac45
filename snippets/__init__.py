"""Top-level package for the snippets project.

This package collects small, independent building blocks: an order
status guard, a composable text-processing pipeline, shared resources
provided through dependency injection, file copy helpers and a set of
date/time utilities.

Each piece can be used on its own; ``snippets.demo`` wires them
together for a quick tour.
"""
