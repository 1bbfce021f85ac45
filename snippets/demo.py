"""Guided tour of the snippets building blocks.

The tour is organized in several stages:

1. Shared resources (database connection, message log).
2. Order status guard and season lookup.
3. Text pipeline.
4. File conversion and copy comparison.
5. Date/time helpers.

Each stage delegates to its own module; this one only wires them
together and reports results through logging.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from . import dates, files
from .container import Container, get_container
from .domain.errors import FileOperationError, PipelineConfigurationError
from .domain.models import Order, OrderStatus, Season, season_name
from .ports.clock import ClockPort
from .ports.resources import DatabaseConnectionPort, MessageLogPort
from .ports.text import TextProcessorPort

logger = logging.getLogger(__name__)


def _run_resources(container: Container) -> None:
    db1 = container.resolve(DatabaseConnectionPort)
    db2 = container.resolve(DatabaseConnectionPort)
    logger.info(f"DB instances same: {db1 is db2}")

    message_log = container.resolve(MessageLogPort)
    message_log.log("Test message")
    message_log.print_logs()


def _run_order() -> None:
    order = Order()
    order.set_status(OrderStatus.IN_PROGRESS)
    logger.info(f"Order status: {order.status.name}")
    logger.info(season_name(Season.SUMMER))


def _run_text(container: Container) -> None:
    try:
        processor = container.resolve(TextProcessorPort)
    except PipelineConfigurationError as e:
        logger.warning(f"Skipping text step: {e}", extra={"stage": e.stage})
        return
    sample = "  hello pipeline  "
    logger.info(f"{sample!r} -> {processor.process(sample)!r}")


def _run_files(container: Container) -> None:
    cfg = container.config.files
    try:
        files.convert_file(cfg.path(cfg.input_file), cfg.path(cfg.output_file), config=cfg)
        files.compare_copy_strategies(
            cfg.path(cfg.large_file),
            cfg.path(cfg.line_copy_file),
            cfg.path(cfg.bulk_copy_file),
            config=cfg,
        )
    except FileOperationError as e:
        logger.warning(f"Skipping file step: {e}", extra={"path": e.path})


def _run_dates(container: Container) -> None:
    clock = container.resolve(ClockPort)
    cfg = container.config.dates
    today = clock.today()

    dates.display_current_datetime(clock, cfg)
    logger.info(dates.compare_dates(today, today + timedelta(days=1)))
    logger.info(f"Days to New Year: {dates.days_until_new_year(clock)}")
    logger.info(f"2024 leap? {dates.is_leap_year(2024)}")
    dates.measure_execution_time(lambda: logger.info("Test task"))
    logger.info(dates.parse_and_add_days("15-11-2023", config=cfg).isoformat())
    logger.info(dates.weekday_name(today, cfg.locale))


def run_demo(container: Optional[Container] = None) -> None:
    """Run every stage of the tour once."""
    container = container or get_container()

    _run_resources(container)
    _run_order()
    _run_text(container)
    _run_files(container)
    _run_dates(container)
