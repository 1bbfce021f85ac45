"""Tests for the order status guard and the season lookup."""

import itertools
import logging
import threading

import pytest

from snippets.domain.models import (
    UNKNOWN_SEASON,
    Order,
    OrderStatus,
    Season,
    season_name,
)


def _order_at(status: OrderStatus) -> Order:
    order = Order()
    order.set_status(status)
    assert order.status is status
    return order


def test_new_order_starts_as_new():
    order = Order()
    assert order.status is OrderStatus.NEW
    assert order.get_status() is OrderStatus.NEW


def test_delivered_order_cannot_be_cancelled(caplog):
    order = _order_at(OrderStatus.DELIVERED)

    with caplog.at_level(logging.WARNING, logger="snippets.domain.models"):
        applied = order.set_status(OrderStatus.CANCELLED)

    assert applied is False
    assert order.status is OrderStatus.DELIVERED
    assert "Cannot cancel a delivered order" in caplog.text


@pytest.mark.parametrize(
    "start, target",
    [
        (s1, s2)
        for s1, s2 in itertools.product(OrderStatus, repeat=2)
        if not (s1 is OrderStatus.DELIVERED and s2 is OrderStatus.CANCELLED)
    ],
)
def test_every_other_transition_is_applied(start, target):
    order = _order_at(start)

    assert order.set_status(target) is True
    assert order.status is target


def test_accepted_transition_does_not_warn(caplog):
    order = Order()
    with caplog.at_level(logging.WARNING):
        order.set_status(OrderStatus.CANCELLED)
        order.set_status(OrderStatus.IN_PROGRESS)
    assert caplog.records == []


def test_order_lifecycle_scenario():
    order = Order()
    assert order.status is OrderStatus.NEW

    order.set_status(OrderStatus.DELIVERED)
    assert order.status is OrderStatus.DELIVERED

    order.set_status(OrderStatus.CANCELLED)
    assert order.status is OrderStatus.DELIVERED

    order.set_status(OrderStatus.NEW)
    assert order.status is OrderStatus.NEW


def test_concurrent_updates_never_cancel_a_delivered_order():
    order = _order_at(OrderStatus.DELIVERED)

    def cancel():
        for _ in range(200):
            order.set_status(OrderStatus.CANCELLED)

    threads = [threading.Thread(target=cancel) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert order.status is OrderStatus.DELIVERED


def test_repr_shows_status_name():
    assert repr(Order()) == "Order(status=NEW)"


def test_orders_compare_by_status():
    first, second = Order(), Order()
    assert first == second

    second.set_status(OrderStatus.DELIVERED)
    assert first != second

    first.set_status(OrderStatus.DELIVERED)
    assert first == second


@pytest.mark.parametrize(
    "season, expected",
    [
        (Season.WINTER, "Зима"),
        (Season.SPRING, "Весна"),
        (Season.SUMMER, "Лето"),
        (Season.AUTUMN, "Осень"),
    ],
)
def test_season_names(season, expected):
    assert season_name(season) == expected


def test_unknown_season():
    assert season_name(None) == UNKNOWN_SEASON
    assert season_name("SUMMER") == UNKNOWN_SEASON
