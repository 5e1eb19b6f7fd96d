import random

import pytest

from bakerysim.model import (
    PRICES,
    BakeryData,
    Customer,
    ItemId,
    SemaphoreSet,
    initialize_bakery,
)
from bakerysim.seller import run_seller, serve_next


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, *args):
        return self.value


@pytest.fixture
def data():
    bakery = BakeryData()
    initialize_bakery(bakery, random.Random(1))
    bakery.simulation_time_limit = 30
    return bakery


def test_serves_customer_and_takes_payment(data):
    data.customers.append(Customer(id=0, requested_item_id=ItemId.VANILLA_CAKE, arrival_time=10))
    before = data.items[ItemId.VANILLA_CAKE].quantity
    assert serve_next(data, 0, _FixedRng(50), now=20) is True
    assert data.customers[0].is_served
    assert not data.customers[0].has_complained
    assert data.items[ItemId.VANILLA_CAKE].quantity == before - 1
    assert data.total_profit == pytest.approx(PRICES[ItemId.VANILLA_CAKE])


def test_complaint_refunds(data):
    data.customers.append(Customer(id=0, requested_item_id=ItemId.DONUTS, arrival_time=10))
    assert serve_next(data, 0, _FixedRng(5), now=20) is True
    assert data.customers[0].has_complained
    assert data.complaining_customers == 1
    assert data.total_profit == pytest.approx(0.0)


def test_oldest_customer_first(data):
    data.customers.append(Customer(id=0, requested_item_id=ItemId.DONUTS, arrival_time=10))
    data.customers.append(Customer(id=1, requested_item_id=ItemId.DONUTS, arrival_time=5))
    serve_next(data, 0, _FixedRng(50), now=20)
    assert data.customers[1].is_served
    assert not data.customers[0].is_served


def test_customer_arriving_now_is_not_picked(data):
    data.customers.append(Customer(id=0, requested_item_id=ItemId.DONUTS, arrival_time=20))
    assert serve_next(data, 0, _FixedRng(50), now=20) is False
    assert not data.customers[0].is_served


def test_served_and_frustrated_customers_are_skipped(data):
    data.customers.append(
        Customer(id=0, requested_item_id=ItemId.DONUTS, arrival_time=1, is_served=True)
    )
    data.customers.append(
        Customer(id=1, requested_item_id=ItemId.DONUTS, arrival_time=2, is_frustrated=True)
    )
    assert serve_next(data, 0, _FixedRng(50), now=20) is False
    assert data.total_profit == 0.0


def test_unbaked_item_leaves_customer_waiting(data):
    data.items[ItemId.BROWNIES].ready = False
    data.customers.append(Customer(id=0, requested_item_id=ItemId.BROWNIES, arrival_time=15))
    assert serve_next(data, 0, _FixedRng(50), now=20) is False
    assert not data.customers[0].is_served
    assert not data.customers[0].is_frustrated


def test_empty_shelf_frustrates_after_timeout(data):
    data.items[ItemId.BROWNIES].quantity = 0
    data.customers.append(Customer(id=0, requested_item_id=ItemId.BROWNIES, arrival_time=0))
    assert serve_next(data, 0, _FixedRng(50), now=11) is False
    assert data.customers[0].is_frustrated
    assert data.frustrated_customers == 1


def test_timeout_boundary_not_frustrated(data):
    data.items[ItemId.BROWNIES].quantity = 0
    data.customers.append(Customer(id=0, requested_item_id=ItemId.BROWNIES, arrival_time=0))
    serve_next(data, 0, _FixedRng(50), now=10)
    assert not data.customers[0].is_frustrated
    assert data.frustrated_customers == 0


def test_run_seller_serves_and_uses_busy_delay(data):
    data.simulation_running = True
    data.customers.append(Customer(id=0, requested_item_id=ItemId.CUPCAKES, arrival_time=1))
    delays = []

    def sleep(seconds):
        delays.append(seconds)
        data.simulation_running = False

    run_seller(data, SemaphoreSet(), 3, _FixedRng(50), clock=lambda: 5.0, sleep=sleep)
    assert data.customers[0].is_served
    assert delays == [0.1]


def test_run_seller_idle_delay(data):
    data.simulation_running = True
    quantities_before = [item.quantity for item in data.items]
    delays = []

    def sleep(seconds):
        delays.append(seconds)
        data.simulation_running = False

    run_seller(data, SemaphoreSet(), 3, _FixedRng(50), clock=lambda: 5.0, sleep=sleep)
    assert delays == [0.5]
    assert [item.quantity for item in data.items] == quantities_before
    assert data.total_profit == 0.0
    assert data.frustrated_customers == 0