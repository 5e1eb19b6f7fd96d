"""Seller worker that serves waiting customers from the shelf."""

from __future__ import annotations

import random
import time
from typing import Callable

from bakerysim.model import BakeryData, Customer, SemaphoreSet

COMPLAINT_PERCENT = 10
BUSY_DELAY = 0.1
IDLE_DELAY = 0.5


def _oldest_waiting(data: BakeryData, now: float) -> tuple[int, Customer] | None:
    chosen: tuple[int, Customer] | None = None
    oldest = now
    for index, customer in enumerate(data.customers):
        if (
            not customer.is_served
            and not customer.is_frustrated
            and customer.arrival_time < oldest
        ):
            chosen = (index, customer)
            oldest = customer.arrival_time
    return chosen


def serve_next(
    data: BakeryData, employee_id: int, rng: random.Random, now: float
) -> bool:
    """Serve the longest-waiting customer if possible; True if someone was served."""
    chosen = _oldest_waiting(data, now)
    if chosen is None:
        return False
    index, customer = chosen

    item = data.find_item(customer.requested_item_id)
    item_name = item.name if item is not None else "Unknown"
    on_shelf = item is not None and item.ready and item.quantity > 0

    if on_shelf:
        item.quantity -= 1
        data.total_profit += item.price
        customer.is_served = True
        if rng.randrange(100) < COMPLAINT_PERCENT:
            customer.has_complained = True
            data.complaining_customers += 1
            data.total_profit -= item.price
            print(
                f"\033[38;2;255;165;0mSeller {employee_id}: SERVED customer {index} "
                f"with {item_name} (Qty left: {item.quantity}) BUT THEY COMPLAINED! "
                f"Refunded ${item.price:.2f}\033[0m"
            )
        else:
            print(
                f"\033[0;34mSeller {employee_id}: SERVED customer {index} "
                f"with {item_name} (Qty left: {item.quantity})\033[0m"
            )
        return True

    waited = int(now - customer.arrival_time)
    if waited > data.simulation_time_limit // 3:
        customer.is_frustrated = True
        data.frustrated_customers += 1
        print(
            f"Seller {employee_id}: CUSTOMER {index} FRUSTRATED waiting for "
            f"{item_name} (waited {waited} sec)"
        )
    return False


def run_seller(
    data: BakeryData,
    semaphores: SemaphoreSet,
    employee_id: int,
    rng: random.Random | None = None,
    clock: Callable[[], float] = time.time,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Keep serving customers while the simulation runs."""
    rng = rng if rng is not None else random.Random()
    while data.simulation_running:
        with semaphores.mutex():
            served = serve_next(data, employee_id, rng, clock())
        sleep(BUSY_DELAY if served else IDLE_DELAY)