"""Customer worker that arrives, waits and leaves served or frustrated."""

from __future__ import annotations

import random
import time
from typing import Callable

from bakerysim.model import MAX_CATEGORIES, BakeryData, Customer, SemaphoreSet, Signal

RESIGNAL_PERIOD = 10


def arrive(
    data: BakeryData, customer_id: int, rng: random.Random, now: float
) -> Customer:
    """Place a fresh customer in slot ``customer_id`` wanting a random product."""
    if customer_id < 0 or customer_id > data.customer_count:
        raise IndexError(f"customer slot {customer_id} out of range")
    customer = Customer(
        id=customer_id,
        requested_item_id=rng.randrange(MAX_CATEGORIES),
        arrival_time=now,
    )
    if customer_id == data.customer_count:
        data.customers.append(customer)
    else:
        data.customers[customer_id] = customer
    print(
        f"\033[0;32mCustomer {customer_id} arrived - wants "
        f"{data.item_name(customer.requested_item_id)} "
        f"(ID:{customer.requested_item_id})\033[0m"
    )
    return customer


def check_status(data: BakeryData, customer_id: int, elapsed: float) -> bool:
    """Report on the customer and tell whether they leave the shop now."""
    customer = data.customers[customer_id]
    wanted = customer.requested_item_id
    name = data.item_name(wanted)

    if customer.is_served:
        if customer.has_complained:
            print(
                f"\033[0;33mCustomer {customer_id} was served but complained "
                f"about {name} (ID:{wanted})\033[0m"
            )
        else:
            print(
                f"\033[0;32mCustomer {customer_id} successfully got "
                f"{name} (ID:{wanted})\033[0m"
            )
        return True

    if customer.is_frustrated:
        print(
            f"\033[0;31mCustomer {customer_id} left frustrated without "
            f"{name} (ID:{wanted})\033[0m"
        )
        return True

    if elapsed > data.simulation_time_limit // 3:
        customer.is_frustrated = True
        data.frustrated_customers += 1
        print(
            f"\033[0;31mCustomer {customer_id} waited too long for {name} "
            f"(ID:{wanted}) - leaving frustrated\033[0m"
        )
        return True

    return False


def run_customer(
    data: BakeryData,
    semaphores: SemaphoreSet,
    customer_id: int,
    rng: random.Random | None = None,
    clock: Callable[[], float] = time.time,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Arrive, then check once a second until served, frustrated or closed."""
    rng = rng if rng is not None else random.Random()
    with semaphores.mutex():
        arrive(data, customer_id, rng, clock())
        semaphores.signal(Signal.CUSTOMER)

    start = clock()
    exited = False
    while not exited and data.simulation_running:
        sleep(1)
        with semaphores.mutex():
            elapsed = int(clock() - start)
            exited = check_status(data, customer_id, elapsed)
            if not exited and elapsed % RESIGNAL_PERIOD == 0:
                semaphores.signal(Signal.CUSTOMER)
    print(f"Customer (customer {customer_id}) exiting...")