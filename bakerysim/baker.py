"""Baker worker that bakes prepared items of its team."""

from __future__ import annotations

import random
import time
from typing import Callable

from bakerysim.model import BakeryData, BakeryItem, SemaphoreSet, Signal


def bake_next(data: BakeryData, employee_id: int) -> BakeryItem | None:
    """Bake the first unbaked item of the baker's team and return it."""
    team_id = data.employees[employee_id].team_id
    item = next(
        (item for item in data.items if not item.ready and item.team_id == team_id),
        None,
    )
    if item is None:
        return None
    item.ready = True
    print(f"Baker {employee_id}: Baked {item.name} (ID:{item.id}, Team:{item.team_id})")
    return item


def run_baker(
    data: BakeryData,
    semaphores: SemaphoreSet,
    employee_id: int,
    rng: random.Random | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Keep baking items while the simulation runs."""
    rng = rng if rng is not None else random.Random()
    print(f"Baker {employee_id} starting (Team: {data.employees[employee_id].team_id})")
    while data.simulation_running:
        sleep((500_000 + rng.randrange(1_000_000)) / 1_000_000)
        with semaphores.mutex():
            if not data.simulation_running:
                break
            if bake_next(data, employee_id) is not None:
                semaphores.signal(Signal.BAKER)
    print(f"Baker (employee {employee_id}) exiting...")