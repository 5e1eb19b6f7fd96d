"""Supply chain worker that restocks depleted ingredients."""

from __future__ import annotations

import random
import time
from typing import Callable

from bakerysim.model import BakeryData, IngredientKind, SemaphoreSet, Signal

INGREDIENT_THRESHOLDS: tuple[int, ...] = (2, 1, 1, 1, 2, 3, 3)
RESTOCK_RANGE = (30, 50)
RESTOCK_INTERVAL = 5

_INGREDIENT_NAMES = (
    "Wheat",
    "Yeast",
    "Butter",
    "Milk",
    "Sugar and Salt",
    "Sweet Items",
    "Cheese and Salami",
)


def ingredient_name(index: int) -> str:
    """Return the display name of an ingredient, or "Unknown"."""
    if 0 <= index < len(_INGREDIENT_NAMES):
        return _INGREDIENT_NAMES[index]
    return "Unknown"


def restock_ingredients(data: BakeryData, rng: random.Random) -> list[IngredientKind]:
    """Refill every ingredient below its threshold; return those refilled."""
    restocked = []
    for kind, threshold in zip(IngredientKind, INGREDIENT_THRESHOLDS):
        stock = data.ingredients[kind]
        if stock.quantity < threshold:
            stock.quantity = rng.randint(*RESTOCK_RANGE)
            stock.available = True
            print(f"Supply Chain: Restocked {ingredient_name(kind)} to {stock.quantity} units")
            restocked.append(kind)
    return restocked


def run_supply_chain(
    data: BakeryData,
    semaphores: SemaphoreSet,
    rng: random.Random | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Restock ingredients periodically while the simulation runs."""
    rng = rng if rng is not None else random.Random()
    while data.simulation_running:
        sleep(RESTOCK_INTERVAL)
        with semaphores.mutex():
            if not data.simulation_running:
                break
            restock_ingredients(data, rng)
            semaphores.signal(Signal.SUPPLY)
    print("Supply Chain exiting...")