"""Chef worker that prepares new unbaked items for its team."""

from __future__ import annotations

import random
import time
from typing import Callable

from bakerysim.model import (
    ITEM_NAMES,
    ITEM_TEAMS,
    MAX_ITEMS,
    PRICES,
    BakeryData,
    BakeryItem,
    IngredientKind,
    ItemId,
    SemaphoreSet,
    Signal,
    TeamId,
)

# Each listed ingredient must be available and hold strictly more than the value.
_REQUIREMENTS: dict[TeamId, dict[IngredientKind, int]] = {
    TeamId.PASTE: {IngredientKind.WHEAT: 1, IngredientKind.YEAST: 0},
    TeamId.CAKES: {
        IngredientKind.SUGAR_SALT: 1,
        IngredientKind.SWEET_ITEMS: 2,
        IngredientKind.MILK: 0,
        IngredientKind.BUTTER: 0,
    },
    TeamId.SANDWICHES: {IngredientKind.CHEESE_SALAMI: 2},
    TeamId.SWEETS: {
        IngredientKind.SUGAR_SALT: 0,
        IngredientKind.SWEET_ITEMS: 1,
        IngredientKind.BUTTER: 0,
    },
    TeamId.SWEET_PATISSERIES: {IngredientKind.WHEAT: 0, IngredientKind.YEAST: 0},
    TeamId.SAVORY_PATISSERIES: {IngredientKind.WHEAT: 0, IngredientKind.YEAST: 0},
}

# Teams that use up one bread product from the paste team per item.
_NEEDS_BREAD = frozenset(
    {TeamId.SANDWICHES, TeamId.SWEET_PATISSERIES, TeamId.SAVORY_PATISSERIES}
)

_USAGE: dict[TeamId, dict[IngredientKind, int]] = {
    TeamId.PASTE: {IngredientKind.WHEAT: 2, IngredientKind.YEAST: 1},
    TeamId.SANDWICHES: {IngredientKind.CHEESE_SALAMI: 3},
    TeamId.CAKES: {
        IngredientKind.SUGAR_SALT: 2,
        IngredientKind.SWEET_ITEMS: 3,
        IngredientKind.MILK: 1,
        IngredientKind.BUTTER: 1,
    },
    TeamId.SWEETS: {
        IngredientKind.SUGAR_SALT: 1,
        IngredientKind.SWEET_ITEMS: 2,
        IngredientKind.BUTTER: 1,
    },
    TeamId.SWEET_PATISSERIES: {
        IngredientKind.WHEAT: 1,
        IngredientKind.YEAST: 1,
        IngredientKind.SUGAR_SALT: 1,
        IngredientKind.SWEET_ITEMS: 1,
    },
    TeamId.SAVORY_PATISSERIES: {
        IngredientKind.WHEAT: 1,
        IngredientKind.YEAST: 1,
        IngredientKind.CHEESE_SALAMI: 1,
    },
}


def _products(team: TeamId) -> list[ItemId]:
    return [item for item in ItemId if ITEM_TEAMS[item] == team]


def _team(team_id: int) -> TeamId | None:
    try:
        return TeamId(team_id)
    except ValueError:
        return None


def can_work(data: BakeryData, team_id: int) -> bool:
    """Tell whether the team has the ingredients and bread it needs for one item."""
    team = _team(team_id)
    if team is None or team not in _REQUIREMENTS:
        return False
    if team in _NEEDS_BREAD and data.teams[TeamId.PASTE].items_prepared <= 0:
        return False
    return all(
        data.ingredients[kind].available and data.ingredients[kind].quantity > minimum
        for kind, minimum in _REQUIREMENTS[team].items()
    )


def prepare_item(
    data: BakeryData, employee_id: int, rng: random.Random
) -> BakeryItem | None:
    """Prepare one unbaked item for the chef's team; None if the chef cannot work."""
    team_id = data.employees[employee_id].team_id
    if not can_work(data, team_id):
        return None
    team = TeamId(team_id)
    if team in _NEEDS_BREAD:
        data.teams[TeamId.PASTE].items_prepared -= 1
    if data.item_count >= MAX_ITEMS:
        return None

    product = _products(team)[rng.randrange(3)]
    item = BakeryItem(
        id=data.item_count,
        name=ITEM_NAMES[product],
        quantity=1,
        price=PRICES[product],
        team_id=team_id,
        ready=False,
    )
    for kind, amount in _USAGE[team].items():
        data.ingredients[kind].quantity -= amount
    if team is TeamId.PASTE:
        data.teams[TeamId.PASTE].items_prepared += 1
    data.items.append(item)
    print(
        f"Chef {employee_id} (Team {team_id}): Created new {item.name} "
        f"(price: {item.price:.2f})"
    )

    for kind, stock in zip(IngredientKind, data.ingredients):
        if stock.quantity <= 0:
            stock.available = False
            print(f"Chef {employee_id}: Ingredient {int(kind)} is now out of stock")
    return item


def run_chef(
    data: BakeryData,
    semaphores: SemaphoreSet,
    employee_id: int,
    rng: random.Random | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Keep preparing items while the simulation runs."""
    rng = rng if rng is not None else random.Random()
    while data.simulation_running:
        sleep(1 + rng.randrange(3))
        with semaphores.mutex():
            if not data.simulation_running:
                break
            if not can_work(data, data.employees[employee_id].team_id):
                continue
            prepare_item(data, employee_id, rng)
            semaphores.signal(Signal.CHEF)
    print(f"Chef (employee {employee_id}) exiting...")