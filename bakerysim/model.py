"""Shared bakery state, the item catalogue and the semaphore set guarding it."""

from __future__ import annotations

import random
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Iterator

MAX_CATEGORIES = 18
MAX_TEAMS = 10
MAX_EMPLOYEES = 50
MAX_CUSTOMERS = 100
MAX_ITEMS = 100


class TeamId(IntEnum):
    """Production and baking teams."""

    PASTE = 0
    CAKES = 1
    SANDWICHES = 2
    SWEETS = 3
    SWEET_PATISSERIES = 4
    SAVORY_PATISSERIES = 5
    BAKE_BREAD = 6
    BAKE_CAKES_SWEETS = 7
    BAKE_PATISSERIES = 8


class IngredientKind(IntEnum):
    """Positions of the raw ingredients in the stock list."""

    WHEAT = 0
    YEAST = 1
    BUTTER = 2
    MILK = 3
    SUGAR_SALT = 4
    SWEET_ITEMS = 5
    CHEESE_SALAMI = 6


class ItemId(IntEnum):
    """Catalogue identifiers of the eighteen bakery products."""

    WHITE_BREAD = 0
    WHOLE_WHEAT_BREAD = 1
    BURGER_BUNS = 2
    CHEESE_SANDWICH = 3
    SALAMI_SANDWICH = 4
    CHEESE_SALAMI_SANDWICH = 5
    VANILLA_CAKE = 6
    CHOCOLATE_CAKE = 7
    STRAWBERRY_CAKE = 8
    DONUTS = 9
    CUPCAKES = 10
    BROWNIES = 11
    CREAM_ROLLS = 12
    JAM_TARTS = 13
    MINI_MUFFINS = 14
    CHEESE_PUFFS = 15
    MINI_PIZZAS = 16
    SAUSAGE_ROLLS = 17


class Signal(IntEnum):
    """Semaphores shared by the workers."""

    MUTEX = 0
    SUPPLY = 1
    CHEF = 2
    BAKER = 3
    SELLER = 4
    CUSTOMER = 5


_CATALOGUE: tuple[tuple[ItemId, str, float, TeamId], ...] = (
    (ItemId.WHITE_BREAD, "White Bread", 3.50, TeamId.PASTE),
    (ItemId.WHOLE_WHEAT_BREAD, "Whole Wheat Bread", 4.00, TeamId.PASTE),
    (ItemId.BURGER_BUNS, "Burger Buns", 2.50, TeamId.PASTE),
    (ItemId.CHEESE_SANDWICH, "Cheese Sandwich", 5.00, TeamId.SANDWICHES),
    (ItemId.SALAMI_SANDWICH, "Salami Sandwich", 5.50, TeamId.SANDWICHES),
    (ItemId.CHEESE_SALAMI_SANDWICH, "Cheese and Salami Sandwich", 8.00, TeamId.SANDWICHES),
    (ItemId.VANILLA_CAKE, "Vanilla Cake", 12.00, TeamId.CAKES),
    (ItemId.CHOCOLATE_CAKE, "Chocolate Cake", 14.00, TeamId.CAKES),
    (ItemId.STRAWBERRY_CAKE, "Strawberry Cake", 15.00, TeamId.CAKES),
    (ItemId.DONUTS, "Donuts", 2.50, TeamId.SWEETS),
    (ItemId.CUPCAKES, "Cupcakes", 3.00, TeamId.SWEETS),
    (ItemId.BROWNIES, "Brownies", 3.50, TeamId.SWEETS),
    (ItemId.CREAM_ROLLS, "Cream Rolls", 4.00, TeamId.SWEET_PATISSERIES),
    (ItemId.JAM_TARTS, "Jam Tarts", 3.50, TeamId.SWEET_PATISSERIES),
    (ItemId.MINI_MUFFINS, "Mini Muffins", 3.00, TeamId.SWEET_PATISSERIES),
    (ItemId.CHEESE_PUFFS, "Cheese Puffs", 4.50, TeamId.SAVORY_PATISSERIES),
    (ItemId.MINI_PIZZAS, "Mini Pizzas", 5.00, TeamId.SAVORY_PATISSERIES),
    (ItemId.SAUSAGE_ROLLS, "Sausage Rolls", 5.50, TeamId.SAVORY_PATISSERIES),
)

ITEM_NAMES: dict[ItemId, str] = {item: name for item, name, _, _ in _CATALOGUE}
PRICES: dict[ItemId, float] = {item: price for item, _, price, _ in _CATALOGUE}
ITEM_TEAMS: dict[ItemId, TeamId] = {item: team for item, _, _, team in _CATALOGUE}

# Inclusive ranges for the opening stock of each ingredient.
INITIAL_INGREDIENT_RANGES: dict[IngredientKind, tuple[int, int]] = {
    IngredientKind.WHEAT: (50, 100),
    IngredientKind.YEAST: (20, 50),
    IngredientKind.BUTTER: (20, 40),
    IngredientKind.MILK: (30, 60),
    IngredientKind.SUGAR_SALT: (40, 80),
    IngredientKind.SWEET_ITEMS: (20, 40),
    IngredientKind.CHEESE_SALAMI: (20, 50),
}


@dataclass
class IngredientStock:
    """Quantity on hand of one ingredient."""

    quantity: int = 0
    available: bool = False


@dataclass
class BakeryItem:
    """A batch of a product, waiting to be baked or on the shelf."""

    id: int
    name: str
    quantity: int
    price: float
    team_id: int
    ready: bool = False


@dataclass
class Team:
    id: int
    name: str
    employee_count: int = 0
    current_workload: int = 0
    active: bool = True
    items_prepared: int = 0


@dataclass
class Employee:
    id: int
    name: str
    team_id: int
    busy: bool = False


@dataclass
class Customer:
    id: int
    requested_item_id: int = 0
    is_served: bool = False
    is_frustrated: bool = False
    has_complained: bool = False
    arrival_time: float = 0.0


def _empty_ingredients() -> list[IngredientStock]:
    return [IngredientStock() for _ in IngredientKind]


@dataclass
class BakeryData:
    """Everything the workers share."""

    bakery_time: int = 0
    total_profit: float = 0.0
    frustrated_customers: int = 0
    complaining_customers: int = 0
    missing_item_customers: int = 0

    max_frustrated_customers: int = 0
    max_complaining_customers: int = 0
    max_missing_item_customers: int = 0
    profit_threshold: float = 0.0
    simulation_time_limit: int = 0

    ingredients: list[IngredientStock] = field(default_factory=_empty_ingredients)
    items: list[BakeryItem] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)

    simulation_running: bool = False

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def team_count(self) -> int:
        return len(self.teams)

    @property
    def employee_count(self) -> int:
        return len(self.employees)

    @property
    def customer_count(self) -> int:
        return len(self.customers)

    def find_item(self, item_id: int) -> BakeryItem | None:
        """Return the first item carrying ``item_id``, or None."""
        return next((item for item in self.items if item.id == item_id), None)

    def item_name(self, item_id: int) -> str:
        """Return the name of the first item carrying ``item_id``."""
        item = self.find_item(item_id)
        return item.name if item is not None else "Unknown Item"


def initialize_bakery(data: BakeryData, rng: random.Random | None = None) -> None:
    """Reset ``data`` and stock it with ingredients and the eighteen products."""
    rng = rng if rng is not None else random.Random()
    fresh = BakeryData()
    for f in fields(BakeryData):
        setattr(data, f.name, getattr(fresh, f.name))

    data.ingredients = [
        IngredientStock(rng.randint(*INITIAL_INGREDIENT_RANGES[kind]), True)
        for kind in IngredientKind
    ]
    data.items = [
        BakeryItem(
            id=int(item_id),
            name=name,
            quantity=rng.randint(1, 2),
            price=price,
            team_id=int(team),
            ready=True,
        )
        for item_id, name, price, team in _CATALOGUE
    ]


class SemaphoreSet:
    """Counting semaphores, one per ``Signal``, each starting at one."""

    def __init__(self) -> None:
        self._semaphores = {signal: threading.Semaphore(1) for signal in Signal}

    def wait(self, signal: Signal) -> None:
        self._semaphores[Signal(signal)].acquire()

    def signal(self, signal: Signal) -> None:
        self._semaphores[Signal(signal)].release()

    @contextmanager
    def mutex(self) -> Iterator[None]:
        """Hold the shared-data mutex for the body of a with block."""
        self.wait(Signal.MUTEX)
        try:
            yield
        finally:
            self.signal(Signal.MUTEX)