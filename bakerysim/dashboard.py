"""Text dashboard showing stock, customers and ingredients of the bakery."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO

from bakerysim.model import (
    PRICES,
    BakeryData,
    Customer,
    IngredientKind,
    ItemId,
    SemaphoreSet,
    TeamId,
)
from bakerysim.supply_chain import ingredient_name

REFRESH_INTERVAL = 1 / 60
DAILY_TARGET = 1000.00

# The customer panel shows rows from y=70 in steps of 20 while y stays within 580.
MAX_CUSTOMER_ROWS = 26

_CLEAR_SCREEN = "\033[H\033[2J"

# Each section: header, team, and (substring to match, label, product) per row.
# A ready item counts towards the first row whose substring occurs in its name.
_SECTIONS: tuple[tuple[str, TeamId, tuple[tuple[str, str, ItemId], ...]], ...] = (
    (
        "BREAD",
        TeamId.PASTE,
        (
            ("White Bread", "White Bread", ItemId.WHITE_BREAD),
            ("Whole Wheat", "Whole Wheat", ItemId.WHOLE_WHEAT_BREAD),
            ("Burger Buns", "Burger Buns", ItemId.BURGER_BUNS),
        ),
    ),
    (
        "SANDWICHES",
        TeamId.SANDWICHES,
        (
            ("Cheese Sandwich", "Cheese", ItemId.CHEESE_SANDWICH),
            ("Salami Sandwich", "Salami", ItemId.SALAMI_SANDWICH),
            ("Cheese and Salami", "Cheese+Salami", ItemId.CHEESE_SALAMI_SANDWICH),
        ),
    ),
    (
        "CAKES",
        TeamId.CAKES,
        (
            ("Vanilla", "Vanilla", ItemId.VANILLA_CAKE),
            ("Chocolate", "Chocolate", ItemId.CHOCOLATE_CAKE),
            ("Strawberry", "Strawberry", ItemId.STRAWBERRY_CAKE),
        ),
    ),
    (
        "SWEETS",
        TeamId.SWEETS,
        (
            ("Donuts", "Donuts", ItemId.DONUTS),
            ("Cupcakes", "Cupcakes", ItemId.CUPCAKES),
            ("Brownies", "Brownies", ItemId.BROWNIES),
        ),
    ),
    (
        "SWEET PATISSERIES",
        TeamId.SWEET_PATISSERIES,
        (
            ("Cream Rolls", "Cream Rolls", ItemId.CREAM_ROLLS),
            ("Jam Tarts", "Jam Tarts", ItemId.JAM_TARTS),
            ("Mini Muffins", "Mini Muffins", ItemId.MINI_MUFFINS),
        ),
    ),
    (
        "SAVORY PATISSERIES",
        TeamId.SAVORY_PATISSERIES,
        (
            ("Cheese Puffs", "Cheese Puffs", ItemId.CHEESE_PUFFS),
            ("Mini Pizzas", "Mini Pizzas", ItemId.MINI_PIZZAS),
            ("Sausage Rolls", "Sausage Rolls", ItemId.SAUSAGE_ROLLS),
        ),
    ),
)


def customer_status(customer: Customer) -> str:
    """Return the status word shown for a customer."""
    if customer.is_frustrated:
        return "Frustrated"
    if customer.is_served and customer.has_complained:
        return "Complained"
    if customer.is_served:
        return "Served"
    return "Waiting"


def _section_counts(
    data: BakeryData, team: TeamId, rows: tuple[tuple[str, str, ItemId], ...]
) -> list[int]:
    counts = [0] * len(rows)
    for item in data.items:
        if item.team_id != team or not item.ready:
            continue
        for position, (needle, _, _) in enumerate(rows):
            if needle in item.name:
                counts[position] += item.quantity
                break
    return counts


def stats_panel(data: BakeryData) -> list[str]:
    """Lines of the inventory, customer and sales summary."""
    lines = [
        "BAKERY INVENTORY DASHBOARD",
        f"TOTAL PROFIT: ${data.total_profit:.2f}",
    ]
    for header, team, rows in _SECTIONS:
        lines.append(f"=== {header} ===")
        counts = _section_counts(data, team, rows)
        for (_, label, product), count in zip(rows, counts):
            lines.append(f"{label}: {count} (${PRICES[product]:.2f})")

    lines += [
        "=== CUSTOMERS ===",
        f"Total Customers: {data.customer_count}",
        f"Active Now: {data.customer_count - data.frustrated_customers}",
        f"Frustrated: {data.frustrated_customers}",
        f"Complaints: {data.complaining_customers}",
    ]

    on_shelf = sum(item.quantity for item in data.items if item.ready)
    lines += [
        "=== SALES ===",
        f"Total Items Sold: {on_shelf}",
        f"Daily Target: ${DAILY_TARGET:.2f}",
    ]
    return lines


def customer_panel(data: BakeryData) -> list[str]:
    """Lines listing each customer, the wanted product and the status."""
    lines = ["CUSTOMER STATUS"]
    for customer in data.customers[:MAX_CUSTOMER_ROWS]:
        name = data.item_name(customer.requested_item_id)
        lines.append(f"Customer {customer.id}: {name} ({customer_status(customer)})")
    return lines


def _missing(data: BakeryData, kind: IngredientKind) -> bool:
    stock = data.ingredients[kind]
    return not stock.available or stock.quantity <= 0


def ingredients_panel(data: BakeryData) -> list[str]:
    """Lines of ingredient stock and the teams held up by missing ones."""
    lines = ["INGREDIENTS INVENTORY"]
    for kind in IngredientKind:
        if _missing(data, kind):
            lines.append(f"{ingredient_name(kind)}: Missing")
        else:
            lines.append(f"{ingredient_name(kind)}: {data.ingredients[kind].quantity}")

    lines.append("Affected Teams:")
    affected: list[str] = []
    if _missing(data, IngredientKind.WHEAT) or _missing(data, IngredientKind.YEAST):
        affected += [
            "Bread Team (Wheat/Yeast Missing)",
            "Sweet Patisseries (Wheat/Yeast Missing)",
            "Savory Patisseries (Wheat/Yeast Missing)",
        ]
    if _missing(data, IngredientKind.CHEESE_SALAMI):
        affected += [
            "Sandwiches Team (Cheese/Salami Missing)",
            "Savory Patisseries (Cheese/Salami Missing)",
        ]
    if _missing(data, IngredientKind.SUGAR_SALT) or _missing(
        data, IngredientKind.SWEET_ITEMS
    ):
        affected += [
            "Cakes Team (Sugar/Sweet Items Missing)",
            "Sweets Team (Sugar/Sweet Items Missing)",
            "Sweet Patisseries (Sugar/Sweet Items Missing)",
        ]
    lines += affected or ["None"]
    return lines


def render_dashboard(data: BakeryData) -> str:
    """The three panels as one block of text."""
    panels = (stats_panel(data), customer_panel(data), ingredients_panel(data))
    return "\n\n".join("\n".join(panel) for panel in panels) + "\n"


def run_dashboard(
    data: BakeryData,
    semaphores: SemaphoreSet,
    stream: TextIO | None = None,
    interval: float = REFRESH_INTERVAL,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Redraw the dashboard on ``stream`` while the simulation runs."""
    stream = stream if stream is not None else sys.stdout
    clear = _CLEAR_SCREEN if stream.isatty() else ""
    while data.simulation_running:
        with semaphores.mutex():
            text = render_dashboard(data)
        stream.write(clear + text)
        stream.flush()
        sleep(interval)