"""Command that sets up the bakery and runs all its workers together."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import Callable

from bakerysim.baker import run_baker
from bakerysim.chef import run_chef
from bakerysim.config import SimulationConfig, load_config
from bakerysim.customer import run_customer
from bakerysim.dashboard import run_dashboard
from bakerysim.manager import run_manager
from bakerysim.model import (
    MAX_CATEGORIES,
    MAX_CUSTOMERS,
    MAX_EMPLOYEES,
    BakeryData,
    Employee,
    SemaphoreSet,
    Team,
    TeamId,
    initialize_bakery,
)
from bakerysim.seller import run_seller
from bakerysim.supply_chain import run_supply_chain

DEFAULT_CONFIG_PATH = "variables.txt"
DASHBOARD_INTERVAL = 1.0
PRODUCTION_TEAM_COUNT = 6
NO_TEAM = -1

TEAM_NAMES: dict[TeamId, str] = {
    TeamId.PASTE: "Paste Team",
    TeamId.CAKES: "Cakes Team",
    TeamId.SANDWICHES: "Sandwiches Team",
    TeamId.SWEETS: "Sweets Team",
    TeamId.SWEET_PATISSERIES: "Sweet Patisseries Team",
    TeamId.SAVORY_PATISSERIES: "Savory Patisseries Team",
    TeamId.BAKE_BREAD: "Bake Bread Team",
    TeamId.BAKE_CAKES_SWEETS: "Bake Cakes/Sweets Team",
    TeamId.BAKE_PATISSERIES: "Bake Patisseries Team",
}

BAKER_TEAMS = (TeamId.PASTE, TeamId.CAKES, TeamId.SWEETS)


def _print_config(config: SimulationConfig) -> None:
    print("=== Simulation Configuration ===")
    print(f"num_chefs: {config.num_chefs}")
    print(f"num_bakers: {config.num_bakers}")
    print(f"num_sellers: {config.num_sellers}")
    print(f"num_supply_chain: {config.num_supply_chain}")
    print(f"max_customers: {config.max_customers}")
    print(f"max_frustrated_customers: {config.max_frustrated_customers}")
    print(f"max_complaining_customers: {config.max_complaining_customers}")
    print(f"max_missing_item_customers: {config.max_missing_item_customers}")
    print(f"profit_threshold: {config.profit_threshold:.2f}")
    print(f"simulation_time_limit: {config.simulation_time_limit}")
    print(f"simulation_running: {int(config.simulation_running)}")
    print("=================================")


def _hire(data: BakeryData, name: str, team_id: int) -> None:
    data.employees.append(Employee(data.employee_count, name, team_id))
    if team_id != NO_TEAM:
        data.teams[team_id].employee_count += 1


def setup_bakery(
    config: SimulationConfig, rng: random.Random | None = None
) -> BakeryData:
    """Stock a fresh bakery and staff it as ``config`` asks."""
    staff = config.num_chefs + config.num_bakers + config.num_sellers
    if staff > MAX_EMPLOYEES:
        raise ValueError(f"{staff} employees requested, at most {MAX_EMPLOYEES} allowed")

    data = BakeryData()
    initialize_bakery(data, rng)
    for index, item in enumerate(data.items[:MAX_CATEGORIES]):
        print(f"Item {index}: {item.name}, Quantity: {item.quantity}")

    data.max_frustrated_customers = config.max_frustrated_customers
    data.max_complaining_customers = config.max_complaining_customers
    data.max_missing_item_customers = config.max_missing_item_customers
    data.profit_threshold = config.profit_threshold
    data.simulation_time_limit = config.simulation_time_limit
    data.simulation_running = config.simulation_running
    _print_config(config)

    data.teams = [Team(int(team), TEAM_NAMES[team]) for team in TeamId]
    for index in range(config.num_chefs):
        _hire(data, "Chef", int(TeamId.PASTE) + index % PRODUCTION_TEAM_COUNT)
    for index in range(config.num_bakers):
        _hire(data, "Baker", int(BAKER_TEAMS[index % len(BAKER_TEAMS)]))
    for _ in range(config.num_sellers):
        _hire(data, "Seller", NO_TEAM)
    return data


def _child_rng(rng: random.Random) -> random.Random:
    return random.Random(rng.getrandbits(64))


def run_simulation(
    config: SimulationConfig, rng: random.Random | None = None
) -> BakeryData:
    """Run every worker on its own thread until the simulation ends."""
    rng = rng if rng is not None else random.Random()
    data = setup_bakery(config, rng)
    semaphores = SemaphoreSet()
    threads: list[threading.Thread] = []

    def start(target: Callable[..., None], *args: object) -> None:
        thread = threading.Thread(target=target, args=args, daemon=True)
        thread.start()
        threads.append(thread)

    start(run_dashboard, data, semaphores, sys.stderr, DASHBOARD_INTERVAL)
    for _ in range(config.num_supply_chain):
        start(run_supply_chain, data, semaphores, _child_rng(rng))
    for index in range(config.num_chefs):
        start(run_chef, data, semaphores, index, _child_rng(rng))
    for index in range(config.num_bakers):
        start(run_baker, data, semaphores, config.num_chefs + index, _child_rng(rng))
    for index in range(config.num_sellers):
        employee_id = config.num_chefs + config.num_bakers + index
        start(run_seller, data, semaphores, employee_id, _child_rng(rng))
    start(run_manager, data, semaphores)

    admitted = 0
    while data.simulation_running:
        time.sleep(4 + rng.randrange(4))
        with semaphores.mutex():
            if not data.simulation_running or admitted >= config.max_customers:
                break
            if data.customer_count < MAX_CUSTOMERS:
                start(run_customer, data, semaphores, data.customer_count, _child_rng(rng))
                admitted += 1

    for thread in threads:
        thread.join()
    return data


def main(argv: list[str] | None = None) -> int:
    """Load the variables file and run the bakery simulation."""
    parser = argparse.ArgumentParser(
        prog="bakerysim", description="Simulate a bakery with chefs, bakers and sellers."
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help=f"variables file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except OSError as exc:
        print(f"Failed to open {args.config}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        run_simulation(config)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())