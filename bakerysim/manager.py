"""Manager worker that ends the simulation and rebalances staff."""

from __future__ import annotations

import time
from typing import Callable

from bakerysim.model import BakeryData, SemaphoreSet

_PRODUCTION_TEAMS = range(6)
_FIRST_BAKING_TEAM = 6


def _announce(message: str) -> None:
    print(f"\033[0;35mManager: {message}\033[0m")


def check_termination(data: BakeryData, elapsed_seconds: int) -> str | None:
    """Stop the simulation if a limit is reached and return why, else None."""
    if elapsed_seconds >= data.simulation_time_limit:
        reason = (
            f"TIME LIMIT REACHED ({elapsed_seconds} >= "
            f"{data.simulation_time_limit} seconds)"
        )
    elif data.frustrated_customers >= data.max_frustrated_customers:
        reason = (
            f"Too many frustrated customers ({data.frustrated_customers} >= "
            f"{data.max_frustrated_customers})"
        )
    elif data.complaining_customers >= data.max_complaining_customers:
        reason = (
            f"Too many complaining customers ({data.complaining_customers} >= "
            f"{data.max_complaining_customers})"
        )
    elif data.missing_item_customers >= data.max_missing_item_customers:
        reason = (
            f"Too many missing item requests ({data.missing_item_customers} >= "
            f"{data.max_missing_item_customers})"
        )
    elif data.total_profit >= data.profit_threshold:
        reason = (
            f"Profit target reached ({data.total_profit:.2f} >= "
            f"{data.profit_threshold:.2f})"
        )
    else:
        return None
    data.simulation_running = False
    _announce(reason)
    return reason


def rebalance(data: BakeryData) -> list[tuple[int, int, int]]:
    """Move idle staff towards starved teams; return (employee, from, to) moves."""
    ready = {team: 0 for team in _PRODUCTION_TEAMS}
    unbaked = {team: 0 for team in _PRODUCTION_TEAMS}
    for item in data.items:
        if item.team_id in ready:
            if item.ready:
                ready[item.team_id] += item.quantity
            else:
                unbaked[item.team_id] += 1

    moves: list[tuple[int, int, int]] = []

    for source in _PRODUCTION_TEAMS:
        for target in _PRODUCTION_TEAMS:
            if (
                source != target
                and ready[target] < 3
                and ready[source] > 10
                and unbaked[target] > 2
            ):
                chef = next(
                    (
                        e
                        for e in data.employees
                        if e.team_id == source and not e.busy
                    ),
                    None,
                )
                if chef is not None:
                    chef.team_id = target
                    moves.append((chef.id, source, target))
                    print(
                        f"\033[0;36mManager: Rebalanced chef {chef.id} "
                        f"from team {source} to {target}\033[0m"
                    )

    for team in _PRODUCTION_TEAMS:
        if unbaked[team] > 5:
            worker = next(
                (
                    e
                    for e in data.employees
                    if not e.busy and e.team_id >= _FIRST_BAKING_TEAM
                ),
                None,
            )
            if worker is not None:
                previous = worker.team_id
                worker.team_id = team
                moves.append((worker.id, previous, team))
                print(
                    f"\033[0;36mManager: Reassigned employee {worker.id} to team "
                    f"{team} ({unbaked[team]} unbaked)\033[0m"
                )
    return moves


def run_manager(
    data: BakeryData,
    semaphores: SemaphoreSet,
    clock: Callable[[], float] = time.time,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Watch the limits once a second and rebalance teams until the end."""
    start = clock()
    print(
        f"Manager: Starting simulation (Time limit: "
        f"{data.simulation_time_limit} seconds)"
    )
    while data.simulation_running:
        sleep(1)
        with semaphores.mutex():
            elapsed = int(clock() - start)
            data.bakery_time = elapsed // 60
            if check_termination(data, elapsed) is not None:
                break
            rebalance(data)
    print(f"Manager: Simulation ended after {int(clock() - start)} seconds")
    print("Manager exiting...")