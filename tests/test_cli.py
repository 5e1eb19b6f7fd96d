import random

import pytest

from bakerysim.cli import main, run_simulation, setup_bakery
from bakerysim.config import SimulationConfig
from bakerysim.model import MAX_EMPLOYEES, TeamId


@pytest.fixture
def config():
    return SimulationConfig(
        num_chefs=7,
        num_bakers=4,
        num_sellers=2,
        num_supply_chain=1,
        max_customers=3,
        simulation_time_limit=60,
        max_frustrated_customers=5,
        max_complaining_customers=6,
        max_missing_item_customers=7,
        profit_threshold=250.0,
        simulation_running=False,
    )


def _staff(data, name):
    return [e for e in data.employees if e.name == name]


def test_setup_creates_nine_teams(config):
    data = setup_bakery(config, random.Random(1))
    assert [team.id for team in data.teams] == [int(t) for t in TeamId]
    assert [team.name for team in data.teams] == [
        "Paste Team",
        "Cakes Team",
        "Sandwiches Team",
        "Sweets Team",
        "Sweet Patisseries Team",
        "Savory Patisseries Team",
        "Bake Bread Team",
        "Bake Cakes/Sweets Team",
        "Bake Patisseries Team",
    ]
    assert all(team.active for team in data.teams)


def test_setup_copies_limits(config):
    data = setup_bakery(config, random.Random(1))
    assert data.max_frustrated_customers == config.max_frustrated_customers
    assert data.max_complaining_customers == config.max_complaining_customers
    assert data.max_missing_item_customers == config.max_missing_item_customers
    assert data.profit_threshold == config.profit_threshold
    assert data.simulation_time_limit == config.simulation_time_limit
    assert data.simulation_running is config.simulation_running
    assert data.item_count == 18
    assert all(item.ready for item in data.items)


def test_chefs_spread_over_production_teams(config):
    data = setup_bakery(config, random.Random(1))
    chefs = _staff(data, "Chef")
    assert len(chefs) == config.num_chefs
    assert sorted(c.team_id for c in chefs[:6]) == [int(t) for t in list(TeamId)[:6]]
    assert chefs[6].team_id == chefs[0].team_id


def test_bakers_cycle_bread_cakes_sweets(config):
    data = setup_bakery(config, random.Random(1))
    assert [b.team_id for b in _staff(data, "Baker")] == [
        TeamId.PASTE,
        TeamId.CAKES,
        TeamId.SWEETS,
        TeamId.PASTE,
    ]


def test_sellers_have_no_team_and_ids_are_positions(config):
    data = setup_bakery(config, random.Random(1))
    sellers = _staff(data, "Seller")
    assert len(sellers) == config.num_sellers
    assert all(s.team_id == -1 for s in sellers)
    assert [e.id for e in data.employees] == list(range(data.employee_count))
    assert sum(t.employee_count for t in data.teams) == config.num_chefs + config.num_bakers


def test_setup_prints_items_and_configuration(config, capsys):
    setup_bakery(config, random.Random(1))
    out = capsys.readouterr().out
    assert "Item 0: White Bread, Quantity:" in out
    assert "=== Simulation Configuration ===" in out
    assert "profit_threshold: 250.00" in out


def test_setup_rejects_too_many_employees(config):
    crowded = SimulationConfig(num_chefs=MAX_EMPLOYEES, num_sellers=1)
    with pytest.raises(ValueError):
        setup_bakery(crowded, random.Random(1))


def test_run_simulation_that_is_not_running_returns_at_once(config):
    data = run_simulation(config, random.Random(2))
    assert data.employee_count == config.num_chefs + config.num_bakers + config.num_sellers
    assert data.customer_count == 0
    assert data.simulation_running is False


def test_main_runs_from_file(tmp_path, capsys):
    path = tmp_path / "variables.txt"
    path.write_text("num_chefs=2\nnum_sellers=1\nsimulation_running=false\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert "num_chefs: 2" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Failed to open" in capsys.readouterr().err