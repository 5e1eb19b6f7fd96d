import random

from bakerysim.chef import can_work, prepare_item, run_chef
from bakerysim.model import (
    ITEM_NAMES,
    ITEM_TEAMS,
    MAX_ITEMS,
    PRICES,
    BakeryData,
    BakeryItem,
    Employee,
    IngredientKind,
    IngredientStock,
    SemaphoreSet,
    Team,
    TeamId,
)


def make_data(**quantities):
    data = BakeryData(simulation_running=True)
    data.ingredients = [
        IngredientStock(quantities.get(kind.name.lower(), 50), True)
        for kind in IngredientKind
    ]
    data.teams = [Team(int(team), team.name) for team in TeamId]
    return data


def add_chef(data, team):
    data.employees.append(Employee(len(data.employees), "Chef", int(team)))
    return len(data.employees) - 1


def team_names(team):
    return {ITEM_NAMES[item] for item, owner in ITEM_TEAMS.items() if owner == team}


def test_paste_can_work_with_enough_wheat():
    data = make_data(wheat=2, yeast=1)
    assert can_work(data, TeamId.PASTE) is True


def test_paste_cannot_work_with_too_little_wheat():
    data = make_data(wheat=1, yeast=5)
    assert can_work(data, TeamId.PASTE) is False


def test_unavailable_ingredient_blocks_work():
    data = make_data()
    data.ingredients[IngredientKind.BUTTER].available = False
    assert can_work(data, TeamId.SWEETS) is False
    assert can_work(data, TeamId.CAKES) is False
    assert can_work(data, TeamId.PASTE) is True


def test_sandwiches_need_bread():
    data = make_data()
    assert can_work(data, TeamId.SANDWICHES) is False
    data.teams[TeamId.PASTE].items_prepared = 1
    assert can_work(data, TeamId.SANDWICHES) is True


def test_baking_team_has_no_recipe():
    data = make_data()
    assert can_work(data, TeamId.BAKE_BREAD) is False
    assert can_work(data, -1) is False


def test_prepare_bread_consumes_and_counts():
    data = make_data(wheat=10, yeast=10)
    chef = add_chef(data, TeamId.PASTE)
    before = data.item_count
    item = prepare_item(data, chef, random.Random(1))
    assert item is data.items[-1]
    assert item.id == before
    assert item.ready is False
    assert item.quantity == 1
    assert item.name in team_names(TeamId.PASTE)
    price = next(PRICES[i] for i, n in ITEM_NAMES.items() if n == item.name)
    assert item.price == price
    assert data.ingredients[IngredientKind.WHEAT].quantity == 10 - 2
    assert data.ingredients[IngredientKind.YEAST].quantity == 10 - 1
    assert data.teams[TeamId.PASTE].items_prepared == 1


def test_prepare_sandwich_uses_bread_and_cheese():
    data = make_data(cheese_salami=10)
    data.teams[TeamId.PASTE].items_prepared = 2
    chef = add_chef(data, TeamId.SANDWICHES)
    item = prepare_item(data, chef, random.Random(3))
    assert item.name in team_names(TeamId.SANDWICHES)
    assert data.teams[TeamId.PASTE].items_prepared == 2 - 1
    assert data.ingredients[IngredientKind.CHEESE_SALAMI].quantity == 10 - 3


def test_prepare_returns_none_when_blocked():
    data = make_data(sugar_salt=0)
    chef = add_chef(data, TeamId.CAKES)
    assert prepare_item(data, chef, random.Random(0)) is None
    assert data.items == []
    assert data.ingredients[IngredientKind.SWEET_ITEMS].quantity == 50


def test_exhausted_ingredient_marked_unavailable():
    data = make_data(wheat=2, yeast=1)
    chef = add_chef(data, TeamId.PASTE)
    prepare_item(data, chef, random.Random(0))
    assert data.ingredients[IngredientKind.WHEAT].available is False
    assert data.ingredients[IngredientKind.YEAST].available is False
    assert data.ingredients[IngredientKind.MILK].available is True


def test_full_item_list_still_uses_bread():
    data = make_data()
    data.items = [BakeryItem(i, "Filler", 1, 1.0, 0, True) for i in range(MAX_ITEMS)]
    data.teams[TeamId.PASTE].items_prepared = 1
    chef = add_chef(data, TeamId.SAVORY_PATISSERIES)
    assert prepare_item(data, chef, random.Random(0)) is None
    assert data.item_count == MAX_ITEMS
    assert data.teams[TeamId.PASTE].items_prepared == 0


def test_run_chef_prepares_until_stopped():
    data = make_data()
    chef = add_chef(data, TeamId.SWEETS)
    calls = []

    def sleep(seconds):
        calls.append(seconds)
        if len(calls) > 1:
            data.simulation_running = False

    run_chef(data, SemaphoreSet(), chef, random.Random(5), sleep)
    assert data.item_count == 1
    assert data.items[0].name in team_names(TeamId.SWEETS)
    assert all(1 <= s <= 3 for s in calls)