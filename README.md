# bakerysim

A simulation of a busy bakery. Every worker runs on its own thread, and they all share one `BakeryData`. A mutex from `SemaphoreSet` guards that data.

- **Supply chain** (`bakerysim.supply_chain`) runs every 5 seconds. It refills any ingredient whose stock has fallen below its threshold, to a random amount between 30 and 50.
- **Chefs** (`bakerysim.chef`) belong to the production teams: paste/bread, cakes, sandwiches, sweets, sweet patisseries and savory patisseries. A chef uses up ingredients to prepare a new unbaked item. Sandwich and patisserie chefs also use up one bread product made by the paste team.
- **Bakers** (`bakerysim.baker`) bake the first unbaked item that belongs to their team.
- **Sellers** (`bakerysim.seller`) serve whichever customer has waited longest, provided the item that customer asked for is baked and in stock. Each sale has a 10% chance that the customer complains, and the sale is then refunded.
- **Customers** (`bakerysim.customer`) arrive every 4 to 7 seconds and ask for one of the 18 products. A customer who waits longer than a third of the time limit leaves frustrated.
- **The manager** (`bakerysim.manager`) checks the limits once a second and stops the simulation on the first of these:
  - the time limit runs out;
  - there are too many frustrated customers;
  - there are too many complaining customers;
  - there are too many missing-item customers;
  - the profit target is reached.

  It also moves idle staff towards teams that are short of stock.

While the simulation runs, a text dashboard (`bakerysim.dashboard`) is written to standard error once a second. It has three panels: inventory and sales, customer status, and ingredient stock. The ingredient panel also lists the teams held up by missing ingredients. When standard error is a terminal, the screen is cleared before each redraw.

## Installation

```
pip install .
```

## Configuration

The settings come from a file of `key=value` lines:

```
num_chefs=12
num_bakers=6
num_sellers=3
num_supply_chain=2
max_customers=30
profit_threshold=500
simulation_time_limit=120
max_frustrated_customers=10
max_complaining_customers=10
max_missing_item_customers=10
simulation_running=true
```

How the file is read:

- `time_limit` is another name for `simulation_time_limit`.
- Unknown keys are ignored.
- When a key appears more than once, the later line wins.
- A numeric value that does not start with a number counts as zero.
- A setting that is left out is 0. The exception is `simulation_running`, which defaults to true. Any value other than `true` stops the simulation before it starts.

No more than 50 chefs, bakers and sellers may be requested in total.

## Running

```
bakerysim
```

This reads `variables.txt` from the current directory. To use a different file, pass its path:

```
bakerysim path/to/variables.txt
```

The command exits with status 1 if the file cannot be opened or if too many employees are requested. Otherwise it exits with status 0 once every worker has finished.

## Using it from Python

```python
import random

from bakerysim.config import load_config, parse_config
from bakerysim.cli import setup_bakery, run_simulation

config = parse_config("num_chefs=6\nnum_bakers=3\nnum_sellers=2\nsimulation_time_limit=60\n")
data = run_simulation(config, random.Random(1))
print(data.total_profit)
```

The single steps can also be called directly on a `BakeryData`. You get one from `setup_bakery`, or from `bakerysim.model.initialize_bakery`. The steps are:

- `bakerysim.chef.prepare_item`
- `bakerysim.baker.bake_next`
- `bakerysim.seller.serve_next`
- `bakerysim.customer.arrive` and `check_status`
- `bakerysim.supply_chain.restock_ingredients`
- `bakerysim.manager.check_termination` and `rebalance`

`bakerysim.dashboard.render_dashboard` returns the dashboard text.

## What it does not do

There is no graphical window. The dashboard is plain text only. The workers are threads inside one process, not separate processes.

## Tests

```
pip install .[test]
pytest
```