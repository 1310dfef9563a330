# algolab

Small, self-contained solvers for four classic algorithm exercises:

- **ATM withdrawal** (greedy): pay out an amount by taking as many of the
  largest notes as fit, then the next largest, and report what could not
  be paid.
- **Travelling salesman** (greedy): build a tour by taking the shortest
  edges that close no early cycle and give no city a third edge, then one
  edge that closes the tour.
- **Knapsack** (dynamic programming): unbounded, bounded-quantity and
  0/1 variants, with the full value/choice tables.
- **Number triangle** (dynamic programming): the best path from the top
  of a triangle of numbers to its bottom row.

The printed tables and messages use Vietnamese labels.

## Installation

```
pip install .
```

## Command line

Each exercise has its own command, and each reads its data from a text
file in the current directory unless `-f/--file` names another one.

```
algolab-atm [AMOUNT] [-f FILE]          # default file ATM.txt; asks for AMOUNT if not given
algolab-tsp [-f FILE]                   # default file TSP.txt
algolab-knapsack [-v {1,2,3}] [-f FILE] # 1: unlimited copies, 2: limited stock, 3: at most one
algolab-triangle [-f FILE]              # default file tam_giac_so.txt
```

The knapsack command reads `caibalo13.txt` for variants 1 and 3 and
`caibalo2.txt` for variant 2 by default. Each command prints an error on
standard error and exits with status 1 when its file cannot be read or
holds malformed data.

### Input formats

- **ATM**: one denomination per line, the face value first and then its
  name, for example `500000 Five hundred thousand`. Blank lines are skipped.
- **TSP**: the number of cities `n`, then the full `n` by `n` distance
  matrix, row by row. Only the entries above the diagonal are used, as
  the edges between cities `a`, `b`, `c`, ...
- **Knapsack**: the capacity on the first line, then one item per line:
  weight, value, then the name. The bounded variant adds a quantity
  after the value.
- **Triangle**: whitespace-separated integers, taken as rows of 1, 2,
  3, ... numbers.

## Library use

```python
from algolab.knapsack import parse_items, solve, KnapsackVariant

capacity, items = parse_items("9\n3 4 A\n4 5 B\n2 3 C\n", with_quantity=False)
plan = solve(items, capacity, KnapsackVariant.UNBOUNDED)  # count of each item
```

`build_tables`, `trace_back`, `format_tables` and `format_solution` expose
the individual steps.

```python
from algolab.triangle import parse_triangle, build_table, trace_path

triangle = parse_triangle("9\n12 15\n10 6 8\n")
path = trace_path(triangle, build_table(triangle))
```

The `atm` module has `Denomination`, `Withdrawal` (with `paid` and
`unpaid`), `parse_denominations`, `withdraw` and `format_withdrawal`.
The `tsp` module has `Edge`, `parse_edges` (returns the city count and
the edges), `sort_edges`, `greedy_tour` and `format_edges`.

## Tests

```
pip install .[test]
pytest
```