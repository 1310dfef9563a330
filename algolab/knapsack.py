"""Knapsack problems solved by dynamic programming over item/capacity tables."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class KnapsackVariant(Enum):
    """How many copies of each item may be packed."""

    UNBOUNDED = 1
    BOUNDED = 2
    ZERO_ONE = 3


_DEFAULT_FILES = {
    KnapsackVariant.UNBOUNDED: "caibalo13.txt",
    KnapsackVariant.BOUNDED: "caibalo2.txt",
    KnapsackVariant.ZERO_ONE: "caibalo13.txt",
}

_RULE = "|---|------------------|------------|---------|-----------|"
_RULE_BOUNDED = "|---|------------------|------------|---------|----------|-----------|"


@dataclass(frozen=True)
class Item:
    """An item with its weight, value and, for the bounded problem, its stock."""

    name: str
    weight: int
    value: int
    quantity: int | None = None


def parse_items(text: str, with_quantity: bool) -> tuple[int, list[Item]]:
    """Parse the capacity line and item lines 'weight value [quantity] name'."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("missing knapsack capacity")
    first, *rest = lines
    try:
        capacity = int(first)
    except ValueError:
        raise ValueError(f"expected the capacity, got {first!r}") from None

    fields = 3 if with_quantity else 2
    items = []
    for lineno, line in enumerate(rest, 2):
        parts = line.split(maxsplit=fields)
        try:
            numbers = [int(part) for part in parts[:fields]]
        except ValueError:
            raise ValueError(f"item {lineno}: malformed number in {line!r}") from None
        if len(numbers) < fields:
            raise ValueError(f"item {lineno}: expected {fields} numbers in {line!r}")
        name = parts[fields] if len(parts) > fields else ""
        quantity = numbers[2] if with_quantity else None
        items.append(Item(name, numbers[0], numbers[1], quantity))
    return capacity, items


def read_items(path: str | Path, with_quantity: bool) -> tuple[int, list[Item]]:
    """Read the capacity and items from a text file."""
    return parse_items(Path(path).read_text(encoding="utf-8"), with_quantity)


def _limit(item: Item, room: int, variant: KnapsackVariant) -> int:
    count = room // item.weight
    if variant is KnapsackVariant.BOUNDED:
        return min(count, item.quantity)
    if variant is KnapsackVariant.ZERO_ONE:
        return min(count, 1)
    return count


def build_tables(
    items: list[Item], capacity: int, variant: KnapsackVariant
) -> tuple[list[list[int]], list[list[int]]]:
    """Best values and chosen counts for each item prefix and each capacity."""
    if not items:
        raise ValueError("no items to pack")
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    for item in items:
        if item.weight <= 0:
            raise ValueError(f"item {item.name!r}: weight must be positive")
        if variant is KnapsackVariant.BOUNDED:
            if item.quantity is None or item.quantity < 0:
                raise ValueError(f"item {item.name!r}: needs a non-negative quantity")

    first, *others = items
    first_choices = [_limit(first, room, variant) for room in range(capacity + 1)]
    values = [[count * first.value for count in first_choices]]
    choices = [first_choices]

    for item in others:
        previous = values[-1]
        value_row, choice_row = [], []
        for room in range(capacity + 1):
            best, best_count = previous[room], 0
            for count in range(1, _limit(item, room, variant) + 1):
                candidate = previous[room - count * item.weight] + count * item.value
                if candidate > best:
                    best, best_count = candidate, count
            value_row.append(best)
            choice_row.append(best_count)
        values.append(value_row)
        choices.append(choice_row)
    return values, choices


def trace_back(items: list[Item], capacity: int, choices: list[list[int]]) -> list[int]:
    """Read the count of each item off the choice table, last item first."""
    room = capacity
    plan = []
    for item, row in zip(reversed(items), reversed(choices)):
        count = row[room]
        plan.append(count)
        room -= count * item.weight
    plan.reverse()
    return plan


def solve(items: list[Item], capacity: int, variant: KnapsackVariant) -> list[int]:
    """Count of each item in a most valuable packing."""
    _, choices = build_tables(items, capacity, variant)
    return trace_back(items, capacity, choices)


def format_tables(values: list[list[int]], choices: list[list[int]]) -> str:
    """Both tables side by side, one line per item."""
    return "".join(
        "".join(f"|{value:4d}{count:2d}" for value, count in zip(value_row, choice_row))
        + "\n"
        for value_row, choice_row in zip(values, choices)
    )


def format_solution(
    items: list[Item], plan: list[int], capacity: int, variant: KnapsackVariant
) -> str:
    """Table of the items with their chosen counts, followed by the totals."""
    bounded = variant is KnapsackVariant.BOUNDED
    rule = _RULE_BOUNDED if bounded else _RULE
    header = (
        "|STT|    Ten do vat    | Trong luong| Gia tri | So luong | Phuong an |"
        if bounded
        else "|STT|    Ten do vat    | Trong luong| Gia tri | Phuong an |"
    )
    lines = [
        f"Phuong an cai ba lo {variant.value} dung thuat toan QUY HOACH DONG nhu sau:",
        rule,
        header,
        rule,
    ]
    for index, (item, count) in enumerate(zip(items, plan), 1):
        row = f"|{index:<3}|{item.name:<18}|{item.weight:<12}|{item.value:<9}|"
        if bounded:
            row += f"{item.quantity!s:<10}|"
        lines.append(row + f"{count:<11}|")
    total_weight = sum(item.weight * count for item, count in zip(items, plan))
    total_value = sum(item.value * count for item, count in zip(items, plan))
    lines.extend(
        [
            rule,
            f"Trong luong cua ba lo = {capacity}",
            f"Tong trong luong = {total_weight}",
            f"Tong gia tri = {total_value}",
        ]
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Solve a knapsack problem read from a file and print the tables and plan."""
    parser = argparse.ArgumentParser(
        prog="knapsack", description="Solve a knapsack problem by dynamic programming."
    )
    parser.add_argument(
        "-v",
        "--variant",
        type=int,
        choices=[variant.value for variant in KnapsackVariant],
        default=KnapsackVariant.UNBOUNDED.value,
        help="1: unlimited copies, 2: limited stock, 3: at most one of each",
    )
    parser.add_argument("-f", "--file", help="items file")
    args = parser.parse_args(argv)
    variant = KnapsackVariant(args.variant)
    path = args.file or _DEFAULT_FILES[variant]

    try:
        capacity, items = read_items(path, variant is KnapsackVariant.BOUNDED)
        values, choices = build_tables(items, capacity, variant)
    except (OSError, ValueError) as exc:
        print(f"knapsack: {exc}", file=sys.stderr)
        return 1
    print(format_tables(values, choices), end="")
    plan = trace_back(items, capacity, choices)
    print(format_solution(items, plan, capacity, variant))
    return 0