"""Best path down a number triangle by dynamic programming."""

from __future__ import annotations

import argparse
import sys
from itertools import islice
from pathlib import Path


def parse_triangle(text: str) -> list[list[int]]:
    """Split whitespace-separated integers into rows of 1, 2, 3, ... numbers."""
    numbers = iter([int(token) for token in text.split()])
    rows = []
    while row := list(islice(numbers, len(rows) + 1)):
        if len(row) <= len(rows):
            raise ValueError(f"row {len(rows) + 1} is incomplete")
        rows.append(row)
    if not rows:
        raise ValueError("the triangle is empty")
    return rows


def read_triangle(path: str | Path) -> list[list[int]]:
    """Read a number triangle from a text file."""
    return parse_triangle(Path(path).read_text(encoding="utf-8"))


def _best_parent(previous: list[int], i: int, j: int) -> int:
    """Column in row i-1 whose best sum leads to cell (i, j)."""
    if i == 1:
        return 0
    if j == 0:
        return 0 if previous[0] > previous[1] else 1
    if j == i:
        return i - 1
    if j == i - 1:
        return j if previous[j] > previous[j - 1] else j - 1
    return max((j - 1, j, j + 1), key=previous.__getitem__)


def build_table(triangle: list[list[int]]) -> list[list[int]]:
    """Best sum of a path from the top to each cell."""
    if not triangle or any(len(row) != i + 1 for i, row in enumerate(triangle)):
        raise ValueError("not a number triangle")
    table = [list(triangle[0])]
    for i, row in enumerate(triangle[1:], 1):
        prev = table[-1]
        table.append([prev[_best_parent(prev, i, j)] + v for j, v in enumerate(row)])
    return table


def trace_path(triangle: list[list[int]], table: list[list[int]]) -> list[int]:
    """Numbers on the best path, from the top row to the bottom row."""
    column = max(range(len(table[-1])), key=table[-1].__getitem__)
    path = [triangle[-1][column]]
    for i in range(len(table) - 1, 0, -1):
        column = _best_parent(table[i - 1], i, column)
        path.append(triangle[i - 1][column])
    return path[::-1]


def format_rows(rows: list[list[int]], title: str) -> str:
    """Title line followed by each row of numbers."""
    return title + "\n" + "".join("".join(f"{v} " for v in row) + "\n" for row in rows)


def format_path(path: list[int]) -> str:
    """The path joined by arrows, followed by its sum."""
    joined = " => ".join(map(str, path))
    return f"Phuong an la duong di qua cac so:\n{joined}\nTong duong di = {sum(path)}\n"


def main(argv: list[str] | None = None) -> int:
    """Read a triangle and print it, its table and the best path."""
    parser = argparse.ArgumentParser(prog="triangle")
    parser.add_argument("-f", "--file", default="tam_giac_so.txt")
    args = parser.parse_args(argv)
    print("Bai toan tam giac so dung thuat toan QUY HOACH DONG:")
    try:
        triangle = read_triangle(args.file)
    except OSError:
        print("Loi mo file!!!", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"triangle: {exc}", file=sys.stderr)
        return 1
    table = build_table(triangle)
    print(format_rows(triangle, "Tam giac so:"), end="")
    print(format_rows(table, "Bang F:"), end="")
    print(format_path(trace_path(triangle, table)), end="")
    return 0