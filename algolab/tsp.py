"""Travelling salesman tour built greedily from the shortest edges."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Edge:
    """An undirected edge between two cities, numbered from 0."""

    length: float
    start: int
    end: int

    @property
    def label(self) -> str:
        return chr(self.start + ord("a")) + chr(self.end + ord("a"))


def parse_edges(text: str) -> tuple[int, list[Edge]]:
    """Parse a city count and a full distance matrix into upper-triangle edges."""
    tokens = text.split()
    if not tokens:
        raise ValueError("missing number of cities")
    n = int(tokens[0])
    numbers = [float(token) for token in tokens[1:]]
    if n < 0 or len(numbers) < n * n:
        raise ValueError(f"expected {n} cities and {n * n} distances")
    return n, [Edge(numbers[i * n + j], i, j) for i in range(n) for j in range(i + 1, n)]


def read_edges(path: str | Path) -> tuple[int, list[Edge]]:
    """Read a distance matrix from a text file."""
    return parse_edges(Path(path).read_text(encoding="utf-8"))


def sort_edges(edges: list[Edge]) -> list[Edge]:
    """Edges by ascending length; equal lengths keep their order."""
    return sorted(edges, key=lambda edge: edge.length)


def _saturated(tour: list[Edge], edge: Edge) -> bool:
    return any(
        sum(city in (chosen.start, chosen.end) for chosen in tour) >= 2
        for city in (edge.start, edge.end)
    )


def greedy_tour(edges: list[Edge], n: int) -> list[Edge]:
    """Pick n-1 sorted edges forming a path, then one edge closing it into a tour."""
    if n < 3:
        raise ValueError("a tour needs at least three cities")
    if any(not 0 <= city < n for e in edges for city in (e.start, e.end)):
        raise ValueError("edge refers to a city outside the tour")
    parent = list(range(n))

    def root(city: int) -> int:
        while parent[city] != city:
            city = parent[city]
        return city

    tour: list[Edge] = []
    candidates = iter(edges)
    for edge in candidates:
        if len(tour) == n - 1:
            if root(edge.start) == root(edge.end) and not _saturated(tour, edge):
                return tour + [edge]
            continue
        a, b = root(edge.start), root(edge.end)
        if a != b and not _saturated(tour, edge):
            tour.append(edge)
            parent[b] = a
    if len(tour) < n - 1:
        raise ValueError("the edges do not connect every city")
    raise ValueError("no edge closes the tour")


def format_edges(edges: list[Edge], with_total: bool) -> str:
    """Numbered list of edges, optionally followed by the total length."""
    text = "".join(f"{i}. {e.label} = {e.length:.2f}\n" for i, e in enumerate(edges, 1))
    if with_total:
        text += f"Tong do dai duong di = {sum(e.length for e in edges):.2f}"
    return text


def main(argv: list[str] | None = None) -> int:
    """Read a distance matrix and print the greedy tour."""
    parser = argparse.ArgumentParser(prog="tsp")
    parser.add_argument("-f", "--file", default="TSP.txt")
    args = parser.parse_args(argv)
    try:
        n, edges = read_edges(args.file)
        print("Phuong an TSP dung thuat toan THAM AN:")
        print("Cac canh truoc khi sap xep:")
        print(format_edges(edges, False), end="")
        ordered = sort_edges(edges)
        print("Cac canh sau khi sap xep:")
        print(format_edges(ordered, False), end="")
        tour = greedy_tour(ordered, n)
    except (OSError, ValueError) as exc:
        print(f"tsp: {exc}", file=sys.stderr)
        return 1
    print("PHUONG AN:")
    print(format_edges(tour, True))
    return 0