"""Greedy and dynamic-programming solvers: ATM change, TSP, knapsack and number triangle."""

__version__ = "0.1.0"
__all__ = ["atm", "knapsack", "triangle", "tsp"]