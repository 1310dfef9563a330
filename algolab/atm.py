"""Cash withdrawal planned with the greedy method over note denominations."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

_RULE = "|---|-------------------------|---------|---------|----------|"


@dataclass(frozen=True)
class Denomination:
    """A kind of note: its face value and its name."""

    value: int
    name: str


@dataclass
class Withdrawal:
    """The notes handed out for a requested amount."""

    amount: int
    notes: list[tuple[Denomination, int]] = field(default_factory=list)

    @property
    def paid(self) -> int:
        return sum(d.value * count for d, count in self.notes)

    @property
    def unpaid(self) -> int:
        return self.amount - self.paid


def parse_denominations(text: str) -> list[Denomination]:
    """Parse lines of the form '<face value> <name>'; blank lines are skipped."""
    denominations = []
    for line in filter(None, map(str.strip, text.splitlines())):
        value, _, name = line.partition(" ")
        value = int(value)
        if value <= 0:
            raise ValueError(f"face value must be positive, got {value}")
        denominations.append(Denomination(value, name.strip()))
    return denominations


def read_denominations(path: str | Path) -> list[Denomination]:
    """Read denominations from a text file."""
    return parse_denominations(Path(path).read_text(encoding="utf-8"))


def withdraw(denominations: list[Denomination], amount: int) -> Withdrawal:
    """Pay out ``amount`` taking as many of the largest notes as fit, largest first."""
    if any(d.value <= 0 for d in denominations):
        raise ValueError("face values must be positive")
    remaining = amount
    notes = []
    for d in sorted(denominations, key=lambda d: d.value, reverse=True):
        count = remaining // d.value if remaining > 0 else 0
        remaining -= count * d.value
        notes.append((d, count))
    return Withdrawal(amount, notes)


def format_withdrawal(withdrawal: Withdrawal) -> str:
    """Render the withdrawal as a table followed by its totals."""
    lines = [
        _RULE,
        f"|{'STT':<3}|{'Loai Tien':<25}|{'Menh gia':<9}|{'So to':<9}|{'Thanh tien':<10}|",
        _RULE,
    ]
    for index, (d, count) in enumerate(withdrawal.notes, 1):
        shown = str(count) if count else ""
        lines.append(f"|{index:<3}|{d.name:<25}|{d.value:<9}|{shown:<9}|{count * d.value:<10}|")
    lines += [
        _RULE,
        f"Tien can rut = {withdrawal.amount:<9}",
        f"Tong tien tra = {withdrawal.paid:<9}",
        f"So tien khong rut duoc = {withdrawal.unpaid:<9}",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Ask for an amount, plan the withdrawal and print it."""
    parser = argparse.ArgumentParser(prog="atm")
    parser.add_argument("amount", nargs="?", type=int)
    parser.add_argument("-f", "--file", default="ATM.txt")
    args = parser.parse_args(argv)
    try:
        amount = args.amount if args.amount is not None else int(input("Nhap so tien can rut:"))
        denominations = read_denominations(args.file)
    except (OSError, ValueError) as exc:
        print(f"atm: {exc}", file=sys.stderr)
        return 1
    print(format_withdrawal(withdraw(denominations, amount)))
    return 0