"""
Day 11: Monkey in the Middle.

Each monkey block lists its starting items, a worry operation, a
divisibility test and the two monkeys it throws to.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Callable, List, TextIO

from ..common import ints, paragraphs

_OPERATION = re.compile(r"new = old (?P<op>[*+]) (?P<operand>old|\d+)")


@dataclass
class Monkey:
    items: List[int]
    operation: Callable[[int], int]
    divisor: int
    if_true: int
    if_false: int
    inspected: int = field(default=0)

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


def _operation(text: str) -> Callable[[int], int]:
    match = _OPERATION.search(text)
    if not match:
        raise ValueError(f"invalid operation: {text!r}")
    op, operand = match.group("op"), match.group("operand")

    def _apply(old: int) -> int:
        value = old if operand == "old" else int(operand)
        return old * value if op == "*" else old + value

    return _apply


def parse_monkeys(stream: TextIO) -> List[Monkey]:
    monkeys: List[Monkey] = []
    for block in paragraphs(stream):
        if len(block) < 6:
            raise ValueError(f"incomplete monkey block: {block!r}")
        monkeys.append(Monkey(
            items=ints(block[1]),
            operation=_operation(block[2]),
            divisor=ints(block[3])[0],
            if_true=ints(block[4])[0],
            if_false=ints(block[5])[0],
        ))
    return monkeys


def monkey_business(monkeys: List[Monkey], rounds: int, relief: bool) -> int:
    # Worry levels only matter modulo every divisor at once.
    modulus = math.prod(m.divisor for m in monkeys)

    for _ in range(rounds):
        for monkey in monkeys:
            for item in monkey.items:
                worry = monkey.operation(item)
                worry = worry // 3 if relief else worry % modulus
                monkeys[monkey.target(worry)].items.append(worry)
            monkey.inspected += len(monkey.items)
            monkey.items = []

    first, second = sorted((m.inspected for m in monkeys), reverse=True)[:2]
    return first * second


def part_one(stream: TextIO) -> str:
    return str(monkey_business(parse_monkeys(stream), rounds=20, relief=True))


def part_two(stream: TextIO) -> str:
    return str(monkey_business(parse_monkeys(stream), rounds=10_000, relief=False))
