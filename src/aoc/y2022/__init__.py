"""Solutions for the 2022 puzzles and their registry bindings."""

from . import d01, d02, d03, d04, d05, d06, d07, d08, d09, d10, d11, d12, d13, d14

BINDINGS = [
    ("2022.1.1", d01.part_one),
    ("2022.1.2", d01.part_two),
    ("2022.2.1", d02.part_one),
    ("2022.2.2", d02.part_two),
    ("2022.3.1", d03.part_one),
    ("2022.3.2", d03.part_two),
    ("2022.4.1", d04.part_one),
    ("2022.4.2", d04.part_two),
    ("y2022d05p1", d05.part_one),
    ("y2022d05p2", d05.part_two),
    ("2022.6.1", d06.part_one),
    ("2022.6.2", d06.part_two),
    ("2022.7.1", d07.part_one),
    ("2022.7.2", d07.part_two),
    ("2022.8.1", d08.part_one),
    ("2022.8.2", d08.part_two),
    ("2022.9.1", d09.part_one),
    ("2022.9.2", d09.part_two),
    ("y2022d10p1", d10.part_one),
    ("y2022d10p2", d10.part_two),
    ("2022.11.1", d11.part_one),
    ("2022.11.2", d11.part_two),
    ("y2022d12p1", d12.part_one),
    ("y2022d12p2", d12.part_two),
    ("y2022d13p1", d13.part_one),
    ("y2022d13p2", d13.part_two),
    ("2022.14.1", d14.part_one),
    ("2022.14.2", d14.part_two),
]

__all__ = ["BINDINGS"]
