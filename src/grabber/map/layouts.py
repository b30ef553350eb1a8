"""Static maze layouts.

Rows are listed top to bottom; '#' is a wall and '.' is floor.
"""
from __future__ import annotations

from typing import List

DEFAULT_LAYOUT: List[str] = [
    "####################",
    "#.#...........#..#.#",
    "#.####.##...###..#.#",
    "#.#..###..###...##.#",
    "#....#........###..#",
    "#.##...##.##.......#",
    "#..###..##......#..#",
    "##...#.#....#.###..#",
    "#.##.#.#..###.#....#",
    "#....#.##.#...#..###",
    "####.#....##..#.##.#",
    "#....###...##......#",
    "#.##...#....###..#.#",
    "#.#....#.##...#.#..#",
    "#...#.....#...#..#.#",
    "#.###.#...#...#..###",
    "###.#.#.#####...##.#",
    "#...#.#.#...#.###..#",
    "#.#...#............#",
    "####################",
]
