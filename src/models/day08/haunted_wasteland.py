# -*- coding: utf-8 -*-
"""
Day 08: Haunted wasteland
=========================

A network of nodes, each with a left and a right successor, is walked by
following an L/R instruction string, repeated as often as needed.

1. Steps from AAA to ZZZ;
2. Ghosts start together on every node ending in A and finish when all of
   them stand on nodes ending in Z.

For part 2 each ghost's walk is assumed to cycle once it reaches its Z node,
with the cycle length equal to the steps it took to get there, so the
answer is the LCM of the individual step counts.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from src.data.loaders import load_text, split_lines

logger = logging.getLogger(__name__)

DAY = 8
START_NODE = 'AAA'
END_NODE = 'ZZZ'

_NODE_PATTERN = re.compile(r'^(\w+)\s*=\s*\((\w+),\s*(\w+)\)$')


@dataclass
class Network:
    instructions: str
    nodes: Dict[str, Tuple[str, str]]

    def ghost_starts(self) -> List[str]:
        return [name for name in self.nodes if name.endswith('A')]


def parse_network(text: str) -> Network:
    """
    Parse instructions and node table

    Example:
        LLR

        AAA = (BBB, BBB)
        BBB = (AAA, ZZZ)
        ZZZ = (ZZZ, ZZZ)
    """
    lines = split_lines(text)
    if not lines:
        raise ValueError("Empty network description")

    instructions = lines[0].strip()
    if not instructions or set(instructions) - {'L', 'R'}:
        raise ValueError(f"Instructions must be a non-empty L/R string: {instructions!r}")

    nodes: Dict[str, Tuple[str, str]] = {}
    for line in lines[1:]:
        match = _NODE_PATTERN.match(line.strip())
        if match is None:
            raise ValueError(f"Malformed node line: {line!r}")
        name, left, right = match.groups()
        nodes[name] = (left, right)

    return Network(instructions=instructions, nodes=nodes)


def count_steps(network: Network, start: str, is_end: Callable[[str], bool]) -> int:
    """
    Steps needed to reach a node satisfying is_end

    Args:
        network: parsed network
        start: starting node
        is_end: end condition, checked after every step

    Returns:
        Number of steps (at least 1)

    Raises:
        ValueError: on an unknown node, or if the walk loops without ending
    """
    node = start
    steps = 0
    seen = set()
    n_instructions = len(network.instructions)

    while True:
        position = steps % n_instructions
        state = (node, position)
        if state in seen:
            raise ValueError(f"Walk from {start} loops without reaching an end node")
        seen.add(state)

        if node not in network.nodes:
            raise ValueError(f"Unknown node {node!r}")
        left, right = network.nodes[node]
        node = left if network.instructions[position] == 'L' else right
        steps += 1

        if is_end(node):
            return steps


def solve_part1(network: Network) -> int:
    if START_NODE not in network.nodes:
        raise ValueError(f"Network has no {START_NODE} node")
    return count_steps(network, START_NODE, lambda node: node == END_NODE)


def solve_part2(network: Network) -> int:
    starts = network.ghost_starts()
    if not starts:
        raise ValueError("Network has no node ending in A")

    cycles = [count_steps(network, start, lambda node: node.endswith('Z')) for start in starts]
    logger.debug(f"Ghost cycle lengths: {dict(zip(starts, cycles))}")
    return int(np.lcm.reduce(np.array(cycles, dtype=np.int64)))


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 08"""
    network = parse_network(load_text(DAY, input_path))
    logger.info(f"Day 08: {len(network.nodes)} nodes, {len(network.instructions)} instructions")

    part1 = solve_part1(network)
    print(f"Part 1: Total steps: {part1}")

    part2 = solve_part2(network)
    print(f"Part 2: Total steps: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
