"""Bamboo garden trimming: a robot that travels out to growing bamboos and cuts them."""

from __future__ import annotations

import copy
import math
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(eq=False)
class BambooNode:
    """A bamboo at some distance from the base that grows at a fixed speed."""

    distance: int
    height_speed: int
    height: int = 0

    def grow(self, coefficient: float = 1) -> None:
        """Grow by speed times coefficient; heights are whole numbers."""
        self.height = int(self.height + self.height_speed * coefficient)

    def cut(self) -> None:
        self.height = 0


def _l_coefficient(nodes: Sequence[BambooNode]) -> float:
    if not nodes:
        raise ValueError("a garden needs at least one bamboo")
    max_speed = max(node.height_speed for node in nodes)
    max_distance = max(node.distance for node in nodes)
    summary_grow = sum(node.height_speed * node.distance for node in nodes)
    return max(max_speed * max_distance, summary_grow)


class BambooGardenTrimming:
    """The trimming schedule, advanced one time step per update."""

    def __init__(self, nodes: Iterable[BambooNode]) -> None:
        source = list(nodes)
        coefficient = _l_coefficient(source)
        self.lower_limit = (1 + math.sqrt(2)) * coefficient
        self.upper_limit = (3 + 2 * math.sqrt(2)) * coefficient
        self.nodes: list[BambooNode] = [copy.copy(node) for node in source]
        self._requested: dict[BambooNode, None] = {}
        self.serviced: BambooNode | None = None
        self.progress = 0
        self.is_cut = False

    @property
    def requested(self) -> list[BambooNode]:
        """Bamboos that have asked to be serviced, in the order they asked."""
        return list(self._requested)

    def update(self) -> None:
        """Advance one time step: grow every bamboo, then move the robot."""
        self._update_nodes()
        if self.serviced is None and self._requested:
            self.serviced = max(self._requested, key=lambda node: node.height)
        if self.serviced is not None:
            self._update_serviced()

    def _update_nodes(self) -> None:
        for node in self.nodes:
            node.grow()
            if node.height_speed >= self.lower_limit:
                self._requested[node] = None

    def _update_serviced(self) -> None:
        node = self.serviced
        assert node is not None
        if not self.is_cut:
            half_way = node.distance // 2
            if self.progress + 1 >= half_way:
                node.cut()
                self.is_cut = True
                node.grow(self.progress + 1 - half_way)
            self.progress += 1
        elif self.progress + 1 >= node.distance:
            self.serviced = None
            self.progress = 0
            self.is_cut = False
        else:
            self.progress += 1


class BambooController:
    """Drives the garden one step per input event."""

    def __init__(self, nodes: Iterable[BambooNode]) -> None:
        self.garden = BambooGardenTrimming(nodes)

    def on_input(self) -> None:
        self.garden.update()


DEFAULT_NODES = ((5, 5), (10, 2), (7, 3))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the default garden for an optional number of steps and print it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        steps = int(args[0]) if args else 0
    except ValueError:
        print(f"invalid step count: {args[0]!r}", file=sys.stderr)
        return 1
    if steps < 0:
        print("step count must not be negative", file=sys.stderr)
        return 1

    controller = BambooController(
        BambooNode(distance, speed) for distance, speed in DEFAULT_NODES
    )
    for _ in range(steps):
        controller.on_input()
    for node in controller.garden.nodes:
        print(f"distance={node.distance} speed={node.height_speed} height={node.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())