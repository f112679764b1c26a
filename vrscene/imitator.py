"""The scene imitator: loads leaf data and animates the scene over time."""

from __future__ import annotations

import argparse
import re
import time
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple

from vrscene.tree_leaves import RADIAN_TO_DEGREE, TREE_LEAVES_ID_TYPE, TreeLeaves
from vrscene.tree_node import DataNode, StateVector, TreeNode

LEAF_NAME_PREFIX = "Stages_CyTree10_Leaf_Lod0"
DEFAULT_DATA_PATH = "data.txt"
FRAME_DELAY = 0.040

_FIELDS_PER_LINE = 10
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SceneEntry(NamedTuple):
    """One object record from a scene data file."""

    name: str
    scale: list[float]
    rotation: list[float]
    move: list[float]


def _number(token: str) -> float:
    return float(token.strip("(),"))


def parse_scene_line(line: str) -> SceneEntry:
    """Parse ``name (sx, sy, sz) (rx, ry, rz) (mx, my, mz)``.

    Rotation is given in radians and returned in degrees.
    """
    tokens = line.rstrip("\r\n").split(" ")
    if len(tokens) < _FIELDS_PER_LINE:
        raise ValueError(f"Malformed scene line: {line!r}")
    name = tokens[0]
    values = [_number(token) for token in tokens[1:_FIELDS_PER_LINE]]
    return SceneEntry(
        name=name,
        scale=values[0:3],
        rotation=[v * RADIAN_TO_DEGREE for v in values[3:6]],
        move=values[6:9],
    )


def _leaf_id(name: str) -> int | None:
    if not name.startswith(LEAF_NAME_PREFIX):
        return None
    match = _LEADING_INT.match(name[len(LEAF_NAME_PREFIX) + 1:])
    if match is None:
        raise ValueError(f"Leaf name without a number: {name!r}")
    return int(match.group(1))


class Imitator:
    """Holds the scene graph and drives its objects frame by frame."""

    def __init__(self, objects_count: int = 0) -> None:
        # objects_count is only a capacity hint; the scene starts empty.
        self._root = TreeNode(
            DataNode(0, 0, [1.0, 1.0, 1.0], [1.0, 1.0, 1.0], [0.0, 0.0, 0.0])
        )
        self._objects_count = 0

    def process_data(self, path: str | Path = DEFAULT_DATA_PATH) -> list[TreeLeaves]:
        """Read leaf objects from a scene data file; a missing file yields none."""
        leaves: list[TreeLeaves] = []
        try:
            with open(path, encoding="utf-8") as scene_data:
                lines = scene_data.read().splitlines()
        except FileNotFoundError:
            return leaves
        for line in lines:
            if not line.strip():
                continue
            entry = parse_scene_line(line)
            id_name = _leaf_id(entry.name)
            if id_name is not None:
                data = DataNode(
                    TREE_LEAVES_ID_TYPE, id_name, entry.scale, entry.rotation, entry.move
                )
                leaves.append(TreeLeaves(data))
        return leaves

    def add(self, obj: TreeNode) -> None:
        """Add a top-level object to the scene."""
        if obj is None:
            raise ValueError("Trying to add None as new object of Imitator")
        self._root.add(obj)
        self._objects_count += 1

    def run(self, seconds: float = 1, data_path: str | Path = DEFAULT_DATA_PATH) -> int:
        """Load leaves and animate the scene for ``seconds``; return the frame count."""
        for leaf in self.process_data(data_path):
            self.add(leaf)

        begin = time.monotonic_ns()
        end = begin
        iteration = -1
        while True:
            iteration += 1
            print(f"iter {iteration}")
            print(f"timestamp: {(end - begin) // 1_000_000}")

            for child in self._root.children[: self._objects_count]:
                child.routine()

            previous_end = end
            end = time.monotonic_ns()
            print(f"delta = {(end - previous_end) // 1_000_000}")

            time.sleep(FRAME_DELAY)
            if (end - begin) // 1_000_000 >= seconds * 1000:
                break
        return iteration + 1

    def _walk(self, node: TreeNode) -> Iterator[StateVector]:
        yield node.state_vector()
        for child in node.children:
            yield from self._walk(child)

    def state_vectors(self) -> list[StateVector]:
        """State vectors of every node, root first, in depth-first order."""
        return list(self._walk(self._root))

    @property
    def objects_count(self) -> int:
        return self._objects_count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Animate a scene of tree leaves.")
    parser.add_argument("--seconds", type=float, default=1, help="how long to run")
    parser.add_argument("--data", default=DEFAULT_DATA_PATH, help="scene data file")
    args = parser.parse_args(argv)
    imitator = Imitator(30)
    imitator.run(args.seconds, args.data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())