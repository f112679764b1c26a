"""Tree leaves that sway through a fixed cycle of small rotations."""

from __future__ import annotations

import math
import random

from vrscene.tree_node import DataNode, TreeNode

RADIAN_TO_DEGREE = 180.0 / math.pi

TREE_LEAVES_ID_TYPE = 1

NEXT_ROTATION: tuple[tuple[float, float, float], ...] = (
    (0.0, 0.0, 0.0),
    (0.05, 0.05, 0.0),
    (0.05, 0.05, 0.0),
    (0.1, 0.1, 0.0),
    (0.15, 0.15, 0.0),
    (0.15, 0.15, 0.05),
    (0.15, 0.15, 0.1),
    (0.15, 0.15, 0.1),
    (0.15, 0.15, 0.1),
    (0.15, 0.15, 0.1),
    (0.2, 0.2, 0.1),
    (0.2, 0.2, 0.1),
    (0.3, 0.3, 0.1),
    (0.2, 0.2, 0.1),
    (0.2, 0.2, 0.05),
    (0.15, 0.15, 0.05),
    (0.15, 0.15, 0.05),
    (0.15, 0.15, 0.05),
    (0.15, 0.15, 0.05),
    (0.15, 0.15, 0.05),
    (0.10, 0.10, 0.0),
    (0.10, 0.10, 0.0),
    (0.05, 0.05, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (-0.05, -0.05, 0.0),
    (-0.05, -0.05, 0.0),
    (-0.1, -0.1, -0.05),
    (-0.1, -0.1, -0.05),
    (-0.15, -0.15, -0.05),
    (-0.15, -0.15, -0.05),
    (-0.15, -0.15, -0.05),
    (-0.15, -0.15, -0.05),
    (-0.15, -0.15, -0.05),
    (-0.2, -0.2, -0.1),
    (-0.2, -0.2, -0.1),
    (-0.3, -0.3, -0.1),
    (-0.3, -0.3, -0.1),
    (-0.2, -0.2, -0.1),
    (-0.2, -0.2, -0.1),
    (-0.15, -0.15, -0.05),
    (-0.15, -0.15, -0.05),
    (-0.15, -0.15, -0.05),
    (-0.15, -0.15, -0.05),
    (-0.1, -0.1, 0.0),
    (-0.05, -0.05, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
)

CYCLE_LENGTH = len(NEXT_ROTATION)


class TreeLeaves(TreeNode):
    """A leaf cluster whose rotation follows a repeating sway cycle."""

    def __init__(
        self,
        data: DataNode | None = None,
        start_index: int | None = None,
    ) -> None:
        super().__init__(data)
        if start_index is None:
            start_index = random.randrange(CYCLE_LENGTH)
        self._next_index = start_index % CYCLE_LENGTH

    @property
    def next_index(self) -> int:
        """Position in the sway cycle that the next step will apply."""
        return self._next_index

    def routine(self) -> None:
        """Apply the next rotation step of the cycle and report it."""
        step = NEXT_ROTATION[self._next_index]
        self.data.rotation = [r + d for r, d in zip(self.data.rotation, step)]
        self._next_index = (self._next_index + 1) % CYCLE_LENGTH
        rx, ry, rz = self.data.rotation
        print(
            f"next_index: {self._next_index}, id_type: {self.data.id_type}, "
            f"id_name: {self.data.id_name}, data.rotation: {rx:g} {ry:g} {rz:g}"
        )