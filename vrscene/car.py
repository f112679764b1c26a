"""A car: a scene node with four wheels as children."""

from __future__ import annotations

from vrscene.tree_node import DataNode, TreeNode

WHEELS_COUNT = 4
WHEEL_ID_TYPE = 2

_WHEEL_MOVES = (
    (-1.0, 1.0, 0.0),
    (1.0, 1.0, 0.0),
    (-1.0, -1.0, 0.0),
    (1.0, -1.0, 0.0),
)


class Car(TreeNode):
    """A car node that creates its four wheels on construction."""

    wheels_count = WHEELS_COUNT

    def __init__(self, data: DataNode) -> None:
        super().__init__(data)
        for index, move in enumerate(_WHEEL_MOVES):
            wheel_data = DataNode(
                WHEEL_ID_TYPE,
                index,
                list(self.data.scale),
                list(self.data.rotation),
                list(move),
                self.data.id_texture,
                list(self.data.color),
            )
            self.add(TreeNode(wheel_data))