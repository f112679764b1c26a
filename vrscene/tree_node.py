"""Scene graph nodes and the per-node data they carry."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def _vector(values: Iterable[float], size: int, name: str) -> list[float]:
    vec = [float(v) for v in values]
    if len(vec) != size:
        raise ValueError(f"{name} needs {size} components, got {len(vec)}")
    return vec


@dataclass
class DataNode:
    """Placement and appearance of one scene object."""

    id_type: int = 0
    id_name: int = 0
    scale: list[float] = field(default_factory=lambda: [1.0, 1.0, 1.0])
    rotation: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    move: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    id_texture: int = 0
    color: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 0.0])

    def __post_init__(self) -> None:
        self.scale = _vector(self.scale, 3, "scale")
        self.rotation = _vector(self.rotation, 3, "rotation")
        self.move = _vector(self.move, 3, "move")
        self.color = _vector(self.color, 4, "color")


@dataclass(frozen=True)
class StateVector:
    """An immutable snapshot of a node's identity and transform."""

    id_type: int
    id_name: int
    scale: tuple[float, float, float]
    rotation: tuple[float, float, float]
    move: tuple[float, float, float]

    @classmethod
    def from_data(cls, data: DataNode) -> StateVector:
        return cls(
            id_type=data.id_type,
            id_name=data.id_name,
            scale=tuple(data.scale),
            rotation=tuple(data.rotation),
            move=tuple(data.move),
        )


class TreeNode:
    """A node in the scene graph holding data and an ordered list of children."""

    def __init__(
        self,
        data: DataNode | None = None,
        children: Iterable[TreeNode] = (),
    ) -> None:
        self.data = data if data is not None else DataNode()
        self.children: list[TreeNode] = []
        for child in children:
            self.add(child)

    def add(self, child: TreeNode) -> None:
        """Append a child node."""
        if child is None:
            raise ValueError("Trying to add None as new child of TreeNode")
        self.children.append(child)

    def routine(self) -> None:
        """Advance the node by one simulation step; plain nodes stay still."""

    @property
    def children_count(self) -> int:
        return len(self.children)

    def state_vector(self) -> StateVector:
        return StateVector.from_data(self.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r}, children={self.children_count})"


@dataclass
class TreeNodeHeader:
    """A scene frame: the root node plus frame number and timestamp."""

    root: TreeNode
    id_frame: int = 0
    time: int = 0