"""JSON serialization of scene frames and their node trees."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from vrscene.tree_node import DataNode, TreeNode, TreeNodeHeader


def _require(obj: Any, key: str) -> Any:
    if not isinstance(obj, Mapping):
        raise ValueError(f"Expected a JSON object holding {key!r}, got {obj!r}")
    try:
        return obj[key]
    except KeyError as exc:
        raise ValueError(f"Missing field {key!r} in scene JSON") from exc


def node_to_json(node: TreeNode) -> dict[str, Any]:
    """Return a JSON-ready dict for ``node`` and all its descendants."""
    if node is None:
        raise ValueError("Cannot serialize a missing node")
    data = node.data
    result: dict[str, Any] = {
        "data": {
            "id_type": data.id_type,
            "id_name": data.id_name,
            "scale": list(data.scale),
            "rotation": list(data.rotation),
            "move": list(data.move),
            "id_texture": data.id_texture,
            "color": list(data.color),
        }
    }
    if node.children:
        result["children"] = [node_to_json(child) for child in node.children]
    return result


def node_from_json(obj: Mapping[str, Any]) -> TreeNode:
    """Build a node tree from its JSON form."""
    fields = _require(obj, "data")
    data = DataNode(
        id_type=int(_require(fields, "id_type")),
        id_name=int(_require(fields, "id_name")),
        scale=_require(fields, "scale"),
        rotation=_require(fields, "rotation"),
        move=_require(fields, "move"),
        id_texture=int(_require(fields, "id_texture")),
        color=_require(fields, "color"),
    )
    children = obj.get("children", [])
    return TreeNode(data, (node_from_json(child) for child in children))


def scene_to_json(scene: TreeNodeHeader) -> dict[str, Any]:
    """Return a JSON-ready dict for a whole scene frame."""
    if scene is None:
        raise ValueError("Cannot serialize a missing scene")
    return {
        "id_frame": scene.id_frame,
        "time": scene.time,
        "root": node_to_json(scene.root),
    }


def scene_from_json(obj: Mapping[str, Any]) -> TreeNodeHeader:
    """Build a scene frame from its JSON form."""
    return TreeNodeHeader(
        root=node_from_json(_require(obj, "root")),
        id_frame=int(_require(obj, "id_frame")),
        time=int(_require(obj, "time")),
    )


def serialize(file_name: str | Path, scene: TreeNodeHeader) -> None:
    """Write ``scene`` to ``file_name`` as indented JSON."""
    document = scene_to_json(scene)
    with open(file_name, "w", encoding="utf-8") as out:
        out.write(json.dumps(document, indent=2, sort_keys=True))
        out.write("\n")


def unserialize(file_name: str | Path) -> TreeNodeHeader:
    """Read a scene frame from a JSON file."""
    with open(file_name, encoding="utf-8") as source:
        document = json.load(source)
    return scene_from_json(document)


def serialize_to_string(scene: TreeNodeHeader) -> str:
    """Return the compact JSON text of ``scene`` with keys in sorted order."""
    return json.dumps(scene_to_json(scene), separators=(",", ":"), sort_keys=True)


def unserialize_from_string(text: str) -> TreeNodeHeader:
    """Parse a scene frame from JSON text."""
    return scene_from_json(json.loads(text))