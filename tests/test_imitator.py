import math

import pytest

from vrscene.car import Car
from vrscene.imitator import Imitator, main, parse_scene_line
from vrscene.tree_leaves import TreeLeaves
from vrscene.tree_node import DataNode

SCALE = [1.0, 1.0, 1.0]
ROTATION = [0.0, 0.0, math.pi / 4]
MOVE = [0.0, 0.0, 0.0]

LEAF_LINE = (
    "Stages_CyTree10_Leaf_Lod0_7 (1.0, 2.0, 3.0) "
    f"(0.0, {math.pi}, {math.pi / 2}) (4.0, 5.0, 6.0)"
)
OTHER_LINE = "Stages_Rock (1.0, 1.0, 1.0) (0.0, 0.0, 0.0) (0.0, 0.0, 0.0)"


def _car(id_name):
    return Car(DataNode(1, id_name, SCALE, ROTATION, MOVE))


def test_default_constructor():
    imitator = Imitator()
    imitator.add(_car(0))
    assert imitator.objects_count == 1


def test_one_arg_constructor():
    imitator = Imitator(3)
    car1, car2 = _car(0), _car(1)
    imitator.add(car1)
    imitator.add(car2)
    imitator.add(car2)
    assert imitator.objects_count == 3


def test_tree_structure():
    imitator = Imitator(2)
    for i in range(3):
        imitator.add(_car(i))
    svt = imitator.state_vectors()

    assert imitator.objects_count == 3
    assert svt[0].id_type == 0
    assert svt[0].id_name == 0
    for i in range(imitator.objects_count):
        assert svt[1 + i * 5].id_type == 1
        assert svt[1 + i * 5].id_name == i
    for i in range(imitator.objects_count):
        for j in range(4):
            index = 1 + i * 5 + 1 + j
            assert svt[index].id_type == 2
            assert svt[index].id_name == j


def test_root_state_vector():
    root = Imitator().state_vectors()
    assert len(root) == 1
    assert root[0].scale == (1.0, 1.0, 1.0)
    assert root[0].rotation == (1.0, 1.0, 1.0)
    assert root[0].move == (0.0, 0.0, 0.0)


def test_add_none_raises():
    with pytest.raises(ValueError):
        Imitator().add(None)


def test_parse_scene_line_converts_rotation_to_degrees():
    entry = parse_scene_line(LEAF_LINE)
    assert entry.name == "Stages_CyTree10_Leaf_Lod0_7"
    assert entry.scale == [1.0, 2.0, 3.0]
    assert entry.rotation == pytest.approx([0.0, 180.0, 90.0])
    assert entry.move == [4.0, 5.0, 6.0]


def test_parse_scene_line_rejects_short_line():
    with pytest.raises(ValueError):
        parse_scene_line("name (1.0, 2.0, 3.0)")


def test_parse_scene_line_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_scene_line("name (a, 2, 3) (0, 0, 0) (0, 0, 0)")


def test_process_data_keeps_only_leaves(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(f"{LEAF_LINE}\n{OTHER_LINE}\n", encoding="utf-8")
    leaves = Imitator().process_data(path)
    assert len(leaves) == 1
    leaf = leaves[0]
    assert isinstance(leaf, TreeLeaves)
    assert leaf.data.id_type == 1
    assert leaf.data.id_name == 7
    assert leaf.data.move == [4.0, 5.0, 6.0]


def test_process_data_missing_file_yields_nothing(tmp_path):
    assert Imitator().process_data(tmp_path / "absent.txt") == []


def test_run_animates_leaves(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text(f"{LEAF_LINE}\n", encoding="utf-8")
    imitator = Imitator()
    frames = imitator.run(0, path)
    out = capsys.readouterr().out

    assert frames == 1
    assert imitator.objects_count == 1
    assert "iter 0" in out
    assert "timestamp: 0" in out
    states = imitator.state_vectors()
    assert len(states) == 2
    assert states[1].id_name == 7


def test_run_keeps_going_until_time_elapses(tmp_path, capsys):
    frames = Imitator().run(0.1, tmp_path / "absent.txt")
    out = capsys.readouterr().out
    assert frames >= 2
    assert f"iter {frames - 1}" in out


def test_main_runs(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text(f"{LEAF_LINE}\n", encoding="utf-8")
    assert main(["--seconds", "0", "--data", str(path)]) == 0
    assert "id_name: 7" in capsys.readouterr().out