# vrscene

A small toolkit for driving a VR scene: a tree of scene nodes that animates
itself frame by frame, a JSON serializer for whole scenes, and a UDP
broadcast server and client that carry datagrams across a local network.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The scene tree (`vrscene.tree_node`)

A scene is a `TreeNode` holding a `DataNode` (`id_type`, `id_name`, `scale`,
`rotation`, `move`, `id_texture` and `color`) and an ordered list of child
nodes. `DataNode` defaults to unit scale, zero rotation and move, and a zero
colour; vectors of the wrong length raise `ValueError`.
`TreeNodeHeader` wraps the root of a scene with an `id_frame` and a `time`.

- `TreeNode(data, children)` builds a node; `add(child)` appends a child and
  raises `ValueError` for `None`.
- `children_count` is a property giving the number of children.
- `state_vector()` returns a frozen `StateVector` snapshot of the node's ids,
  scale, rotation and move; `StateVector.from_data(data)` builds one from a
  `DataNode`.
- `routine()` advances a node by one step; plain nodes do not change.

## Animated nodes

- `vrscene.tree_leaves.TreeLeaves(data, start_index)` is a node that sways:
  each `routine()` adds the next step of a fixed 50-step rotation cycle to its
  rotation, moves on in the cycle and prints the new state. `start_index` is
  chosen at random when not given; `next_index` tells where the cycle stands.
- `vrscene.car.Car(data)` is a node created with four wheel children
  (type id 2, named 0 to 3) that share the car's scale, rotation, texture and
  colour and sit at the four corners (±1, ±1, 0).
- `vrscene.matrix.Matrix(values)` is a 3×3 matrix built from nine values row
  by row; `Matrix.filled(elem)` fills every element. It supports `*`, `*=`,
  row indexing and equality.

## The imitator (`vrscene.imitator`)

`Imitator` keeps a root node and the objects added to it.

- `add(obj)` adds a top-level object; `objects_count` counts them.
- `process_data(path)` reads a scene data file and returns a `TreeLeaves` for
  every line whose name starts with `Stages_CyTree10_Leaf_Lod0`, followed by
  one separator character and the leaf number. A missing file yields an empty
  list. Each line has the form

      name (sx, sy, sz) (rx, ry, rz) (mx, my, mz)

  with rotation in radians, stored in degrees. `parse_scene_line(line)`
  parses one such line.
- `run(seconds, data_path)` adds those leaves, then calls `routine()` on
  every object, printing the iteration, timestamp and delta in milliseconds
  and sleeping 40 ms per frame, until the time is up. It returns the number
  of frames.
- `state_vectors()` lists the state vectors of every node, root first, depth
  first.

From the command line:

    vrscene-imitator --seconds 1 --data data.txt

## Serializing scenes (`vrscene.serializer`)

- `serialize_to_string(scene)` gives compact JSON with sorted keys;
  `unserialize_from_string(text)` reads it back.
- `serialize(file_name, scene)` writes indented JSON to a file;
  `unserialize(file_name)` reads it back.
- `scene_to_json`, `scene_from_json`, `node_to_json` and `node_from_json`
  work with plain Python objects.

Each node is written as an object with a `data` member and, when it has
any, a `children` list. Missing fields raise `ValueError`.

## Sending datagrams

`vrscene.server.Server(address, port)` sends UDP datagrams with broadcast
enabled, to 255.255.255.255 on port 8000 unless told otherwise; an invalid
IPv4 address raises `ValueError`. `send_data(data)` sends raw bytes and
returns the count sent; `send_scene(scene)` sends a serialized scene.

`vrscene.client.Client(port)` binds to the port (shared with other clients)
and `receive(size)` returns at most `size` bytes of the next datagram.

Both close with `close()` and work as context managers.

    vrscene-server 192.168.1.255 --count 5 --interval 1.0

sends the greeting `Hello from server!` once per interval (forever without
`--count`), and

    vrscene-client --port 8000

prints every message it receives (forever without `--count`).

## What it does not do

The imitator does not send its frames anywhere: `run` only animates and
prints. To broadcast a scene, build a `TreeNodeHeader` and pass it to
`Server.send_scene` yourself. Nothing in the package renders a scene.