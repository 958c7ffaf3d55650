# lotuskit

Building blocks for small games and simulations, written in plain Python
with no third-party dependencies.

## What is inside

- `lotuskit.mathlib`: `Vec2`, `Vec3` and `Vec4` (addition, subtraction,
  `scale`, `dot`, `normalized`, and `cross` on `Vec3`) and `Mat4`, a 4x4
  matrix of 16 floats. Helper functions build `identity`, `trans_mat4`,
  `scale_mat4`, `rotx_mat4`, `roty_mat4`, `rotz_mat4`, `rot_mat4` (angles in
  degrees), `perspective` (field of view in radians), `ortho` and `look_at`
  matrices; `mul_mat4` and `mul_mat4_vec3` multiply them, as does the `@`
  operator. Normalizing a zero-length vector raises `ValueError`.
- `lotuskit.memory`: `MemoryRegion`, a fixed-capacity store that can be
  chained to other regions with `spawn`, `link`, `step`, `unlink`, `free`
  and `free_all`. Appending to a full region raises `OverflowError`.
- `lotuskit.array`: `DynamicArray`, a growable array with `push`, `pop`,
  `insert`, `resize` and `describe`; it doubles its capacity when full.
- `lotuskit.linked_list`: `LinkedList` made of `ListNode`s, with
  `append_node`, `remove_node`, `node(index)` and a `ListHeader` from
  `header()`. The start node is always present.
- `lotuskit.hashmap`: `Hashmap`, a fixed number of string-keyed slots with
  linear probing; `set`, `get`, `remove`, and the hash function `string_hash`.
- `lotuskit.fileio`: `is_file`, `read_file`, `write_file`, `append_file`,
  `copy_file`, `delete_file`, `get_file_size` and `process_file`, which calls
  a function on each line of a file.
- `lotuskit.events`: `EventBus` and `EventCode`. A bus starts with every
  `EventCode` registered; callbacks take `(data, event_code)`, and the first
  one to return a true value stops dispatch.
- `lotuskit.ecs`: `World`, an entity-component system. Components are
  registered with a factory for their default value; systems are callables
  taking an entity id; prefabs are lists of component ids that can extend a
  parent prefab and be instanced as entities.

## What it does not do

lotuskit holds data and does arithmetic only. It does not open windows,
draw anything, load textures or shaders, read the keyboard or mouse, or load
plugins. There are no cameras, mesh builders or ready-made 2D/3D scenes, and
no command-line program.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short example

```python
from lotuskit.ecs import World

world = World()
world.register_component(dict, 0)
world.register_system(0, lambda entity: print("tick", entity))

entity = world.create_entity()
world.add_component(entity, 0)
world.run_system(0)
```

```python
from lotuskit.mathlib import Vec3, look_at, trans_mat4

view = look_at(Vec3(0, 0, 1), Vec3(0, 0, 0), Vec3(0, 1, 0))
moved = trans_mat4(1, 2, 3) @ Vec3(0, 0, 0)   # Vec3(1.0, 2.0, 3.0)
```

```python
from lotuskit.events import EventBus, EventCode

bus = EventBus()
bus.register_callback(EventCode.KEY_PRESSED, lambda data, code: print("key", data))
bus.push_event(65, EventCode.KEY_PRESSED)
```