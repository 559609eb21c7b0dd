# trinkit

A small, dependency-free toolkit holding the game-side pieces of a 3D
action game: vector and rotation maths, easing curves, frame timing,
scene switching, a countdown HUD model, arena geometry and enemy wave
logic.

## Modules

- `trinkit.vector`: `Vector2`, `Vector3`, `Vector4` and `Color` dataclasses.
  - They support `+` and `-` with a vector of the same type, and `*` and `/`
    with another vector (component by component) or a number.
  - `Vector3` adds `length()`, `normalize()` (the zero vector stays zero) and
    the static methods `cross`, `dot`, `lerp`, `reflect`, `transform`
    (with perspective divide), `transfer_normal` and `calculate_value`.
  - `calculate_value` interpolates a list of `(time, Vector3)` keyframes and
    raises `ValueError` when the list is empty.
  - `Vector4` equality compares only `x`, `y` and `z`.
  - `Color.convert` unpacks a `0xAARRGGBB` integer. `Color.white`, `black`,
    `red`, `green` and `blue` take an optional alpha.
- `trinkit.direction`: functions returning unit vectors. These are `right()`,
  `left()`, `up()`, `down()`, `forward()`, `backward()`, the diagonals
  `up_right()`, `up_left()`, `down_right()` and `down_left()`, and the 3D
  diagonals `up_forward_right()`, `up_forward_left()`,
  `down_backward_right()` and `down_backward_left()`.
- `trinkit.matrix`: `Matrix4x4`, a row-major matrix used with row vectors,
  with the translation in row 3.
  - `+`, `-` and `/ scalar` work element by element.
  - `*` and `@` give the matrix product.
  - In-place `*=` and `/=` with another matrix work element by element.
  - It builds `zero`, `identity`, `scale`, `pitch`, `yaw`, `roll`, `rotate`,
    `translate`, `affine`, `orthographic`, `shadow_orthographic`,
    `perspective_fov`, `viewport` and `axis_affine` matrices.
  - It has `multiply`, `transpose` and `inverse`. `inverse` raises
    `ValueError` for a singular matrix.
- `trinkit.quaternion`: `Quaternion`, whose default is the identity.
  - Construction: `from_euler`, `from_axis_angle`, `from_rotation_matrix`,
    `look_rotation` and `look_at`.
  - Operations: `multiply`, `conjugate`, `norm`, `normalize`, `inverse`,
    `dot`, `rotate_vector`, `to_rotate_matrix`, `to_euler_angles` and
    `slerp`, which takes the shorter arc.
  - `calculate_value` interpolates `(time, Quaternion)` keyframes.
  - `normalize` and `inverse` raise `ValueError` for the zero quaternion.
- `trinkit.easing`: the Sine, Quad, Cubic, Quart, Quint, Expo, Circ, Back
  and Bounce families.
  - The functions are named like `ease_in_quad`, `ease_out_bounce` and
    `ease_in_out_expo`. The Back family has only in and out forms.
  - The `EasingType` enum selects a curve, for example
    `EasingType.EASE_OUT_BOUNCE`, through `eased_value(easing_type, t)`.
- `trinkit.json_store`: `JsonStore(base_directory="./Resources/Json/")`
  reads and writes JSON documents below that directory.
  - `save` forces a `.json` extension, creates missing folders, writes with
    four-space indentation and returns the path it wrote.
  - `load` raises `OSError` if the file cannot be opened.
  - `from_vector3`, `to_vector3`, `from_vector2`, `to_vector2`, `from_color`
    and `to_color` convert to and from dictionaries. The `to_*` functions
    fall back to a default value when a key is missing.
- `trinkit.rng`: `generate(minimum, maximum)` returns a uniform integer in
  `[minimum, maximum]` when both bounds are integers, and a float in
  `[minimum, maximum)` otherwise. It raises `TypeError` for non-numbers and
  `ValueError` when `minimum > maximum`.
- `trinkit.game_timer`: `GameTimer(clock=time.monotonic)` measures the
  frame delta on each `update()`.
  - When `time_scale` is not 1 and `return_scale_enable` is set, it holds
    the scale for `wait_time` seconds, then eases it back to 1.
  - `scaled_delta_time()` returns `delta_time * time_scale`.
- `trinkit.scene_transition`: `SceneTransition` fades an overlay colour in,
  holds it, then fades it out.
  - `TransitionState` names the phases: `BEGIN`, `WAIT` and `END`.
  - `is_begin_transition_finished` is raised once the screen is covered.
  - Drive it with `start()`, `update(delta_time)` and
    `reset_begin_transition()`.
- `trinkit.scenes`: the abstract `Scene` (`init()`, `update(manager)`) and
  `SceneFactory`.
  - `SceneFactory.register(name, scene_class)` adds a scene class, and
    `create(name)` builds one. An unknown name raises `KeyError`.
  - `SceneManager(factory, first_scene_name, transition=None)` runs the
    current scene. Its methods are `update`, `set_next_scene`,
    `switch_scene`, `init_next_scene` and `finalize`.
- `trinkit.time_limit`: `TimeLimit` counts whole seconds up to
  `time_limit`. Counting begins `wait_time` seconds after
  `update(delta_time, started)` first sees `started` true.
  - `digits()` gives the minutes, tens and units left.
  - `texture_offsets()` gives their offsets in a ten-digit number strip.
  - `apply_json` and `to_json` read and write its parameters.
- `trinkit.environment`:
  - `create_field_grid(division)` builds the vertices (`MeshVertex`) and
    triangle indices of a flat -1..1 grid.
  - `UVTransform` holds a texture transform and has `from_json` and
    `to_json`.
  - `wall_alpha(elapsed, clamped)` gives the wall opacity: solid when
    `clamped` is true, pulsing otherwise.
- `trinkit.enemy_spawns`:
  - `SpawnPlace` names the arena areas.
  - `SpawnTable` groups spawn positions by place. It has `add`, `remove`,
    `from_json`, `to_json`, `load`/`save` through a `JsonStore`, and
    `wave_positions(phase)` for waves 0 to 3.
  - `PhaseTracker.advance(enemy_count)` returns the wave to spawn next, or
    `None`.

## Example

```python
import math

from trinkit import direction
from trinkit.easing import EasingType, eased_value
from trinkit.quaternion import Quaternion
from trinkit.vector import Vector3

q = Quaternion.from_axis_angle(direction.up(), math.pi / 2)
print(q.rotate_vector(Vector3(1.0, 0.0, 0.0)))  # roughly (0, 0, -1)

print(eased_value(EasingType.EASE_OUT_BOUNCE, 0.5))  # 0.765625
```

## What it does not do

There is no rendering, input, audio or window handling, and no command to
run. The package provides the logic and data that a game loop would call
into; you supply the loop, the scenes and the drawing.

## Install and test

```
pip install .
pip install .[test]
pytest
```