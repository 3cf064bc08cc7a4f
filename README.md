# glscene

A small OpenGL scene viewer. It opens a window with a textured floor,
a white cube marking a point light and Phong-lit geometry, and lets you
fly through the scene with a free-look camera.

Two scene layouts are included:

- `farlight` – a lit emerald floor under a fixed point light with distance
  attenuation, shown fullscreen.
- `emerald` – a plain wall-textured floor and an emerald cube with a light
  orbiting above it, in a 1920x1080 window.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
glscene --layout farlight --resources path/to/root
glscene --layout emerald --resources path/to/root
```

`--layout` defaults to `farlight`; `--resources` defaults to `../..`.
The resource root must hold these files:

- `shaders/vertFloor.vert`, `shaders/fragmentshader.frag`
- `shaders/vertLightWhite.vert`, `shaders/fragLightWhite.frag`
- `shaders/vertexshader.vert`, `shaders/fragBuiLighting.frag`,
  `shaders/fragSpecBuiLight.frag`
- `resources/wall.jpg` (emerald layout) and `resources/emerald.jpg`

If any of them is missing, or a shader fails to compile or link, or an image
cannot be loaded, the command prints an error and exits with status 1.

Controls:

| Key / input       | Action                            |
|-------------------|-----------------------------------|
| Mouse             | Look around (pitch clamped ±75°)  |
| W / S             | Move forward / back               |
| A / D             | Strafe left / right               |
| Space / Left Ctrl | Move up / down                    |
| Up / Down         | Raise / lower the move speed by 0.1 |
| Escape            | Quit                              |

## Using the library

The pieces work on their own as well:

```python
import math

from glscene.camera import Camera
from glscene.transforms import perspective

camera = Camera((0.0, 0.0, 3.0))
view = camera.sync_angle(10.0, 30.0, 0.0)   # returns the new view matrix
projection = perspective(math.radians(80.0), 16 / 9, 0.1, 100.0)
```

- `glscene.transforms` – `normalize`, `perspective`, `look_at`, `translate`,
  `scale`, `rotate` and `normal_matrix` on 4x4 `numpy` arrays (column vectors;
  angles in radians).
- `glscene.camera` – `Camera` with `sync_angle`, `sync_position` and `update`.
- `glscene.geometry` – `cube_vertices`, `floor_vertices` and `floor_indices`.
- `glscene.scene` – `Material`, `Light`, `SceneLayout`, `InputState`,
  `emerald_material`, `farlight_layout`, `emerald_layout`, `floor_model`,
  `light_cube_model` and `movement_directions`.
- `glscene.shader` – `ShaderProgram`, `read_shader_source` and `ShaderError`.
- `glscene.texture` – `Texture`, `load_rgba` and `TextureError`.
- `glscene.app` – `SceneWindow`, `parse_args` and `main`.

`ShaderProgram` and `Texture` need a current OpenGL context (for example an
open pyglet window).

## What it does not do

The package ships no shader sources or texture images; you provide them under
the resource root. It has no scene file format: the two layouts are built in.