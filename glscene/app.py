"""Interactive window that renders a lit scene with a fly camera."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from itertools import accumulate
from pathlib import Path

import numpy as np

from glscene.camera import Camera
from glscene.geometry import cube_vertices, floor_indices, floor_vertices
from glscene.scene import (
    CAMERA_START,
    FAR_PLANE,
    FIELD_OF_VIEW,
    NEAR_PLANE,
    InputState,
    Key,
    SceneLayout,
    emerald_layout,
    farlight_layout,
    floor_model,
    light_cube_model,
    movement_directions,
)
from glscene.shader import ShaderError, ShaderProgram
from glscene.texture import Texture, TextureError
from glscene.transforms import normal_matrix, perspective, translate

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
WINDOW_TITLE = "get gl info"
DEFAULT_RESOURCE_ROOT = "../.."

# Shader programs by role: (vertex source, fragment source), relative to the root.
_PROGRAMS: dict[str, tuple[str, str]] = {
    "floor": ("shaders/vertFloor.vert", "shaders/fragmentshader.frag"),
    "light": ("shaders/vertLightWhite.vert", "shaders/fragLightWhite.frag"),
    "lighting": ("shaders/vertexshader.vert", "shaders/fragBuiLighting.frag"),
    "specular": ("shaders/vertexshader.vert", "shaders/fragSpecBuiLight.frag"),
}

# Layout name -> (layout for a given elapsed time, whether to go fullscreen).
_LAYOUTS: dict[str, tuple[Callable[[float], SceneLayout], bool]] = {
    "farlight": (lambda elapsed: farlight_layout(), True),
    "emerald": (emerald_layout, False),
}


def _key_from_name(name: str) -> Key | None:
    """The scene key for a keyboard symbol name such as ``"W"`` or ``"LCTRL"``."""
    return Key.__members__.get(name)


def _required_files(layout: SceneLayout, root) -> list[Path]:
    """Every file the scene needs under ``root``, without duplicates, in load order."""
    root = Path(root)
    names: Iterable[str] = (
        *(path for pair in _PROGRAMS.values() for path in pair),
        layout.floor_texture,
        layout.cube_texture,
    )
    return [root / name for name in dict.fromkeys(names)]


def _projection(width: int, height: int) -> np.ndarray:
    """Perspective projection for a framebuffer of the given size."""
    aspect = width / height if width > 0 and height > 0 else 1.0
    return perspective(math.radians(FIELD_OF_VIEW), aspect, NEAR_PLANE, FAR_PLANE)


def _lit_uniforms(layout: SceneLayout, view_position) -> dict[str, object]:
    """Material, light and eye uniforms for the lighting shader."""
    values: dict[str, object] = {}
    values.update(layout.material.uniforms())
    values.update(layout.light.uniforms())
    values["v3fViewPos"] = tuple(float(v) for v in np.asarray(view_position).reshape(3))
    return values


@dataclass(frozen=True)
class _Mesh:
    vao: int
    count: int
    indexed: bool

    def draw(self, gl) -> None:
        gl.glBindVertexArray(self.vao)
        if self.indexed:
            gl.glDrawElements(gl.GL_TRIANGLES, self.count, gl.GL_UNSIGNED_INT, None)
        else:
            gl.glDrawArrays(gl.GL_TRIANGLES, 0, self.count)
        gl.glBindVertexArray(0)


def _upload(gl, target, array: np.ndarray) -> int:
    buffer = gl.GLuint()
    gl.glGenBuffers(1, buffer)
    gl.glBindBuffer(target, buffer)
    gl.glBufferData(target, array.nbytes, array.ctypes, gl.GL_STATIC_DRAW)
    return buffer.value


def _build_mesh(gl, vertices, sizes, *, indices=None, vertex_buffer=None):
    """Create a vertex array; returns the mesh and the vertex buffer it reads."""
    data = np.ascontiguousarray(vertices, dtype=np.float32)
    vao = gl.GLuint()
    gl.glGenVertexArrays(1, vao)
    gl.glBindVertexArray(vao)
    if vertex_buffer is None:
        vertex_buffer = _upload(gl, gl.GL_ARRAY_BUFFER, data)
    else:
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vertex_buffer)
    if indices is not None:
        index_data = np.ascontiguousarray(indices, dtype=np.uint32)
        _upload(gl, gl.GL_ELEMENT_ARRAY_BUFFER, index_data)
        count = len(index_data)
    else:
        count = len(data)
    stride = data.shape[1] * data.itemsize
    for location, (size, offset) in enumerate(zip(sizes, accumulate(sizes, initial=0))):
        gl.glVertexAttribPointer(
            location,
            size,
            gl.GL_FLOAT,
            gl.GL_FALSE,
            stride,
            offset * data.itemsize,
        )
        gl.glEnableVertexAttribArray(location)
    gl.glBindVertexArray(0)
    return _Mesh(vao.value, count, indices is not None), vertex_buffer


class SceneWindow:
    """Owns the OpenGL window, the GPU resources and the per-frame logic."""

    def __init__(self, layout_name, resource_root) -> None:
        try:
            factory, fullscreen = _LAYOUTS[layout_name]
        except KeyError:
            choices = ", ".join(_LAYOUTS)
            raise ValueError(f"unknown layout {layout_name!r}; choose from {choices}") from None
        root = Path(resource_root)
        self.layout_name = layout_name
        self._layout_factory = factory
        self._elapsed = 0.0
        self.layout = factory(0.0)

        missing = [path for path in _required_files(self.layout, root) if not path.is_file()]
        if missing:
            listed = ", ".join(str(path) for path in missing)
            raise FileNotFoundError(f"missing resource files: {listed}")

        import pyglet
        from pyglet import gl
        from pyglet.window import key as keymod

        self._gl = gl
        self._keymod = keymod
        config = gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        size = {} if fullscreen else {"width": WINDOW_WIDTH, "height": WINDOW_HEIGHT}
        self.window = pyglet.window.Window(
            caption=WINDOW_TITLE,
            resizable=True,
            fullscreen=fullscreen,
            vsync=True,
            config=config,
            **size,
        )
        self.window.set_exclusive_mouse(True)
        gl.glEnable(gl.GL_DEPTH_TEST)

        self._programs = {
            role: ShaderProgram(root / vertex, root / fragment)
            for role, (vertex, fragment) in _PROGRAMS.items()
        }
        self._floor_texture = Texture(root / self.layout.floor_texture)
        self._cube_texture = Texture(root / self.layout.cube_texture)

        if self.layout.lit_floor:
            floor_sizes = (3, 3, 2)
        else:
            floor_sizes = (3, 2)
        self._floor_mesh, _ = _build_mesh(
            gl,
            floor_vertices(with_normals=self.layout.lit_floor),
            floor_sizes,
            indices=floor_indices(),
        )
        cube = cube_vertices()
        self._cube_mesh, cube_buffer = _build_mesh(gl, cube, (3, 3, 2))
        self._light_mesh, _ = _build_mesh(gl, cube, (3,), vertex_buffer=cube_buffer)

        self.input = InputState()
        self.camera = Camera(CAMERA_START)
        self._view = self.camera.update()

        self._keys = keymod.KeyStateHandler()
        self.window.push_handlers(self._keys)
        self.window.push_handlers(self)
        pyglet.clock.schedule(self.update)

    def _held_keys(self) -> set[Key]:
        return {key for key in Key if self._keys[getattr(self._keymod, key.name)]}

    def _set_transforms(self, program: ShaderProgram, model, projection) -> None:
        program.set_uniform("matrixModel", model)
        program.set_uniform("matrixView", self._view)
        program.set_uniform("matrixProjection", projection)

    def _apply_lighting(self, program: ShaderProgram, model) -> None:
        program.set_uniform("matrixNormal", normal_matrix(model))
        for name, value in _lit_uniforms(self.layout, self.camera.position).items():
            program.set_uniform(name, value)

    def _draw_floor(self, projection) -> None:
        model = floor_model()
        if self.layout.lit_floor:
            program = self._programs["specular"]
            program.use()
            self._set_transforms(program, model, projection)
            self._apply_lighting(program, np.identity(4))
            self._floor_texture.bind(1)
            program.set_uniform("texture0", 1)
        else:
            program = self._programs["floor"]
            program.use()
            self._set_transforms(program, model, projection)
            self._floor_texture.bind(0)
            program.set_uniform("wallTexture", 0)
        self._floor_mesh.draw(self._gl)

    def _draw_light(self, projection) -> None:
        program = self._programs["light"]
        program.use()
        self._set_transforms(program, light_cube_model(self.layout.light.position), projection)
        self._light_mesh.draw(self._gl)

    def _draw_cubes(self, projection) -> None:
        program = self._programs["specular"]
        for position in self.layout.cube_positions:
            model = translate(np.identity(4), position)
            program.use()
            self._set_transforms(program, model, projection)
            self._apply_lighting(program, model)
            self._cube_texture.bind(1)
            program.set_uniform("texture0", 1)
            self._cube_mesh.draw(self._gl)

    def on_draw(self):
        """Render one frame."""
        gl = self._gl
        width, height = self.window.get_framebuffer_size()
        gl.glViewport(0, 0, width, height)
        gl.glClearColor(0.0, 0.0, 0.0, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        projection = _projection(width, height)
        self._draw_floor(projection)
        self._draw_light(projection)
        self._draw_cubes(projection)
        return True

    def on_key_press(self, symbol, modifiers):
        """Escape quits; Up and Down change the camera speed."""
        key = _key_from_name(self._keymod.symbol_string(symbol))
        if key is not None:
            self.input.handle_key(key)
        return True

    def on_mouse_motion(self, x, y, dx, dy):
        """Record relative mouse motion; moving up tilts the view up."""
        self.input.handle_mouse(dx, -dy)
        return True

    def update(self, dt) -> None:
        """Advance time, move and turn the camera, and close on request."""
        self._elapsed += dt
        self.layout = self._layout_factory(self._elapsed)
        for direction in movement_directions(self._held_keys()):
            self.camera.sync_position(dt, direction)
        self.camera.sync_angle(self.input.pitch_offset, self.input.yaw_offset, 0.0)
        self.input.pitch_offset = 0.0
        self.input.yaw_offset = 0.0
        self.camera.speed = self.input.speed
        self._view = self.camera.update()
        if self.input.quit:
            import pyglet

            pyglet.clock.unschedule(self.update)
            self.window.close()


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(description="Render a lit scene with a fly camera.")
    parser.add_argument(
        "--layout",
        choices=sorted(_LAYOUTS),
        default="farlight",
        help="which scene to show (default: farlight)",
    )
    parser.add_argument(
        "--resources",
        dest="resource_root",
        type=Path,
        default=Path(DEFAULT_RESOURCE_ROOT),
        help="directory holding shaders/ and resources/",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the scene window and run until it is closed."""
    args = parse_args(argv)
    try:
        SceneWindow(args.layout, args.resource_root)
    except (FileNotFoundError, ShaderError, TextureError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    import pyglet

    pyglet.app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())