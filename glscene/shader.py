"""Compiling and linking GLSL programs from files on disk."""

from __future__ import annotations

from pathlib import Path

import numpy as np


class ShaderError(RuntimeError):
    """A shader source could not be read, compiled or linked."""


def read_shader_source(path) -> str:
    """Return the text of the shader source file at ``path``."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ShaderError(f"cannot read shader source {path}: {exc}") from exc


def _uniform_value(value):
    array = np.asarray(value)
    if array.ndim == 2:
        # OpenGL expects matrices column by column.
        return tuple(float(x) for x in array.flatten(order="F"))
    if array.ndim == 1:
        return tuple(array.tolist())
    return value


class ShaderProgram:
    """A linked vertex + fragment shader program."""

    def __init__(self, vertex_path, fragment_path) -> None:
        vertex_source = read_shader_source(vertex_path)
        fragment_source = read_shader_source(fragment_path)

        from pyglet.graphics import shader as pyglet_shader

        try:
            vertex = pyglet_shader.Shader(vertex_source, "vertex")
        except pyglet_shader.ShaderException as exc:
            raise ShaderError(f"shader compilation failed ({vertex_path}):\n{exc}") from exc
        try:
            fragment = pyglet_shader.Shader(fragment_source, "fragment")
        except pyglet_shader.ShaderException as exc:
            raise ShaderError(f"shader compilation failed ({fragment_path}):\n{exc}") from exc
        try:
            self._program = pyglet_shader.ShaderProgram(vertex, fragment)
        except pyglet_shader.ShaderException as exc:
            raise ShaderError(f"shader program linking failed:\n{exc}") from exc
        self._exception_type = pyglet_shader.ShaderException
        self.vertex_path = str(vertex_path)
        self.fragment_path = str(fragment_path)

    @property
    def program_id(self) -> int:
        """The OpenGL name of the linked program."""
        return self._program.id

    def use(self) -> None:
        """Make this program current."""
        self._program.use()

    def set_uniform(self, name: str, value) -> None:
        """Set uniform ``name``; names the program does not use are ignored."""
        try:
            self._program[name] = _uniform_value(value)
        except (KeyError, self._exception_type):
            pass