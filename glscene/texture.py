"""Loading images from disk into mipmapped OpenGL textures."""

from __future__ import annotations

from PIL import Image


class TextureError(RuntimeError):
    """An image could not be loaded as a texture."""


def load_rgba(path) -> tuple[int, int, bytes]:
    """Load an image and return ``(width, height, pixels)`` as 8-bit RGBA.

    Rows are in file order, top row first.
    """
    try:
        with Image.open(path) as image:
            rgba = image.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise TextureError(f"cannot load image {path}: {exc}") from exc
    return rgba.width, rgba.height, rgba.tobytes()


class Texture:
    """A 2D texture with repeat wrapping and trilinear filtering."""

    def __init__(self, path) -> None:
        width, height, pixels = load_rgba(path)

        import pyglet
        from pyglet import gl

        image = pyglet.image.ImageData(width, height, "RGBA", pixels, pitch=width * 4)
        self._texture = image.get_texture()
        self.width = width
        self.height = height
        self.path = str(path)

        gl.glBindTexture(gl.GL_TEXTURE_2D, self._texture.id)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(
            gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

    @property
    def texture_id(self) -> int:
        """The OpenGL name of the texture."""
        return self._texture.id

    def bind(self, unit: int = 0) -> None:
        """Bind the texture to texture unit ``unit``."""
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._texture.id)