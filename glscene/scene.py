"""Scene description: materials, lights, object placement and input state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from glscene.transforms import rotate, scale, translate

CAMERA_START = (0.0, 0.0, 3.0)
FIELD_OF_VIEW = 80.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
SPEED_STEP = 0.1
LIGHT_CUBE_SCALE = 0.2
FLOOR_SCALE = 3.0
EMERALD_ORBIT_RADIUS = 1.0
EMERALD_ORBIT_HEIGHT = 1.75

WALL_TEXTURE = "resources/wall.jpg"
EMERALD_TEXTURE = "resources/emerald.jpg"

Vec3 = tuple[float, float, float]


class Key(Enum):
    """Keys the scene reacts to."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    SPACE = "space"
    LCTRL = "lctrl"
    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"


# Held keys and the camera-relative move each one requests, in polling order.
_MOVEMENT_KEYS: tuple[tuple[Key, Vec3], ...] = (
    (Key.W, (0.0, 0.0, -1.0)),
    (Key.S, (0.0, 0.0, 1.0)),
    (Key.A, (-1.0, 0.0, 0.0)),
    (Key.D, (1.0, 0.0, 0.0)),
    (Key.SPACE, (0.0, 1.0, 0.0)),
    (Key.LCTRL, (0.0, -1.0, 0.0)),
)


@dataclass(frozen=True)
class Material:
    """Phong surface parameters."""

    ambient: Vec3
    ambient_coeff: float
    diffuse: Vec3
    diffuse_coeff: float
    specular: Vec3
    shininess: float

    def uniforms(self) -> dict[str, object]:
        """Uniform values keyed by their names in the lighting shader."""
        return {
            "material.v3fAmbient": self.ambient,
            "material.fAmbientCoeff": self.ambient_coeff,
            "material.v3fDiffuse": self.diffuse,
            "material.fDiffuseCoeff": self.diffuse_coeff,
            "material.v3fSpecular": self.specular,
            "material.fSpecularCoeff": self.shininess,
        }


@dataclass(frozen=True)
class Light:
    """A point light; ``attenuation`` is (constant, linear, quadratic) or None."""

    position: Vec3
    ambient: Vec3 = (1.0, 1.0, 1.0)
    diffuse: Vec3 = (1.0, 1.0, 1.0)
    specular: Vec3 = (1.0, 1.0, 1.0)
    attenuation: tuple[float, float, float] | None = None

    def uniforms(self) -> dict[str, object]:
        """Uniform values keyed by their names in the lighting shader."""
        values: dict[str, object] = {
            "light.v3fAmbient": self.ambient,
            "light.v3fDiffuse": self.diffuse,
            "light.v3fSpecular": self.specular,
            "light.v3fPosition": self.position,
        }
        if self.attenuation is not None:
            constant, linear, quadratic = self.attenuation
            values["light.fconst"] = constant
            values["light.flinear"] = linear
            values["light.fquadratic"] = quadratic
        return values


@dataclass(frozen=True)
class SceneLayout:
    """What one frame of a scene draws and where.

    ``lit_floor`` selects whether the floor uses the lighting shader or the
    plain textured one; ``cube_positions`` are the lit cubes to draw.
    """

    name: str
    light: Light
    material: Material
    cube_positions: tuple[Vec3, ...]
    lit_floor: bool
    floor_texture: str
    cube_texture: str


@dataclass
class InputState:
    """Keyboard and mouse state carried between frames."""

    quit: bool = False
    speed: float = 1.0
    yaw_offset: float = 0.0
    pitch_offset: float = 0.0
    _unused: dict = field(default_factory=dict, repr=False, compare=False)

    def handle_key(self, key: Key) -> None:
        """React to a key press: Escape quits, Up/Down change the camera speed."""
        if key is Key.ESCAPE:
            self.quit = True
        elif key is Key.UP:
            self.speed += SPEED_STEP
        elif key is Key.DOWN:
            self.speed -= SPEED_STEP

    def handle_mouse(self, dx: float, dy: float) -> None:
        """Record relative mouse motion; moving down gives a negative pitch."""
        self.yaw_offset = float(dx)
        self.pitch_offset = float(-dy)


def emerald_material() -> Material:
    """The emerald material used for lit surfaces."""
    return Material(
        ambient=(0.0215, 0.1745, 0.0215),
        ambient_coeff=0.1,
        diffuse=(0.07568, 0.61424, 0.07568),
        diffuse_coeff=1.0,
        specular=(0.633, 0.727811, 0.633),
        shininess=0.6 * 128.0,
    )


def farlight_layout() -> SceneLayout:
    """A lit emerald floor under a distant, attenuated light."""
    return SceneLayout(
        name="farlight",
        light=Light(position=(-3.0, 3.0, -3.0), attenuation=(1.0, 0.22, 0.20)),
        material=emerald_material(),
        cube_positions=(),
        lit_floor=True,
        floor_texture=EMERALD_TEXTURE,
        cube_texture=EMERALD_TEXTURE,
    )


def emerald_layout(elapsed: float) -> SceneLayout:
    """An emerald cube with a light orbiting above it; ``elapsed`` is in seconds."""
    light_position = (
        EMERALD_ORBIT_RADIUS * math.sin(elapsed),
        EMERALD_ORBIT_HEIGHT,
        EMERALD_ORBIT_RADIUS * math.cos(elapsed),
    )
    return SceneLayout(
        name="emerald",
        light=Light(position=light_position),
        material=emerald_material(),
        cube_positions=((0.0, 0.75, 0.0),),
        lit_floor=False,
        floor_texture=WALL_TEXTURE,
        cube_texture=EMERALD_TEXTURE,
    )


def floor_model() -> np.ndarray:
    """Model matrix laying the floor quad flat in the y = 0 plane, scaled up."""
    model = scale(np.identity(4), (FLOOR_SCALE, FLOOR_SCALE, FLOOR_SCALE))
    return rotate(model, math.radians(-90.0), (1.0, 0.0, 0.0))


def light_cube_model(position) -> np.ndarray:
    """Model matrix for the small cube marking the light at ``position``."""
    model = translate(np.identity(4), position)
    return scale(model, (LIGHT_CUBE_SCALE,) * 3)


def movement_directions(pressed) -> list[Vec3]:
    """Camera moves requested by the held keys in ``pressed``, in polling order."""
    held = set(pressed)
    return [direction for key, direction in _MOVEMENT_KEYS if key in held]