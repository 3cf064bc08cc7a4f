import math

import numpy as np
import pytest

from glscene.geometry import floor_vertices
from glscene.scene import (
    EMERALD_TEXTURE,
    WALL_TEXTURE,
    InputState,
    Key,
    Light,
    emerald_layout,
    emerald_material,
    farlight_layout,
    floor_model,
    light_cube_model,
    movement_directions,
)


def test_emerald_material_values():
    material = emerald_material()
    assert material.ambient == (0.0215, 0.1745, 0.0215)
    assert material.ambient_coeff == 0.1
    assert material.diffuse == (0.07568, 0.61424, 0.07568)
    assert material.diffuse_coeff == 1.0
    assert material.specular == (0.633, 0.727811, 0.633)
    assert material.shininess == pytest.approx(0.6 * 128.0)


def test_material_uniform_names():
    uniforms = emerald_material().uniforms()
    assert uniforms["material.v3fDiffuse"] == (0.07568, 0.61424, 0.07568)
    assert set(uniforms) == {
        "material.v3fAmbient",
        "material.fAmbientCoeff",
        "material.v3fDiffuse",
        "material.fDiffuseCoeff",
        "material.v3fSpecular",
        "material.fSpecularCoeff",
    }


def test_farlight_layout():
    layout = farlight_layout()
    assert layout.light.position == (-3.0, 3.0, -3.0)
    assert layout.light.attenuation == (1.0, 0.22, 0.20)
    assert layout.cube_positions == ()
    assert layout.lit_floor is True
    assert layout.floor_texture == EMERALD_TEXTURE


def test_light_uniforms_include_attenuation_only_when_set():
    with_attenuation = farlight_layout().light.uniforms()
    assert with_attenuation["light.flinear"] == 0.22
    assert with_attenuation["light.fquadratic"] == 0.20
    plain = Light(position=(1.0, 2.0, 3.0)).uniforms()
    assert "light.fconst" not in plain
    assert plain["light.v3fPosition"] == (1.0, 2.0, 3.0)


def test_emerald_layout_at_start():
    layout = emerald_layout(0.0)
    assert layout.light.position == pytest.approx((0.0, 1.75, 1.0))
    assert layout.cube_positions == ((0.0, 0.75, 0.0),)
    assert layout.lit_floor is False
    assert layout.floor_texture == WALL_TEXTURE


@pytest.mark.parametrize("elapsed", [0.3, 1.7, 4.2, 10.0])
def test_emerald_light_stays_on_orbit(elapsed):
    x, y, z = emerald_layout(elapsed).light.position
    assert math.hypot(x, z) == pytest.approx(1.0)
    assert y == 1.75


def test_floor_model_lays_quad_flat():
    model = floor_model()
    for row in floor_vertices(with_normals=True):
        point = model @ np.array([*row[:3], 1.0])
        assert point[1] == pytest.approx(0.0, abs=1e-9)
        assert abs(point[0]) == pytest.approx(3 * abs(row[0]), rel=1e-6)
    normal = model[:3, :3] @ np.array([0.0, 0.0, 1.0])
    assert normal / np.linalg.norm(normal) == pytest.approx([0.0, 1.0, 0.0], abs=1e-9)


def test_light_cube_model():
    model = light_cube_model((-3.0, 3.0, -3.0))
    assert model[:3, 3] == pytest.approx([-3.0, 3.0, -3.0])
    assert model[:3, :3] == pytest.approx(np.identity(3) * 0.2)
    assert model[3] == pytest.approx([0.0, 0.0, 0.0, 1.0])


def test_movement_directions_order_and_content():
    assert movement_directions({Key.D, Key.W}) == [(0.0, 0.0, -1.0), (1.0, 0.0, 0.0)]
    assert movement_directions([Key.LCTRL]) == [(0.0, -1.0, 0.0)]
    assert movement_directions(set()) == []
    assert movement_directions({Key.ESCAPE, Key.UP}) == []


def test_handle_key_escape_quits():
    state = InputState()
    state.handle_key(Key.ESCAPE)
    assert state.quit is True


def test_handle_key_changes_speed():
    state = InputState()
    state.handle_key(Key.UP)
    state.handle_key(Key.UP)
    assert state.speed == pytest.approx(1.2)
    state.handle_key(Key.DOWN)
    assert state.speed == pytest.approx(1.1)
    state.handle_key(Key.W)
    assert state.speed == pytest.approx(1.1)
    assert state.quit is False


def test_handle_mouse_inverts_vertical_and_persists():
    state = InputState()
    state.handle_mouse(5, 7)
    assert (state.yaw_offset, state.pitch_offset) == (5.0, -7.0)
    state.handle_key(Key.UP)
    assert (state.yaw_offset, state.pitch_offset) == (5.0, -7.0)