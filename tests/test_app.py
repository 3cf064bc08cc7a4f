from pathlib import Path

import numpy as np
import pytest

from glscene.app import (
    SceneWindow,
    _key_from_name,
    _lit_uniforms,
    _projection,
    _required_files,
    main,
    parse_args,
)
from glscene.scene import Key, emerald_layout, farlight_layout


def test_parse_args_defaults():
    args = parse_args([])
    assert args.layout == "farlight"
    assert args.resource_root == Path("../..")


def test_parse_args_explicit_values(tmp_path):
    args = parse_args(["--layout", "emerald", "--resources", str(tmp_path)])
    assert args.layout == "emerald"
    assert args.resource_root == tmp_path


def test_parse_args_rejects_unknown_layout():
    with pytest.raises(SystemExit):
        parse_args(["--layout", "nowhere"])


@pytest.mark.parametrize(
    "name, expected",
    [("W", Key.W), ("LCTRL", Key.LCTRL), ("SPACE", Key.SPACE), ("ESCAPE", Key.ESCAPE)],
)
def test_key_from_name_known(name, expected):
    assert _key_from_name(name) is expected


def test_key_from_name_unknown():
    assert _key_from_name("F1") is None


def test_required_files_include_shaders_and_textures(tmp_path):
    files = _required_files(farlight_layout(), tmp_path)
    assert tmp_path / "shaders/vertFloor.vert" in files
    assert tmp_path / "shaders/fragSpecBuiLight.frag" in files
    assert tmp_path / "resources/emerald.jpg" in files
    assert tmp_path / "resources/wall.jpg" not in files
    assert len(files) == len(set(files))


def test_required_files_emerald_needs_wall_texture(tmp_path):
    files = _required_files(emerald_layout(0.0), tmp_path)
    assert tmp_path / "resources/wall.jpg" in files
    assert tmp_path / "resources/emerald.jpg" in files
    assert all(path.is_relative_to(tmp_path) for path in files)


def test_projection_tracks_aspect_ratio():
    result = _projection(1920, 1080)
    assert result[1, 1] / result[0, 0] == pytest.approx(1920 / 1080)
    assert result[3, 2] == -1.0


def test_projection_with_zero_height_is_finite():
    result = _projection(640, 0)
    assert result.shape == (4, 4)
    assert np.all(np.isfinite(result))


def test_lit_uniforms_farlight_has_attenuation():
    values = _lit_uniforms(farlight_layout(), (1.0, 2.0, 3.0))
    assert values["v3fViewPos"] == (1.0, 2.0, 3.0)
    assert values["light.v3fPosition"] == (-3.0, 3.0, -3.0)
    assert values["light.flinear"] == 0.22
    assert values["material.fSpecularCoeff"] == pytest.approx(0.6 * 128.0)


def test_lit_uniforms_emerald_has_no_attenuation():
    values = _lit_uniforms(emerald_layout(0.0), np.zeros(3))
    assert "light.fconst" not in values
    assert values["v3fViewPos"] == (0.0, 0.0, 0.0)


def test_scene_window_rejects_unknown_layout(tmp_path):
    with pytest.raises(ValueError):
        SceneWindow("nowhere", tmp_path)


def test_scene_window_reports_missing_resources(tmp_path):
    with pytest.raises(FileNotFoundError) as info:
        SceneWindow("farlight", tmp_path)
    assert "vertFloor.vert" in str(info.value)


def test_main_fails_on_missing_resources(tmp_path, capsys):
    status = main(["--layout", "emerald", "--resources", str(tmp_path)])
    assert status == 1
    assert "wall.jpg" in capsys.readouterr().err