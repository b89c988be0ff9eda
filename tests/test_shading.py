import math

import pytest

from terrainmetrics.heightfield import Box2, HeightField
from terrainmetrics.shading import light_direction, shade_color, shade_image


def _field(values=None, nx=3, ny=3):
    box = Box2(0.0, 0.0, 2.0, 2.0)
    if values is None:
        return HeightField.constant(box, nx, ny, 0.0)
    return HeightField(box, nx, ny, values)


def _image(color, nx=3, ny=3):
    return [[color] * ny for _ in range(nx)]


def test_light_direction_is_unit():
    for az, alt in [(0, 45), (135, 30), (270, 10), (315, 80)]:
        d = light_direction(az, alt)
        assert math.isclose(sum(x * x for x in d), 1.0)


def test_light_direction_zenith():
    d = light_direction(123.0, 90.0)
    assert d[2] == pytest.approx(1.0)
    assert d[0] == pytest.approx(0.0, abs=1e-12)
    assert d[1] == pytest.approx(0.0, abs=1e-12)


def test_light_direction_north_is_positive_y():
    d = light_direction(0.0, 0.0)
    assert d[1] == pytest.approx(1.0)
    assert d[0] == pytest.approx(0.0, abs=1e-12)


def test_unknown_type_returns_base():
    base = (0.3, 0.4, 0.5)
    assert shade_color(base, 0) == base
    assert shade_color(base, 7) == base


def test_type1_without_light_is_ambient_only():
    a = shade_color((0.1, 0.5, 0.9), 1, light=0.0)
    b = shade_color((0.9, 0.2, 0.0), 1, light=0.0)
    assert a == pytest.approx(b)
    assert a == pytest.approx((0.2, 0.2, 0.2))


def test_type1_brighter_with_more_light():
    base = (0.5, 0.5, 0.5)
    dim = shade_color(base, 1, light=0.3)
    bright = shade_color(base, 1, light=0.9)
    assert all(b > d for b, d in zip(bright, dim))


def test_type2_facing_away_ignores_base():
    a = shade_color((1.0, 0.0, 0.0), 2, normal=(0, 0, -1), light_dir=(0, 0, 1))
    b = shade_color((0.0, 1.0, 1.0), 2, normal=(0, 0, -1), light_dir=(0, 0, 1))
    assert a == pytest.approx(b)


def test_type2_facing_light_follows_base():
    a = shade_color((1.0, 0.0, 0.0), 2, normal=(0, 0, 1), light_dir=(0, 0, 1))
    b = shade_color((0.0, 0.0, 0.0), 2, normal=(0, 0, 1), light_dir=(0, 0, 1))
    assert a[0] > b[0]
    assert a[1] == pytest.approx(b[1])


def test_type3_lit_brighter_than_unlit():
    base = (0.5, 0.5, 0.5)
    lit = shade_color(base, 3, normal=(0, 0, 1), light_dir=(0, 0, 1))
    unlit = shade_color(base, 3, normal=(0, 0, 1), light_dir=(0, 0, -1))
    assert all(l > u for l, u in zip(lit, unlit))


def test_shade_image_type2_matches_shade_color():
    hf = _field()
    img = _image((0.4, 0.6, 0.8))
    out = shade_image(img, hf, 2, light_dir=(0.0, 0.0, 1.0))
    expected = shade_color((0.4, 0.6, 0.8), 2, normal=hf.grid_normal(1, 1),
                           light_dir=(0.0, 0.0, 1.0))
    assert out[1][1] == pytest.approx(expected)
    assert len(out) == 3 and all(len(c) == 3 for c in out)


def test_shade_image_full_shadow_scales_by_ambient():
    hf = _field()
    img = _image((0.5, 0.5, 0.5))
    no_shadow = shade_image(img, hf, 0)
    dark = shade_image(img, hf, 0, shadow_map=_field())
    assert dark[0][0] == pytest.approx(tuple(0.3 * c for c in no_shadow[0][0]))


def test_shade_image_type1_uses_light_map():
    hf = _field()
    light = HeightField(Box2(0.0, 0.0, 2.0, 2.0), 3, 3, [0.0] * 8 + [1.0])
    out = shade_image(_image((0.5, 0.5, 0.5)), hf, 1, light_map=light)
    assert out[2][2][0] > out[0][0][0]


def test_shade_image_clamps_colors():
    hf = _field()
    out = shade_image(_image((2.0, -1.0, 0.5)), hf, 0)
    for column in out:
        for c in column:
            assert all(0.0 <= x <= 1.0 for x in c)


def test_shade_image_size_mismatch():
    with pytest.raises(ValueError):
        shade_image(_image((0.5, 0.5, 0.5), nx=2), _field(), 0)


def test_shade_image_type1_requires_light_map():
    with pytest.raises(ValueError):
        shade_image(_image((0.5, 0.5, 0.5)), _field(), 1)