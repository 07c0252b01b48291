# -*- coding: utf-8 -*-
import numpy as np
import pytest

from gravlens.math.vec3 import Vec3
from gravlens.renderer.background import (
    BackgroundImage, ColorModel, shade_directions, hash13, SPACE_COLOR
)


def _gradient_image(w, h):
    """Красный = x, зелёный = y; по цвету видно, какой пиксель взят."""
    img = np.zeros((h, w, 4), dtype=np.uint8)
    img[..., 0] = np.arange(w)[np.newaxis, :]
    img[..., 1] = np.arange(h)[:, np.newaxis]
    img[..., 3] = 255
    return BackgroundImage(w, h, img.tobytes())


def _random_dirs(n=200, seed=3):
    rng = np.random.default_rng(seed)
    d = rng.normal(size=(n, 3))
    return d / np.linalg.norm(d, axis=-1, keepdims=True)


def test_hash_in_unit_interval():
    cells = np.floor(_random_dirs(1000) * 100.0)
    h = hash13(cells[:, 0], cells[:, 1], cells[:, 2])
    assert np.all(h >= 0.0) and np.all(h < 1.0)


def test_color_model_is_pure():
    dirs = _random_dirs()
    bg = _gradient_image(11, 21)
    assert np.array_equal(shade_directions(dirs), shade_directions(dirs.copy()))
    assert np.array_equal(shade_directions(dirs, bg), shade_directions(dirs, bg))
    model = ColorModel()
    first = model.color(Vec3(0.2, 0.1, 0.97).normalized())
    assert model.color(Vec3(0.2, 0.1, 0.97).normalized()) == first


def test_starfield_has_base_and_band():
    dirs = _random_dirs()
    rgb = shade_directions(dirs)
    assert np.all(rgb >= SPACE_COLOR - 1e-12)
    # on the galactic plane the band adds at least half of its tint
    equator = shade_directions(np.array([0.0, 0.0, 1.0]))
    assert equator[2] >= 0.05 + 0.1 - 1e-12


def test_starfield_shape_preserved():
    dirs = _random_dirs(12).reshape(3, 4, 3)
    assert shade_directions(dirs).shape == (3, 4, 3)


def test_image_projection_picks_nearest_pixel():
    bg = _gradient_image(11, 21)
    aspect = 21 / 11
    rgb = shade_directions(np.array([1.0, -1.0, 1.0]), bg)
    u = 0.5 + 1.0 * 0.15 * aspect
    v = 0.5 + 1.0 * 0.15
    tx, ty = int(u * 10), int(v * 20)
    assert rgb.tolist() == pytest.approx([tx / 255.0, ty / 255.0, 0.0])


def test_image_projection_black_behind_and_outside():
    bg = _gradient_image(11, 21)
    behind = shade_directions(np.array([[0.0, 0.0, -1.0], [0.3, 0.2, 0.0]]), bg)
    assert np.all(behind == 0.0)
    outside = shade_directions(np.array([0.0, 0.99, 0.1]), bg)
    assert np.all(outside == 0.0)


def test_background_validation():
    with pytest.raises(ValueError):
        BackgroundImage(2, 2, bytes(15))
    with pytest.raises(ValueError):
        BackgroundImage(0, 2, b"")
    bg = BackgroundImage(1, 2, bytes(range(8)))
    assert bg.pixels.shape == (2, 1, 4)
    assert bg.pixels[1, 0].tolist() == [4, 5, 6, 7]
