# -*- coding: utf-8 -*-
import numpy as np
import pytest

from gravlens.math.vec3 import Vec3
from gravlens.lensing import (
    PinholeCamera, DistortionMap, DistortionPrecomputer, SimulationParameters
)


def _full_map(width, height, rs, distance=150.0, camera=None):
    pre = DistortionPrecomputer(width, height, camera)
    dmap = pre.new_map()
    pre.compute_all(dmap, SimulationParameters(rs, distance))
    return dmap


def test_pinhole_directions():
    cam = PinholeCamera()
    dirs = cam.ray_directions(4, 4)
    assert dirs.shape == (4, 4, 3)
    assert np.allclose(np.linalg.norm(dirs, axis=-1), 1.0)
    # (row 1, col 2) sits exactly on the optical axis
    assert dirs[1, 2].tolist() == [0.0, 0.0, 1.0]
    # row 0 is the top of the screen
    assert dirs[0, 0, 1] > 0 > dirs[3, 0, 1]
    assert np.array_equal(cam.ray_directions(4, 4, 2, 4), dirs[2:4])


def test_entry_accessor():
    dmap = DistortionMap(3, 2)
    dmap.write_rows(1, np.array([[True, False, False]]),
                    np.array([[[0, 0, 0], [0, 0, 1], [1, 0, 0]]], dtype=float))
    assert dmap.entry(1, 0).hit is True
    assert dmap.entry(1, 1).hit is False
    assert dmap.entry(1, 1).escape_direction == Vec3(0, 0, 1)
    assert dmap.hit_count() == 1
    with pytest.raises(IndexError):
        dmap.entry(2, 0)


def test_compute_rows_touches_only_its_rows():
    pre = DistortionPrecomputer(6, 4)
    dmap = pre.new_map()
    dmap.directions.fill(7.0)
    pre.compute_rows(dmap, 1, 3, SimulationParameters(4.0, 150.0))
    dirs = dmap.directions.array
    assert np.all(dirs[0] == 7.0) and np.all(dirs[3] == 7.0)
    hits = dmap.hits.array[1:3]
    norms = np.linalg.norm(dirs[1:3], axis=-1)
    assert np.allclose(norms[~hits], 1.0)
    assert np.all(norms[hits] == 0.0)


def test_straight_line_limit():
    cam = PinholeCamera()
    dmap = _full_map(5, 3, rs=1e-3, camera=cam)
    assert dmap.hit_count() == 0
    initial = cam.ray_directions(5, 3)
    assert np.allclose(dmap.directions.array, initial, atol=1e-3)


def test_horizon_grows_with_field_strength():
    # narrow screen so the shadow spans several pixels of a 20x12 grid
    cam = PinholeCamera(screen_width=4.0)
    counts = [_full_map(20, 12, rs, camera=cam).hit_count() for rs in (2.0, 4.0, 6.0)]
    assert counts == sorted(counts)
    assert counts[-1] > counts[0] > 0


def test_hit_pixels_store_zero_direction():
    cam = PinholeCamera(screen_width=4.0)
    dmap = _full_map(20, 12, rs=4.0, camera=cam)
    hits = dmap.hits.array
    assert hits.any()
    assert np.all(dmap.directions.array[hits] == 0.0)
    assert np.allclose(np.linalg.norm(dmap.directions.array[~hits], axis=-1), 1.0)


def test_mirror_symmetry_4x4():
    dmap = _full_map(4, 4, rs=4.0, distance=150.0)
    # column 2 is the vertical centre, columns 1 and 3 mirror each other
    for row in range(4):
        left, right = dmap.entry(row, 1), dmap.entry(row, 3)
        assert left.hit == right.hit
        if not left.hit:
            lx, rx = left.escape_direction.x, right.escape_direction.x
            assert lx < 0.0 < rx
            assert lx == pytest.approx(-rx, abs=1e-12)
            assert left.escape_direction.y == pytest.approx(right.escape_direction.y, abs=1e-12)
    assert dmap.entry(1, 2).hit
