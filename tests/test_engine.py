import math

import numpy as np
import pytest
from scipy import stats

from cspace_sampling.randomization import Engine

N = 100_000


@pytest.fixture
def rng():
    return Engine(seed=2024)


def test_uniform01_range(rng):
    draws = np.array([rng.uniform01() for _ in range(10_000)])
    assert np.all(draws >= 0) and np.all(draws < 1)


def test_uniform_real_bounds_and_mean(rng):
    draws = np.array([rng.uniform_real(2, 5) for _ in range(N)])
    assert np.all(draws >= 2)
    assert np.all(draws < 5)
    assert abs(draws.mean() - 3.5) < 0.02


def test_uniform_real_empty_interval(rng):
    assert rng.uniform_real(1.5, 1.5) == 1.5


def test_uniform_real_inverted_bounds(rng):
    with pytest.raises(AssertionError):
        rng.uniform_real(5, 2)


def test_uniform_int_inclusive(rng):
    draws = np.array([rng.uniform_int(-2, 3) for _ in range(20_000)])
    assert draws.min() == -2
    assert draws.max() == 3
    counts = np.bincount(draws + 2)
    assert len(counts) == 6
    assert np.all(np.abs(counts / len(draws) - 1 / 6) < 0.02)


def test_uniform_int_clamps_rounding_onto_upper_bound(rng, monkeypatch):
    # 10 + (1 - 2**-53) rounds to exactly 11.0
    monkeypatch.setattr(rng, "uniform01", lambda: np.nextafter(1.0, 0.0))
    assert rng.uniform_real(10, 11) == 11.0
    assert rng.uniform_int(10, 10) == 10


@pytest.mark.parametrize("lower,upper", [(0, 0), (-5, 5), (10, 10), (0, 2**20)])
def test_uniform_int_close_to_one(rng, monkeypatch, lower, upper):
    monkeypatch.setattr(rng, "uniform01", lambda: np.nextafter(1.0, 0.0))
    r = rng.uniform_int(lower, upper)
    assert lower <= r <= upper


def test_uniform_bool_includes_half(rng, monkeypatch):
    monkeypatch.setattr(rng, "uniform01", lambda: 0.5)
    assert rng.uniform_bool() is True
    monkeypatch.setattr(rng, "uniform01", lambda: np.nextafter(0.5, 1.0))
    assert rng.uniform_bool() is False


def test_uniform_bool_fair(rng):
    draws = [rng.uniform_bool() for _ in range(20_000)]
    assert abs(np.mean(draws) - 0.5) < 0.02


def test_gaussian_moments(rng):
    draws = np.array([rng.gaussian01() for _ in range(N)])
    assert abs(draws.mean()) < 0.02
    assert abs(draws.std() - 1) < 0.02

    draws = np.array([rng.gaussian(3.0, 0.5) for _ in range(N)])
    assert abs(draws.mean() - 3.0) < 0.01
    assert abs(draws.std() - 0.5) < 0.01


def test_gaussian_is_scaled_standard_normal():
    a, b = Engine(seed=7), Engine(seed=7)
    for _ in range(100):
        assert a.gaussian(-1.0, 2.5) == pytest.approx(b.gaussian01() * 2.5 - 1.0)


def test_half_normal_real_support_and_bias(rng):
    draws = np.array([rng.half_normal_real(1.0, 3.0) for _ in range(N)])
    assert np.all(draws >= 1.0)
    assert np.all(draws <= 3.0)
    # density grows towards r_max
    hist, _ = np.histogram(draws, bins=10, range=(1.0, 3.0))
    assert np.all(np.diff(hist) > 0)
    # folded normal with stddev (r_max - r_min) / 3 around r_max
    expected_mean = 3.0 - (2.0 / 3.0) * math.sqrt(2 / math.pi)
    assert abs(draws.mean() - expected_mean) < 0.01


def test_half_normal_real_focus_concentrates(rng):
    means = [
        np.mean([rng.half_normal_real(0.0, 1.0, focus) for _ in range(20_000)])
        for focus in [1.0, 3.0, 10.0]
    ]
    assert means[0] < means[1] < means[2] < 1.0


def test_half_normal_real_degenerate_interval(rng):
    assert rng.half_normal_real(2.0, 2.0) == 2.0


def test_half_normal_real_folds_below_r_min(rng, monkeypatch):
    # a draw 3.5 standard deviations beyond r_max folds below r_min and is reflected
    monkeypatch.setattr(rng, "gaussian01", lambda: -3.5)
    r = rng.half_normal_real(0.0, 1.0)
    assert r == pytest.approx(1 / 6)
    monkeypatch.setattr(rng, "gaussian01", lambda: 10.0)
    assert 0.0 <= rng.half_normal_real(0.0, 1.0) <= 1.0


def test_half_normal_int(rng):
    draws = np.array([rng.half_normal_int(0, 5) for _ in range(20_000)])
    assert draws.min() >= 0
    assert draws.max() <= 5
    counts = np.bincount(draws, minlength=6)
    assert counts.argmax() == 5
    assert np.all(np.diff(counts) >= 0)


def test_quaternion_unit_norm(rng):
    for _ in range(1000):
        q = rng.quaternion()
        assert q.shape == (4,)
        assert abs(np.linalg.norm(q) - 1) < 1e-12


def test_quaternion_out_argument(rng):
    out = np.zeros(7)
    q = rng.quaternion(out=out[3:])
    assert np.shares_memory(q, out)
    assert np.all(out[:3] == 0)
    assert abs(np.linalg.norm(out[3:]) - 1) < 1e-12


def test_quaternion_rotation_angle_uniformity(rng):
    # for rotations uniform over SO(3) the angle theta has cdf (theta - sin(theta)) / pi
    w = np.array([rng.quaternion()[3] for _ in range(N)])
    theta = 2 * np.arccos(np.clip(np.abs(w), 0, 1))
    u = (theta - np.sin(theta)) / np.pi
    counts, _ = np.histogram(u, bins=20, range=(0, 1))
    assert stats.chisquare(counts).pvalue > 1e-3


def test_quaternion_components_not_clustered(rng):
    qs = np.array([rng.quaternion() for _ in range(N)])
    # uniform rotations have E[q_i^2] = 1/4 for every component and the sign of each
    # component is a fair coin
    np.testing.assert_allclose((qs**2).mean(0), 0.25, atol=0.005)
    np.testing.assert_allclose((qs > 0).mean(0), 0.5, atol=0.01)


def test_euler_rpy(rng):
    angles = np.array([rng.euler_rpy() for _ in range(N)])
    assert angles.shape == (N, 3)
    assert np.all(angles >= -np.pi)
    assert np.all(angles < np.pi)
    np.testing.assert_allclose(angles.mean(0), 0, atol=0.03)
    np.testing.assert_allclose(angles.std(0), 2 * np.pi / math.sqrt(12), atol=0.03)


def test_disk_annulus_radius(rng):
    for _ in range(10_000):
        x, y = rng.disk(0.5, 2.0)
        assert 0.5 - 1e-12 <= math.hypot(x, y) <= 2.0 + 1e-12


def test_disk_uniform_by_area(rng):
    pts = np.array([rng.disk(0.0, 1.0) for _ in range(N)])
    r2 = (pts**2).sum(1)
    # equal area rings have equal width in r^2
    counts, _ = np.histogram(r2, bins=10, range=(0, 1))
    assert stats.chisquare(counts).pvalue > 1e-3
    angle = np.arctan2(pts[:, 1], pts[:, 0])
    counts, _ = np.histogram(angle, bins=12, range=(-np.pi, np.pi))
    assert stats.chisquare(counts).pvalue > 1e-3
    # uniform in radius would put half the points inside r = 0.5
    assert abs(np.mean(r2 < 0.25) - 0.25) < 0.01


def test_disk_bad_radii(rng):
    with pytest.raises(AssertionError):
        rng.disk(2.0, 1.0)
    with pytest.raises(AssertionError):
        rng.disk(-1.0, 1.0)


def test_ball_shell_radius(rng):
    for _ in range(10_000):
        x, y, z = rng.ball(1.0, 1.5)
        assert 1.0 - 1e-12 <= math.sqrt(x * x + y * y + z * z) <= 1.5 + 1e-12


def test_ball_uniform_by_volume(rng):
    pts = np.array([rng.ball(0.0, 1.0) for _ in range(N)])
    r = np.linalg.norm(pts, axis=1)
    counts, _ = np.histogram(r**3, bins=10, range=(0, 1))
    assert stats.chisquare(counts).pvalue > 1e-3
    # the radius histogram grows quadratically rather than staying flat
    hist, edges = np.histogram(r, bins=5, range=(0, 1))
    expected = N * (edges[1:] ** 3 - edges[:-1] ** 3)
    np.testing.assert_allclose(hist, expected, rtol=0.15)
    assert abs(np.mean(r < 0.5) - 0.125) < 0.01
    # directions are uniform over the sphere
    np.testing.assert_allclose(pts.mean(0), 0, atol=0.01)


def test_ball_bad_radii(rng):
    with pytest.raises(AssertionError):
        rng.ball(1.0, 0.5)
