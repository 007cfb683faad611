import math

import numpy as np
import pytest

from wordsphere.config import AUTO_ROTATE_SPEED, SPHERE_RADIUS, TWO_PI
from wordsphere.controller.rotation import RotationController, wrap_angle

LOW = AUTO_ROTATE_SPEED * 0.35
HIGH = AUTO_ROTATE_SPEED * 1.6
CENTER = (400.0, 300.0)


def test_initial_schedule(rotation):
    s = rotation.state
    assert 2500.0 <= s.next_shuffle_time < 6500.0
    for v in (s.auto_velocity.x, s.auto_velocity.y):
        assert LOW <= abs(v) <= HIGH


def test_resampled_velocity_stays_within_bounds_with_both_signs():
    controller = RotationController(rng=np.random.default_rng(7), now=0.0)
    seen = []
    for i in range(200):
        controller.shuffle(now=float(i))
        seen += [controller.state.auto_velocity.x, controller.state.auto_velocity.y]
    assert all(LOW <= abs(v) <= HIGH for v in seen)
    assert any(v > 0 for v in seen)
    assert any(v < 0 for v in seen)


def test_later_schedules_use_longer_base_interval(rotation):
    rotation.shuffle(now=1000.0)
    assert 5000.0 <= rotation.state.next_shuffle_time < 9000.0


def test_step_resamples_only_when_due(rotation):
    s = rotation.state
    velocity = (s.auto_velocity.x, s.auto_velocity.y)
    due = s.next_shuffle_time

    rotation.step(now=due - 1.0)
    assert (s.auto_velocity.x, s.auto_velocity.y) == velocity
    assert s.next_shuffle_time == due

    rotation.step(now=due)
    assert s.next_shuffle_time >= due + 4000.0


def test_hover_test_boundaries(rotation):
    hover_radius = SPHERE_RADIUS * 1.2
    assert rotation.is_point_inside_sphere(*CENTER, CENTER)
    assert rotation.is_point_inside_sphere(CENTER[0] + hover_radius, CENTER[1], CENTER)
    assert not rotation.is_point_inside_sphere(CENTER[0] + hover_radius + 1.0, CENTER[1], CENTER)
    assert not rotation.is_point_inside_sphere(CENTER[0] + 300.0, CENTER[1] + 300.0, CENTER)


def test_hover_blend_converges_monotonically(rotation):
    rotation.update_hover(*CENTER, CENTER)
    previous = rotation.state.hover_blend
    for _ in range(200):
        rotation.step(now=0.0)
        blend = rotation.state.hover_blend
        assert 0.0 <= blend <= previous
        previous = blend
    assert previous < 1e-3

    rotation.clear_hover()
    for _ in range(200):
        rotation.step(now=0.0)
        blend = rotation.state.hover_blend
        assert previous <= blend <= 1.0
        previous = blend
    assert previous > 1.0 - 1e-3


def test_manual_rotation_eases_toward_target(rotation):
    rotation.set_manual_target(1.0, -1.0)
    rotation.step(now=0.0)
    assert rotation.state.manual_current.x == pytest.approx(0.05)
    assert rotation.state.manual_current.y == pytest.approx(-0.05)


def test_full_pause_freezes_manual_and_auto_rotation(rotation):
    s = rotation.state
    s.hover_active = True
    s.hover_blend = 0.0
    s.auto_angle.x = 0.5
    rotation.set_manual_target(1.0, 1.0)

    rotation.step(now=0.0)

    assert s.manual_current.x == 0.0
    assert s.auto_angle.x == 0.5


def test_auto_angle_accumulates_velocity_times_blend(rotation):
    s = rotation.state
    s.auto_velocity.x = 0.01
    s.auto_velocity.y = -0.02
    rotation.step(now=0.0)
    assert s.auto_angle.x == pytest.approx(0.01)
    assert s.auto_angle.y == pytest.approx(-0.02)
    assert rotation.total_rotation == pytest.approx((0.01, -0.02))


def test_auto_angle_never_leaves_open_interval(rotation):
    s = rotation.state
    s.auto_velocity.x = 0.9
    s.auto_velocity.y = -1.3
    for _ in range(5000):
        rotation.step(now=0.0)
        assert -TWO_PI < s.auto_angle.x < TWO_PI
        assert -TWO_PI < s.auto_angle.y < TWO_PI


@pytest.mark.parametrize("angle, expected", [
    (1.0, 1.0),
    (-1.0, -1.0),
    (7.0, 7.0 - TWO_PI),
    (-7.0, -7.0 + TWO_PI),
    (TWO_PI, 0.0),
    (5 * math.pi, math.pi),
])
def test_wrap_angle(angle, expected):
    assert wrap_angle(angle) == pytest.approx(expected)


def test_total_rotation_sums_manual_and_auto(rotation):
    s = rotation.state
    s.manual_current.x, s.manual_current.y = 0.1, 0.2
    s.auto_angle.x, s.auto_angle.y = 1.0, -1.0
    assert rotation.total_rotation == pytest.approx((1.1, -0.8))


def test_blend_is_eased_before_it_scales_manual_and_auto(rotation):
    s = rotation.state
    s.hover_active = True
    s.manual_target.x = 1.0
    s.auto_velocity.x = 0.01

    rotation.step(now=0.0)

    assert s.hover_blend == pytest.approx(0.92)
    assert s.manual_current.x == pytest.approx(0.05 * 0.92)
    assert s.auto_angle.x == pytest.approx(0.01 * 0.92)
