import math

import pytest

from spiderfy import (
    LayoutMode,
    LayoutParameters,
    SPIRAL_ANGLE_NUDGE,
    compute_layout,
    select_mode,
    transition_delay,
)

DEFAULT_RADIUS = 90 * 3 / (2 * math.pi)


def test_zero_markers_produce_no_records():
    assert compute_layout(0) == ()


def test_negative_count_is_rejected():
    with pytest.raises(ValueError) as exc:
        compute_layout(-1)

    assert 'non-negative' in str(exc.value)


def test_single_marker_with_defaults():
    (record,) = compute_layout(1)

    assert record.mode is LayoutMode.CIRCLE
    assert record.index == 0
    assert record.angle == 0.0
    assert math.isclose(record.leg_length, DEFAULT_RADIUS)
    assert math.isclose(record.leg_length, 42.97, abs_tol=0.01)
    assert math.isclose(record.x, DEFAULT_RADIUS)
    assert record.y == 0.0
    assert record.transition_delay == 0.0
    assert record.should_render_leg is False
    assert record.stack_order is None
    assert record.animate is True
    assert record.animation_speed == 500


def test_single_marker_leg_can_be_forced():
    (record,) = compute_layout(1, LayoutParameters(force_legs_when_single=True))

    assert record.should_render_leg is True


@pytest.mark.parametrize('count', [1, 2, 5, 37, 120])
def test_one_record_per_marker_with_contiguous_indices(count):
    records = compute_layout(count)

    assert len(records) == count
    assert [r.index for r in records] == list(range(count))
    assert all(r.should_render_leg == (count > 1) for r in records)


@pytest.mark.parametrize('count', [2, 3, 8])
def test_circle_markers_share_radius_and_step(count):
    params = LayoutParameters(anchor_offset_x=7.5)
    records = compute_layout(count, params)
    radius = 90 * (count + 2) / (2 * math.pi)

    for record in records:
        assert math.isclose(record.leg_length + params.anchor_offset_x, radius, rel_tol=1e-12)
        assert record.stack_order is None
    for prev, cur in zip(records, records[1:]):
        assert math.isclose(cur.angle - prev.angle, 2 * math.pi / count, rel_tol=1e-9)


def test_spiral_angles_increase_and_legs_grow():
    records = compute_layout(60)

    assert all(r.mode is LayoutMode.SPIRAL for r in records)
    for prev, cur in zip(records, records[1:]):
        assert cur.angle > prev.angle
        assert cur.leg_length >= prev.leg_length


def test_spiral_first_steps_follow_accumulation():
    records = compute_layout(10)

    first_angle = 80 / 60
    first_leg = 60 + (2 * math.pi * 5) / first_angle
    assert math.isclose(records[0].angle, first_angle)
    assert math.isclose(records[0].leg_length, first_leg)

    second_angle = first_angle + 80 / first_leg + SPIRAL_ANGLE_NUDGE
    second_leg = first_leg + (2 * math.pi * 5) / second_angle
    assert math.isclose(records[1].angle, second_angle)
    assert math.isclose(records[1].leg_length, second_leg)
    assert math.isclose(records[1].x, second_leg * math.cos(second_angle))
    assert math.isclose(records[1].y, second_leg * math.sin(second_angle))


def test_nine_markers_switch_to_spiral_with_stack_order():
    records = compute_layout(9)

    assert all(r.mode is LayoutMode.SPIRAL for r in records)
    assert [r.stack_order for r in records] == [9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert min(records, key=lambda r: r.stack_order).index == 8


@pytest.mark.parametrize(
    'count, switchover, expected',
    [
        (9, 9, LayoutMode.SPIRAL),
        (8, 9, LayoutMode.CIRCLE),
        (1, 0, LayoutMode.SPIRAL),
        (0, 0, LayoutMode.SPIRAL),
        (10_000, math.inf, LayoutMode.CIRCLE),
    ],
)
def test_select_mode_boundaries(count, switchover, expected):
    assert select_mode(count, switchover) is expected


def test_switchover_extremes_drive_layout():
    always_spiral = compute_layout(2, LayoutParameters(circle_spiral_switchover=0))
    never_spiral = compute_layout(50, LayoutParameters(circle_spiral_switchover=math.inf))

    assert all(r.stack_order is not None for r in always_spiral)
    assert all(r.stack_order is None for r in never_spiral)


def test_anchor_offsets_are_applied_asymmetrically():
    params = LayoutParameters(anchor_offset_x=10.0, anchor_offset_y=5.0)
    (record,) = compute_layout(1, params)

    assert math.isclose(record.leg_length, DEFAULT_RADIUS - 10.0)
    assert math.isclose(record.x, DEFAULT_RADIUS + 10.0)
    assert math.isclose(record.y, 5.0)


def test_transition_delays_are_evenly_staggered():
    records = compute_layout(12, LayoutParameters(animation_speed=600))

    assert records[0].transition_delay == 0.0
    for prev, cur in zip(records, records[1:]):
        assert cur.transition_delay > prev.transition_delay
    assert records[-1].transition_delay < 0.6
    assert math.isclose(records[3].transition_delay, transition_delay(3, 12, 600))
    assert math.isclose(transition_delay(3, 12, 600), 0.15)


def test_layout_is_deterministic():
    params = LayoutParameters(spiral_length_factor=3.5, anchor_offset_x=2.0)

    assert compute_layout(25, params) == compute_layout(25, params)
    assert compute_layout(4, params) == compute_layout(4, params)


def test_large_counts_stay_finite():
    records = compute_layout(2000)

    assert all(math.isfinite(v) for r in records for v in (r.angle, r.leg_length, r.x, r.y))


def test_to_dict_uses_front_end_keys():
    circle = compute_layout(2)[1].to_dict()
    spiral = compute_layout(9)[0].to_dict()

    assert set(circle) == {
        'index',
        'angle',
        'legLength',
        'x',
        'y',
        'transitionDelay',
        'animate',
        'animationSpeed',
        'shouldRenderLeg',
    }
    assert circle['index'] == 1
    assert spiral['style'] == {'zIndex': 9}
