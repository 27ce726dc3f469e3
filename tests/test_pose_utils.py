import numpy as np
import pytest

from opentrack_dsu_bridge.utils.pose_utils import (
    DifferState,
    PoseDiffer,
    PoseSample,
    diff_pose,
)

from conftest import FakeClock


def test_zero_sample_is_sentinel():
    assert PoseSample().is_zero()
    assert not PoseSample(roll=-0.5).is_zero()


def test_first_sample_uses_neutral_rate():
    sample = PoseSample(x=1.0, y=2.0, z=3.0, yaw=10.0, pitch=-20.0, roll=5.0)
    state, delta = diff_pose(DifferState(), sample, now=100.0)

    assert delta.as_tuple() == sample.as_tuple()
    assert state.last_sample_time == 100.0
    assert state.total_packet_count == 1
    np.testing.assert_array_equal(state.last_position, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(state.last_orientation, [10.0, -20.0, 5.0])


def test_steady_state_scales_orientation_by_rate():
    first = PoseSample(x=1.0, y=1.0, z=1.0, yaw=10.0, pitch=10.0, roll=10.0)
    second = PoseSample(x=1.5, y=0.0, z=1.0, yaw=12.0, pitch=9.0, roll=10.0)

    state, _ = diff_pose(DifferState(), first, now=1.0)
    # One packet seen, 500 ms elapsed -> 2 packets per second
    state, delta = diff_pose(state, second, now=1.5)

    assert delta.x == pytest.approx(0.5)
    assert delta.y == pytest.approx(-1.0)
    assert delta.z == pytest.approx(0.0)
    assert delta.yaw == pytest.approx(2.0 * 2.0)
    assert delta.pitch == pytest.approx(-1.0 * 2.0)
    assert delta.roll == pytest.approx(0.0)
    assert state.total_packet_count == 2
    assert state.last_sample_time == 1.0


def test_rate_uses_cumulative_count_and_baseline_time():
    state = DifferState()
    state, _ = diff_pose(state, PoseSample(yaw=1.0), now=0.0)
    state, _ = diff_pose(state, PoseSample(yaw=2.0), now=0.01)
    state, _ = diff_pose(state, PoseSample(yaw=3.0), now=0.02)
    # A slow packet after a fast burst: 3 packets over 1000 ms -> 3/s
    state, delta = diff_pose(state, PoseSample(yaw=4.0), now=1.0)

    assert delta.yaw == pytest.approx(1.0 * 3 * 1000 / 1000.0)
    assert state.total_packet_count == 4
    assert state.last_sample_time == 0.0


def test_position_never_scaled():
    state, _ = diff_pose(DifferState(), PoseSample(x=1.0, yaw=1.0), now=0.0)
    state, delta = diff_pose(state, PoseSample(x=4.0, yaw=1.0), now=0.001)
    assert delta.x == pytest.approx(3.0)


def test_sentinel_resets_state():
    state = DifferState()
    for i, now in enumerate([0.0, 0.1, 0.2], start=1):
        state, _ = diff_pose(state, PoseSample(x=i, yaw=i * 2.0), now=now)

    state, delta = diff_pose(state, PoseSample(), now=0.3)

    assert delta.as_tuple() == (0.0,) * 6
    assert state.last_sample_time is None
    assert state.total_packet_count == 0
    np.testing.assert_array_equal(state.last_position, np.zeros(3))
    np.testing.assert_array_equal(state.last_orientation, np.zeros(3))


def test_first_sample_after_reset_is_unscaled():
    state, _ = diff_pose(DifferState(), PoseSample(x=5.0, yaw=50.0), now=0.0)
    state, _ = diff_pose(state, PoseSample(x=6.0, yaw=60.0), now=0.004)
    state, _ = diff_pose(state, PoseSample(), now=0.008)

    state, delta = diff_pose(state, PoseSample(x=2.0, pitch=-7.0), now=5.0)
    assert delta.as_tuple() == (2.0, 0.0, 0.0, 0.0, -7.0, 0.0)
    assert state.last_sample_time == 5.0


def test_clock_not_advancing_keeps_output_finite():
    state, _ = diff_pose(DifferState(), PoseSample(yaw=1.0), now=3.0)
    state, delta = diff_pose(state, PoseSample(yaw=2.5), now=3.0)
    assert delta.yaw == pytest.approx(1.5)


def test_differ_uses_clock():
    differ = PoseDiffer(clock=FakeClock(10.0, 10.25))
    differ.process(PoseSample(roll=1.0))
    delta = differ.process(PoseSample(roll=2.0))
    # 1 packet over 250 ms -> 4 per second
    assert delta.roll == pytest.approx(4.0)


def test_reset_baseline_keeps_rate_estimate():
    differ = PoseDiffer(clock=FakeClock(0.0, 0.5, 1.0))
    differ.process(PoseSample(x=3.0, yaw=30.0))
    differ.process(PoseSample(x=4.0, yaw=40.0))

    differ.reset_baseline()
    assert differ.state.total_packet_count == 2
    assert differ.state.last_sample_time == 0.0

    delta = differ.process(PoseSample(x=1.0, yaw=1.0))
    # Deltas are measured from zero, rate is 2 packets per 1000 ms
    assert delta.x == pytest.approx(1.0)
    assert delta.yaw == pytest.approx(2.0)


def test_reset_drops_history():
    differ = PoseDiffer(clock=FakeClock(0.0))
    differ.process(PoseSample(z=1.0))
    differ.reset()
    assert differ.state.last_sample_time is None
    assert differ.state.total_packet_count == 0
