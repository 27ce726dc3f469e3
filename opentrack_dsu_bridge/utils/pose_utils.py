"""
Pose utility functions for converting OpenTrack samples into motion deltas.

Absolute OpenTrack poses are turned into deltas for a gyroscope/accelerometer
emulation channel:
    - position deltas are passed through unscaled (accelerometer-style)
    - orientation deltas are scaled by the estimated packet rate so that a
      "degrees per packet" change becomes an approximate "degrees per second"

All orientations are (yaw, pitch, roll) in degrees.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class PoseSample:
    """
    Single 6-DOF sample: position (x, y, z) and orientation (yaw, pitch, roll).

    The same type carries both absolute samples (as received) and delta
    samples (as forwarded).
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = 0.0      # degrees
    pitch: float = 0.0    # degrees
    roll: float = 0.0     # degrees

    @classmethod
    def from_arrays(cls, position, orientation):
        """Build a sample from (x, y, z) and (yaw, pitch, roll) sequences."""
        return cls(
            x=float(position[0]), y=float(position[1]), z=float(position[2]),
            yaw=float(orientation[0]), pitch=float(orientation[1]), roll=float(orientation[2]),
        )

    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @property
    def orientation(self) -> np.ndarray:
        return np.array([self.yaw, self.pitch, self.roll], dtype=np.float64)

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.x, self.y, self.z, self.yaw, self.pitch, self.roll)

    def is_zero(self) -> bool:
        """True for the all-zero reset sentinel."""
        return all(v == 0.0 for v in self.as_tuple())


def _zeros():
    return np.zeros(3, dtype=np.float64)


@dataclass(frozen=True, eq=False)
class DifferState:
    """
    Baseline carried between successive absolute samples.

    last_sample_time is the monotonic time (seconds) of the first sample after
    the last reset, None while no baseline exists. It is not advanced in
    steady state: the rate estimate is cumulative count over time since then.
    """
    last_position: np.ndarray = field(default_factory=_zeros)
    last_orientation: np.ndarray = field(default_factory=_zeros)
    last_sample_time: Optional[float] = None
    total_packet_count: int = 0

    def with_zero_baseline(self):
        """Copy with position/orientation baselines cleared, timing kept."""
        return DifferState(
            last_sample_time=self.last_sample_time,
            total_packet_count=self.total_packet_count,
        )


def diff_pose(state: DifferState, sample: PoseSample, now: float):
    """
    Convert an absolute pose into a delta pose.

    Args:
        state: Current differ state
        sample: Absolute pose as received
        now: Current monotonic time in seconds

    Returns:
        Tuple of (new_state, delta_sample)
    """
    # Zeros mean the user is perfectly still or tracking was stopped
    if sample.is_zero():
        return DifferState(), PoseSample()

    position = sample.position
    orientation = sample.orientation

    position_diff = position - state.last_position
    orientation_diff = orientation - state.last_orientation

    if state.last_sample_time is None:
        value_per_second = 1.0
        last_sample_time = now
    else:
        elapsed_ms = (now - state.last_sample_time) * 1000.0
        if elapsed_ms > 0.0:
            value_per_second = (state.total_packet_count * 1000.0) / elapsed_ms
        else:
            value_per_second = 1.0
        last_sample_time = state.last_sample_time

    new_state = DifferState(
        last_position=position,
        last_orientation=orientation,
        last_sample_time=last_sample_time,
        total_packet_count=state.total_packet_count + 1,
    )
    delta = PoseSample.from_arrays(position_diff, orientation_diff * value_per_second)
    return new_state, delta


class PoseDiffer:
    """
    Stateful wrapper around diff_pose.

    Owned by a single thread; not safe for concurrent use.

    Example:
        differ = PoseDiffer()
        delta = differ.process(PoseSample(x=1.0, yaw=10.0))
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            clock: Monotonic time source in seconds (default: time.monotonic)
        """
        self.clock = clock
        self.state = DifferState()

    def process(self, sample: PoseSample) -> PoseSample:
        self.state, delta = diff_pose(self.state, sample, self.clock())
        return delta

    def reset(self):
        """Drop all history, as if a sentinel sample had arrived."""
        self.state = DifferState()

    def reset_baseline(self):
        """Zero position/orientation baselines, keep the rate estimate."""
        self.state = self.state.with_zero_baseline()
